from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


DEFAULT_SCALE_STEPS = 3
DEFAULT_LABELS_SIZE_PX = 12.0
DEFAULT_FONT_FAMILY = "Comic Mono"

ChartMode = Literal["line", "bars", "markers"]


@dataclass(frozen=True)
class ChartConfig:
    x_packed: bool = False
    y_at_zero: bool = False
    scale_steps: int = DEFAULT_SCALE_STEPS

    def __post_init__(self) -> None:
        if self.scale_steps <= 0:
            raise ValueError("scale_steps must be > 0")


@dataclass(frozen=True)
class ChartStyle:
    mode: ChartMode = "line"
    background: tuple[int, int, int, int] = (12, 16, 23, 255)
    frame_color: tuple[int, int, int, int] = (60, 67, 78, 255)
    label_color: tuple[int, int, int, int] = (208, 218, 232, 255)
    line_color: tuple[int, int, int, int] = (255, 165, 0, 255)
    line_width: int = 1
    marker_size: int = 3
    bar_width: float = 0.6
    font_family: str = DEFAULT_FONT_FAMILY
    show_frame: bool = False

    def __post_init__(self) -> None:
        if self.mode not in {"line", "bars", "markers"}:
            raise ValueError(f"unsupported chart mode: {self.mode}")
        if self.line_width <= 0:
            raise ValueError("line_width must be > 0")
        if self.marker_size <= 0:
            raise ValueError("marker_size must be > 0")
        if not 0.0 < self.bar_width <= 1.0:
            raise ValueError("bar_width must be in (0, 1]")
