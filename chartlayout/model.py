from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Axis(str, Enum):
    NONE = "none"
    X = "x"
    Y = "y"
    XY = "xy"

    @property
    def shows_x(self) -> bool:
        return self in (Axis.X, Axis.XY)

    @property
    def shows_y(self) -> bool:
        return self in (Axis.Y, Axis.XY)


@dataclass
class DataPoint:
    label: str
    value: float
    screen_position_x: float = 0.0
    screen_position_y: float = 0.0


@dataclass
class Label:
    text: str
    x: float = -1.0
    y: float = -1.0


@dataclass(frozen=True)
class Scale:
    min: float
    max: float

    def __post_init__(self) -> None:
        if self.max < self.min:
            raise ValueError(f"scale max must be >= min: {self.min} > {self.max}")

    @property
    def size(self) -> float:
        return self.max - self.min

    @property
    def is_degenerate(self) -> bool:
        return self.max == self.min


@dataclass(frozen=True)
class Paddings:
    left: float
    top: float
    right: float
    bottom: float

    def __post_init__(self) -> None:
        if min(self.left, self.top, self.right, self.bottom) < 0:
            raise ValueError("paddings must be >= 0")

    @classmethod
    def zero(cls) -> "Paddings":
        return cls(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Frame:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    def inset(self, paddings: Paddings) -> "Frame":
        return Frame(
            left=self.left + paddings.left,
            top=self.top + paddings.top,
            right=self.right - paddings.right,
            bottom=self.bottom - paddings.bottom,
        )

    def as_rect(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class LayoutSnapshot:
    """Result of one layout pass, replaced wholesale on every new data set."""

    frame: Frame
    scale: Scale
    paddings: Paddings
    axis: Axis
    labels_size: float
    x_labels: tuple[Label, ...]
    y_labels: tuple[Label, ...]
    data: tuple[DataPoint, ...]
