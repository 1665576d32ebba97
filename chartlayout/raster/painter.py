from __future__ import annotations

from chartlayout.config import DEFAULT_FONT_FAMILY
from chartlayout.contracts import Painter
from chartlayout.raster.draw_text import line_height, text_size


class PillowPainter(Painter):
    def __init__(self, font_family: str = DEFAULT_FONT_FAMILY) -> None:
        self.font_family = font_family

    def measure_label_width(self, text: str, size: float) -> float:
        width, _ = text_size(text, font_family=self.font_family, font_size_px=size)
        return float(width)

    def measure_label_height(self, size: float) -> float:
        return float(line_height(font_family=self.font_family, font_size_px=size))
