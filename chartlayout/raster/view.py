from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from chartlayout.config import DEFAULT_LABELS_SIZE_PX, ChartStyle
from chartlayout.contracts import ChartView
from chartlayout.model import DataPoint, Frame, Label
from chartlayout.raster.canvas import draw_hline, draw_vline, fill_rect, new_canvas
from chartlayout.raster.draw_lines import draw_polyline
from chartlayout.raster.draw_markers import draw_markers
from chartlayout.raster.draw_text import draw_text


class RasterChartView(ChartView):
    """ChartView that paints into an RGBA numpy canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        style: ChartStyle | None = None,
        labels_size: float = DEFAULT_LABELS_SIZE_PX,
        on_invalidate: Callable[[], None] | None = None,
    ) -> None:
        self.width = int(width)
        self.height = int(height)
        self.style = style or ChartStyle()
        self.labels_size = float(labels_size)
        self.invalidations = 0
        self._on_invalidate = on_invalidate
        self._canvas = new_canvas(self.width, self.height, self.style.background)

    def post_invalidate(self) -> None:
        self.invalidations += 1
        if self._on_invalidate is not None:
            self._on_invalidate()

    def clear(self) -> None:
        self._canvas[:, :] = np.asarray(self.style.background, dtype=np.uint8)

    def to_rgba(self) -> np.ndarray:
        return self._canvas.copy()

    def draw_labels(self, labels: Sequence[Label]) -> None:
        for label in labels:
            draw_text(
                self._canvas,
                label.x,
                label.y,
                label.text,
                self.style.label_color,
                font_family=self.style.font_family,
                font_size_px=self.labels_size,
            )

    def draw_data(self, frame: Frame, data: Sequence[DataPoint]) -> None:
        style = self.style
        if style.show_frame:
            left, top, right, bottom = (int(round(v)) for v in frame.as_rect())
            draw_hline(self._canvas, left, right, top, style.frame_color)
            draw_hline(self._canvas, left, right, bottom, style.frame_color)
            draw_vline(self._canvas, left, top, bottom, style.frame_color)
            draw_vline(self._canvas, right, top, bottom, style.frame_color)
        if not data:
            return

        xs = np.rint([p.screen_position_x for p in data]).astype(np.int32)
        ys = np.rint([p.screen_position_y for p in data]).astype(np.int32)
        if style.mode == "bars":
            self._draw_bars(frame, xs, ys)
            return
        if style.mode == "line":
            draw_polyline(self._canvas, xs, ys, style.line_color, width=style.line_width)
        draw_markers(self._canvas, xs, ys, style.line_color, size=style.marker_size)

    def _draw_bars(self, frame: Frame, xs: np.ndarray, ys: np.ndarray) -> None:
        # Bars share the column grid; their width is a fraction of the narrowest column gap.
        column = float(np.min(np.diff(xs))) if xs.size > 1 else frame.width
        half = max(1, int(abs(column) * self.style.bar_width / 2.0))
        bottom = int(round(frame.bottom))
        for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
            fill_rect(self._canvas, x - half, y, x + half, bottom, self.style.line_color)
