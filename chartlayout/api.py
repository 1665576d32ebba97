from __future__ import annotations

from typing import Any

import numpy as np

from chartlayout.animation import NoAnimation
from chartlayout.config import DEFAULT_LABELS_SIZE_PX, ChartConfig, ChartStyle
from chartlayout.model import Axis
from chartlayout.raster import PillowPainter, RasterChartView
from chartlayout.renderer import ChartRenderer


def chart(
    width: int,
    height: int,
    *,
    config: ChartConfig | None = None,
    style: ChartStyle | None = None,
    labels_size: float = DEFAULT_LABELS_SIZE_PX,
) -> tuple[ChartRenderer, RasterChartView]:
    """Wire a renderer to a raster view and a Pillow painter."""
    if width <= 0 or height <= 0:
        raise ValueError("width/height must be > 0")
    style = style or ChartStyle()
    view = RasterChartView(width, height, style=style, labels_size=labels_size)
    renderer = ChartRenderer(view, PillowPainter(style.font_family), NoAnimation(), config=config)
    return renderer, view


def render_to_rgba(
    entries: Any,
    width: int,
    height: int,
    *,
    padding: tuple[int, int, int, int] = (8, 8, 8, 8),
    axis: Axis = Axis.XY,
    config: ChartConfig | None = None,
    style: ChartStyle | None = None,
    labels_size: float = DEFAULT_LABELS_SIZE_PX,
) -> np.ndarray:
    """Lay out `entries` and rasterise the final (non-animated) chart."""
    renderer, view = chart(width, height, config=config, style=style, labels_size=labels_size)
    renderer.render(entries)
    left, top, right, bottom = padding
    # NoAnimation leaves every point at its final position, so one pass is enough.
    renderer.pre_draw(width, height, left, top, right, bottom, axis, labels_size)
    view.clear()
    renderer.draw()
    return view.to_rgba()
