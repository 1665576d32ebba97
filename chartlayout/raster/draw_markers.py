from __future__ import annotations

import numpy as np

from chartlayout.raster.canvas import RGBA, fill_rect


def draw_markers(dst: np.ndarray, xs: np.ndarray, ys: np.ndarray, color: RGBA, size: int = 1) -> None:
    radius = max(0, size // 2)
    for x, y in zip(xs.tolist(), ys.tolist(), strict=True):
        fill_rect(dst, int(x) - radius, int(y) - radius, int(x) + radius, int(y) + radius, color)
