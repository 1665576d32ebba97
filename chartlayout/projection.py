from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from chartlayout.model import DataPoint, Frame, Label, Scale


def project_values(values: np.ndarray, scale: Scale, frame: Frame) -> np.ndarray:
    if scale.is_degenerate:
        return np.full(values.shape, frame.center_y, dtype=np.float64)
    return frame.bottom - (frame.bottom - frame.top) * (values - scale.min) / scale.size


def place_data_points(data: Sequence[DataPoint], x_labels: Sequence[Label], scale: Scale, frame: Frame) -> None:
    if len(data) != len(x_labels):
        raise ValueError(f"data/label length mismatch: {len(data)} != {len(x_labels)}")
    values = np.fromiter((p.value for p in data), dtype=np.float64, count=len(data))
    ys = project_values(values, scale, frame)
    for point, label, y in zip(data, x_labels, ys.tolist(), strict=True):
        point.screen_position_x = label.x
        point.screen_position_y = y
