from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from chartlayout.contracts import Painter
from chartlayout.model import Axis, Frame, Label


def x_anchors(
    labels: Sequence[Label],
    frame: Frame,
    *,
    axis: Axis,
    packed: bool,
    painter: Painter,
    labels_size: float,
) -> tuple[float, float]:
    if packed:
        entry_width = frame.width / len(labels)
        return (frame.left + entry_width / 2.0, frame.right - entry_width / 2.0)
    if axis.shows_x:
        first_w = painter.measure_label_width(labels[0].text, labels_size)
        last_w = painter.measure_label_width(labels[-1].text, labels_size)
        return (frame.left + first_w / 2.0, frame.right - last_w / 2.0)
    # X not displayed: positions still span the frame for data projection.
    return (frame.left, frame.right)


def place_labels_x(
    labels: Sequence[Label],
    frame: Frame,
    *,
    axis: Axis,
    packed: bool,
    painter: Painter,
    labels_size: float,
) -> None:
    if not labels:
        return
    left, right = x_anchors(labels, frame, axis=axis, packed=packed, painter=painter, labels_size=labels_size)
    count = len(labels)
    if count == 1:
        xs = np.asarray([left], dtype=np.float64)
    else:
        xs = left + (right - left) / (count - 1) * np.arange(count, dtype=np.float64)
    y = frame.bottom + painter.measure_label_height(labels_size)
    for label, x in zip(labels, xs.tolist(), strict=True):
        label.x = x
        label.y = y


def place_labels_y(
    labels: Sequence[Label],
    frame: Frame,
    *,
    painter: Painter,
    labels_size: float,
    steps: int,
) -> None:
    if steps <= 0:
        raise ValueError("steps must be > 0")
    screen_step = frame.height / steps
    cursor = frame.bottom + painter.measure_label_height(labels_size) / 2.0
    for label in labels:
        label.x = frame.left - painter.measure_label_width(label.text, labels_size) / 2.0
        label.y = cursor
        cursor -= screen_step
