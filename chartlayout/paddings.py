from __future__ import annotations

from collections.abc import Sequence

from chartlayout.contracts import Painter
from chartlayout.model import Axis, Label, Paddings


def measure_paddings_x(axis: Axis, painter: Painter, labels_size: float) -> Paddings:
    if not axis.shows_x:
        return Paddings.zero()
    return Paddings(0.0, 0.0, 0.0, painter.measure_label_height(labels_size))


def measure_paddings_y(axis: Axis, painter: Painter, labels_size: float, y_labels: Sequence[Label]) -> Paddings:
    """Reserve the widest Y label on the left and half a line above and below.

    The half lines keep the top and bottom tick labels, which are centred on
    the frame edges, from being clipped.
    """
    if not axis.shows_y:
        return Paddings.zero()
    widest = max((painter.measure_label_width(label.text, labels_size) for label in y_labels), default=0.0)
    half_height = painter.measure_label_height(labels_size) / 2.0
    return Paddings(widest, half_height, 0.0, half_height)


def negotiate_paddings(paddings_x: Paddings, paddings_y: Paddings) -> Paddings:
    return Paddings(
        max(paddings_x.left, paddings_y.left),
        max(paddings_x.top, paddings_y.top),
        max(paddings_x.right, paddings_y.right),
        max(paddings_x.bottom, paddings_y.bottom),
    )
