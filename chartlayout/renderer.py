from __future__ import annotations

from dataclasses import replace
from enum import Enum
import logging
from typing import Any

from chartlayout.adapters import normalize_entries
from chartlayout.config import ChartConfig
from chartlayout.contracts import ChartAnimation, ChartView, Painter
from chartlayout.errors import ChartStateError, InvalidDataError
from chartlayout.model import Axis, DataPoint, Frame, Label, LayoutSnapshot, Scale
from chartlayout.paddings import measure_paddings_x, measure_paddings_y, negotiate_paddings
from chartlayout.placement import place_labels_x, place_labels_y
from chartlayout.projection import place_data_points
from chartlayout.scales import build_y_labels, find_border_values

LOGGER = logging.getLogger(__name__)


class LayoutState(str, Enum):
    UNPROCESSED = "unprocessed"
    PROCESSED = "processed"


class ChartRenderer:
    """Lays out one data set exactly once and serves the cached result to every draw.

    `pre_draw` is called on each layout pass of the host. The first pass after
    new data is installed computes the inner frame, label positions and data
    point positions, starts the animation and returns False so the host waits
    for the animation's redraw request. Later passes return True without
    touching anything.
    """

    def __init__(
        self,
        view: ChartView,
        painter: Painter,
        animation: ChartAnimation,
        *,
        config: ChartConfig | None = None,
    ) -> None:
        self._view = view
        self._painter = painter
        self._animation = animation
        self._config = config or ChartConfig()
        self._state = LayoutState.UNPROCESSED
        self._data: list[DataPoint] = []
        self._scale: Scale | None = None
        self._x_labels: list[Label] = []
        self._y_labels: list[Label] = []
        self._snapshot: LayoutSnapshot | None = None

    @property
    def state(self) -> LayoutState:
        return self._state

    @property
    def snapshot(self) -> LayoutSnapshot | None:
        return self._snapshot

    @property
    def config(self) -> ChartConfig:
        return self._config

    @property
    def x_packed(self) -> bool:
        return self._config.x_packed

    @property
    def y_at_zero(self) -> bool:
        return self._config.y_at_zero

    @property
    def animation(self) -> ChartAnimation:
        return self._animation

    def configure(self, **changes: Any) -> None:
        """Replace config fields; the current data set is laid out again on the next pass."""
        self._config = replace(self._config, **changes)
        self._install([(p.label, p.value) for p in self._data])

    def pre_draw(
        self,
        width: int,
        height: int,
        padding_left: int,
        padding_top: int,
        padding_right: int,
        padding_bottom: int,
        axis: Axis,
        labels_size: float,
    ) -> bool:
        if self._state is LayoutState.PROCESSED:
            return True

        if len(self._data) <= 1:
            raise InvalidDataError("A chart needs more than one entry.")
        if width <= 0 or height <= 0:
            raise ValueError("view width/height must be > 0")
        if labels_size <= 0:
            raise ValueError("labels_size must be > 0")
        assert self._scale is not None

        outer = Frame(
            left=float(padding_left),
            top=float(padding_top),
            right=float(width - padding_right),
            bottom=float(height - padding_bottom),
        )
        paddings = negotiate_paddings(
            measure_paddings_x(axis, self._painter, labels_size),
            measure_paddings_y(axis, self._painter, labels_size, self._y_labels),
        )
        frame = outer.inset(paddings)
        if frame.width <= 0 or frame.height <= 0:
            raise ValueError(f"inner frame is empty: {frame.as_rect()}")

        place_labels_x(
            self._x_labels,
            frame,
            axis=axis,
            packed=self._config.x_packed,
            painter=self._painter,
            labels_size=labels_size,
        )
        place_labels_y(
            self._y_labels,
            frame,
            painter=self._painter,
            labels_size=labels_size,
            steps=self._config.scale_steps,
        )
        place_data_points(self._data, self._x_labels, self._scale, frame)

        # Publish in one assignment so draw sees either the old or the new layout.
        self._snapshot = LayoutSnapshot(
            frame=frame,
            scale=self._scale,
            paddings=paddings,
            axis=axis,
            labels_size=float(labels_size),
            x_labels=tuple(self._x_labels),
            y_labels=tuple(self._y_labels),
            data=tuple(self._data),
        )
        self._state = LayoutState.PROCESSED
        LOGGER.debug(
            "layout computed: frame=%s scale=[%s, %s] entries=%d",
            frame.as_rect(),
            self._scale.min,
            self._scale.max,
            len(self._data),
        )

        self._animation.animate_from(frame.bottom, self._snapshot.data, self._view.post_invalidate)
        return False

    def draw(self) -> None:
        snapshot = self._snapshot
        if snapshot is None:
            raise ChartStateError("draw called before a layout pass completed")
        if snapshot.axis.shows_x:
            self._view.draw_labels(snapshot.x_labels)
        if snapshot.axis.shows_y:
            self._view.draw_labels(snapshot.y_labels)
        self._view.draw_data(snapshot.frame, snapshot.data)

    def render(self, entries: Any) -> None:
        self._install(normalize_entries(entries))
        self._view.post_invalidate()

    def anim(self, entries: Any, animation: ChartAnimation) -> None:
        self._install(normalize_entries(entries))
        self._animation = animation
        self._view.post_invalidate()

    def _install(self, pairs: list[tuple[str, float]]) -> None:
        data = [DataPoint(label=label, value=value) for label, value in pairs]
        scale = find_border_values(data, self._config.y_at_zero) if data else None
        self._data = data
        self._scale = scale
        self._x_labels = [Label(p.label) for p in data]
        self._y_labels = build_y_labels(scale, self._config.scale_steps) if scale is not None else []
        self._state = LayoutState.UNPROCESSED
        LOGGER.debug("installed %d entries; layout reset", len(data))
