from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
import logging

import numpy as np

from chartlayout.contracts import ChartAnimation
from chartlayout.model import DataPoint

LOGGER = logging.getLogger(__name__)


class NoAnimation(ChartAnimation):
    """Leaves every point at its laid out position and requests a single redraw."""

    def animate_from(self, start_position: float, entries: Sequence[DataPoint], callback: Callable[[], None]) -> None:
        callback()


@dataclass(eq=False)
class SteppedAnimation(ChartAnimation):
    """Frame-driven vertical grow-in; the host calls `tick()` once per frame."""

    duration_frames: int = 30
    _entries: tuple[DataPoint, ...] = field(default=(), init=False, repr=False)
    _start: float = field(default=0.0, init=False)
    _targets: np.ndarray = field(default_factory=lambda: np.zeros(0, dtype=np.float64), init=False, repr=False)
    _callback: Callable[[], None] | None = field(default=None, init=False, repr=False)
    _frame: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.duration_frames <= 0:
            raise ValueError("duration_frames must be > 0")

    @property
    def finished(self) -> bool:
        return self._callback is None or self._frame >= self.duration_frames

    @property
    def progress(self) -> float:
        if self._callback is None:
            return 1.0
        return min(1.0, self._frame / self.duration_frames)

    def animate_from(self, start_position: float, entries: Sequence[DataPoint], callback: Callable[[], None]) -> None:
        if self._callback is not None and not self.finished:
            LOGGER.debug("superseding in-flight animation at frame %d/%d", self._frame, self.duration_frames)
        self._entries = tuple(entries)
        self._start = float(start_position)
        self._targets = np.asarray([p.screen_position_y for p in self._entries], dtype=np.float64)
        self._callback = callback
        self._frame = 0
        self._apply(0.0)
        callback()

    def tick(self) -> bool:
        """Advance one frame; returns False once the animation has completed."""
        if self.finished:
            return False
        assert self._callback is not None
        self._frame += 1
        self._apply(self.progress)
        self._callback()
        return not self.finished

    def _apply(self, t: float) -> None:
        ys = self._start + (self._targets - self._start) * t
        for point, y in zip(self._entries, ys.tolist(), strict=True):
            point.screen_position_y = y
