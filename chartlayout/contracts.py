from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from chartlayout.model import DataPoint, Frame, Label


class Painter(ABC):
    """Text measurement capability used while negotiating paddings and placing labels."""

    @abstractmethod
    def measure_label_width(self, text: str, size: float) -> float:
        raise NotImplementedError

    @abstractmethod
    def measure_label_height(self, size: float) -> float:
        raise NotImplementedError


class ChartView(ABC):
    """Host surface: schedules redraws and paints what the renderer hands it."""

    @abstractmethod
    def post_invalidate(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_labels(self, labels: Sequence[Label]) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_data(self, frame: Frame, data: Sequence[DataPoint]) -> None:
        raise NotImplementedError


class ChartAnimation(ABC):
    @abstractmethod
    def animate_from(self, start_position: float, entries: Sequence[DataPoint], callback: Callable[[], None]) -> None:
        """Start moving `entries` from `start_position` towards their laid out positions.

        Implementations must not block; `callback` requests a redraw and must be
        invoked at least once.
        """
        raise NotImplementedError
