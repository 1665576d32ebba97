from __future__ import annotations


class ChartError(Exception):
    """Base class for chart layout failures."""


class InvalidDataError(ChartError, ValueError):
    """Raised when a data set cannot be laid out."""


class ChartStateError(ChartError, RuntimeError):
    """Raised when the renderer is driven out of order (for example draw before layout)."""
