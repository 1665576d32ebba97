from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal, InvalidOperation

import numpy as np

from chartlayout.errors import InvalidDataError
from chartlayout.model import DataPoint, Label, Scale


def find_border_values(data: Sequence[DataPoint], start_at_zero: bool) -> Scale:
    if not data:
        raise InvalidDataError("cannot resolve a scale for an empty data set")
    values = np.fromiter((p.value for p in data), dtype=np.float64, count=len(data))
    vmin = float(np.min(values))
    vmax = float(np.max(values))
    if start_at_zero:
        # All-negative data would otherwise invert the scale.
        vmin, vmax = 0.0, max(vmax, 0.0)
    if not np.isfinite(vmax - vmin):
        raise InvalidDataError(f"value range [{vmin}, {vmax}] is too wide to lay out")
    return Scale(min=vmin, max=vmax)


def scale_steps(scale: Scale, steps: int) -> np.ndarray:
    if steps <= 0:
        raise ValueError("steps must be > 0")
    step = scale.size / steps
    return scale.min + step * np.arange(steps + 1, dtype=np.float64)


def build_y_labels(scale: Scale, steps: int) -> list[Label]:
    return [Label(text) for text in format_ticks_for_axis(scale_steps(scale, steps))]


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e9 or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    quant = Decimal("1").scaleb(-decimals)
    try:
        q = d.quantize(quant)
    except InvalidOperation:
        q = d
    out = format(q, "f")
    # Integer ticks keep their trailing zeros (30, 40); fractional ones are trimmed.
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def format_ticks_for_axis(ticks: np.ndarray) -> list[str]:
    if ticks.size == 0:
        return []
    step = float(abs(ticks[1] - ticks[0])) if ticks.size > 1 else 0.0
    if step == 0.0:
        return [format_tick(float(v)) for v in ticks]
    return [format_tick(float(v), step=step) for v in ticks]


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    # Repeating fractions (10 / 3) would otherwise carry float noise into the labels.
    rounded = round(step, 6)
    if rounded == 0:
        return 6
    d = Decimal(repr(rounded)).normalize()
    exp = d.as_tuple().exponent
    if not isinstance(exp, int):
        return 6
    return min(6, max(0, -exp))
