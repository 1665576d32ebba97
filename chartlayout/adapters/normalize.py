from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal
import math
from typing import Any

import numpy as np

from chartlayout.errors import InvalidDataError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_entries(entries: Any) -> list[tuple[str, float]]:
    """Coerce a category -> value source into ordered ``(label, value)`` pairs.

    Accepts a mapping, a pandas Series indexed by category, or a sequence of
    ``(label, value)`` pairs. Labels must be unique strings and values finite
    numbers.
    """
    if pd is not None and isinstance(entries, pd.DataFrame):
        numeric_cols = [c for c in entries.columns if pd.api.types.is_numeric_dtype(entries[c])]
        if len(numeric_cols) != 1:
            raise InvalidDataError("DataFrame input must contain exactly one numeric column")
        entries = entries[numeric_cols[0]]

    if pd is not None and isinstance(entries, pd.Series):
        pairs = list(zip(entries.index.tolist(), entries.tolist(), strict=True))
    elif isinstance(entries, Mapping):
        pairs = list(entries.items())
    elif isinstance(entries, Sequence) and not isinstance(entries, (str, bytes, bytearray)):
        pairs = [_coerce_pair(item, index=i) for i, item in enumerate(entries)]
    else:
        raise InvalidDataError(f"unsupported entries type: {type(entries)!r}")

    out: list[tuple[str, float]] = []
    seen: set[str] = set()
    for i, (label, raw) in enumerate(pairs):
        if not isinstance(label, str):
            raise InvalidDataError(f"label at index {i} must be a string: {label!r}")
        if label in seen:
            raise InvalidDataError(f"duplicate label: {label!r}")
        seen.add(label)
        out.append((label, _coerce_value(raw, label=label)))
    return out


def _coerce_pair(item: Any, *, index: int) -> tuple[Any, Any]:
    if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
        raise InvalidDataError(f"entry at index {index} must be a (label, value) pair: {item!r}")
    return (item[0], item[1])


def _coerce_value(raw: Any, *, label: str) -> float:
    if torch is not None and isinstance(raw, torch.Tensor):
        if raw.numel() != 1:
            raise InvalidDataError(f"value for {label!r} must be a scalar tensor")
        raw = raw.detach().cpu().item()
    if isinstance(raw, (bool, np.bool_)) or raw is None:
        raise InvalidDataError(f"value for {label!r} is not numeric: {raw!r}")
    if isinstance(raw, Decimal):
        value = float(raw)
    elif isinstance(raw, (int, float, np.integer, np.floating)):
        value = float(raw)
    else:
        raise InvalidDataError(f"value for {label!r} is not numeric: {raw!r}")
    if not math.isfinite(value):
        raise InvalidDataError(f"value for {label!r} must be finite: {raw!r}")
    return value
