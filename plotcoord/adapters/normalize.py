from __future__ import annotations

from collections.abc import Iterable, Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from plotcoord.errors import CoordError


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def coerce_values(values: Any, *, label: str = "values") -> np.ndarray:
    """Flatten a batch of numeric values into a 1-D float64 array for vectorized mapping."""
    if torch is not None and isinstance(values, torch.Tensor):
        tensor = values.detach()
        if tensor.ndim != 1:
            raise CoordError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(values, pd.Series):
        return _coerce_ndarray(values.to_numpy(), label=label)

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise CoordError(f"{label} must be 1-D")
        return _coerce_ndarray(values, label=label)

    if isinstance(values, (str, bytes, bytearray)):
        raise CoordError(f"unsupported {label} input type: {type(values)!r}")

    if isinstance(values, Sequence):
        return _coerce_ndarray(np.asarray(values, dtype=object).reshape(-1), label=label, sized=len(values))

    if isinstance(values, Iterable):
        return coerce_values(list(values), label=label)

    raise CoordError(f"unsupported {label} input type: {type(values)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str, sized: int | None = None) -> np.ndarray:
    if sized is not None and arr.shape[0] != sized:
        raise CoordError(f"{label} must be 1-D")
    if arr.dtype.kind in {"i", "u", "f"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape[0], dtype=np.float64)
    for i, raw in enumerate(arr.tolist()):
        if raw is None:
            out[i] = np.nan
            continue
        if isinstance(raw, bool):
            raise CoordError(f"{label} contains a boolean at index {i}")
        if isinstance(raw, Decimal):
            out[i] = float(raw)
            continue
        try:
            out[i] = float(raw)
        except (TypeError, ValueError) as exc:
            raise CoordError(f"{label} contains non-numeric value at index {i}: {raw!r}") from exc
    return out
