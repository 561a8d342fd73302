from __future__ import annotations

from decimal import Decimal, InvalidOperation
import math
from typing import Any, TypeVar

import numpy as np


T = TypeVar("T")


def to_float(value: Any) -> float | None:
    """Convert a numeric value to a float, or None when it has no float form."""
    if isinstance(value, (bool, np.bool_)):
        return None
    if isinstance(value, (int, np.integer)):
        try:
            return float(value)
        except OverflowError:
            return None
    if isinstance(value, (float, np.floating)):
        return float(value)
    if isinstance(value, Decimal):
        out = float(value)
        # float() saturates huge decimals to inf instead of raising.
        if math.isinf(out) and value.is_finite():
            return None
        return out
    return None


def from_float(value: float, target: type[T]) -> T | None:
    """Cast a float into `target`, or None when `target` cannot represent it.

    Integer targets truncate toward zero. Non-finite input is never representable.
    """
    if not math.isfinite(value):
        return None
    if target is bool or (isinstance(target, type) and issubclass(target, np.bool_)):
        return None
    if target is int:
        return int(value)  # type: ignore[return-value]
    if isinstance(target, type) and issubclass(target, np.integer):
        info = np.iinfo(target)
        truncated = math.trunc(value)
        if truncated < int(info.min) or truncated > int(info.max):
            return None
        return target(truncated)  # type: ignore[return-value]
    if target is float:
        return float(value)  # type: ignore[return-value]
    if isinstance(target, type) and issubclass(target, np.floating):
        with np.errstate(over="ignore"):
            out = target(value)
        if not np.isfinite(out):
            return None
        return out  # type: ignore[return-value]
    if target is Decimal:
        try:
            return Decimal(value)  # type: ignore[return-value]
        except InvalidOperation:
            return None
    return None
