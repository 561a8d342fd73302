from __future__ import annotations

import math

import numpy as np


# Relative tolerance (in steps) for floating drift at tick boundaries.
DRIFT_TOLERANCE = 1e-9


def nice_ticks(vmin: float, vmax: float, max_points: int, *, integer: bool = False) -> np.ndarray:
    """Return at most `max_points` evenly spaced 1/2/5 x 10^k ticks inside [vmin, vmax]."""
    if max_points <= 0 or not (math.isfinite(vmin) and math.isfinite(vmax)):
        return np.asarray([], dtype=np.float64)
    lo = float(min(vmin, vmax))
    hi = float(max(vmin, vmax))
    if lo == hi:
        return np.asarray([lo], dtype=np.float64)

    step = _nice_ceiling((hi - lo) / max(max_points - 1, 1))
    if integer:
        step = max(step, 1.0)
    count = 0
    while math.isfinite(step) and step > 0:
        first, count = _tick_span(lo, hi, step)
        if count <= max_points:
            break
        step = _nice_ceiling(step * 1.0001)

    if count == 0 or not (math.isfinite(step) and step > 0):
        # No usable step or no multiple of it inside the domain; use the bounds.
        return np.asarray([lo, hi][:max_points], dtype=np.float64)

    ticks = first + step * np.arange(count, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * DRIFT_TOLERANCE)] = 0.0
    return np.clip(ticks, lo, hi)


def _tick_span(lo: float, hi: float, step: float) -> tuple[float, int]:
    first = math.ceil(lo / step - DRIFT_TOLERANCE) * step
    if first > hi:
        return (first, 0)
    count = int(math.floor((hi - first) / step + DRIFT_TOLERANCE)) + 1
    return (first, count)


def _nice_ceiling(value: float) -> float:
    if not (math.isfinite(value) and value > 0):
        return math.nan
    exp = np.floor(np.log10(value))
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        frac = value / (10**exp)
    if frac <= 1.0:
        nice_frac = 1.0
    elif frac <= 2.0:
        nice_frac = 2.0
    elif frac <= 5.0:
        nice_frac = 5.0
    else:
        nice_frac = 10.0
    with np.errstate(over="ignore", invalid="ignore"):
        return float(nice_frac * (10**exp))
