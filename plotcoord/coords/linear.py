from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

import numpy as np

from plotcoord.adapters.normalize import coerce_values
from plotcoord.errors import CoordError
from plotcoord.interval import Interval
from plotcoord.ranged import DiscreteRanged, PixelLimit, Ranged
from plotcoord.ticks import nice_ticks


# Bias that keeps exact fractional positions (e.g. 1/3 * 300) from flooring one pixel short.
MAP_EPSILON = 1e-3

# Pixel offsets at or beyond this magnitude saturate to the nearer end of the limit.
MAX_PIXEL_OFFSET = 2.0**62


def project(logic: float, limit: PixelLimit) -> int:
    """Place a relative position (0 = domain start, 1 = domain end) into `limit`."""
    low, high = limit
    actual = high - low
    if actual == 0:
        return high
    if math.isnan(logic):
        return low
    scaled = actual * logic
    if not abs(scaled) < MAX_PIXEL_OFFSET:
        # Positions too far out to place as pixels saturate at the matching end.
        return high if logic > 0 else low
    if actual > 0:
        return low + int(math.floor(scaled + MAP_EPSILON))
    return low + int(math.ceil(scaled - MAP_EPSILON))


def project_many(logic: np.ndarray, limit: PixelLimit) -> np.ndarray:
    low, high = limit
    actual = high - low
    if actual == 0:
        return np.full(logic.shape, high, dtype=np.int64)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = actual * logic
        placeable = np.abs(scaled) < MAX_PIXEL_OFFSET
    safe = np.where(placeable, scaled, 0.0)
    if actual > 0:
        offsets = np.floor(safe + MAP_EPSILON)
    else:
        offsets = np.ceil(safe - MAP_EPSILON)
    out = low + offsets.astype(np.int64)
    out[~placeable & (logic > 0)] = high
    out[~placeable & ~(logic > 0)] = low
    return out


def _relative(value: float, start: float, end: float) -> float:
    span = end - start
    if span == 0:
        return 0.0
    return (value - start) / span


@dataclass(frozen=True)
class LinearCoord(Ranged[float]):
    start: float
    end: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise CoordError("linear coordinate bounds must be finite")

    def map(self, value: float, limit: PixelLimit) -> int:
        return project(_relative(float(value), self.start, self.end), limit)

    def map_many(self, values: Any, limit: PixelLimit) -> np.ndarray:
        arr = coerce_values(values)
        span = self.end - self.start
        if span == 0:
            logic = np.zeros_like(arr)
        else:
            with np.errstate(over="ignore", invalid="ignore"):
                logic = (arr - self.start) / span
        return project_many(logic, limit)

    def key_points(self, max_points: int) -> list[float]:
        return [float(v) for v in nice_ticks(self.start, self.end, max_points)]

    def range(self) -> Interval[float]:
        return Interval(self.start, self.end)


@dataclass(frozen=True)
class IntCoord(Ranged[int], DiscreteRanged[int]):
    """Integer coordinate whose members run from `start` to `end` inclusive."""

    start: int
    end: int

    def __post_init__(self) -> None:
        for bound in (self.start, self.end):
            if isinstance(bound, (bool, np.bool_)) or not isinstance(bound, (int, np.integer)):
                raise CoordError(f"integer coordinate bounds must be integers, got {bound!r}")

    def map(self, value: int, limit: PixelLimit) -> int:
        return project(_relative(float(value), float(self.start), float(self.end)), limit)

    def map_many(self, values: Any, limit: PixelLimit) -> np.ndarray:
        return LinearCoord(float(self.start), float(self.end)).map_many(values, limit)

    def key_points(self, max_points: int) -> list[int]:
        return [int(round(v)) for v in nice_ticks(self.start, self.end, max_points, integer=True)]

    def range(self) -> Interval[int]:
        return Interval(self.start, self.end)

    @property
    def _direction(self) -> int:
        return -1 if self.end < self.start else 1

    def size(self) -> int:
        return abs(self.end - self.start) + 1

    def index_of(self, value: int) -> int | None:
        if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
            return None
        idx = (int(value) - self.start) * self._direction
        if idx < 0 or idx >= self.size():
            return None
        return idx

    def from_index(self, index: int) -> int | None:
        if index < 0 or index >= self.size():
            return None
        return self.start + index * self._direction
