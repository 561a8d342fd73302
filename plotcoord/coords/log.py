from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any

import numpy as np

from plotcoord.adapters.normalize import coerce_values
from plotcoord.coords.linear import project, project_many
from plotcoord.errors import CoordError
from plotcoord.interval import Interval
from plotcoord.ranged import PixelLimit, Ranged
from plotcoord.ticks import nice_ticks


@dataclass(frozen=True)
class LogCoord(Ranged[float]):
    """Base-10 logarithmic coordinate over a strictly positive domain."""

    start: float
    end: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.start) and math.isfinite(self.end)):
            raise CoordError("log coordinate bounds must be finite")
        if self.start <= 0 or self.end <= 0:
            raise CoordError("log coordinate bounds must be > 0")

    def _relative(self, value: float) -> float:
        span = math.log10(self.end) - math.log10(self.start)
        if math.isnan(value):
            return value
        if value <= 0:
            position = -math.inf
        else:
            position = math.log10(value) - math.log10(self.start)
        if span == 0:
            return 0.0
        return position / span

    def map(self, value: float, limit: PixelLimit) -> int:
        return project(self._relative(float(value)), limit)

    def map_many(self, values: Any, limit: PixelLimit) -> np.ndarray:
        arr = coerce_values(values)
        span = math.log10(self.end) - math.log10(self.start)
        if span == 0:
            logic = np.where(np.isnan(arr), np.nan, 0.0)
            return project_many(logic, limit)
        with np.errstate(divide="ignore", invalid="ignore"):
            position = np.where(arr > 0, np.log10(np.where(arr > 0, arr, 1.0)) - math.log10(self.start), -np.inf)
        position = np.where(np.isnan(arr), np.nan, position)
        return project_many(position / span, limit)

    def key_points(self, max_points: int) -> list[float]:
        if max_points <= 0:
            return []
        lo = min(self.start, self.end)
        hi = max(self.start, self.end)
        first = math.ceil(math.log10(lo) - 1e-9)
        last = math.floor(math.log10(hi) + 1e-9)
        decades = [10.0**k for k in range(first, last + 1)]
        if len(decades) < 2:
            return [float(v) for v in nice_ticks(lo, hi, max_points)]
        stride = max(1, math.ceil(len(decades) / max_points))
        return decades[::stride]

    def range(self) -> Interval[float]:
        return Interval(self.start, self.end)
