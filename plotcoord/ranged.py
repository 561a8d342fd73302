from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeAlias, TypeVar

import numpy as np

from plotcoord.errors import CoordError
from plotcoord.interval import Interval


T = TypeVar("T")

PixelLimit: TypeAlias = tuple[int, int]


class Ranged(ABC, Generic[T]):
    """A coordinate: maps values of its domain onto an integer pixel span."""

    @abstractmethod
    def map(self, value: T, limit: PixelLimit) -> int:
        """Map `value` into the pixel span `limit`, extrapolating outside the domain."""

    @abstractmethod
    def key_points(self, max_points: int) -> list[T]:
        """Return at most `max_points` tick candidates over the domain."""

    @abstractmethod
    def range(self) -> Interval[T]:
        """Return the full logical domain."""

    def axis_pixel_range(self, limit: PixelLimit) -> Interval[int]:
        """Return the pixel span this coordinate's own axis occupies within `limit`."""
        return Interval(limit[0], limit[1])

    def map_many(self, values: Any, limit: PixelLimit) -> np.ndarray:
        out = [self.map(v, limit) for v in values]
        return np.asarray(out, dtype=np.int64)


class DiscreteRanged(ABC, Generic[T]):
    """A finite, ordered value domain indexable from zero."""

    @abstractmethod
    def size(self) -> int: ...

    @abstractmethod
    def index_of(self, value: T) -> int | None: ...

    @abstractmethod
    def from_index(self, index: int) -> T | None: ...

    def values(self) -> list[T]:
        out: list[T] = []
        for idx in range(self.size()):
            value = self.from_index(idx)
            if value is None:
                raise CoordError(f"discrete coordinate has no value at index {idx} of {self.size()}")
            out.append(value)
        return out
