from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar


T = TypeVar("T")


@dataclass(frozen=True)
class Interval(Generic[T]):
    """Half-open interval `[start, end)` over a value or pixel domain."""

    start: T
    end: T

    @classmethod
    def coerce(cls, value: Any) -> "Interval[Any]":
        if isinstance(value, Interval):
            return value
        if isinstance(value, tuple) and len(value) == 2:
            return cls(value[0], value[1])
        raise TypeError(f"expected an Interval or a (start, end) tuple, got {type(value)!r}")

    def normalized(self) -> "Interval[T]":
        lo = min(self.start, self.end)  # type: ignore[type-var]
        hi = max(self.start, self.end)  # type: ignore[type-var]
        return Interval(lo, hi)

    def contains(self, value: T) -> bool:
        norm = self.normalized()
        return norm.start <= value < norm.end  # type: ignore[operator]

    def as_tuple(self) -> tuple[T, T]:
        return (self.start, self.end)
