from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field
import math
from typing import Any, TypeVar

from plotcoord.errors import CoordError
from plotcoord.interval import Interval
from plotcoord.ranged import DiscreteRanged, PixelLimit, Ranged


T = TypeVar("T", bound=Hashable)


@dataclass(frozen=True)
class SliceCoord(Ranged[T], DiscreteRanged[T]):
    """Categorical coordinate over an ordered list of distinct values."""

    members: tuple[T, ...]
    _positions: dict[Any, int] = field(init=False, repr=False, compare=False)

    def __init__(self, members: Sequence[T]) -> None:
        values = tuple(members)
        if not values:
            raise CoordError("category coordinate needs at least one value")
        try:
            positions = {value: idx for idx, value in enumerate(values)}
        except TypeError as exc:
            raise CoordError("category values must be hashable") from exc
        if len(positions) != len(values):
            raise CoordError("category values must be distinct")
        object.__setattr__(self, "members", values)
        object.__setattr__(self, "_positions", positions)

    def map(self, value: T, limit: PixelLimit) -> int:
        idx = self.index_of(value)
        last = len(self.members) - 1
        if idx is None or last == 0:
            return limit[0]
        return int(round(limit[0] + (limit[1] - limit[0]) * (idx / last)))

    def key_points(self, max_points: int) -> list[T]:
        if max_points <= 0:
            return []
        stride = max(1, math.ceil(len(self.members) / max_points))
        return list(self.members[::stride])

    def range(self) -> Interval[T]:
        return Interval(self.members[0], self.members[-1])

    def size(self) -> int:
        return len(self.members)

    def index_of(self, value: T) -> int | None:
        try:
            return self._positions.get(value)
        except TypeError:
            return None

    def from_index(self, index: int) -> T | None:
        if index < 0 or index >= len(self.members):
            return None
        return self.members[index]
