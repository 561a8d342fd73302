from __future__ import annotations

import copy
from dataclasses import dataclass
import logging
from typing import Any, TypeVar

import numpy as np

from plotcoord.convert import as_coord
from plotcoord.interval import Interval
from plotcoord.numcast import from_float, to_float
from plotcoord.ranged import DiscreteRanged, PixelLimit, Ranged


LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PartialAxis(Ranged[T]):
    """Axis decorator that only draws the part of the axis covering `display`.

    Values keep landing where `inner` puts them; only the axis pixel range
    shrinks to the span `display` maps onto.
    """

    inner: Ranged[T]
    display: Interval[T]

    def map(self, value: T, limit: PixelLimit) -> int:
        return self.inner.map(value, limit)

    def map_many(self, values: Any, limit: PixelLimit) -> np.ndarray:
        return self.inner.map_many(values, limit)

    def key_points(self, max_points: int) -> list[T]:
        return self.inner.key_points(max_points)

    def range(self) -> Interval[T]:
        return self.inner.range()

    def axis_pixel_range(self, limit: PixelLimit) -> Interval[int]:
        left = self.map(self.display.start, limit)
        right = self.map(self.display.end, limit)
        return Interval(left, right).normalized()

    def clone(self) -> "PartialAxis[T]":
        return type(self)(copy.deepcopy(self.inner), copy.deepcopy(self.display))


@dataclass(frozen=True)
class DiscretePartialAxis(PartialAxis[T], DiscreteRanged[T]):
    """Partial axis over a discrete coordinate; indexing is forwarded unchanged."""

    def size(self) -> int:
        return self.inner.size()  # type: ignore[attr-defined]

    def index_of(self, value: T) -> int | None:
        return self.inner.index_of(value)  # type: ignore[attr-defined]

    def from_index(self, index: int) -> T | None:
        return self.inner.from_index(index)  # type: ignore[attr-defined]


def wrap_partial(inner: Ranged[T], display: Interval[T] | tuple[T, T]) -> PartialAxis[T]:
    window = Interval.coerce(display)
    if isinstance(inner, DiscreteRanged):
        return DiscretePartialAxis(inner, window)
    return PartialAxis(inner, window)


def partial_axis(desc: Any, display: Interval[Any] | tuple[Any, Any]) -> PartialAxis[Any]:
    """Convert `desc` into a coordinate and only display the `display` part of its axis."""
    return wrap_partial(as_coord(desc), display)


def make_partial_axis(
    axis_range: Interval[T] | tuple[T, T],
    part: Interval[float] | tuple[float, float],
) -> PartialAxis[T] | None:
    """Build a partial axis whose visible range `axis_range` fills the `part` share of the axis.

    `part` holds the fractions of the full axis length, each in [0.0, 1.0], that the
    visible range should start and end at. The full domain is extended backward
    and forward so the visible range occupies exactly that share.

    Returns None when a bound cannot be represented in the value type of
    `axis_range`, or when `part` has zero width.
    """
    visible = Interval.coerce(axis_range)
    share = Interval.coerce(part)

    left = to_float(visible.start)
    right = to_float(visible.end)
    if left is None or right is None:
        LOGGER.debug("visible range %r has no float form", visible)
        return None

    width = float(share.end) - float(share.start)
    if width == 0:
        LOGGER.debug("visible share %r has zero width", share)
        return None

    full_range_size = (right - left) / width
    full_left = left - full_range_size * float(share.start)
    full_right = right + full_range_size * (1.0 - float(share.end))

    value_type: type[Any] = type(visible.start)
    if type(visible.end) is not value_type:
        # Mixed endpoint types (e.g. int and float) share a float domain.
        value_type = float
    start = from_float(full_left, value_type)
    end = from_float(full_right, value_type)
    if start is None or end is None:
        LOGGER.debug("full range (%r, %r) is not representable as %s", full_left, full_right, value_type.__name__)
        return None

    display = as_coord(visible).range()
    return partial_axis(Interval(start, end), display)
