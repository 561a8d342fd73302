from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from plotcoord.interval import Interval
from plotcoord.ranged import PixelLimit, Ranged


DEFAULT_MAX_TICKS = 10

T = TypeVar("T")


@dataclass(frozen=True)
class AxisLayout(Generic[T]):
    span: Interval[int]
    ticks: tuple[T, ...]
    tick_pixels: tuple[int, ...]


def layout_axis(coord: Ranged[T], limit: PixelLimit, *, max_ticks: int = DEFAULT_MAX_TICKS) -> AxisLayout[T]:
    """Resolve where an axis line and its ticks land inside `limit`.

    Ticks whose pixel falls outside the axis span (both ends included) are
    dropped, so a partial axis only shows ticks along its visible part.
    """
    if max_ticks <= 0:
        raise ValueError("max_ticks must be > 0")
    span = coord.axis_pixel_range(limit)
    bounds = span.normalized()
    placed: list[tuple[int, Any]] = []
    for value in coord.key_points(max_ticks):
        px = coord.map(value, limit)
        if bounds.start <= px <= bounds.end:
            placed.append((px, value))
    placed.sort(key=lambda item: item[0])
    return AxisLayout(
        span=span,
        ticks=tuple(value for _, value in placed),
        tick_pixels=tuple(px for px, _ in placed),
    )
