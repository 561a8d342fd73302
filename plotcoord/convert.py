from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
import logging
from typing import Any

import numpy as np

from plotcoord.coords import IntCoord, LinearCoord, SliceCoord
from plotcoord.errors import CoordError
from plotcoord.interval import Interval
from plotcoord.ranged import Ranged


LOGGER = logging.getLogger(__name__)


def as_coord(desc: Any) -> Ranged[Any]:
    """Build the coordinate a plain domain description stands for.

    - a `Ranged` is returned as-is
    - an `Interval` or `(start, end)` tuple of integers gives an `IntCoord`
    - an `Interval` or `(start, end)` tuple of real numbers gives a `LinearCoord`
    - a list (or any other non-tuple sequence) of distinct values gives a `SliceCoord`
    """
    if isinstance(desc, Ranged):
        return desc

    if isinstance(desc, Interval) or (isinstance(desc, tuple) and len(desc) == 2):
        start, end = Interval.coerce(desc).as_tuple()
        if _is_integer(start) and _is_integer(end):
            coord: Ranged[Any] = IntCoord(start, end)
        elif _is_real(start) and _is_real(end):
            coord = LinearCoord(float(start), float(end))
        else:
            raise CoordError(f"cannot build a coordinate over ({start!r}, {end!r})")
        LOGGER.debug("converted interval (%r, %r) to %s", start, end, type(coord).__name__)
        return coord

    if isinstance(desc, Sequence) and not isinstance(desc, (str, bytes, bytearray, tuple)):
        LOGGER.debug("converted %d categories to SliceCoord", len(desc))
        return SliceCoord(desc)

    raise CoordError(f"cannot build a coordinate from {type(desc)!r}")


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def _is_real(value: Any) -> bool:
    return _is_integer(value) or isinstance(value, (float, np.floating, Decimal))
