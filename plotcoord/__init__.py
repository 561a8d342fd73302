from plotcoord.convert import as_coord
from plotcoord.coords import IntCoord, LinearCoord, LogCoord, SliceCoord
from plotcoord.errors import CoordError
from plotcoord.interval import Interval
from plotcoord.layout import AxisLayout, layout_axis
from plotcoord.partial_axis import DiscretePartialAxis, PartialAxis, make_partial_axis, partial_axis, wrap_partial
from plotcoord.ranged import DiscreteRanged, PixelLimit, Ranged

__all__ = [
    "AxisLayout",
    "CoordError",
    "DiscretePartialAxis",
    "DiscreteRanged",
    "IntCoord",
    "Interval",
    "LinearCoord",
    "LogCoord",
    "PartialAxis",
    "PixelLimit",
    "Ranged",
    "SliceCoord",
    "as_coord",
    "layout_axis",
    "make_partial_axis",
    "partial_axis",
    "wrap_partial",
]
