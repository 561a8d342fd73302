from .category import SliceCoord
from .linear import IntCoord, LinearCoord
from .log import LogCoord

__all__ = [
    "IntCoord",
    "LinearCoord",
    "LogCoord",
    "SliceCoord",
]
