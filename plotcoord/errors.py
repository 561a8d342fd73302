from __future__ import annotations


class CoordError(ValueError):
    """Raised when a coordinate cannot be built from its description or input."""
