"""
streamslice datastructures module.

Key datastructures:
- Boundary: one side of a range, anchored to the start or the end of a stream
- SliceRange: an ordered pair of boundaries
"""

from __future__ import annotations

from .boundary import (
    Anchor,
    Boundary,
    SliceRange,
    boundary_strategy,
    slice_range_strategy,
)

__all__ = [
    "Anchor",
    "Boundary",
    "SliceRange",
    "boundary_strategy",
    "slice_range_strategy",
]
