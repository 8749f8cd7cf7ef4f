"""
Boundary datastructures for streamslice.

A range is a pair of boundaries. Each boundary is a non-negative offset
anchored either to the beginning or to the end of the stream; the sign used on
the command line only selects the anchor and never survives parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hypothesis import strategies as st

from .type_aliases import UnitCount, UnitOffset, UnitPosition


class Anchor(Enum):
    """Which end of the stream a boundary is counted from."""

    START = "start"
    END = "end"


@dataclass(frozen=True, slots=True)
class Boundary:
    """
    One side of a slice range.

    ``Boundary(Anchor.START, 3)`` means "3 units from the beginning" and
    ``Boundary(Anchor.END, 3)`` means "3 units before the end".
    """

    anchor: Anchor
    offset: UnitOffset

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"Boundary offset must be non-negative, got {self.offset}")

    @classmethod
    def from_start(cls, offset: UnitOffset) -> Boundary:
        """Create a boundary counted from the beginning of the stream."""
        return cls(anchor=Anchor.START, offset=offset)

    @classmethod
    def from_end(cls, offset: UnitOffset) -> Boundary:
        """Create a boundary counted back from the end of the stream."""
        return cls(anchor=Anchor.END, offset=offset)

    @classmethod
    def from_signed(cls, value: int) -> Boundary:
        """Map a signed index: non-negative counts from the start, negative from the end."""
        if value >= 0:
            return cls.from_start(value)
        return cls.from_end(-value)

    @property
    def is_from_start(self) -> bool:
        return self.anchor is Anchor.START

    @property
    def is_from_end(self) -> bool:
        return self.anchor is Anchor.END

    def resolve(self, total: UnitCount) -> UnitPosition:
        """Absolute position given the total unit count. Not clamped."""
        if self.anchor is Anchor.START:
            return self.offset
        return total - self.offset

    def __str__(self) -> str:
        if self.anchor is Anchor.START:
            return str(self.offset)
        return f"-{self.offset}"


@dataclass(frozen=True, slots=True)
class SliceRange:
    """
    Ordered pair of boundaries.

    No ordering between ``start`` and ``end`` is enforced here: whether the
    range is empty depends on the stream it is applied to.
    """

    start: Boundary
    end: Boundary

    def absolute_extent(self, total: UnitCount) -> tuple[UnitPosition, UnitPosition]:
        """Resolve both sides against ``total`` and clamp each to ``[0, total]``."""
        start = min(max(self.start.resolve(total), 0), total)
        end = min(max(self.end.resolve(total), 0), total)
        return start, end

    def is_empty_for(self, total: UnitCount) -> bool:
        start, end = self.absolute_extent(total)
        return start >= end

    def __str__(self) -> str:
        # FromEnd(0) only arises from an omitted end or a "+N" that lands on it
        end = "" if self.end == Boundary.from_end(0) else str(self.end)
        return f"{self.start}:{end}"


# Hypothesis strategies for property-based testing
def boundary_strategy(max_offset: int = 64) -> st.SearchStrategy[Boundary]:
    """Generate boundaries of either anchor."""
    return st.builds(
        Boundary,
        anchor=st.sampled_from(Anchor),
        offset=st.integers(min_value=0, max_value=max_offset),
    )


def slice_range_strategy(max_offset: int = 64) -> st.SearchStrategy[SliceRange]:
    """Generate arbitrary, possibly empty, slice ranges."""
    return st.builds(
        SliceRange,
        start=boundary_strategy(max_offset),
        end=boundary_strategy(max_offset),
    )
