"""
Range text parsing.

Turns ``start:end`` into a ``SliceRange``. Either side may be empty, a
non-negative index (from the start) or a negative index (from the end); the
end may also be ``+N``, a length relative to the already-resolved start.
"""

from __future__ import annotations

import re

from loguru import logger

from ..datastructures.boundary import Anchor, Boundary, SliceRange
from ..datastructures.type_aliases import RangeText
from .errors import InvalidRangeError, RangeOverflowError

RANGE_DELIMITER = ":"

_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INTEGER = re.compile(r"[0-9]+")


def parse_range(text: RangeText) -> SliceRange:
    """Parse ``start:end`` into a pair of boundaries.

    Raises:
        InvalidRangeError: the delimiter is missing or a side is not an integer.
        RangeOverflowError: a ``+N`` end reaches past an end-anchored start.
    """
    start_text, delimiter, end_text = text.partition(RANGE_DELIMITER)
    if not delimiter:
        raise InvalidRangeError(text, "expected the format start:end")

    start = _parse_start(start_text, text)
    end = _parse_end(end_text, start, text)

    slice_range = SliceRange(start=start, end=end)
    logger.debug("Parsed range {!r} as {}", text, slice_range)
    return slice_range


def _parse_start(part: str, text: RangeText) -> Boundary:
    if not part:
        return Boundary.from_start(0)
    return Boundary.from_signed(_parse_signed(part, text))


def _parse_end(part: str, start: Boundary, text: RangeText) -> Boundary:
    if not part:
        return Boundary.from_end(0)
    if part.startswith("+"):
        return _relative_end(start, _parse_length(part[1:], text), text)
    return Boundary.from_signed(_parse_signed(part, text))


def _relative_end(start: Boundary, length: int, text: RangeText) -> Boundary:
    if start.anchor is Anchor.START:
        return Boundary.from_start(start.offset + length)
    if length > start.offset:
        raise RangeOverflowError(text, start.offset, length)
    return Boundary.from_end(start.offset - length)


def _parse_signed(part: str, text: RangeText) -> int:
    if not _SIGNED_INTEGER.fullmatch(part):
        raise InvalidRangeError(text, f"{part!r} is not an integer")
    return int(part)


def _parse_length(part: str, text: RangeText) -> int:
    if not _UNSIGNED_INTEGER.fullmatch(part):
        raise InvalidRangeError(text, f"+{part} is not a non-negative length")
    return int(part)
