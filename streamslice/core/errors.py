"""
Exception types for streamslice.

Every failure a slice invocation can hit derives from ``SliceError`` so the
command line can report them uniformly. None of them are retried.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from ..datastructures.type_aliases import RangeText


class SliceError(Exception):
    """Base exception for slicing errors."""

    pass


class InvalidRangeError(SliceError):
    """Raised when the range text is not of the form ``start:end``."""

    def __init__(self, range_text: RangeText, reason: str) -> None:
        self.range_text = range_text
        self.reason = reason
        super().__init__(f"Invalid range {range_text!r}: {reason}")


class RangeOverflowError(SliceError):
    """Raised when a ``+N`` end reaches past an end-anchored start."""

    def __init__(self, range_text: RangeText, start_offset: int, length: int) -> None:
        self.range_text = range_text
        self.start_offset = start_offset
        self.length = length
        super().__init__(
            f"Invalid range {range_text!r}: +{length} runs past the end of the "
            f"stream when starting {start_offset} units before the end"
        )


class InputIsDirectoryError(SliceError):
    """Raised when the input path names a directory."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Input file is a directory: {path}")


class SliceIOError(SliceError):
    """Raised when reading, writing, seeking or opening fails."""

    pass


@contextmanager
def io_errors_as_slice_errors(action: str) -> Iterator[None]:
    """Re-raise any ``OSError`` in the block as ``SliceIOError``."""
    try:
        yield
    except OSError as e:
        raise SliceIOError(f"I/O error while {action}: {e}") from e
