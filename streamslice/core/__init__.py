"""
Core slicing functionality: range parsing, counting policies, the streaming
engine, the seek path and input handling.
"""

from .config import SliceSettings
from .counting import ByteCounter, CountMode, LineCounter, counter_for_mode
from .engine import slice_stream
from .errors import (
    InputIsDirectoryError,
    InvalidRangeError,
    RangeOverflowError,
    SliceError,
    SliceIOError,
)
from .fast_path import slice_seekable
from .input_source import InputSource, open_input
from .range_resolver import parse_range
from .slicer import SliceReport, SliceStrategy, slice_bytes, slice_input

__all__ = [
    "ByteCounter",
    "CountMode",
    "InputIsDirectoryError",
    "InputSource",
    "InvalidRangeError",
    "LineCounter",
    "RangeOverflowError",
    "SliceError",
    "SliceIOError",
    "SliceReport",
    "SliceSettings",
    "SliceStrategy",
    "counter_for_mode",
    "open_input",
    "parse_range",
    "slice_bytes",
    "slice_input",
    "slice_seekable",
    "slice_stream",
]
