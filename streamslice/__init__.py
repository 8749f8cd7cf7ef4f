"""
streamslice - print a sub-range of a stream by line or by byte

Extracts ``start:end`` from a file or from standard input. Bounds count from
the beginning when non-negative and from the end when negative; the end may
also be ``+N`` relative to the start. Inputs of unknown length are streamed
through a bounded trailing window, and byte ranges of regular files are
copied with a single seek.

## Architecture

- **datastructures**: boundaries and ranges
- **core**: range parsing, counting policies, the streaming engine, the seek
  path, input handling and settings
- **cli**: the ``streamslice`` command

## Quick Start

```python
from streamslice import CountMode, slice_bytes

slice_bytes(b"hello\\nworld\\n", "0:1")                    # b"hello\\n"
slice_bytes(b"hello\\nworld\\n", "-5:", mode=CountMode.BYTE)  # b"world\\n"
```
"""

from .core import (
    CountMode,
    InputIsDirectoryError,
    InvalidRangeError,
    RangeOverflowError,
    SliceError,
    SliceIOError,
    SliceReport,
    SliceSettings,
    SliceStrategy,
    parse_range,
    slice_bytes,
    slice_input,
    slice_seekable,
    slice_stream,
)
from .datastructures import Anchor, Boundary, SliceRange

# Version info
__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Datastructures
    "Anchor",
    "Boundary",
    "SliceRange",
    # Core
    "CountMode",
    "SliceSettings",
    "SliceReport",
    "SliceStrategy",
    "parse_range",
    "slice_bytes",
    "slice_input",
    "slice_seekable",
    "slice_stream",
    # Errors
    "SliceError",
    "InvalidRangeError",
    "RangeOverflowError",
    "InputIsDirectoryError",
    "SliceIOError",
]
