"""
Seek-based slicing for byte mode over random-access inputs.

When the input is a regular file or block device its length is known, so
both boundaries resolve to absolute offsets up front and a single contiguous
extent is copied. The output is identical to running the streaming engine
with a byte counter over the same input.
"""

from __future__ import annotations

import os

from loguru import logger

from ..datastructures.boundary import SliceRange
from ..datastructures.type_aliases import ByteCount, ChunkSize
from .config import DEFAULT_READ_CHUNK_SIZE
from .errors import io_errors_as_slice_errors
from .interfaces import ByteSink, SeekableByteSource


def slice_seekable(
    slice_range: SliceRange,
    source: SeekableByteSource,
    sink: ByteSink,
    chunk_size: ChunkSize = DEFAULT_READ_CHUNK_SIZE,
) -> ByteCount:
    """Copy the byte extent selected by ``slice_range`` from ``source`` to ``sink``.

    Returns the number of bytes copied.

    Raises:
        SliceIOError: seeking, reading or writing failed.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    with io_errors_as_slice_errors("seeking input"):
        length = source.seek(0, os.SEEK_END)
        start, end = slice_range.absolute_extent(length)
        logger.debug(
            "Input is {} bytes; {} resolves to extent [{}, {})",
            length,
            slice_range,
            start,
            end,
        )
        if start >= end:
            return 0
        source.seek(start, os.SEEK_SET)
        return _copy_extent(source, sink, end - start, chunk_size)


def _copy_extent(
    source: SeekableByteSource, sink: ByteSink, remaining: ByteCount, chunk_size: ChunkSize
) -> ByteCount:
    copied = 0
    while remaining > 0:
        buf = source.read(min(chunk_size, remaining))
        if not buf:
            # File shrank after its length was taken
            break
        sink.write(buf)
        copied += len(buf)
        remaining -= len(buf)
    return copied
