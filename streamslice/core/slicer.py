"""
Slice orchestration.

Parses the range, then either copies a seekable extent directly (byte mode
over a random-access input) or streams through the engine. The chosen
strategy and the number of bytes written are reported back.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from enum import Enum
from typing import cast

from loguru import logger

from ..datastructures.type_aliases import ByteCount, RangeText
from .config import SliceSettings
from .counting import CountMode, counter_for_mode
from .engine import slice_stream
from .errors import io_errors_as_slice_errors
from .fast_path import slice_seekable
from .interfaces import ByteSink, ByteSource, SeekableByteSource
from .range_resolver import parse_range


class SliceStrategy(Enum):
    """How a slice was produced."""

    SEEK = "seek"
    STREAM = "stream"


@dataclass(frozen=True, slots=True)
class SliceReport:
    """Outcome of one slice invocation."""

    strategy: SliceStrategy
    bytes_written: ByteCount


@dataclass(slots=True)
class CountingSink:
    """Sink wrapper tracking how many bytes passed through."""

    sink: ByteSink
    bytes_written: ByteCount = field(default=0)

    def write(self, data: bytes, /) -> int:
        self.sink.write(data)
        self.bytes_written += len(data)
        return len(data)

    def flush(self) -> None:
        self.sink.flush()


def slice_input(
    range_text: RangeText,
    source: ByteSource,
    sink: ByteSink,
    mode: CountMode = CountMode.LINE,
    settings: SliceSettings | None = None,
    seekable: bool = False,
) -> SliceReport:
    """Slice ``source`` into ``sink`` and flush the sink.

    ``seekable`` must only be set for sources backed by a regular file or a
    block device; byte mode then takes the seek path.

    Raises:
        InvalidRangeError, RangeOverflowError: ``range_text`` is malformed.
        SliceIOError: reading, writing or seeking failed.
    """
    settings = settings or SliceSettings()
    slice_range = parse_range(range_text)
    counting_sink = CountingSink(sink)

    if seekable and mode is CountMode.BYTE:
        strategy = SliceStrategy.SEEK
        slice_seekable(
            slice_range,
            cast(SeekableByteSource, source),
            counting_sink,
            chunk_size=settings.read_chunk_size,
        )
    else:
        strategy = SliceStrategy.STREAM
        counter = counter_for_mode(mode, settings.delimiter_byte)
        slice_stream(
            slice_range,
            counter,
            source,
            counting_sink,
            chunk_size=settings.read_chunk_size,
        )

    with io_errors_as_slice_errors("flushing output"):
        counting_sink.flush()

    report = SliceReport(strategy=strategy, bytes_written=counting_sink.bytes_written)
    logger.debug(
        "Sliced {} in {} mode: {} bytes via {}",
        range_text,
        mode.value,
        report.bytes_written,
        report.strategy.value,
    )
    return report


def slice_bytes(
    data: bytes,
    range_text: RangeText,
    mode: CountMode = CountMode.LINE,
    settings: SliceSettings | None = None,
) -> bytes:
    """Slice an in-memory buffer through the streaming engine."""
    sink = io.BytesIO()
    slice_input(range_text, io.BytesIO(data), sink, mode=mode, settings=settings)
    return sink.getvalue()
