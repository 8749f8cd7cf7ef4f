"""
Streaming slice engine.

Emits exactly the bytes of a stream that fall inside a ``SliceRange`` without
knowing the stream length in advance and without rewinding. Which algorithm
runs depends on how the two boundaries are anchored:

- start and end both from the start: count forward and stop at the end
  boundary. Constant memory.
- start from the start, end from the end: skip the leading bytes, then keep a
  trailing window holding the last ``end`` units and emit whatever falls out
  of its front. Memory bounded by the end offset.
- start from the end: keep a trailing window of the last ``start`` units,
  counting what is evicted; once the stream is exhausted the evicted count is
  the start position and the end can be resolved. Memory bounded by the start
  offset.

A byte's position is its offset in byte mode, or the number of delimiters
before it in line mode. A byte is emitted iff ``start <= position < end``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from loguru import logger

from ..datastructures.boundary import Anchor, SliceRange
from ..datastructures.type_aliases import ByteValue, ChunkSize, UnitOffset
from .config import DEFAULT_READ_CHUNK_SIZE
from .errors import io_errors_as_slice_errors
from .interfaces import ByteSink, ByteSource, UnitCounter


def slice_stream(
    slice_range: SliceRange,
    counter: UnitCounter,
    source: ByteSource,
    sink: ByteSink,
    chunk_size: ChunkSize = DEFAULT_READ_CHUNK_SIZE,
) -> None:
    """Write the bytes of ``source`` selected by ``slice_range`` to ``sink``.

    Reads ``source`` until it is exhausted or nothing more can be emitted.
    The sink is not flushed here.

    Raises:
        SliceIOError: reading or writing failed. Bytes already written stay written.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    start, end = slice_range.start, slice_range.end
    chunks = _read_chunks(source, chunk_size)

    with io_errors_as_slice_errors("slicing stream"):
        if start.anchor is Anchor.START and end.anchor is Anchor.START:
            logger.debug("Streaming {} forward from the start", slice_range)
            _slice_head(start.offset, end.offset, counter, chunks, sink)
        elif start.anchor is Anchor.START:
            logger.debug("Streaming {} with a trailing window of {}", slice_range, end)
            _slice_until_tail(start.offset, end.offset, counter, chunks, sink)
        else:
            logger.debug("Streaming {} with a tail window of {}", slice_range, start)
            _slice_tail(slice_range, counter, chunks, sink)


def _read_chunks(source: ByteSource, chunk_size: ChunkSize) -> Iterator[bytes]:
    while chunk := source.read(chunk_size):
        yield chunk


def _slice_head(
    start: UnitOffset,
    end: UnitOffset,
    counter: UnitCounter,
    chunks: Iterator[bytes],
    sink: ByteSink,
) -> None:
    if start >= end:
        return

    count = counter.count
    position = 0
    for chunk in chunks:
        units = counter.count_chunk(chunk)
        if position + units < start:
            # every byte of this chunk lies before the start
            position += units
            continue
        if position >= start and position + units < end:
            sink.write(chunk)
            position += units
            continue

        emit_from: int | None = None
        for index, byte in enumerate(chunk):
            if emit_from is None and position >= start:
                emit_from = index
            position += count(byte)
            if position >= end:
                if emit_from is not None:
                    sink.write(chunk[emit_from : index + 1])
                return
        if emit_from is not None:
            sink.write(chunk[emit_from:])


def _slice_until_tail(
    skip: int,
    keep_back: UnitOffset,
    counter: UnitCounter,
    chunks: Iterator[bytes],
    sink: ByteSink,
) -> None:
    # The leading skip counts raw bytes, not units, even in line mode.
    count = counter.count
    window: deque[ByteValue] = deque()
    held = 0
    for chunk in chunks:
        if skip:
            if len(chunk) <= skip:
                skip -= len(chunk)
                continue
            chunk = chunk[skip:]
            skip = 0

        emitted = bytearray()
        for byte in chunk:
            window.append(byte)
            held += count(byte)
            while held > keep_back:
                front = window.popleft()
                held -= count(front)
                emitted.append(front)
        if emitted:
            sink.write(bytes(emitted))


def _slice_tail(
    slice_range: SliceRange,
    counter: UnitCounter,
    chunks: Iterator[bytes],
    sink: ByteSink,
) -> None:
    keep = slice_range.start.offset
    count = counter.count
    window: deque[ByteValue] = deque()
    held = 0
    # units evicted so far, i.e. the position of the window's first byte
    position = 0
    for chunk in chunks:
        for byte in chunk:
            window.append(byte)
            held += count(byte)
            while held > keep:
                units = count(window.popleft())
                held -= units
                position += units

    # position + held is the total unit count of the stream
    stop = slice_range.end.resolve(position + held)
    logger.debug(
        "Tail window starts at unit {} and holds {} units; emitting up to unit {}",
        position,
        held,
        stop,
    )

    emitted = bytearray()
    while window and position < stop:
        byte = window.popleft()
        emitted.append(byte)
        position += count(byte)
    if emitted:
        sink.write(bytes(emitted))
