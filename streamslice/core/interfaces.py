"""
Collaborator contracts for the slicing core.

The engine only needs something it can ``read`` from and something it can
``write`` to. The fast path additionally needs ``seek``. Any binary file
object satisfies these protocols.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..datastructures.type_aliases import ByteValue, UnitCount


@runtime_checkable
class ByteSource(Protocol):
    """Produces bytes until ``read`` returns ``b""``."""

    def read(self, size: int = -1, /) -> bytes: ...


@runtime_checkable
class SeekableByteSource(ByteSource, Protocol):
    """A byte source supporting absolute positioning."""

    def seek(self, offset: int, whence: int = 0, /) -> int: ...


@runtime_checkable
class ByteSink(Protocol):
    """Accepts byte chunks; may buffer until ``flush``."""

    def write(self, data: bytes, /) -> int | None: ...

    def flush(self) -> None: ...


class UnitCounter(Protocol):
    """Maps one byte to the number of units (0 or 1) it completes."""

    def count(self, byte: ByteValue) -> UnitCount: ...

    def count_chunk(self, chunk: bytes) -> UnitCount: ...
