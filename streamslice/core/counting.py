"""
Unit-counting policies.

A policy decides how many units a single byte completes. Byte mode counts
every byte; line mode counts only the delimiter, so a line owns its own
terminating delimiter. Policies hold no running state: positions are tracked
by the engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..datastructures.type_aliases import ByteValue, UnitCount
from .interfaces import UnitCounter

NEWLINE: ByteValue = 0x0A


class CountMode(Enum):
    """What a unit is."""

    BYTE = "byte"
    LINE = "line"


@dataclass(frozen=True, slots=True)
class ByteCounter:
    """Every byte is one unit."""

    def count(self, byte: ByteValue) -> UnitCount:
        return 1

    def count_chunk(self, chunk: bytes) -> UnitCount:
        return len(chunk)


@dataclass(frozen=True, slots=True)
class LineCounter:
    """Only the delimiter byte completes a unit."""

    delimiter: ByteValue = NEWLINE

    def __post_init__(self) -> None:
        if not 0 <= self.delimiter <= 0xFF:
            raise ValueError(f"Delimiter must be a single byte, got {self.delimiter}")

    def count(self, byte: ByteValue) -> UnitCount:
        return 1 if byte == self.delimiter else 0

    def count_chunk(self, chunk: bytes) -> UnitCount:
        return chunk.count(self.delimiter)


def counter_for_mode(mode: CountMode, delimiter: ByteValue = NEWLINE) -> UnitCounter:
    """Resolve the counting policy once per invocation."""
    match mode:
        case CountMode.BYTE:
            return ByteCounter()
        case CountMode.LINE:
            return LineCounter(delimiter=delimiter)
