"""
Input selection for the command line.

Resolves the optional input path to a readable binary stream and reports
whether it supports random access. Standard input is never treated as
seekable; named regular files and block devices are.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO

from loguru import logger

from ..datastructures.type_aliases import InputPath
from .errors import InputIsDirectoryError, io_errors_as_slice_errors

STDIN_PATH = "-"


@dataclass(frozen=True, slots=True)
class InputSource:
    """An opened input stream."""

    stream: BinaryIO
    name: str
    seekable: bool


def is_stdin_path(path: InputPath | None) -> bool:
    return path is None or path == STDIN_PATH


@contextmanager
def open_input(path: InputPath | None, stdin: BinaryIO) -> Iterator[InputSource]:
    """Open ``path`` for reading, or hand out ``stdin`` for ``None`` / ``"-"``.

    Files opened here are closed on exit; ``stdin`` is left open.

    Raises:
        InputIsDirectoryError: ``path`` names a directory.
        SliceIOError: ``path`` cannot be inspected or opened.
    """
    if is_stdin_path(path):
        logger.debug("Reading from standard input")
        yield InputSource(stream=stdin, name="<stdin>", seekable=False)
        return

    assert path is not None
    with io_errors_as_slice_errors(f"opening {path}"):
        mode = os.stat(path).st_mode
    if stat.S_ISDIR(mode):
        raise InputIsDirectoryError(path)

    seekable = stat.S_ISREG(mode) or stat.S_ISBLK(mode)
    with io_errors_as_slice_errors(f"opening {path}"):
        stream = open(path, "rb")
    logger.debug("Opened {} (seekable={})", path, seekable)
    try:
        yield InputSource(stream=stream, name=path, seekable=seekable)
    finally:
        stream.close()
