"""Pytest configuration and fixtures for streamslice testing."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop any loguru sinks a test installed so later tests never write to a stale stream."""
    yield
    logger.remove()


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[[bytes], Path]:
    """Write bytes to a fresh file under ``tmp_path`` and return its path."""
    counter = 0

    def _write(data: bytes) -> Path:
        nonlocal counter
        counter += 1
        path = tmp_path / f"input-{counter}.bin"
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep STREAMSLICE_* variables and stray .env files out of tests."""
    for name in ("READ_CHUNK_SIZE", "LINE_DELIMITER", "LOG_LEVEL"):
        monkeypatch.delenv(f"STREAMSLICE_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
