"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def write_list(tmp_path: Path) -> Callable[[str | bytes], Path]:
    """Return a helper that writes content to a fresh list file."""

    def write(content: str | bytes) -> Path:
        path = tmp_path / "list"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return path

    return write


@pytest.fixture
def numbers_file(write_list: Callable[[str | bytes], Path]) -> Path:
    """Return path to a file holding 0 through 4, one per line."""
    return write_list("0\n1\n2\n3\n4")


@pytest.fixture
def missing_file(tmp_path: Path) -> Path:
    """Return a path that does not exist."""
    return tmp_path / "missing"


class FlakyReader:
    """Reader whose ``readline`` raises ``OSError`` after ``fail_after`` lines."""

    def __init__(self, lines: list[bytes], fail_after: int) -> None:
        """Initialize with the lines to serve before failing."""
        self._lines = list(lines)
        self._fail_after = fail_after
        self.calls = 0

    def readline(self) -> bytes:
        """Serve the next line or fail."""
        self.calls += 1
        if self.calls > self._fail_after:
            raise OSError("device not ready")
        return self._lines.pop(0) if self._lines else b""


@pytest.fixture
def flaky_reader() -> Callable[[list[bytes], int], FlakyReader]:
    """Return a factory for readers that fail partway through."""
    return FlakyReader
