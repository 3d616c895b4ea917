"""Tests for line splitting and blank filtering."""

from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

from parse_list import Err, Ok, is_nonblank, read_lines, without_blanks


class TestReadLines:
    """Tests for read_lines."""

    def test_binary_lines(self) -> None:
        """Test binary lines are decoded and terminators stripped."""
        lines = list(read_lines(io.BytesIO(b"a\nb\nc")))
        assert lines == [Ok("a"), Ok("b"), Ok("c")]

    def test_text_lines(self) -> None:
        """Test text readers are split the same way."""
        lines = list(read_lines(io.StringIO("a\nb\n")))
        assert lines == [Ok("a"), Ok("b")]

    def test_crlf(self) -> None:
        """Test CRLF terminators are stripped."""
        lines = list(read_lines(io.BytesIO(b"1\r\n2\r\n")))
        assert lines == [Ok("1"), Ok("2")]

    def test_lone_carriage_return_kept(self) -> None:
        """Test a carriage return without newline is content."""
        lines = list(read_lines(io.BytesIO(b"1\r")))
        assert lines == [Ok("1\r")]

    def test_whitespace_kept(self) -> None:
        """Test surrounding whitespace is not trimmed."""
        lines = list(read_lines(io.BytesIO(b"  1 \n")))
        assert lines == [Ok("  1 ")]

    def test_invalid_utf8_is_local(self) -> None:
        """Test an undecodable line fails alone and splitting continues."""
        lines = list(read_lines(io.BytesIO(b"1\n\xff\xfe\n3\n")))
        assert lines[0] == Ok("1")
        assert isinstance(lines[1], Err)
        assert isinstance(lines[1].error, UnicodeDecodeError)
        assert lines[2] == Ok("3")

    def test_replace_errors(self) -> None:
        """Test the codec error handler is honored."""
        lines = list(read_lines(io.BytesIO(b"a\xff\n"), errors="replace"))
        assert lines == [Ok("a\ufffd")]

    def test_encoding(self) -> None:
        """Test a non-default encoding."""
        lines = list(read_lines(io.BytesIO("é\n".encode("latin-1")), encoding="latin-1"))
        assert lines == [Ok("é")]

    def test_read_error_ends_stream(self, flaky_reader: Callable[..., object]) -> None:
        """Test an OSError is yielded once and then the stream ends."""
        reader = flaky_reader([b"1\n", b"2\n"], 1)
        lines = list(read_lines(reader))  # type: ignore[arg-type]
        assert lines[0] == Ok("1")
        assert isinstance(lines[1], Err)
        assert isinstance(lines[1].error, OSError)
        assert len(lines) == 2

    def test_text_reader_decode_error(self, write_list: Callable[[bytes], Path]) -> None:
        """Test a text reader's decode error is yielded as the last element."""
        path = write_list(b"1\n\xff\n3\n")
        with open(path, encoding="utf-8") as f:
            lines = list(read_lines(f))
        assert isinstance(lines[-1], Err)
        assert isinstance(lines[-1].error, UnicodeDecodeError)
        assert all(isinstance(line, Ok) for line in lines[:-1])


class TestBlankFiltering:
    """Tests for is_nonblank and without_blanks."""

    def test_is_nonblank(self) -> None:
        """Test blank detection on successful lines."""
        assert is_nonblank(Ok("1"))
        assert is_nonblank(Ok(" 1 "))
        assert not is_nonblank(Ok(""))
        assert not is_nonblank(Ok(" \t "))

    def test_failed_line_never_blank(self) -> None:
        """Test a line that failed to read always counts as non-blank."""
        assert is_nonblank(Err(OSError("x")))

    def test_without_blanks(self) -> None:
        """Test blanks are dropped and failures kept."""
        error = OSError("x")
        lines = [Ok(""), Ok("1"), Err(error), Ok("  "), Ok("2")]
        assert list(without_blanks(lines)) == [Ok("1"), Err(error), Ok("2")]

    def test_all_blank(self) -> None:
        """Test an all-blank input produces nothing."""
        assert list(without_blanks(read_lines(io.BytesIO(b"\n \n\t\n")))) == []
