"""Construction helpers layered over ``ParseListIterator``.

Each helper adds one layer and delegates to the next:

    from_file_lines -> from_read_lines -> from_bufread_lines -> from_iter

Only ``from_file_lines`` can fail up front (when the file cannot be opened).
Every other failure is reported per element by the returned iterator.
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Iterable
from typing import IO, Any, AnyStr

from parse_list.config import DEFAULT_OPTIONS, LineOptions
from parse_list.iterator import DEFAULT_PARSE_ERRORS, ParseListIterator, Parser, T
from parse_list.lines import read_lines, without_blanks
from parse_list.result import Err, Ok

log = logging.getLogger(__name__)


class _ReadStream(io.RawIOBase):
    """Raw stream over any object with a ``read(size)`` method returning bytes."""

    def __init__(self, source: Any) -> None:
        super().__init__()
        self._source = source

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        data = self._source.read(len(buffer))
        n = len(data)
        buffer[:n] = data
        return n


def from_file_lines(
    path: str | os.PathLike[str],
    parser: Parser[T],
    *,
    options: LineOptions | None = None,
) -> ParseListIterator[T]:
    """Parse the non-blank lines of a file.

    The file is opened immediately, so a missing or unreadable file raises
    ``OSError`` here rather than on the first ``next()``. The returned
    iterator owns the handle: use it as a context manager or call
    ``close()``.

    Args:
        path: Path of a newline-separated text file.
        parser: Called on each line's text.
        options: Decoding and filtering options.

    Returns:
        Iterator of ``Ok(value)`` / ``Err(ParseListError)``.

    Raises:
        OSError: The file could not be opened.
    """
    f = open(path, "rb")  # noqa: SIM115 - closed through the returned iterator
    log.debug("opened %s", path)
    iterator = from_read_lines(f, parser, options=options)
    iterator.source = f
    return iterator


def from_read_lines(
    stream: IO[bytes],
    parser: Parser[T],
    *,
    options: LineOptions | None = None,
) -> ParseListIterator[T]:
    """Parse the non-blank lines of a byte stream.

    Raw streams, and any object that only has ``read(size)``, are wrapped
    in ``io.BufferedReader``; already buffered streams (and in-memory
    ``BytesIO``) are used as they are.
    """
    reader: IO[bytes]
    if isinstance(stream, io.RawIOBase):
        reader = io.BufferedReader(stream)
    elif not hasattr(stream, "readline"):
        reader = io.BufferedReader(_ReadStream(stream))
    else:
        reader = stream
    return from_bufread_lines(reader, parser, options=options)


def from_bufread_lines(
    reader: IO[AnyStr],
    parser: Parser[T],
    *,
    options: LineOptions | None = None,
) -> ParseListIterator[T]:
    """Parse the lines of a buffered reader, binary or text.

    Blank and whitespace-only lines are dropped unless
    ``options.skip_blank`` is False. Lines that failed to read or decode
    are never dropped.

    A read error from ``reader`` is the last element: the line stream ends
    after it. A binary line that fails to decode does not end the stream.
    """
    options = options or DEFAULT_OPTIONS
    lines: Iterable[Ok[str] | Err[Exception]] = read_lines(
        reader, encoding=options.encoding, errors=options.errors
    )
    if options.skip_blank:
        lines = without_blanks(lines)
    return from_iter(lines, parser, parse_errors=options.parse_errors)


def from_text(
    text: str,
    parser: Parser[T],
    *,
    options: LineOptions | None = None,
) -> ParseListIterator[T]:
    """Parse the lines of an in-memory string."""
    return from_bufread_lines(io.StringIO(text), parser, options=options)


def from_iter(
    items: Iterable[Any],
    parser: Parser[T],
    *,
    parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS,
) -> ParseListIterator[T]:
    """Parse an iterable of line results.

    Items are ``Ok(str)`` or ``Err(exception)``; plain ``str`` items are
    accepted as ``Ok(str)``. No filtering is applied.
    """
    lines = (Ok(item) if isinstance(item, str) else item for item in items)
    return ParseListIterator(lines, parser, parse_errors=parse_errors)
