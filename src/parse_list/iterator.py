"""The parsing iterator.

``ParseListIterator`` wraps an iterable of line results and a parser, and
yields exactly one ``Ok(value)`` or ``Err(ParseListError)`` per line result.
Failures are per element: the iterator keeps going after an I/O or parse
failure, and it is up to the caller to stop, skip, or collect.

Usage:
    lines = [Ok("0"), Err(OSError("disk")), Ok("2")]
    for result in ParseListIterator(lines, int):
        if isinstance(result, Ok):
            print(result.value)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from types import TracebackType
from typing import Any, Generic, TypeVar, Union

from parse_list.errors import IoFailure, ParseFailure, ParseListError
from parse_list.result import Err, Ok

log = logging.getLogger(__name__)

T = TypeVar("T")

Parser = Callable[[str], T]
ParsedResult = Union[Ok[T], Err[ParseListError]]

DEFAULT_PARSE_ERRORS: tuple[type[Exception], ...] = (ValueError,)


class ParseListIterator(Generic[T]):
    """Lazy adapter from line results to parsed results.

    Nothing is read or parsed until ``next()`` is called. One parsed result
    is produced per line result, in order, with no buffering, skipping, or
    retry. The iterator is a single cursor and is not re-entrant.
    """

    def __init__(
        self,
        lines: Iterable[Ok[str] | Err[Exception]],
        parser: Parser[T],
        *,
        parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS,
        source: Any = None,
    ) -> None:
        """Wrap ``lines``; ``source`` is an optional resource closed by ``close()``."""
        self._lines = iter(lines)
        self._parser = parser
        self._parse_errors = parse_errors
        self.source = source
        self._position = 0

    def __iter__(self) -> ParseListIterator[T]:
        return self

    def __next__(self) -> ParsedResult[T]:
        line = next(self._lines)
        position = self._position
        self._position += 1

        if isinstance(line, Err):
            log.debug("element %d: read failed: %s", position, line.error)
            return Err(IoFailure(line.error))

        try:
            value = self._parser(line.value)
        except self._parse_errors as e:
            log.debug("element %d: parse failed: %s", position, e)
            return Err(ParseFailure(e))
        return Ok(value)

    @property
    def position(self) -> int:
        """Number of elements produced so far."""
        return self._position

    def ok_values(self) -> Iterator[T]:
        """Lazily yield only the successfully parsed values, skipping failures."""
        for result in self:
            if isinstance(result, Ok):
                yield result.value

    def close(self) -> None:
        """Close the underlying source, if the iterator was given one."""
        if self.source is not None:
            self.source.close()

    def __enter__(self) -> ParseListIterator[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
