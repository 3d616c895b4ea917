"""Line splitting and blank-line filtering.

Turns a buffered reader into a lazy stream of line results
(``Ok(str)`` or ``Err(exception)``), one per line.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import IO, AnyStr, Union

from parse_list.result import Err, Ok

log = logging.getLogger(__name__)

LineResult = Union[Ok[str], Err[Exception]]


def _strip_terminator(line: str) -> str:
    """Drop a trailing ``\\n`` and then a trailing ``\\r``."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(
    source: IO[AnyStr],
    *,
    encoding: str = "utf-8",
    errors: str = "strict",
) -> Iterator[LineResult]:
    """Lazily split a buffered reader into line results.

    Works with binary readers (each line is decoded on its own) and text
    readers. A binary line that fails to decode becomes
    ``Err(UnicodeDecodeError)`` and splitting continues with the next line.
    An ``OSError`` from the reader, or a ``UnicodeDecodeError`` raised by a
    text reader's own decoder, becomes the last element: the read position
    after a failed read is undefined.

    Args:
        source: Anything with a ``readline()`` method.
        encoding: Codec used for binary lines.
        errors: Codec error handler used for binary lines.

    Yields:
        One line result per line, terminators stripped.
    """
    while True:
        try:
            raw = source.readline()
        except (OSError, UnicodeDecodeError) as e:
            # text readers decode inside readline() and cannot resync
            log.debug("read failed, ending line stream: %s", e)
            yield Err(e)
            return

        if not raw:
            return

        if isinstance(raw, bytes):
            try:
                text = raw.decode(encoding, errors)
            except UnicodeDecodeError as e:
                yield Err(e)
                continue
        else:
            text = raw

        yield Ok(_strip_terminator(text))


def is_nonblank(line: LineResult) -> bool:
    """Return False only for successfully read whitespace-only lines.

    A line that failed to read always counts as non-blank so that its error
    reaches the caller.
    """
    if isinstance(line, Err):
        return True
    return bool(line.value.strip())


def without_blanks(lines: Iterable[LineResult]) -> Iterator[LineResult]:
    """Lazily drop blank lines, keeping every failed line."""
    return filter(is_nonblank, lines)
