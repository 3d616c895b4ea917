"""Error types surfaced per element by the parsing iterator.

A ``ParseListError`` is always one of two variants:

- ``IoFailure``: the line itself could not be obtained (read or decode error).
- ``ParseFailure``: the line was read but the parser rejected it.

Both keep the original exception untouched in ``.error`` and chain it as
``__cause__``, so tracebacks and ``isinstance`` checks on the inner error
keep working.
"""

from __future__ import annotations

from typing import ClassVar, Literal


class ParseListError(Exception):
    """Base class for per-element failures. Not raised directly."""

    kind: ClassVar[Literal["io", "parse"]]

    def __init__(self, error: BaseException) -> None:
        super().__init__(error)
        self.error = error
        self.__cause__ = error

    def __str__(self) -> str:
        return str(self.error)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.error!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.error is other.error  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), id(self.error)))


class IoFailure(ParseListError):
    """A line could not be read (``OSError``) or decoded (``UnicodeDecodeError``)."""

    kind = "io"


class ParseFailure(ParseListError):
    """A line was read but the parser raised one of its parse errors."""

    kind = "parse"
