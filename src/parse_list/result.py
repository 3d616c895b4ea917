"""Two-variant result type for per-line outcomes.

``Ok`` carries a value, ``Err`` carries an exception. Neither is raised on
its own; callers decide what to do with an ``Err`` (skip it, log it, or call
``unwrap()`` to fail fast).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def ok(self) -> T:
        """Return the carried value."""
        return self.value

    def unwrap(self) -> T:
        """Return the carried value."""
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def ok(self) -> None:
        """Return None; there is no value."""
        return None

    def unwrap(self) -> NoReturn:
        """Raise the carried exception."""
        raise self.error


Result = Union[Ok[T], Err[E]]
