"""Plain text parsers usable as the ``parser`` of a parsing iterator."""

from __future__ import annotations

import json
import re
from typing import Any

_DIGITS = re.compile(r"\+?[0-9]+")

U32_MAX = 2**32 - 1


def unsigned_int(text: str, *, max_value: int | None = None) -> int:
    """Parse a non-negative decimal integer.

    Stricter than ``int()``: no surrounding whitespace, no ``-`` sign, no
    underscores and only ASCII digits. There is no upper bound unless
    ``max_value`` is given; bind it with ``functools.partial`` to get a
    fixed-width parser, e.g. ``partial(unsigned_int, max_value=U32_MAX)``.

    Raises:
        ValueError: The text is empty, contains anything but digits, or
            exceeds ``max_value``.
    """
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _DIGITS.fullmatch(text):
        raise ValueError("invalid digit found in string")
    value = int(text)
    if max_value is not None and value > max_value:
        raise ValueError("number too large to fit in target type")
    return value


def json_value(text: str) -> Any:
    """Parse one JSON document per line (JSON Lines).

    Raises:
        json.JSONDecodeError: The line is not valid JSON.
    """
    return json.loads(text)
