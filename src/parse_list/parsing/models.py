"""Pydantic-backed parsers.

Each line is a JSON object validated into a model instance. Validation
errors are ``pydantic.ValidationError`` (a ``ValueError``), so the parsing
iterator reports them as parse failures with the default options.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def model_parser(model: type[M], *, strict: bool | None = None) -> Callable[[str], M]:
    """Build a parser that validates each line as JSON into ``model``.

    Args:
        model: Pydantic model class.
        strict: Passed through to ``model_validate_json``.

    Returns:
        A parser returning ``model`` instances.
    """

    def parse(text: str) -> M:
        return model.model_validate_json(text, strict=strict)

    parse.__name__ = f"parse_{model.__name__}"
    return parse
