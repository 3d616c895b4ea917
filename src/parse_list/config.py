"""Options for the line-reading construction helpers."""

from __future__ import annotations

import codecs
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from parse_list.iterator import DEFAULT_PARSE_ERRORS


class LineOptions(BaseModel):
    """How lines are decoded and filtered before parsing.

    Accepts plain dicts through ``LineOptions.model_validate``, e.g. a table
    loaded from a config file.
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = "utf-8"
    errors: Literal["strict", "replace", "ignore", "surrogateescape", "backslashreplace"] = "strict"
    skip_blank: bool = True
    parse_errors: tuple[type[Exception], ...] = DEFAULT_PARSE_ERRORS

    @field_validator("encoding")
    @classmethod
    def ensure_known_encoding(cls, v: str) -> str:
        """Reject codecs Python does not know, normalizing the name."""
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {v}") from e

    @field_validator("parse_errors")
    @classmethod
    def ensure_parse_errors(cls, v: tuple[type[Exception], ...]) -> tuple[type[Exception], ...]:
        """Require at least one exception type."""
        if not v:
            raise ValueError("parse_errors must name at least one exception type")
        return v


DEFAULT_OPTIONS = LineOptions()
