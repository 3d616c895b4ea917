"""JSON Schema-backed parsers.

Lines are decoded as JSON and checked against a Draft 7 schema. A line that
is not JSON raises ``json.JSONDecodeError``; a document that does not match
raises ``SchemaMismatch``. Both are ``ValueError`` subclasses.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from jsonschema import Draft7Validator


class SchemaMismatch(ValueError):
    """JSON decoded but failed validation against the schema."""

    def __init__(self, data: Any, errors: list[str]) -> None:
        super().__init__("; ".join(errors))
        self.data = data
        self.errors = errors


def schema_parser(schema: dict[str, Any]) -> Callable[[str], Any]:
    """Build a parser that returns decoded JSON matching ``schema``.

    The schema itself is checked once, here; an invalid schema raises
    ``jsonschema.SchemaError`` immediately.
    """
    Draft7Validator.check_schema(schema)
    validator = Draft7Validator(schema)

    def parse(text: str) -> Any:
        data = json.loads(text)
        errors = [e.message for e in validator.iter_errors(data)]
        if errors:
            raise SchemaMismatch(data, errors)
        return data

    return parse


def schema_from_fields(
    required: dict[str, str],
    optional: dict[str, str] | None = None,
    title: str | None = None,
) -> dict[str, Any]:
    """Build an object JSON Schema from field definitions.

    Types: "string", "integer", "number", "boolean", "null", "array", "object"
    Use "string|null" for nullable strings.
    Use "enum:a,b,c" for enumerations.

    Args:
        required: Dict of required field names to JSON types.
        optional: Dict of optional field names to JSON types.
        title: Optional schema title.

    Returns:
        JSON Schema dict.
    """
    properties: dict[str, Any] = {}

    for name, type_str in required.items():
        properties[name] = _parse_type(type_str)
    for name, type_str in (optional or {}).items():
        properties[name] = _parse_type(type_str)

    schema: dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "type": "object",
        "properties": properties,
        "required": list(required),
    }
    if title:
        schema["title"] = title
    return schema


def _parse_type(type_str: str) -> dict[str, Any]:
    if "|" in type_str:
        return {"anyOf": [{"type": t.strip()} for t in type_str.split("|")]}
    if type_str.startswith("enum:"):
        return {"type": "string", "enum": [v.strip() for v in type_str[5:].split(",")]}
    return {"type": type_str}
