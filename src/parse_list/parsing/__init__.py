"""Ready-made parsers for common line formats.

Any ``Callable[[str], T]`` works as a parser; these cover the usual cases:
- ``unsigned_int``: non-negative decimal integers
- ``json_value``: one JSON document per line
- ``model_parser``: JSON lines validated into a Pydantic model
- ``schema_parser``: JSON lines validated against a JSON Schema
"""

from parse_list.parsing.models import model_parser
from parse_list.parsing.parsers import U32_MAX, json_value, unsigned_int
from parse_list.parsing.schema import SchemaMismatch, schema_from_fields, schema_parser

__all__ = [
    "unsigned_int",
    "U32_MAX",
    "json_value",
    "model_parser",
    "schema_parser",
    "SchemaMismatch",
    "schema_from_fields",
]
