"""Type aliases for dockey.

This module contains ONLY TypeAlias definitions for JSON values, keys and the
callable seams. It has no dependencies on other dockey modules so that
_exceptions.py, _json.py, _path.py and _keys.py can all import from it
without cycles.
"""

from collections.abc import Callable
from typing import TypeAlias

# JSON type definitions per RFC 8259
# Using string annotations for forward references to avoid runtime | issues
JSONPrimitive: TypeAlias = "str | int | float | bool | None"
"""A JSON primitive value: string, number, boolean, or null."""

JSONArray: TypeAlias = "list[JSONValue]"
"""A JSON array containing any JSON values."""

JSONObject: TypeAlias = "dict[str, JSONValue]"
"""A JSON object mapping string keys to JSON values."""

JSONValue: TypeAlias = "JSONPrimitive | JSONArray | JSONObject"
"""Any JSON value: primitive, array, or object."""

NormalizedValue: TypeAlias = "str | float"
"""A scalar extracted from a document: text or a 64-bit float.

Nulls and arrays are resolved while flattening and never appear here.
"""

Key: TypeAlias = bytes
"""A canonically encoded index key derived from one normalized value."""

Transform: TypeAlias = Callable[[object], object]
"""A pure function applied to values and search terms before encoding."""

Tokenizer: TypeAlias = Callable[[str], list[str]]
"""A pure function splitting text into an ordered list of tokens."""
