"""JSON parsing and rendering for documents.

Parsing is strict RFC 8259 on top of the standard library decoder: the
non-standard NaN and Infinity literals are rejected, member names that occur
twice keep their first value, and every failure surfaces as InvalidJSONError.
"""

import json
import re
from typing import TYPE_CHECKING

from ._exceptions import InvalidJSONError

if TYPE_CHECKING:
    from ._types import JSONObject, JSONValue

__all__ = [
    "parse_json",
    "replace_lone_surrogates",
    "serialize_json",
]

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")
_REPLACEMENT_CHARACTER = "\ufffd"


def _reject_constant(name: str) -> float:
    msg = f"invalid JSON: {name} is not a JSON value"
    raise InvalidJSONError(msg)


def _parse_int(text: str) -> "int | float":
    try:
        return int(text)
    except ValueError:
        # more digits than the interpreter converts to int; the float is infinite
        return float(text)


def _first_wins(pairs: "list[tuple[str, JSONValue]]") -> "JSONObject":
    obj: JSONObject = {}
    for name, value in pairs:
        _ = obj.setdefault(name, value)
    return obj


def parse_json(data: "str | bytes") -> "JSONValue":
    """Parse a complete JSON text.

    Args:
        data: The JSON text, as a string or as UTF-8 encoded bytes.

    Returns:
        The parsed JSON value.

    Raises:
        InvalidJSONError: If the bytes are not valid UTF-8, the text is not
            valid JSON, or nesting is too deep for the decoder.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            msg = f"invalid JSON: invalid UTF-8 at byte {e.start}"
            raise InvalidJSONError(msg) from e
    else:
        text = data

    try:
        return json.loads(
            text,
            parse_constant=_reject_constant,
            parse_int=_parse_int,
            object_pairs_hook=_first_wins,
        )
    except InvalidJSONError:
        raise
    except json.JSONDecodeError as e:
        msg = f"invalid JSON: {e.msg} at line {e.lineno} column {e.colno}"
        raise InvalidJSONError(msg) from e
    except RecursionError as e:
        msg = "invalid JSON: nesting depth exceeds maximum"
        raise InvalidJSONError(msg) from e


def serialize_json(value: object) -> str:
    """Render a JSON value as compact text.

    Member order is preserved and non-ASCII characters are written as-is.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def replace_lone_surrogates(text: str) -> str:
    """Replace unpaired surrogate code points with U+FFFD.

    The decoder turns a ``\\ud800`` escape without its partner into a lone
    surrogate, which has no UTF-8 encoding.
    """
    return _LONE_SURROGATE.sub(_REPLACEMENT_CHARACTER, text)
