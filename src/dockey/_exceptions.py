"""Exception hierarchy for dockey.

All errors raised by the package derive from DockeyError, so callers that
index many documents can skip a failing document with a single except clause.
"""

__all__ = [
    "ConversionError",
    "DockeyError",
    "InvalidJSONError",
    "PathSyntaxError",
    "UnsupportedTypeError",
]


class DockeyError(Exception):
    """Base exception for all dockey errors."""


class InvalidJSONError(DockeyError):
    """The document buffer is not syntactically valid JSON."""


class UnsupportedTypeError(DockeyError, TypeError):
    """A matched node cannot be normalized into an indexable value.

    Raised for objects and booleans at any depth of the matched node.

    Attributes:
        node_text: Compact JSON text of the offending node. It is rendered
            from the parsed value, not sliced from the source, so numbers
            appear in canonical form (`1e2` as `100.0`) and only the first
            of any duplicate members is shown.
    """

    node_text: str

    def __init__(self, node_text: str) -> None:
        super().__init__(f"type at path not supported for indexing: {node_text}")
        self.node_text = node_text


class ConversionError(DockeyError, TypeError):
    """A value cannot be canonically encoded as a key.

    Attributes:
        value_type: Name of the unsupported type.
    """

    value_type: str

    def __init__(self, value_type: str, message: "str | None" = None) -> None:
        if message is None:
            message = f"cannot convert {value_type} to key bytes"
        super().__init__(message)
        self.value_type = value_type


class PathSyntaxError(DockeyError, ValueError):
    """A path query is malformed."""
