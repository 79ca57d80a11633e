"""Value extraction from JSON documents.

A Document wraps an immutable JSON buffer. Extraction parses the buffer,
resolves a path query, and flattens the matched node into an ordered list of
normalized scalars:

- a string yields itself
- a number yields its value as a float
- null, or a path that matches nothing, yields nothing
- an array yields the flattened values of its elements, in order

Objects and booleans are rejected wherever they occur in the matched node,
and the whole extraction fails with UnsupportedTypeError.
"""

import logging
import math
from typing import TYPE_CHECKING, ClassVar

from ._exceptions import InvalidJSONError, UnsupportedTypeError
from ._json import parse_json, replace_lone_surrogates, serialize_json
from ._keys import encode_key
from ._path import PATH_MISSING, evaluate_path

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ._path import PathEvaluator
    from ._types import Key, NormalizedValue

__all__ = ["Document", "flatten_values"]

logger = logging.getLogger(__name__)


def _number_value(number: "int | float") -> float:
    try:
        return float(number)
    except OverflowError:
        # integer literal with more digits than a float can hold
        return math.inf if number > 0 else -math.inf


def flatten_values(node: object) -> "list[NormalizedValue]":
    """Flatten a matched node into normalized scalars.

    Args:
        node: The node returned by path evaluation, or PATH_MISSING.

    Returns:
        The scalars in depth-first order, with nulls dropped.

    Raises:
        UnsupportedTypeError: If the node is or contains an object or a
            boolean.
    """
    values: list[NormalizedValue] = []
    # explicit stack so deeply nested arrays cannot exhaust the recursion limit
    stack: list[Iterator[object]] = [iter((node,))]
    while stack:
        for item in stack[-1]:
            if item is None or item is PATH_MISSING:
                continue
            if isinstance(item, str):
                values.append(replace_lone_surrogates(item))
            # bool is an int subclass, so it must be ruled out before numbers
            elif isinstance(item, (int, float)) and not isinstance(item, bool):
                values.append(_number_value(item))
            elif isinstance(item, list):
                stack.append(iter(item))
                break
            else:
                raise UnsupportedTypeError(serialize_json(item))
        else:
            _ = stack.pop()
    return values


class Document:
    """An immutable JSON document subject to path-based key extraction.

    Example:
        >>> doc = Document('{"a": "Hello", "b": [1, 2, 3]}')
        >>> doc.values_at_path("a")
        ['Hello']
        >>> doc.values_at_path("b")
        [1.0, 2.0, 3.0]
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_evaluator", "_raw")

    _raw: bytes
    _evaluator: "PathEvaluator"

    def __init__(
        self,
        raw: "str | bytes",
        *,
        _evaluator: "PathEvaluator | None" = None,
    ) -> None:
        """Wrap a JSON payload.

        The payload is not validated here; validation happens on every
        extraction so that construction never fails.

        Args:
            raw: The JSON text, as a string or UTF-8 bytes.
            _evaluator: Internal. Path evaluator used instead of the default.
        """
        if isinstance(raw, str):
            self._raw = raw.encode("utf-8", "surrogatepass")
        else:
            self._raw = bytes(raw)
        self._evaluator = evaluate_path if _evaluator is None else _evaluator

    @classmethod
    def from_string(cls, json: str) -> "Document":
        """Create a document from JSON text."""
        return cls(json)

    @classmethod
    def from_bytes(cls, json: bytes) -> "Document":
        """Create a document from UTF-8 encoded JSON."""
        return cls(json)

    @property
    def raw(self) -> bytes:
        """The raw JSON bytes."""
        return self._raw

    def __bytes__(self) -> bytes:
        return self._raw

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._raw == other._raw
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._raw)

    def __repr__(self) -> str:
        return f"Document({self._raw!r})"

    def values_at_path(self, path: str) -> "list[NormalizedValue]":
        """Return the scalar values found at a path query.

        Args:
            path: The path query, e.g. ``"person.name"`` or ``"tags"``.

        Returns:
            The flattened values: strings and floats, in document order.
            An empty list if the path matches nothing or only nulls.

        Raises:
            InvalidJSONError: If the document is not valid JSON.
            UnsupportedTypeError: If the matched node is or contains an
                object or a boolean.
            PathSyntaxError: If the path query is malformed.
        """
        try:
            document = parse_json(self._raw)
        except InvalidJSONError as e:
            logger.debug("Document is not valid JSON: %s", e)
            raise
        node = self._evaluator(document, path)
        try:
            return flatten_values(node)
        except UnsupportedTypeError as e:
            logger.debug("Rejected value at path %r: %s", path, e.node_text)
            raise

    def keys_at_path(self, path: str) -> "list[Key]":
        """Return the canonically encoded keys for the values at a path query.

        Every value produced by values_at_path is encodable, so this returns
        exactly one key per value, in the same order.

        Raises:
            InvalidJSONError: If the document is not valid JSON.
            UnsupportedTypeError: If the matched node is or contains an
                object or a boolean.
            PathSyntaxError: If the path query is malformed.
        """
        return [encode_key(value) for value in self.values_at_path(path)]
