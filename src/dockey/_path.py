"""Path queries over parsed JSON documents.

A path is a dot-separated list of segments evaluated from the document root:

- ``name`` selects an object member; ``*`` and ``?`` in a segment match any
  run of characters and any single character, and the first member whose
  name matches wins.
- ``0``, ``1``, ... select an array element. ``a[0]`` is the same as ``a.0``.
- ``#`` as the last segment yields the length of an array. ``#`` followed by
  more segments applies the rest of the path to every element and collects
  the results that exist, so ``friends.#.name`` yields every friend's name.
- ``\\`` escapes the next character, allowing ``.``, ``*``, ``?``, ``#`` and
  ``[`` inside member names.

Evaluation never raises for a path that does not match; it returns
``PATH_MISSING`` instead.
"""

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, TypeAlias

from ._constants import PATH_ARRAY_COUNT, PATH_ESCAPE, PATH_SEPARATOR
from ._exceptions import PathSyntaxError

if TYPE_CHECKING:
    from collections.abc import Callable

    from ._types import JSONValue

__all__ = [
    "PATH_MISSING",
    "PathEvaluator",
    "PathSegment",
    "evaluate_path",
    "parse_path",
]


class _PathMissing:
    """Sentinel for paths that match nothing in a document."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "PATH_MISSING"


PATH_MISSING: _PathMissing = _PathMissing()

PathEvaluator: TypeAlias = "Callable[[JSONValue, str], JSONValue | _PathMissing]"
"""Resolves a path query against a parsed document."""


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One parsed segment of a path query.

    Attributes:
        name: The segment text with escapes removed.
        pattern: Compiled matcher when the segment contains wildcards.
        count: True for an unescaped ``#`` segment.
    """

    name: str
    pattern: "re.Pattern[str] | None" = None
    count: bool = False

    @property
    def index(self) -> "int | None":
        """The array index this segment selects, if it is one."""
        if self.pattern is None and self.name.isascii() and self.name.isdigit():
            return int(self.name)
        return None

    def select_member(self, obj: "dict[str, JSONValue]") -> "JSONValue | _PathMissing":
        if self.pattern is None:
            if self.name in obj:
                return obj[self.name]
            return PATH_MISSING
        for member, value in obj.items():
            if self.pattern.fullmatch(member):
                return value
        return PATH_MISSING


class _SegmentBuilder:
    __slots__ = ("literal", "regex", "wildcard", "escaped_any")

    def __init__(self) -> None:
        self.literal: list[str] = []
        self.regex: list[str] = []
        self.wildcard = False
        self.escaped_any = False

    def add_literal(self, char: str) -> None:
        self.literal.append(char)
        self.regex.append(re.escape(char))

    def add_wildcard(self, char: str) -> None:
        self.literal.append(char)
        self.regex.append(".*" if char == "*" else ".")
        self.wildcard = True

    def is_empty(self) -> bool:
        return not self.literal and not self.escaped_any

    def build(self) -> PathSegment:
        name = "".join(self.literal)
        if self.wildcard:
            return PathSegment(name, pattern=re.compile("".join(self.regex), re.DOTALL))
        count = name == PATH_ARRAY_COUNT and not self.escaped_any
        return PathSegment(name, count=count)


@lru_cache(maxsize=256)
def parse_path(path: str) -> tuple[PathSegment, ...]:
    """Split a path query into segments.

    Args:
        path: The path query.

    Returns:
        The parsed segments, in evaluation order.

    Raises:
        PathSyntaxError: If the path ends in a lone escape character or
            contains a malformed bracket index.
    """
    segments: list[PathSegment] = []
    builder = _SegmentBuilder()
    position = 0
    after_bracket = False

    while position < len(path):
        char = path[position]

        if after_bracket and char not in (PATH_SEPARATOR, "["):
            msg = f"unexpected {char!r} after bracket index at offset {position}"
            raise PathSyntaxError(msg)
        after_bracket = False

        if char == PATH_ESCAPE:
            if position + 1 >= len(path):
                msg = "path ends with an escape character"
                raise PathSyntaxError(msg)
            builder.add_literal(path[position + 1])
            builder.escaped_any = True
            position += 2
            continue

        if char == PATH_SEPARATOR:
            if position > 0 and path[position - 1] == "]" and builder.is_empty():
                # "a[0].b": the separator after a bracket index ends nothing
                position += 1
                continue
            segments.append(builder.build())
            builder = _SegmentBuilder()
            position += 1
            continue

        if char == "[":
            close = path.find("]", position)
            if close == -1:
                msg = f"unclosed bracket at offset {position}"
                raise PathSyntaxError(msg)
            inner = path[position + 1 : close]
            if inner != PATH_ARRAY_COUNT and not (inner.isascii() and inner.isdigit()):
                msg = f"invalid bracket index {inner!r} at offset {position}"
                raise PathSyntaxError(msg)
            if not builder.is_empty():
                segments.append(builder.build())
                builder = _SegmentBuilder()
            segments.append(PathSegment(inner, count=inner == PATH_ARRAY_COUNT))
            position = close + 1
            after_bracket = True
            continue

        if char in ("*", "?"):
            builder.add_wildcard(char)
        else:
            builder.add_literal(char)
        position += 1

    if not (path.endswith("]") and builder.is_empty()):
        segments.append(builder.build())
    return tuple(segments)


def _resolve(
    current: "JSONValue", segments: "tuple[PathSegment, ...]"
) -> "JSONValue | _PathMissing":
    for position, segment in enumerate(segments):
        if isinstance(current, dict):
            found = segment.select_member(current)
            if found is PATH_MISSING:
                return PATH_MISSING
            current = found
            continue

        if isinstance(current, list):
            if segment.count:
                rest = segments[position + 1 :]
                if not rest:
                    return len(current)
                results: list[JSONValue] = []
                for element in current:
                    result = _resolve(element, rest)
                    if result is not PATH_MISSING:
                        results.append(result)
                return results
            index = segment.index
            if index is None or index >= len(current):
                return PATH_MISSING
            current = current[index]
            continue

        return PATH_MISSING

    return current


def evaluate_path(document: "JSONValue", path: str) -> "JSONValue | _PathMissing":
    """Resolve a path query against a parsed document.

    Args:
        document: The parsed JSON document.
        path: The path query. The empty path matches nothing.

    Returns:
        The matched node, a list of nodes for ``#`` fan-out, or
        ``PATH_MISSING`` if the path matches nothing.

    Raises:
        PathSyntaxError: If the path is malformed.
    """
    if not path:
        return PATH_MISSING
    return _resolve(document, parse_path(path))
