"""Value transforms applied before encoding or comparison.

Transforms are pure functions of one value. Applying the same transform to
index values and to query-time search terms keeps matching symmetric.
"""

from functools import reduce
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from ._types import Transform

__all__ = ["chain", "to_lower"]

# Per-character mappings where str.lower applies full or contextual casing
_SIMPLE_CASE: Final[dict[int, str]] = str.maketrans({"İ": "i", "Σ": "σ"})


def to_lower(value: object) -> object:
    """Map all Unicode letters to lower case.

    Lowering is per character: U+0130 becomes a plain "i" and capital sigma
    always becomes U+03C3, never the final form. Strings are lowered
    directly. Byte sequences, keys included, are decoded as UTF-8 and the
    lowered text is returned; invalid sequences become U+FFFD. Any other
    value is returned unchanged.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", "replace")
    if isinstance(value, str):
        return value.translate(_SIMPLE_CASE).lower()
    return value


def chain(*transforms: "Transform") -> "Transform":
    """Compose transforms, applying them left to right.

    Example:
        >>> strip_then_lower = chain(str.strip, to_lower)
        >>> strip_then_lower("  Hello ")
        'hello'
    """

    def apply(value: object) -> object:
        return reduce(lambda current, transform: transform(current), transforms, value)

    return apply
