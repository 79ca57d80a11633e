"""Tokenizers for full-text indexing."""

import re
from typing import TYPE_CHECKING, Final

from ._keys import encode_key

if TYPE_CHECKING:
    from ._types import Key, Tokenizer, Transform

__all__ = ["text_keys", "whitespace_tokenizer"]

_NON_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[^\t\n\f\r ]+")


def whitespace_tokenizer(text: str) -> list[str]:
    r"""Split text into its maximal runs of non-whitespace characters.

    Whitespace is only tab, newline, form feed, carriage return and space.
    Other Unicode spaces such as U+00A0 stay inside tokens. Leading, trailing
    and repeated whitespace never produce empty tokens.

    Example:
        >>> whitespace_tokenizer("foo   bar\tbaz")
        ['foo', 'bar', 'baz']
    """
    return _NON_WHITESPACE.findall(text)


def text_keys(
    text: str,
    tokenizer: "Tokenizer" = whitespace_tokenizer,
    transform: "Transform | None" = None,
) -> "list[Key]":
    """Tokenize text and encode every token as an index key.

    Args:
        text: The text to index or search for.
        tokenizer: Splits the text into tokens.
        transform: Applied to each token before encoding, e.g. to_lower.

    Returns:
        One key per token, in token order.

    Raises:
        ConversionError: If the transform returns a value that cannot be
            encoded.
    """
    tokens = tokenizer(text)
    if transform is None:
        return [encode_key(token) for token in tokens]
    return [encode_key(transform(token)) for token in tokens]
