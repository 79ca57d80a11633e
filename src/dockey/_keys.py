"""Canonical key encoding and index references.

Encoding rules:
- Text is encoded as its UTF-8 bytes, with no length prefix or terminator.
- Byte sequences (for example an existing key) pass through unchanged.
- Floats are encoded as the 8-byte big-endian IEEE-754 bit pattern.

Number keys compare in numeric order as unsigned bytes only when both values
are non-negative. Negative numbers sort in reverse and after all positive
numbers, and NaN payloads sort wherever their bits land. Existing index data
depends on this layout, so it is kept as is.
"""

import struct
from typing import ClassVar, Final

from ._constants import FLOAT_KEY_SIZE
from ._exceptions import ConversionError

__all__ = [
    "Reference",
    "decode_number_key",
    "decode_text_key",
    "encode_key",
]

_FLOAT_FORMAT: Final[struct.Struct] = struct.Struct(">d")


def encode_key(value: object) -> bytes:
    """Encode a normalized value as canonical key bytes.

    Args:
        value: A string, a float, or an already encoded byte sequence.

    Returns:
        The key bytes. The same value always yields the same bytes.

    Raises:
        ConversionError: If the value's type cannot be encoded, or a string
            contains code points with no UTF-8 encoding.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, (bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return value.encode("utf-8")
        except UnicodeEncodeError as e:
            msg = f"cannot convert str to key bytes: {e.reason} at index {e.start}"
            raise ConversionError("str", msg) from e
    if isinstance(value, float):
        return _FLOAT_FORMAT.pack(value)
    raise ConversionError(type(value).__name__)


def decode_text_key(key: bytes) -> str:
    """Decode a key produced from text back to the original string.

    Raises:
        ConversionError: If the key is not valid UTF-8.
    """
    try:
        return key.decode("utf-8")
    except UnicodeDecodeError as e:
        msg = f"key is not UTF-8 text: invalid byte at index {e.start}"
        raise ConversionError("bytes", msg) from e


def decode_number_key(key: bytes) -> float:
    """Decode a key produced from a float back to the number.

    Raises:
        ConversionError: If the key is not exactly 8 bytes long.
    """
    if len(key) != FLOAT_KEY_SIZE:
        msg = f"number key must be {FLOAT_KEY_SIZE} bytes, got {len(key)}"
        raise ConversionError("bytes", msg)
    (number,) = _FLOAT_FORMAT.unpack(key)
    return number


class Reference:
    """Pointer value of an index entry, typically a document digest.

    References are only carried and displayed; nothing in this package
    produces or interprets their contents.
    """

    __slots__: ClassVar[tuple[str, ...]] = ("_data",)

    _data: bytes

    def __init__(self, data: "bytes | bytearray | memoryview") -> None:
        self._data = bytes(data)

    @classmethod
    def from_hex(cls, text: str) -> "Reference":
        """Build a reference from its hexadecimal rendering.

        Raises:
            ValueError: If the text is not valid hexadecimal.
        """
        return cls(bytes.fromhex(text))

    def byte_size(self) -> int:
        """Return the reference length, e.g. 32 for a SHA-256 digest."""
        return len(self._data)

    def hex_string(self) -> str:
        """Return the reference as lowercase hex, for logs and diagnostics."""
        return self._data.hex()

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Reference):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._data)

    def __repr__(self) -> str:
        return f"Reference({self.hex_string()!r})"
