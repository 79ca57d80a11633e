"""Constants shared by dockey modules and the storage layers built on it."""

from typing import Final

KEY_DELIMITER: Final[int] = 0x10
"""Byte reserved for joining key segments into composite keys.

Encoders in this package never emit or strip it; a text key may still contain
it, and handling that is up to the composite-key builder.
"""

DEFAULT_FILE_MODE: Final[int] = 0o600
"""Default permission bits for an index database file."""

FLOAT_KEY_SIZE: Final[int] = 8
"""Size in bytes of an encoded number key."""

PATH_SEPARATOR: Final[str] = "."
PATH_ESCAPE: Final[str] = "\\"
PATH_ARRAY_COUNT: Final[str] = "#"
