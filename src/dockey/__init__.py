"""Index key extraction from JSON documents."""

from importlib.metadata import version

from ._constants import DEFAULT_FILE_MODE, KEY_DELIMITER
from ._document import Document
from ._exceptions import (
    ConversionError,
    DockeyError,
    InvalidJSONError,
    PathSyntaxError,
    UnsupportedTypeError,
)
from ._keys import Reference, decode_number_key, decode_text_key, encode_key
from ._path import PATH_MISSING, PathEvaluator, evaluate_path
from ._tokenize import text_keys, whitespace_tokenizer
from ._transform import chain, to_lower
from ._types import JSONValue, Key, NormalizedValue, Tokenizer, Transform

__version__ = version("dockey")

__all__ = [
    "DEFAULT_FILE_MODE",
    "KEY_DELIMITER",
    "PATH_MISSING",
    "ConversionError",
    "DockeyError",
    "Document",
    "InvalidJSONError",
    "JSONValue",
    "Key",
    "NormalizedValue",
    "PathEvaluator",
    "PathSyntaxError",
    "Reference",
    "Tokenizer",
    "Transform",
    "UnsupportedTypeError",
    "__version__",
    "chain",
    "decode_number_key",
    "decode_text_key",
    "encode_key",
    "evaluate_path",
    "text_keys",
    "to_lower",
    "whitespace_tokenizer",
]
