"""jsonmodel — in-memory JSON object model with lenient parsing."""

from .array import JSONArray
from .coercion import (
    canonical_number_text,
    double_to_string,
    infer_from_text,
    quote,
    validate_finite,
)
from .errors import (
    DuplicateKeyError,
    InvalidKeyError,
    InvalidNumberError,
    JSONModelError,
    JSONSyntaxError,
    NotFoundError,
    SerializationError,
    TypeMismatchError,
)
from .jsonobject import JSONObject
from .parser import parse
from .reflector import JSONExposable, register_converter
from .repl import JSONRepl
from .serializer import dumps
from .tokener import JSONTokener
from .values import JSONString, Null, RawJSON, Value, _NullType
from .wrapper import wrap

__all__ = [
    "JSONObject",
    "JSONArray",
    "JSONTokener",
    "JSONRepl",
    "Null",
    "Value",
    "JSONString",
    "RawJSON",
    "JSONExposable",
    "parse",
    "dumps",
    "wrap",
    "register_converter",
    "infer_from_text",
    "canonical_number_text",
    "double_to_string",
    "quote",
    "validate_finite",
    "JSONModelError",
    "InvalidKeyError",
    "NotFoundError",
    "TypeMismatchError",
    "DuplicateKeyError",
    "InvalidNumberError",
    "JSONSyntaxError",
    "SerializationError",
]
