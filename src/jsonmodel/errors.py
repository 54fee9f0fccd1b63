"""Exception hierarchy for jsonmodel."""

from __future__ import annotations


class JSONModelError(Exception):
    """Base class for every failure raised by the object model."""


class InvalidKeyError(JSONModelError, ValueError):
    """A ``None`` key was given to an operation that requires a key."""


class NotFoundError(JSONModelError, LookupError):
    """A required key is missing."""


class TypeMismatchError(JSONModelError, TypeError):
    """A stored value cannot be coerced to the requested type or shape."""


class DuplicateKeyError(JSONModelError, ValueError):
    """A key that already holds a value was inserted with ``put_once``."""


class InvalidNumberError(JSONModelError, ValueError):
    """JSON does not allow non-finite numbers."""


class SerializationError(JSONModelError):
    """A raw value produced no text while being emitted."""


class JSONSyntaxError(JSONModelError, ValueError):
    """Malformed JSON text.

    ``position`` is the 0-based character offset where the tokener stopped;
    ``line`` and ``column`` are 1-based.
    """

    def __init__(self, message: str, position: int = 0, line: int = 1, column: int = 1) -> None:
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(f"{message} at {position} [line {line}, column {column}]")
