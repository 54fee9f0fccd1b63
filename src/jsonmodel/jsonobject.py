"""JSONObject — a mapping from string keys to JSON values."""

from __future__ import annotations

import logging
import math
import numbers
import re
from collections.abc import Iterable, Iterator, KeysView, Mapping
from pathlib import Path
from typing import TextIO

from .array import JSONArray
from .coercion import (
    INT32_MAX,
    INT32_MIN,
    INT64_MAX,
    INT64_MIN,
    quote,
    validate_finite,
)
from .errors import (
    DuplicateKeyError,
    InvalidKeyError,
    JSONModelError,
    NotFoundError,
    TypeMismatchError,
)
from .parser import parse_object
from .reflector import field_names, populate_from_bean, populate_from_fields
from .resources import load_resource_table
from .serializer import dumps, write_object
from .tokener import JSONTokener
from .values import Null, Value
from .wrapper import wrap

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


# ---------------------------------------------------------------------------
# Coercion helpers
# ---------------------------------------------------------------------------

def _as_float(value: object) -> float:
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, numbers.Number):
        return float(value)
    if isinstance(value, str):
        if "_" in value:
            raise ValueError(f"{value!r} is not a decimal number")
        return float(value)
    raise TypeError(f"{type(value).__name__} is not a number")


def _as_integer(value: object, low: int, high: int) -> int:
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, int):
        result = value
    elif isinstance(value, numbers.Number):
        result = math.trunc(value)
    elif isinstance(value, str) and _INTEGER_RE.fullmatch(value):
        result = int(value)
    else:
        raise ValueError(f"{value!r} is not an integer")
    if not low <= result <= high:
        raise ValueError(f"{result} is out of range")
    return result


def _is_array_shaped(value: object) -> bool:
    return isinstance(value, (JSONArray, list, tuple))


def similar_values(mine: object, theirs: object) -> bool:
    """Structural equality used by ``similar``.

    Containers compare recursively; ``True`` is never similar to ``1``.
    """
    if isinstance(mine, (JSONObject, JSONArray)):
        return mine.similar(theirs)
    if isinstance(mine, bool) or isinstance(theirs, bool):
        return type(mine) is type(theirs) and mine == theirs
    return mine == theirs


# ---------------------------------------------------------------------------
# JSONObject
# ---------------------------------------------------------------------------

class JSONObject:
    """String keys mapped to JSON values, in insertion order.

    Usage::

        obj = JSONObject.parse('{"name": "Joe", "age": 36}')
        obj.get_int("age")          # → 36
        obj.put("tags", ["a", "b"]) # lists become JSONArray
        obj.to_string(2)            # pretty-printed text

    Storing ``None`` removes a key; storing ``Null`` keeps it as JSON null.
    """

    def __init__(self, mapping: Mapping[object, object] | None = None) -> None:
        self._map: dict[str, Value] = {}
        if mapping is not None:
            for key, value in mapping.items():
                if value is not None:
                    self.put(str(key), wrap(value))

    # -- Alternate constructors ----------------------------------------

    @classmethod
    def from_mapping(cls, mapping: Mapping[object, object] | None) -> "JSONObject":
        return cls(mapping)

    @classmethod
    def from_tokener(cls, tokener: JSONTokener) -> "JSONObject":
        return parse_object(tokener, cls())

    @classmethod
    def parse(cls, source: str | TextIO) -> "JSONObject":
        """Parse lenient JSON object text."""
        return cls.from_tokener(JSONTokener(source))

    @classmethod
    def from_subset(cls, other: "JSONObject", names: Iterable[str]) -> "JSONObject":
        """Copy the named keys of *other*; missing names are ignored."""
        obj = cls()
        for name in names:
            try:
                obj.put_once(name, other.opt(name))
            except JSONModelError:
                logger.debug("Skipping %r while copying subset", name, exc_info=True)
        return obj

    @classmethod
    def from_bean(cls, bean: object) -> "JSONObject":
        """Build an object from a converter, dataclass fields or accessors."""
        return populate_from_bean(cls(), bean)

    @classmethod
    def from_fields(cls, obj: object, names: Iterable[str]) -> "JSONObject":
        """Build an object from the named public fields of *obj*."""
        return populate_from_fields(cls(), obj, names)

    @classmethod
    def from_resource_table(cls, table: Mapping[str, str]) -> "JSONObject":
        """Expand dotted keys into nested objects.

        ``{"a.b.c": "x"}`` becomes ``{"a": {"b": {"c": "x"}}}``.
        """
        obj = cls()
        for key, value in table.items():
            if key is None:
                continue
            path = key.split(".")
            target = obj
            for segment in path[:-1]:
                nested = target.opt_object(segment)
                if nested is None:
                    nested = cls()
                    target.put(segment, nested)
                target = nested
            target.put(path[-1], value)
        return obj

    @classmethod
    def from_resource_bundle(
        cls,
        base_name: str,
        locale: str | None = None,
        search_path: str | Path | None = None,
    ) -> "JSONObject":
        return cls.from_resource_table(load_resource_table(base_name, locale, search_path))

    # -- Required access -----------------------------------------------

    def get(self, key: str) -> Value:
        if key is None:
            raise InvalidKeyError("Null key.")
        value = self.opt(key)
        if value is None:
            raise NotFoundError(f"JSONObject[{quote(key)}] not found.")
        return value

    def get_bool(self, key: str) -> bool:
        value = self.get(key)
        if value is False or (isinstance(value, str) and value.lower() == "false"):
            return False
        if value is True or (isinstance(value, str) and value.lower() == "true"):
            return True
        raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a Boolean.")

    def get_float(self, key: str) -> float:
        value = self.get(key)
        try:
            return _as_float(value)
        except (TypeError, ValueError):
            raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a number.") from None

    def get_int(self, key: str) -> int:
        value = self.get(key)
        try:
            return _as_integer(value, INT32_MIN, INT32_MAX)
        except (TypeError, ValueError, OverflowError):
            raise TypeMismatchError(f"JSONObject[{quote(key)}] is not an int.") from None

    def get_long(self, key: str) -> int:
        value = self.get(key)
        try:
            return _as_integer(value, INT64_MIN, INT64_MAX)
        except (TypeError, ValueError, OverflowError):
            raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a long.") from None

    def get_string(self, key: str) -> str:
        value = self.get(key)
        if isinstance(value, str):
            return value
        raise TypeMismatchError(f"JSONObject[{quote(key)}] not a string.")

    def get_array(self, key: str) -> JSONArray:
        value = self.get(key)
        if isinstance(value, JSONArray):
            return value
        raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a JSONArray.")

    def get_object(self, key: str) -> "JSONObject":
        value = self.get(key)
        if isinstance(value, JSONObject):
            return value
        raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a JSONObject.")

    # -- Optional access -----------------------------------------------

    def opt(self, key: str) -> Value | None:
        if key is None:
            return None
        return self._map.get(key)

    def opt_bool(self, key: str, default: bool = False) -> bool:
        try:
            return self.get_bool(key)
        except JSONModelError:
            return default

    def opt_float(self, key: str, default: float = math.nan) -> float:
        try:
            return self.get_float(key)
        except JSONModelError:
            return default

    def opt_int(self, key: str, default: int = 0) -> int:
        try:
            return self.get_int(key)
        except JSONModelError:
            return default

    def opt_long(self, key: str, default: int = 0) -> int:
        try:
            return self.get_long(key)
        except JSONModelError:
            return default

    def opt_string(self, key: str, default: str = "") -> str:
        value = self.opt(key)
        if value is None or value is Null:
            return default
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def opt_array(self, key: str) -> JSONArray | None:
        value = self.opt(key)
        return value if isinstance(value, JSONArray) else None

    def opt_object(self, key: str) -> "JSONObject | None":
        value = self.opt(key)
        return value if isinstance(value, JSONObject) else None

    # -- Queries -------------------------------------------------------

    def has(self, key: str) -> bool:
        return key in self._map

    def is_null(self, key: str) -> bool:
        """True only when *key* is present and holds ``Null``."""
        return self.opt(key) is Null

    def length(self) -> int:
        return len(self._map)

    def keys(self) -> KeysView[str]:
        return self._map.keys()

    def names(self) -> JSONArray | None:
        """The keys as a JSONArray, or None when the object is empty."""
        if not self._map:
            return None
        return JSONArray(self._map)

    @staticmethod
    def get_names(source: object) -> list[str] | None:
        """Key names of a JSONObject, or public field names of any object."""
        if isinstance(source, JSONObject):
            return list(source.keys()) or None
        return field_names(source)

    # -- Mutation ------------------------------------------------------

    def put(self, key: str, value: object) -> "JSONObject":
        """Store *value* under *key*; ``None`` removes the key.

        Mappings are stored as JSONObject and lists, tuples and sets as
        JSONArray.  Non-finite floats raise InvalidNumberError.
        """
        if key is None:
            raise InvalidKeyError("Null key.")
        if not isinstance(key, str):
            raise InvalidKeyError(f"Key must be a string, not {type(key).__name__}.")
        if value is None:
            self.remove(key)
            return self
        if isinstance(value, Mapping):
            value = JSONObject(value)
        elif isinstance(value, (list, tuple, set, frozenset)):
            value = JSONArray(value)
        else:
            validate_finite(value)
        self._map[key] = value
        return self

    def put_once(self, key: str, value: object) -> "JSONObject":
        """Like ``put``, but a key that already holds a value is an error."""
        if key is not None and value is not None:
            if self.opt(key) is not None:
                raise DuplicateKeyError(f'Duplicate key "{key}"')
            self.put(key, value)
        return self

    def put_opt(self, key: str, value: object) -> "JSONObject":
        if key is not None and value is not None:
            self.put(key, value)
        return self

    def accumulate(self, key: str, value: object) -> "JSONObject":
        """Put *value*, collecting repeated values under *key* in an array.

        The first value is stored as-is unless it is itself array-shaped, in
        which case it becomes the sole element of a new array.
        """
        validate_finite(value)
        current = self.opt(key)
        if current is None:
            self.put(key, JSONArray().put(value) if _is_array_shaped(value) else value)
        elif isinstance(current, JSONArray):
            current.put(value)
        else:
            self.put(key, JSONArray().put(current).put(value))
        return self

    def append(self, key: str, value: object) -> "JSONObject":
        """Append *value* to the array under *key*, creating it if needed."""
        validate_finite(value)
        current = self.opt(key)
        if current is None:
            self.put(key, JSONArray().put(value))
        elif isinstance(current, JSONArray):
            current.put(value)
        else:
            raise TypeMismatchError(f"JSONObject[{quote(key)}] is not a JSONArray.")
        return self

    def increment(self, key: str) -> "JSONObject":
        """Add one to the number under *key*; a missing key becomes ``1``."""
        current = self.opt(key)
        if current is None:
            self.put(key, 1)
        elif isinstance(current, (int, float)) and not isinstance(current, bool):
            self.put(key, current + 1)
        else:
            raise TypeMismatchError(f"Unable to increment [{quote(key)}].")
        return self

    def remove(self, key: str) -> Value | None:
        return self._map.pop(key, None)

    # -- Comparison / projection --------------------------------------

    def similar(self, other: object) -> bool:
        """Structural comparison; member order does not matter."""
        try:
            if not isinstance(other, JSONObject):
                return False
            if self._map.keys() != other._map.keys():
                return False
            for name, value in self._map.items():
                if not similar_values(value, other.get(name)):
                    return False
            return True
        except Exception:
            logger.debug("JSONObject comparison failed", exc_info=True)
            return False

    def to_json_array(self, names: Iterable[str] | None) -> JSONArray | None:
        """Values for *names*, in order; missing keys leave a placeholder."""
        if names is None:
            return None
        names = list(names)
        if not names:
            return None
        projection = JSONArray()
        for name in names:
            projection.put(self.opt(name))
        return projection

    # -- Output --------------------------------------------------------

    def write(self, writer: TextIO, indent_factor: int = 0, indent: int = 0) -> TextIO:
        """Write JSON text to *writer*; the writer is left open."""
        return write_object(self, writer, indent_factor, indent)

    def to_string(self, indent_factor: int | None = None) -> str | None:
        """JSON text of this object.

        Without *indent_factor* the text is compact and rendering errors
        are swallowed (the result is None).  With one, errors propagate.
        """
        if indent_factor is None:
            try:
                return dumps(self)
            except Exception:
                logger.debug("Could not render JSONObject", exc_info=True)
                return None
        return dumps(self, indent_factor)

    def __str__(self) -> str:
        return self.to_string() or ""

    def __repr__(self) -> str:
        return f"JSONObject({self._map!r})"

    # -- Container protocol -------------------------------------------

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __getitem__(self, key: str) -> Value:
        return self.get(key)

    def __setitem__(self, key: str, value: object) -> None:
        self.put(key, value)

    def __delitem__(self, key: str) -> None:
        if self.remove(key) is None:
            raise NotFoundError(f"JSONObject[{quote(key)}] not found.")
