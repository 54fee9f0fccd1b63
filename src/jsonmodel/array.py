"""JSONArray — the ordered sequence counterpart of JSONObject."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, TextIO

from .coercion import validate_finite
from .errors import JSONModelError, NotFoundError, TypeMismatchError
from .values import Null, Value
from .wrapper import wrap

if TYPE_CHECKING:
    from .tokener import JSONTokener

logger = logging.getLogger(__name__)


class JSONArray:
    """Ordered sequence of values.

    ``None`` entries are placeholders for values that were not found (see
    ``JSONObject.to_json_array``); they emit as ``null`` and make ``get``
    raise.
    """

    def __init__(self, values: Iterable[object] | None = None) -> None:
        self._items: list[Value | None] = []
        if values is not None:
            for value in values:
                self._items.append(wrap(value))

    @classmethod
    def from_tokener(cls, tokener: "JSONTokener") -> "JSONArray":
        from .parser import parse_array
        array = cls()
        parse_array(tokener, array)
        return array

    # -- Access ---------------------------------------------------------

    def get(self, index: int) -> Value:
        value = self.opt(index)
        if value is None:
            raise NotFoundError(f"JSONArray[{index}] not found.")
        return value

    def opt(self, index: int) -> Value | None:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def get_string(self, index: int) -> str:
        value = self.get(index)
        if isinstance(value, str):
            return value
        raise TypeMismatchError(f"JSONArray[{index}] not a string.")

    def length(self) -> int:
        return len(self._items)

    # -- Mutation -------------------------------------------------------

    def put(self, value: object) -> "JSONArray":
        """Append *value*, converting mappings and lists to containers."""
        self._items.append(_normalize(value))
        return self

    def put_at(self, index: int, value: object) -> "JSONArray":
        """Store *value* at *index*, padding with ``Null`` past the end."""
        if index < 0:
            raise NotFoundError(f"JSONArray[{index}] not found.")
        value = _normalize(value)
        if index < len(self._items):
            self._items[index] = value
        else:
            self._items.extend([Null] * (index - len(self._items)))
            self._items.append(value)
        return self

    # -- Comparison / output -------------------------------------------

    def similar(self, other: object) -> bool:
        """Structural, order-sensitive comparison with another JSONArray."""
        from .jsonobject import similar_values
        try:
            if not isinstance(other, JSONArray):
                return False
            if len(self._items) != len(other._items):
                return False
            for index in range(len(self._items)):
                if not similar_values(self.get(index), other.get(index)):
                    return False
            return True
        except JSONModelError:
            logger.debug("JSONArray comparison failed", exc_info=True)
            return False

    def write(self, writer: TextIO, indent_factor: int = 0, indent: int = 0) -> TextIO:
        from .serializer import write_array
        return write_array(self, writer, indent_factor, indent)

    def to_string(self, indent_factor: int | None = None) -> str | None:
        from .serializer import dumps
        if indent_factor is None:
            try:
                return dumps(self)
            except Exception:
                logger.debug("Could not render JSONArray", exc_info=True)
                return None
        return dumps(self, indent_factor)

    def __str__(self) -> str:
        return self.to_string() or ""

    def __repr__(self) -> str:
        return f"JSONArray({self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Value | None]:
        return iter(self._items)

    def __getitem__(self, index: int) -> Value:
        return self.get(index)


def _normalize(value: object) -> object:
    from .jsonobject import JSONObject
    if isinstance(value, Mapping):
        return JSONObject(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return JSONArray(value)
    validate_finite(value)
    return value
