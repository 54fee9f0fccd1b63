"""Value types for jsonmodel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from .array import JSONArray
    from .jsonobject import JSONObject


class _NullType:
    """Singleton for JSON ``null``.

    Distinct from a missing key: storing ``Null`` keeps the key, storing
    ``None`` removes it.  Compares equal to itself and to ``None``.
    """

    _instance: "_NullType | None" = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __str__(self) -> str:
        return "null"

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return other is None or other is self

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    def __hash__(self) -> int:
        return hash(None)

    def __copy__(self) -> "_NullType":
        return self

    def __deepcopy__(self, memo: dict) -> "_NullType":
        return self

    def __reduce__(self):
        return (_NullType, ())


Null = _NullType()


@runtime_checkable
class JSONString(Protocol):
    """A value that renders its own JSON text."""

    def to_json_string(self) -> str | None:
        ...


@dataclass(frozen=True)
class RawJSON:
    """Pre-rendered JSON text emitted verbatim."""

    text: str | None

    def to_json_string(self) -> str | None:
        return self.text

    def __str__(self) -> str:
        return self.text or ""


Value = Union[_NullType, bool, int, float, str, "JSONObject", "JSONArray", JSONString]
