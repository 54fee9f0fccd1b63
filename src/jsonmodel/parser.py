"""Parser: builds JSONObject / JSONArray instances from lenient JSON text.

Accepted on top of strict JSON:

- ``;`` as a pair separator in objects
- a trailing separator before the closing ``}`` or ``]``
- single-quoted strings and unquoted bare words (resolved by
  ``infer_from_text``)
- elided array elements (``[1,,2]``), read as ``null``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from .tokener import JSONTokener
from .values import Null

if TYPE_CHECKING:
    from .array import JSONArray
    from .jsonobject import JSONObject


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

def _key_text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def parse_object(tokener: JSONTokener, target: "JSONObject") -> "JSONObject":
    """Read one ``{...}`` object from *tokener* into *target*.

    Keys go through ``put_once``, so a repeated key raises DuplicateKeyError.
    """
    if tokener.next_clean() != "{":
        raise tokener.syntax_error("A JSONObject text must begin with '{'")

    while True:
        char = tokener.next_clean()
        if char == "":
            raise tokener.syntax_error("A JSONObject text must end with '}'")
        if char == "}":
            return target
        tokener.back()
        key = _key_text(tokener.next_value())

        if tokener.next_clean() != ":":
            raise tokener.syntax_error("Expected a ':' after a key")
        target.put_once(key, tokener.next_value())

        char = tokener.next_clean()
        if char in (",", ";"):
            if tokener.next_clean() == "}":
                return target
            tokener.back()
        elif char == "}":
            return target
        else:
            raise tokener.syntax_error("Expected a ',' or '}'")


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------

def parse_array(tokener: JSONTokener, target: "JSONArray") -> "JSONArray":
    """Read one ``[...]`` array from *tokener* into *target*."""
    if tokener.next_clean() != "[":
        raise tokener.syntax_error("A JSONArray text must start with '['")

    if tokener.next_clean() == "]":
        return target
    tokener.back()

    while True:
        if tokener.next_clean() == ",":
            tokener.back()
            target.put(Null)
        else:
            tokener.back()
            target.put(tokener.next_value())

        char = tokener.next_clean()
        if char == ",":
            if tokener.next_clean() == "]":
                return target
            tokener.back()
        elif char == "]":
            return target
        else:
            raise tokener.syntax_error("Expected a ',' or ']'")


# ---------------------------------------------------------------------------
# Convenience
# ---------------------------------------------------------------------------

def parse(source: str | TextIO) -> "JSONObject":
    """Parse JSON object text (or a text stream) into a new JSONObject."""
    from .jsonobject import JSONObject
    return JSONObject.from_tokener(JSONTokener(source))
