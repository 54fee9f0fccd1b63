"""Serializer: strict JSON text emission, compact or pretty-printed."""

from __future__ import annotations

import io
import numbers
from collections.abc import Mapping
from typing import TYPE_CHECKING, TextIO

from .coercion import canonical_number_text, quote_to
from .errors import SerializationError
from .values import JSONString, Null

if TYPE_CHECKING:
    from .array import JSONArray
    from .jsonobject import JSONObject


def write_indent(writer: TextIO, indent: int) -> None:
    writer.write(" " * indent)


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

def write_object(obj: "JSONObject", writer: TextIO, indent_factor: int = 0, indent: int = 0) -> TextIO:
    """Write *obj* to *writer*.

    A single member is always written inline.  With more members and
    ``indent_factor > 0`` each member goes on its own line, indented by
    ``indent + indent_factor`` spaces, and the closing brace goes back to
    ``indent``.
    """
    pretty = indent_factor > 0
    keys = list(obj.keys())
    writer.write("{")
    if len(keys) == 1:
        key = keys[0]
        quote_to(key, writer)
        writer.write(": " if pretty else ":")
        write_value(writer, obj.opt(key), indent_factor, indent)
    elif keys:
        new_indent = indent + indent_factor
        for position, key in enumerate(keys):
            if position:
                writer.write(",")
            if pretty:
                writer.write("\n")
                write_indent(writer, new_indent)
            quote_to(key, writer)
            writer.write(": " if pretty else ":")
            write_value(writer, obj.opt(key), indent_factor, new_indent)
        if pretty:
            writer.write("\n")
            write_indent(writer, indent)
    writer.write("}")
    return writer


def write_array(array: "JSONArray", writer: TextIO, indent_factor: int = 0, indent: int = 0) -> TextIO:
    """Write *array* to *writer* with the same layout rules as objects."""
    pretty = indent_factor > 0
    items = list(array)
    writer.write("[")
    if len(items) == 1:
        write_value(writer, items[0], indent_factor, indent)
    elif items:
        new_indent = indent + indent_factor
        for position, item in enumerate(items):
            if position:
                writer.write(",")
            if pretty:
                writer.write("\n")
                write_indent(writer, new_indent)
            write_value(writer, item, indent_factor, new_indent)
        if pretty:
            writer.write("\n")
            write_indent(writer, indent)
    writer.write("]")
    return writer


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def raw_text(value: JSONString) -> str:
    """Return the JSON text a raw value renders itself as."""
    try:
        text = value.to_json_string()
    except Exception as exc:
        raise SerializationError(f"Bad value from to_json_string: {exc}") from exc
    if text is None:
        raise SerializationError(f"Bad value from to_json_string: {value!r}")
    return str(text)


def write_value(writer: TextIO, value: object, indent_factor: int = 0, indent: int = 0) -> TextIO:
    from .array import JSONArray
    from .jsonobject import JSONObject

    if value is None or value is Null:
        writer.write("null")
    elif isinstance(value, JSONObject):
        value.write(writer, indent_factor, indent)
    elif isinstance(value, JSONArray):
        value.write(writer, indent_factor, indent)
    elif isinstance(value, Mapping):
        JSONObject(value).write(writer, indent_factor, indent)
    elif isinstance(value, (list, tuple, set, frozenset)):
        JSONArray(value).write(writer, indent_factor, indent)
    elif isinstance(value, bool):
        writer.write("true" if value else "false")
    elif isinstance(value, numbers.Number):
        writer.write(canonical_number_text(value))
    elif isinstance(value, JSONString):
        writer.write(raw_text(value))
    else:
        quote_to(str(value), writer)
    return writer


def dumps(value: object, indent_factor: int = 0) -> str:
    """Render *value* as JSON text, pretty-printed when ``indent_factor > 0``."""
    return write_value(io.StringIO(), value, indent_factor, 0).getvalue()
