"""Tests for strict JSON emission."""

import io
from datetime import date
from decimal import Decimal

import pytest

from jsonmodel import JSONArray, JSONObject, Null, RawJSON, SerializationError, dumps
from jsonmodel.serializer import write_indent, write_object, write_value


def _sample():
    obj = JSONObject()
    obj.put("a", 1)
    obj.put("b", [1, 2])
    obj.put("c", {"d": True})
    return obj


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_empty_object():
    assert dumps(JSONObject()) == "{}"
    assert dumps(JSONObject(), 4) == "{}"

def test_single_member_inline():
    obj = JSONObject({"k": "v"})
    assert dumps(obj) == '{"k":"v"}'
    assert dumps(obj, 2) == '{"k": "v"}'

def test_compact():
    assert dumps(_sample()) == '{"a":1,"b":[1,2],"c":{"d":true}}'

def test_pretty():
    expected = (
        "{\n"
        '  "a": 1,\n'
        '  "b": [\n'
        "    1,\n"
        "    2\n"
        "  ],\n"
        '  "c": {"d": true}\n'
        "}"
    )
    assert dumps(_sample(), 2) == expected

def test_nested_indent_accumulates():
    obj = JSONObject({"outer": {"x": 1, "y": 2}, "z": 3})
    expected = (
        "{\n"
        '    "outer": {\n'
        '        "x": 1,\n'
        '        "y": 2\n'
        "    },\n"
        '    "z": 3\n'
        "}"
    )
    assert dumps(obj, 4) == expected

def test_single_element_array_inline():
    assert dumps(JSONArray([5]), 2) == "[5]"

def test_write_object_with_current_indent():
    buf = io.StringIO()
    write_object(JSONObject({"a": 1, "b": 2}), buf, 2, 2)
    assert buf.getvalue() == '{\n    "a": 1,\n    "b": 2\n  }'

def test_write_indent():
    buf = io.StringIO()
    write_indent(buf, 3)
    assert buf.getvalue() == "   "

def test_writer_left_open():
    buf = io.StringIO()
    JSONObject({"a": 1}).write(buf)
    assert not buf.closed
    assert buf.getvalue() == '{"a":1}'


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "value, text",
    [
        (None, "null"),
        (Null, "null"),
        (True, "true"),
        (False, "false"),
        (3, "3"),
        (2.50, "2.5"),
        (4.0, "4"),
        (Decimal("1.10"), "1.1"),
        ("a\"b", '"a\\"b"'),
        ({"x": 1}, '{"x":1}'),
        ((1, 2), "[1,2]"),
        (date(2024, 1, 15), '"2024-01-15"'),
    ],
)
def test_write_value(value, text):
    assert write_value(io.StringIO(), value).getvalue() == text

def test_raw_value_verbatim():
    obj = JSONObject().put("raw", RawJSON("[1, 2]"))
    assert dumps(obj) == '{"raw":[1, 2]}'

def test_raw_value_without_text_fails():
    obj = JSONObject().put("raw", RawJSON(None))
    with pytest.raises(SerializationError):
        dumps(obj)

def test_raw_value_raising_fails():
    class Broken:
        def to_json_string(self):
            raise RuntimeError("nope")

    with pytest.raises(SerializationError):
        dumps(JSONObject().put("raw", Broken()))

def test_unmodeled_value_is_quoted_text():
    class Thing:
        def __str__(self):
            return "thing"

    assert dumps(JSONObject().put("t", Thing())) == '{"t":"thing"}'

def test_not_found_placeholder_emits_null():
    arr = JSONArray().put(None)
    assert dumps(arr) == "[null]"


# ---------------------------------------------------------------------------
# to_string
# ---------------------------------------------------------------------------

def test_to_string_swallows_errors():
    obj = JSONObject().put("raw", RawJSON(None))
    assert obj.to_string() is None
    assert str(obj) == ""

class _NoText:
    def __str__(self):
        raise RuntimeError("no text")


def test_to_string_swallows_failing_str():
    obj = JSONObject().put("x", _NoText())
    assert obj.to_string() is None
    assert str(obj) == ""

def test_array_to_string_swallows_failing_str():
    arr = JSONArray().put(_NoText())
    assert arr.to_string() is None
    assert str(arr) == ""

def test_failing_str_with_indent_raises():
    with pytest.raises(RuntimeError):
        JSONObject().put("x", _NoText()).to_string(2)

def test_to_string_with_indent_raises():
    obj = JSONObject().put("raw", RawJSON(None))
    with pytest.raises(SerializationError):
        obj.to_string(2)

def test_str_is_compact():
    assert str(JSONObject({"a": [1, "x"]})) == '{"a":[1,"x"]}'
