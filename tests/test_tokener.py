"""Tests for the JSONTokener character source."""

import io

import pytest

from jsonmodel import JSONArray, JSONObject, JSONSyntaxError, JSONTokener, Null


# ---------------------------------------------------------------------------
# Characters
# ---------------------------------------------------------------------------

def test_next_clean_skips_whitespace():
    t = JSONTokener("  \n\t x")
    assert t.next_clean() == "x"
    assert t.next_clean() == ""

def test_back_pushes_one_character():
    t = JSONTokener("ab")
    assert t.next() == "a"
    t.back()
    assert t.next() == "a"
    assert t.next() == "b"

def test_back_twice_fails():
    t = JSONTokener("ab")
    t.next()
    t.back()
    with pytest.raises(JSONSyntaxError):
        t.back()

def test_back_at_end_does_not_rewind():
    t = JSONTokener("a")
    assert t.next() == "a"
    assert t.next() == ""
    t.back()
    assert t.next() == ""

def test_reads_from_stream():
    t = JSONTokener(io.StringIO("[1]"))
    assert t.next_clean() == "["


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

def test_double_quoted_string():
    assert JSONTokener('"hi there"').next_value() == "hi there"

def test_single_quoted_string():
    assert JSONTokener("'it'").next_value() == "it"

def test_string_escapes():
    text = r'"a\"b\\c\/d\nA"'
    assert JSONTokener(text).next_value() == 'a"b\\c/d\nA'

def test_unterminated_string():
    with pytest.raises(JSONSyntaxError, match="Unterminated string"):
        JSONTokener('"abc').next_value()

def test_newline_in_string():
    with pytest.raises(JSONSyntaxError):
        JSONTokener('"a\nb"').next_value()

def test_illegal_escape():
    with pytest.raises(JSONSyntaxError, match="Illegal escape"):
        JSONTokener(r'"\q"').next_value()

def test_bad_unicode_escape():
    with pytest.raises(JSONSyntaxError, match="Illegal escape"):
        JSONTokener(r'"\uZZZZ"').next_value()

def test_bare_words_are_inferred():
    assert JSONTokener("true").next_value() is True
    assert JSONTokener("null").next_value() is Null
    assert JSONTokener("12").next_value() == 12
    assert JSONTokener("1.5").next_value() == 1.5
    assert JSONTokener("hello world").next_value() == "hello world"

def test_bare_word_stops_at_delimiter():
    t = JSONTokener("abc, def")
    assert t.next_value() == "abc"
    assert t.next_clean() == ","

def test_missing_value():
    with pytest.raises(JSONSyntaxError, match="Missing value"):
        JSONTokener(",").next_value()

def test_nested_containers():
    t = JSONTokener('{"a": [1, 2]}')
    value = t.next_value()
    assert isinstance(value, JSONObject)
    assert isinstance(value.get("a"), JSONArray)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

def test_syntax_error_position():
    t = JSONTokener("ab\ncd")
    for _ in range(4):
        t.next()
    err = t.syntax_error("boom")
    assert isinstance(err, JSONSyntaxError)
    assert err.position == 4
    assert err.line == 2
    assert err.column == 2
    assert "boom" in str(err)
