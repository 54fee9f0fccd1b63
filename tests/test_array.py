"""Tests for the JSONArray collaborator."""

import math

import pytest

from jsonmodel import (
    InvalidNumberError,
    JSONArray,
    JSONObject,
    JSONTokener,
    NotFoundError,
    Null,
    TypeMismatchError,
)


def test_construct_wraps_elements():
    arr = JSONArray([1, {"a": 1}, [2], None])
    assert arr.get(0) == 1
    assert isinstance(arr.get(1), JSONObject)
    assert isinstance(arr.get(2), JSONArray)
    assert arr.get(3) is Null

def test_get_out_of_range():
    arr = JSONArray([1])
    assert arr.opt(5) is None
    assert arr.opt(-1) is None
    with pytest.raises(NotFoundError):
        arr.get(5)
    with pytest.raises(NotFoundError):
        arr[1]

def test_get_string():
    arr = JSONArray(["x", 1])
    assert arr.get_string(0) == "x"
    with pytest.raises(TypeMismatchError):
        arr.get_string(1)

def test_put_appends_and_chains():
    arr = JSONArray()
    assert arr.put(1).put("two") is arr
    assert arr.length() == 2
    assert list(arr) == [1, "two"]

def test_put_rejects_non_finite():
    with pytest.raises(InvalidNumberError):
        JSONArray().put(math.inf)

def test_put_at_pads_with_null():
    arr = JSONArray().put_at(2, "x")
    assert len(arr) == 3
    assert arr.get(0) is Null
    assert arr.get(1) is Null
    assert arr.get(2) == "x"

def test_put_at_replaces():
    arr = JSONArray([1, 2]).put_at(0, 9)
    assert list(arr) == [9, 2]

def test_put_at_negative():
    with pytest.raises(NotFoundError):
        JSONArray().put_at(-1, 1)

def test_from_tokener():
    arr = JSONArray.from_tokener(JSONTokener("[1, [2, 3], {a: b}]"))
    assert arr.get(0) == 1
    assert list(arr.get(1)) == [2, 3]
    assert arr.get(2).get("a") == "b"


class TestSimilar:
    def test_same_order(self):
        assert JSONArray([1, "a", [2]]).similar(JSONArray([1, "a", [2]]))

    def test_order_sensitive(self):
        assert not JSONArray([1, 2]).similar(JSONArray([2, 1]))

    def test_length_mismatch(self):
        assert not JSONArray([1]).similar(JSONArray([1, 1]))

    def test_not_an_array(self):
        assert not JSONArray([1]).similar([1])

    def test_placeholder_not_similar(self):
        assert not JSONArray().put(None).similar(JSONArray().put(None))


def test_to_string():
    arr = JSONArray([1, "x", True])
    assert arr.to_string() == '[1,"x",true]'
    assert str(arr) == '[1,"x",true]'
    assert arr.to_string(2) == '[\n  1,\n  "x",\n  true\n]'
