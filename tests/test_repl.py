"""Tests for JSONRepl state handling."""

import pytest

from jsonmodel import JSONArray, JSONObject, JSONRepl, JSONSyntaxError, Null
from jsonmodel.config import Settings


# ---------------------------------------------------------------------------
# JSONRepl.eval() basics
# ---------------------------------------------------------------------------

def test_eval_returns_parsed_object():
    repl = JSONRepl()
    result = repl.eval('{"joe": {"name": "Joe Smith"}}')
    assert isinstance(result, JSONObject)
    assert result.get_object("joe").get("name") == "Joe Smith"


def test_eval_merges_into_doc():
    repl = JSONRepl()
    repl.eval("{a: 1}")
    repl.eval("{b: 2}")
    assert list(repl.doc.keys()) == ["a", "b"]


def test_later_eval_wins():
    repl = JSONRepl()
    repl.eval("{a: 1}")
    repl.eval("{a: 2}")
    assert repl.doc.get("a") == 2


def test_eval_syntax_error_leaves_doc_untouched():
    repl = JSONRepl()
    repl.eval("{a: 1}")
    with pytest.raises(JSONSyntaxError):
        repl.eval("{a: 2")
    assert repl.doc.get("a") == 1


def test_settings_default():
    assert JSONRepl().settings == Settings()
    assert JSONRepl(Settings(indent_factor=4)).settings.indent_factor == 4


# ---------------------------------------------------------------------------
# lookup()
# ---------------------------------------------------------------------------

@pytest.fixture
def loaded():
    repl = JSONRepl()
    repl.eval('{"joe": {"name": "Joe Smith", "tags": ["a", {"k": "v"}]}, "n": null}')
    return repl


def test_lookup_nested(loaded):
    assert loaded.lookup("joe.name") == "Joe Smith"
    assert loaded.lookup("joe.tags.0") == "a"
    assert loaded.lookup("joe.tags.1.k") == "v"


def test_lookup_containers(loaded):
    assert isinstance(loaded.lookup("joe"), JSONObject)
    assert isinstance(loaded.lookup("joe.tags"), JSONArray)


def test_lookup_null(loaded):
    assert loaded.lookup("n") is Null


def test_lookup_missing(loaded):
    assert loaded.lookup("nobody") is None
    assert loaded.lookup("joe.tags.9") is None
    assert loaded.lookup("joe.tags.x") is None
    assert loaded.lookup("joe.name.first") is None


# ---------------------------------------------------------------------------
# reset()
# ---------------------------------------------------------------------------

def test_reset_clears_doc(loaded):
    loaded.reset()
    assert len(loaded.doc) == 0
    assert loaded.lookup("joe") is None
