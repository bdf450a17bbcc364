"""Unit tests for key sanitizing and value stringification."""

from __future__ import annotations

from array import array
from uuid import UUID

from kvlog.render.values import clean_value, render_value, sanitize_key, value_to_string


class Dummy:
    def __str__(self) -> str:
        return "To String Dummy"


def test_sanitize_key_strips_everything_outside_the_key_alphabet():
    assert sanitize_key(" Me's$ sag e 1*\n# ") == "Message1"
    assert sanitize_key("http.status_code") == "http.status_code"


def test_sanitize_key_turns_none_into_null():
    assert sanitize_key(None) == "null"
    assert sanitize_key("$%") == ""


def test_value_to_string_handles_scalars():
    assert value_to_string(None) == "null"
    assert value_to_string("text") == "text"
    assert value_to_string(42) == "42"
    assert value_to_string(1.5) == "1.5"
    assert value_to_string(Dummy()) == "To String Dummy"
    uuid = UUID("12345678-1234-5678-1234-567812345678")
    assert value_to_string(uuid) == "12345678-1234-5678-1234-567812345678"


def test_value_to_string_lists_sequences_with_null_elements():
    assert value_to_string(["a", "b", "c"]) == "[a, b, c]"
    assert value_to_string(("a", None, None)) == "[a, null, null]"
    assert value_to_string([]) == "[]"
    assert value_to_string([Dummy(), Dummy()]) == "[To String Dummy, To String Dummy]"


def test_value_to_string_lists_primitive_arrays():
    assert value_to_string(array("i", [1, -2, 3])) == "[1, -2, 3]"
    assert value_to_string(array("d", [1.5, 2.0])) == "[1.5, 2.0]"
    assert value_to_string(b"\x01\x02\x7f") == "[1, 2, 127]"
    assert value_to_string([True, False]) == "[True, False]"


def test_value_to_string_recurses_into_nested_arrays():
    assert value_to_string([[1, 2], [None]]) == "[[1, 2], [null]]"
    assert value_to_string(frozenset({7})) == "[7]"


def test_value_to_string_uses_one_line_exception_form():
    assert value_to_string(RuntimeError("boom")) == "RuntimeError: boom"


def test_clean_value_removes_quotes_newlines_and_padding():
    assert clean_value("\nA\nB") == "A B"
    assert clean_value("'X'") == "X"
    assert clean_value('"a" b c') == "a b c"
    assert clean_value("  padded  ") == "padded"
    assert clean_value("one\r\ntwo") == "one two"


def test_render_value_cleans_after_stringifying():
    assert render_value(["'a'", "b\nc"]) == "[a, b c]"


def test_value_to_string_marks_self_containing_lists():
    value = ["a"]
    value.append(value)
    assert value_to_string(value) == "[a, [...]]"
    assert value_to_string([value, value]) == "[[a, [...]], [a, [...]]]"
