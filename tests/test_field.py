"""Unit tests for the field model and entry rendering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from kvlog.models.field import DEFAULT_TEMPLATE, LogField
from kvlog.render.entry import render_entry


def test_field_defaults_template_and_values():
    field = LogField(key="k", template=None, values=None)
    assert field.template == DEFAULT_TEMPLATE
    assert field.values == ()


def test_single_field_keeps_one_value_even_when_none():
    field = LogField.single("k", None)
    assert field.values == (None,)
    assert field.rendered_values() == ["null"]


def test_field_is_frozen():
    field = LogField.single("k", "v")
    with pytest.raises(ValidationError):
        field.key = "other"


def test_field_format_segment_uses_sanitized_key():
    assert LogField.single(" Me's$ sag e 1*\n# ", "v").format_segment() == 'Message1="{}"'
    assert LogField.single(None, "v").format_segment() == 'null="{}"'


def test_field_keeps_raw_key_and_filters_at_render_time():
    field = LogField.single("$$", "v")
    assert field.key == "$$"
    assert field.is_renderable is False


def test_render_entry_joins_fields_in_order():
    fields = [
        LogField(key="message1", template="arg1 {}, arg2 {}", values=("a", "b")),
        LogField(key="message2", template="arg1 {}, arg2 {}", values=("c", "d")),
    ]
    entry = render_entry(fields)
    assert entry.message == 'message1="arg1 {}, arg2 {}" message2="arg1 {}, arg2 {}"'
    assert entry.args == ("a", "b", "c", "d")


def test_render_entry_drops_fields_with_empty_keys_completely():
    entry = render_entry([LogField.single("", "v"), LogField.single("*", "w")])
    assert entry.message == ""
    assert entry.args == ()


def test_render_entry_appends_error_untouched():
    error = ValueError("it's\nbroken")
    entry = render_entry([LogField.single("k", "v")], error)
    assert entry.args == ("v", error)
    assert entry.args[-1] is error
