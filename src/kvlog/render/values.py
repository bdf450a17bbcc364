"""Key sanitizing and value stringification for key/value log lines."""

from __future__ import annotations

import re
import traceback
from array import array
from collections.abc import Iterable, Sequence, Set
from functools import singledispatch
from typing import Any, FrozenSet

NULL = "null"

_INVALID_KEY_CHARS = re.compile(r"[^a-zA-Z0-9_.]")
_NEWLINES = re.compile(r"\r\n|\r|\n")
_QUOTES = str.maketrans("", "", "'\"")


def sanitize_key(key: str | None) -> str:
    """Drop every character that is not a letter, digit, underscore, or period."""

    if key is None:
        return NULL
    return _INVALID_KEY_CHARS.sub("", key)


def _listing(items: Iterable[Any], seen: FrozenSet[int]) -> str:
    # A container already being listed further up renders like Python's own repr.
    if id(items) in seen:
        return "[...]"
    seen = seen | {id(items)}
    return "[" + ", ".join(value_to_string(item, seen) for item in items) + "]"


@singledispatch
def value_to_string(value: Any, _seen: FrozenSet[int] = frozenset()) -> str:
    """Render any value to the string placed between a field's quotes.

    ``None`` becomes ``"null"``, arrays of any element type become a bracketed
    ``[a, b, c]`` listing (applied recursively), exceptions use their one-line
    ``Type: message`` form, and everything else falls back to ``str()``.
    """

    return str(value)


@value_to_string.register(type(None))
def _(value: None, _seen: FrozenSet[int] = frozenset()) -> str:
    return NULL


@value_to_string.register(str)
def _(value: str, _seen: FrozenSet[int] = frozenset()) -> str:
    return value


@value_to_string.register(Sequence)
@value_to_string.register(Set)
@value_to_string.register(array)
def _(value: Iterable[Any], _seen: FrozenSet[int] = frozenset()) -> str:
    # bytes and bytearray land here too and list their integer values.
    return _listing(value, _seen)


@value_to_string.register(BaseException)
def _(value: BaseException, _seen: FrozenSet[int] = frozenset()) -> str:
    return "".join(traceback.format_exception_only(type(value), value)).strip()


def clean_value(text: str) -> str:
    """Strip quotes, fold newlines into spaces, and trim the result."""

    return _NEWLINES.sub(" ", text.translate(_QUOTES)).strip()


def render_value(value: Any) -> str:
    return clean_value(value_to_string(value))
