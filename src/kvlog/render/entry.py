"""Turn accumulated fields into the (format string, arguments) pair a sink consumes."""

from __future__ import annotations

from typing import Any, NamedTuple, Sequence, Tuple

from kvlog.models.field import LogField


class RenderedEntry(NamedTuple):
    message: str
    args: Tuple[Any, ...]


def render_entry(fields: Sequence[LogField], error: BaseException | None = None) -> RenderedEntry:
    """Render fields in insertion order, skipping those whose key sanitizes to nothing.

    The attached error, when present, is appended untouched as the last
    argument so the sink can print its traceback.
    """

    visible = [field for field in fields if field.is_renderable]
    message = " ".join(field.format_segment() for field in visible)
    args: list[Any] = [value for field in visible for value in field.rendered_values()]
    if error is not None:
        args.append(error)
    return RenderedEntry(message, tuple(args))
