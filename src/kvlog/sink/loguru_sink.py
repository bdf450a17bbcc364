"""Sink boundary: the protocol the builder talks to and its loguru implementation."""

from __future__ import annotations

import inspect
from types import ModuleType
from typing import Any, Protocol, runtime_checkable

from kvlog.core.logging import get_logger, register_levels
from kvlog.models.levels import Level

# Frames between LoguruSink.log and the code that called a builder level method.
DEFAULT_DEPTH = 3


@runtime_checkable
class LogSink(Protocol):
    """Anything that can take a level, a ``{}``-placeholder format string, and its arguments."""

    def log(self, level: Level | str, message: str, *args: Any) -> None:
        ...


def is_sink(candidate: Any) -> bool:
    """True when ``candidate`` can take ``log(level, message, *args)`` calls.

    Classes and modules may expose a ``log`` attribute too; those are
    categories, as is any object whose ``log`` cannot accept the sink call.
    """

    if not isinstance(candidate, LogSink) or isinstance(candidate, (type, ModuleType, str)):
        return False
    try:
        inspect.signature(candidate.log).bind(Level.INFO.value, "", None, None)
    except (TypeError, ValueError):
        return False
    return True


def category_name(category: Any) -> str:
    """Name used to tag records coming from ``category``."""

    if category is None:
        return "root"
    if isinstance(category, str):
        return category
    if isinstance(category, ModuleType):
        return category.__name__
    if isinstance(category, type):
        return f"{category.__module__}.{category.__qualname__}"
    return category_name(type(category))


_ALIASES = {"WARN": "WARNING"}


def level_name(level: Level | str) -> str:
    if isinstance(level, Level):
        return level.value
    name = str(level).upper()
    return _ALIASES.get(name, name)


class LoguruSink:
    """Forward rendered entries to loguru.

    A trailing exception argument is handed to ``logger.opt(exception=...)`` so
    loguru prints its traceback; the remaining arguments fill the placeholders.
    loguru only formats the message when a handler accepts the level.
    """

    def __init__(self, category: str = "root", depth: int = DEFAULT_DEPTH) -> None:
        register_levels()
        self.category = category
        self.depth = depth
        self._logger = get_logger(category=category)

    def log(self, level: Level | str, message: str, *args: Any) -> None:
        error = None
        if args and isinstance(args[-1], BaseException):
            error = args[-1]
            args = args[:-1]
        self._logger.opt(depth=self.depth, exception=error).log(level_name(level), message, *args)

    def __repr__(self) -> str:
        return f"LoguruSink(category={self.category!r})"


def sink_for(category: Any) -> LoguruSink:
    """Resolve the sink for a class, module, instance, or plain name."""

    return LoguruSink(category_name(category))
