"""Immutable, chainable builder for key/value log lines.

Example::

    log = LogEntryBuilder.create(App)
    log.message("Hello World!!").success().info()

produces ``message="Hello World!!" status="success"`` at INFO. Every call that
adds a field returns a new builder, so a base builder can be shared and
branched freely; nothing is rendered until a level method runs.
"""

from __future__ import annotations

import sys
from datetime import datetime
from types import ModuleType
from typing import Any, Callable, Iterable, Tuple
from uuid import UUID

from kvlog.models.field import LogField
from kvlog.models.keys import FAIL, SUCCESS, LogKey
from kvlog.models.levels import Level
from kvlog.render.entry import RenderedEntry, render_entry
from kvlog.sink.loguru_sink import LogSink, is_sink, sink_for

_WEEKDAYS = ("MONDAY", "TUESDAY", "WEDNESDAY", "THURSDAY", "FRIDAY", "SATURDAY", "SUNDAY")
_MONTHS = (
    "JANUARY",
    "FEBRUARY",
    "MARCH",
    "APRIL",
    "MAY",
    "JUNE",
    "JULY",
    "AUGUST",
    "SEPTEMBER",
    "OCTOBER",
    "NOVEMBER",
    "DECEMBER",
)


def _now() -> datetime:
    return datetime.now().astimezone()


def _package_of(module: ModuleType) -> str:
    if module.__package__ is not None:
        return module.__package__
    return module.__name__.rpartition(".")[0]


class LogEntryBuilder:
    __slots__ = ("_sink", "_fields", "_error")

    def __init__(
        self,
        sink: LogSink,
        fields: Tuple[LogField, ...] = (),
        error: BaseException | None = None,
    ) -> None:
        self._sink = sink
        self._fields = fields
        self._error = error

    @classmethod
    def create(cls, origin: Any = None) -> "LogEntryBuilder":
        """Start an empty builder.

        ``origin`` is either a ready sink (an instance whose ``log`` accepts
        ``level, message, *args``) or a category (class, module, instance, or name)
        from which a loguru sink is resolved.
        """

        if is_sink(origin):
            return cls(origin)
        return cls(sink_for(origin))

    @staticmethod
    def sink_for(category: Any) -> LogSink:
        return sink_for(category)

    @property
    def sink(self) -> LogSink:
        return self._sink

    @property
    def fields(self) -> Tuple[LogField, ...]:
        return self._fields

    @property
    def attached_error(self) -> BaseException | None:
        return self._error

    def __repr__(self) -> str:
        return f"LogEntryBuilder(sink={self._sink!r}, fields={len(self._fields)}, error={self._error!r})"

    # -- generic fields -----------------------------------------------------

    def _append(self, field: LogField, error: BaseException | None = None) -> "LogEntryBuilder":
        return LogEntryBuilder(self._sink, self._fields + (field,), self._error if error is None else error)

    def add(self, key: str | None, value: Any) -> "LogEntryBuilder":
        return self._append(LogField.single(key, value))

    def add_format(self, key: str | None, template: str | None, *values: Any) -> "LogEntryBuilder":
        """Add a field whose value is ``template`` with one ``{}`` per value."""

        return self._append(LogField(key=key, template=template, values=values))

    def _set(self, key: LogKey, value: Any) -> "LogEntryBuilder":
        return self.add(key.value, value)

    # -- well-known keys ----------------------------------------------------

    def message(self, value: Any) -> "LogEntryBuilder":
        return self._set(LogKey.MESSAGE, value)

    def message_format(self, template: str | None, *values: Any) -> "LogEntryBuilder":
        return self.add_format(LogKey.MESSAGE.value, template, *values)

    def exception(self, value: str | BaseException | None) -> "LogEntryBuilder":
        return self._set(LogKey.EXCEPTION, value)

    def exception_with_stack_trace(self, error: BaseException, message: str | None = None) -> "LogEntryBuilder":
        """Log ``message`` (or the error's one-line form) and attach ``error`` for its traceback."""

        value = error if message is None else message
        return self._append(LogField.single(LogKey.EXCEPTION.value, value), error)

    def endpoint(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.ENDPOINT, value)

    def service(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.SERVICE, value)

    def name(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.NAME, value)

    def duration(self, value: int | float | None) -> "LogEntryBuilder":
        return self._set(LogKey.DURATION, value)

    def status(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.STATUS, value)

    def fail(self) -> "LogEntryBuilder":
        return self._set(LogKey.STATUS, FAIL)

    def success(self) -> "LogEntryBuilder":
        return self._set(LogKey.STATUS, SUCCESS)

    def action(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.ACTION, value)

    def environment(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.ENVIRONMENT, value)

    def method(self, value: str | Callable[..., Any] | None) -> "LogEntryBuilder":
        if value is not None and not isinstance(value, str):
            value = getattr(value, "__name__", value)
        return self._set(LogKey.METHOD, value)

    def class_(self, value: str | type | None) -> "LogEntryBuilder":
        if isinstance(value, type):
            value = f"{value.__module__}.{value.__qualname__}"
        return self._set(LogKey.CLASS, value)

    def package(self, value: str | type | ModuleType | None) -> "LogEntryBuilder":
        if isinstance(value, type):
            module = sys.modules.get(value.__module__)
            value = _package_of(module) if module else value.__module__.rpartition(".")[0]
        elif isinstance(value, ModuleType):
            value = _package_of(value)
        return self._set(LogKey.PACKAGE, value)

    def code(self, value: str | int | None) -> "LogEntryBuilder":
        return self._set(LogKey.CODE, value)

    def track(self, value: str | UUID | None) -> "LogEntryBuilder":
        return self._set(LogKey.TRACK, value)

    def request(self, value: str | UUID | None) -> "LogEntryBuilder":
        return self._set(LogKey.REQUEST, value)

    def session(self, value: str | UUID | None) -> "LogEntryBuilder":
        return self._set(LogKey.SESSION, value)

    def transaction(self, value: str | UUID | None) -> "LogEntryBuilder":
        return self._set(LogKey.TRANSACTION, value)

    def id(self, value: str | UUID | None) -> "LogEntryBuilder":
        return self._set(LogKey.ID, value)

    def type_(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.TYPE, value)

    def value(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.VALUE, value)

    def http_method(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.HTTP_METHOD, value)

    def http_status(self, value: str | int | None) -> "LogEntryBuilder":
        return self._set(LogKey.HTTP_STATUS, value)

    def language(self, value: str | None) -> "LogEntryBuilder":
        return self._set(LogKey.LANGUAGE, value)

    def arguments(self, values: Iterable[Any] | None) -> "LogEntryBuilder":
        if values is not None and not isinstance(values, (list, tuple)):
            values = list(values)
        return self._set(LogKey.ARGUMENTS, values)

    # -- calendar -----------------------------------------------------------

    def day(self) -> "LogEntryBuilder":
        return self._set(LogKey.DAY, _now().day)

    def day_name(self) -> "LogEntryBuilder":
        return self._set(LogKey.DAY, _WEEKDAYS[_now().weekday()])

    def month(self) -> "LogEntryBuilder":
        return self._set(LogKey.MONTH, _now().month)

    def month_name(self) -> "LogEntryBuilder":
        return self._set(LogKey.MONTH, _MONTHS[_now().month - 1])

    def year(self) -> "LogEntryBuilder":
        return self._set(LogKey.YEAR, _now().year)

    def date(self, fmt: str | None = None) -> "LogEntryBuilder":
        now = _now()
        return self._set(LogKey.DATE, now.strftime(fmt) if fmt else now.date().isoformat())

    def time(self, fmt: str | None = None) -> "LogEntryBuilder":
        now = _now()
        return self._set(LogKey.TIME, now.strftime(fmt) if fmt else now.time().isoformat(timespec="milliseconds"))

    def date_time(self, fmt: str | None = None, key: str = LogKey.DATE_TIME.value) -> "LogEntryBuilder":
        now = _now()
        if fmt:
            return self.add(key, now.strftime(fmt))
        return self.add(key, f"{now:%Y-%m-%d %H:%M:%S}.{now.microsecond // 1000:03d} {now:%z}")

    def time_zone(self) -> "LogEntryBuilder":
        return self._set(LogKey.TIME_ZONE, _now().strftime("%z"))

    def time_zone_name(self) -> "LogEntryBuilder":
        return self._set(LogKey.TIME_ZONE, _now().tzname())

    # -- emission -----------------------------------------------------------

    def render(self) -> RenderedEntry:
        return render_entry(self._fields, self._error)

    def _emit(self, level: Level | str) -> None:
        entry = self.render()
        self._sink.log(level, entry.message, *entry.args)

    def emit(self, level: Level | str) -> None:
        self._emit(level)

    def trace(self) -> None:
        self._emit(Level.TRACE)

    def debug(self) -> None:
        self._emit(Level.DEBUG)

    def info(self) -> None:
        self._emit(Level.INFO)

    def warn(self) -> None:
        self._emit(Level.WARNING)

    def warning(self) -> None:
        self._emit(Level.WARNING)

    def error(self) -> None:
        self._emit(Level.ERROR)

    def critical(self) -> None:
        self._emit(Level.CRITICAL)

    def finest(self) -> None:
        self._emit(Level.FINEST)

    def finer(self) -> None:
        self._emit(Level.FINER)

    def fine(self) -> None:
        self._emit(Level.FINE)

    def config(self) -> None:
        self._emit(Level.CONFIG)

    def severe(self) -> None:
        self._emit(Level.SEVERE)

    def all(self) -> None:
        self._emit(Level.ALL)
