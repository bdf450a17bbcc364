"""Well-known field keys used by the builder's convenience setters."""

from __future__ import annotations

from enum import Enum


class LogKey(str, Enum):
    PACKAGE = "package"
    CLASS = "class"
    ENDPOINT = "endpoint"
    SERVICE = "service"
    EXCEPTION = "exception"
    HTTP_STATUS = "httpStatus"
    HTTP_METHOD = "httpMethod"
    TRANSACTION = "transaction"
    VALUE = "value"
    TYPE = "type"
    SESSION = "session"
    TRACK = "track"
    REQUEST = "request"
    CODE = "code"
    METHOD = "method"
    ENVIRONMENT = "environment"
    STATUS = "status"
    MESSAGE = "message"
    NAME = "name"
    DURATION = "duration"
    LANGUAGE = "language"
    ARGUMENTS = "arguments"
    ID = "id"
    ACTION = "action"
    DAY = "day"
    MONTH = "month"
    YEAR = "year"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "dateTime"
    TIME_ZONE = "timeZone"

    def __str__(self) -> str:
        return self.value


# Literal values for the status shortcuts.
FAIL = "fail"
SUCCESS = "success"
