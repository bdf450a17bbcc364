"""Shared fixtures: a recording sink double and a loguru record collector."""

from __future__ import annotations

from typing import Any, List, Tuple

import pytest
from loguru import logger

from kvlog.builder import LogEntryBuilder


class RecordingSink:
    """Sink double that remembers every call instead of logging."""

    def __init__(self) -> None:
        self.calls: List[Tuple[Any, str, Tuple[Any, ...]]] = []

    def log(self, level: Any, message: str, *args: Any) -> None:
        self.calls.append((level, message, args))


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def builder(sink: RecordingSink) -> LogEntryBuilder:
    return LogEntryBuilder.create(sink)


@pytest.fixture
def records():
    captured: List[dict] = []
    handler_id = logger.add(lambda message: captured.append(message.record), level=0, format="{message}")
    yield captured
    logger.remove(handler_id)
