"""Central logging configuration shared by the CLI, the sink adapter, and tests."""

from __future__ import annotations

import sys
from typing import Any

from loguru import logger

from kvlog.core.config import get_settings
from kvlog.models.levels import EXTRA_LEVELS


def register_levels() -> None:
    """Make sure the finer-grained levels exist in loguru.

    Safe to call repeatedly; levels already known to loguru are left alone.
    """

    for level, number in EXTRA_LEVELS.items():
        try:
            logger.level(level.value)
        except ValueError:
            logger.level(level.value, no=number)


def configure_logging(level: str | None = None) -> None:
    """Route loguru output to stderr with a concise structured format."""

    settings = get_settings()
    register_levels()
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or settings.level).upper(),
        format=settings.format,
        enqueue=settings.enqueue,
        colorize=settings.colorize,
    )


def get_logger(**extra: Any):
    """Return a child logger pre-populated with extra context."""

    return logger.bind(**extra)
