"""Emission levels understood by the builder and the loguru sink."""

from __future__ import annotations

from enum import Enum
from typing import Dict, FrozenSet


class Level(str, Enum):
    """Level names as loguru knows them.

    The first block mirrors loguru's built-in levels; the second adds the
    finer-grained levels of a categorized (java.util.logging style) sink,
    registered on demand by :func:`kvlog.core.logging.register_levels`.
    """

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    ALL = "ALL"
    FINEST = "FINEST"
    FINER = "FINER"
    FINE = "FINE"
    CONFIG = "CONFIG"
    SEVERE = "SEVERE"

    def __str__(self) -> str:
        return self.value


# Severity numbers for the levels loguru does not ship.
EXTRA_LEVELS: Dict[Level, int] = {
    Level.ALL: 1,
    Level.FINEST: 3,
    Level.FINER: 7,
    Level.FINE: 12,
    Level.CONFIG: 15,
    Level.SEVERE: 45,
}


def known_level_names() -> FrozenSet[str]:
    # loguru's SUCCESS is accepted as a threshold even though nothing emits at it.
    return frozenset(level.value for level in Level) | {"SUCCESS"}
