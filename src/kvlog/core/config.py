"""Application configuration and central settings management.

Every environment-driven knob of the ambient logging setup lives here so the
builder and sink modules stay free of environment lookups. Settings are
validated through Pydantic so a typo in ``KVLOG_LEVEL`` fails loudly instead
of silently muting output.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from kvlog.models.levels import known_level_names

PROJECT_ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = PROJECT_ROOT / ".env"
load_dotenv(ENV_PATH)

DEFAULT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"


def _bool_env(key: str, default: bool | None) -> bool | None:
    value = os.getenv(key)
    if not value:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Typed representation of environment configuration."""

    level: str = Field(default_factory=lambda: os.getenv("KVLOG_LEVEL", "INFO"))
    format: str = Field(
        default_factory=lambda: os.getenv("KVLOG_FORMAT", DEFAULT_FORMAT),
        description="loguru handler format",
    )
    enqueue: bool = Field(default_factory=lambda: _bool_env("KVLOG_ENQUEUE", True))
    colorize: bool | None = Field(default_factory=lambda: _bool_env("KVLOG_COLORIZE", None))

    @field_validator("level")
    @classmethod
    def ensure_level(cls, value: str) -> str:
        normalized = value.strip().upper()
        if normalized not in known_level_names():
            msg = f"KVLOG_LEVEL must be one of {', '.join(sorted(known_level_names()))}"
            raise ValueError(msg)
        return normalized


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per interpreter for reuse across modules."""

    return Settings()
