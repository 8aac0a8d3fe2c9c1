"""Runtime settings for the ``yatl`` command line.

Every field defaults from a ``YATL_*`` environment variable so the CLI can be
tuned without flags.  Settings are split per concern so a bad variable only
breaks the command that reads it.  Library code never reads this module.
"""

from __future__ import annotations

import os
from typing import Dict, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .log import normalize_level


class _EnvSettings(BaseModel):
    # env values arrive as strings; let pydantic coerce and bound-check them
    model_config = ConfigDict(validate_default=True)


class LogSettings(_EnvSettings):
    level: str = Field(default_factory=lambda: os.getenv("YATL_LOG_LEVEL", "WARNING"))

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        return normalize_level(v)


class RunSettings(_EnvSettings):
    lap_interval: float = Field(default_factory=lambda: os.getenv("YATL_LAP_INTERVAL", "1.0"), ge=0)
    laps: int = Field(default_factory=lambda: os.getenv("YATL_LAPS", "3"), ge=1)


S = TypeVar("S", bound=_EnvSettings)

_settings_cache: Dict[type, _EnvSettings] = {}


def get_settings(kind: Type[S], force_refresh: bool = False) -> S:
    """Return a cached ``kind`` instance built from the current environment.

    Raises pydantic.ValidationError when a variable of that section is invalid.
    """
    if force_refresh or kind not in _settings_cache:
        _settings_cache[kind] = kind()
    return _settings_cache[kind]  # type: ignore[return-value]


def clear_settings() -> None:
    _settings_cache.clear()


__all__ = ["LogSettings", "RunSettings", "clear_settings", "get_settings"]
