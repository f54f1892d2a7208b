# config/settings.py
"""
Runtime settings for the stopwatch utilities.

- Honors these env vars:
    STOPWATCH_CLOCK      wall | monotonic  (default: wall)
    STOPWATCH_LOG_LEVEL  any logging level name (default: WARNING)
- Cached singleton via get_settings(); pass force_refresh=True after
  changing the environment.
"""

from __future__ import annotations

import logging
import os
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    clock: Literal["wall", "monotonic"] = Field(default_factory=lambda: os.getenv("STOPWATCH_CLOCK", "wall"))
    log_level: str = Field(default_factory=lambda: os.getenv("STOPWATCH_LOG_LEVEL", "WARNING"))

    @field_validator("log_level")
    @classmethod
    def known_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


# ---------- Singleton access ----------

_settings_singleton: Optional[Settings] = None

def get_settings(force_refresh: bool = False) -> Settings:
    """
    Return a cached Settings instance built from the environment.
    """
    global _settings_singleton
    if force_refresh or _settings_singleton is None:
        _settings_singleton = Settings()
    return _settings_singleton


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Apply the configured log level to the root logger (for entrypoints only)."""
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
