"""
Configuration — typed, validated settings loaded from the environment.

Uses pydantic-settings to:
  - Load from environment variables prefixed with OPTRES_
  - Validate types and constraints on first load
  - Keep the container modules free of any configuration

Only the logging layer (optres.observe) reads these settings; Option and
Result behave identically whatever the environment says.

Architecture: Only OptresSettings is a BaseSettings instance. LoggingSettings
is a plain BaseModel populated via env_nested_delimiter="__", so the env var
OPTRES_LOGGING__LEVEL maps to logging.level.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingSettings(BaseModel):
    """How container outcomes are logged by optres.observe."""

    level: str = Field(default="INFO", description="Minimum log level")
    renderer: Literal["console", "json"] = Field(
        default="console",
        description="console for humans, json for log shippers",
    )
    include_payloads: bool = Field(
        default=True,
        description="Attach value/error reprs to log events",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        """Normalise to an upper-case standard level name; unknown names become INFO."""
        normalised = value.strip().upper()
        if normalised not in _LEVEL_NAMES:
            return "INFO"
        return normalised

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


class OptresSettings(BaseSettings):
    """
    Root settings.

    Load order (highest priority first):
      1. Keyword arguments
      2. Environment variables (OPTRES_LOGGING__LEVEL, ...)
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="OPTRES_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=lambda: LoggingSettings())


@lru_cache(maxsize=1)
def get_settings() -> OptresSettings:
    """Load settings once; call get_settings.cache_clear() to reload."""
    return OptresSettings()


__all__ = ["LoggingSettings", "OptresSettings", "get_settings"]
