"""Runtime settings for tardis.

Settings are loaded from environment variables (prefix ``TARDIS_``) and can be
overridden by explicit arguments where the API accepts them.
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tardis.core.clock import local_utc_offset_minutes

logger = logging.getLogger(__name__)

_MAX_OFFSET_MINUTES = 24 * 60
_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


class TardisSettings(BaseSettings):
    """Settings for the local frame of "now" points and library logging."""

    model_config = SettingsConfigDict(env_prefix="TARDIS_", extra="ignore")

    utc_offset_minutes: Optional[int] = Field(
        default=None,
        description="UTC offset of the local frame; None uses the host's local offset",
    )
    log_level: str = Field(default="WARNING", description="Level of the 'tardis' logger")

    @field_validator("utc_offset_minutes")
    @classmethod
    def validate_utc_offset_minutes(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and not (-_MAX_OFFSET_MINUTES < value < _MAX_OFFSET_MINUTES):
            raise ValueError(
                f"utc_offset_minutes must be within ±{_MAX_OFFSET_MINUTES - 1}, got {value}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVEL_NAMES:
            raise ValueError(f"log_level must be one of {', '.join(_LEVEL_NAMES)}, got {value!r}")
        return level


_SETTINGS: Optional[TardisSettings] = None


def get_settings() -> TardisSettings:
    """Process-wide settings, read from the environment on first use."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = TardisSettings()
    return _SETTINGS


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _SETTINGS
    _SETTINGS = None


def resolve_utc_offset(explicit: Optional[int] = None) -> int:
    """
    UTC offset for a new local-frame point.

    An explicit value wins, then the configured offset, then the host's.
    """
    if explicit is not None:
        return explicit
    configured = get_settings().utc_offset_minutes
    if configured is not None:
        return configured
    return local_utc_offset_minutes()


def configure_logging(settings: Optional[TardisSettings] = None) -> None:
    """Apply the configured level to the package logger. Handlers are left to the application."""
    settings = settings or get_settings()
    logging.getLogger("tardis").setLevel(settings.log_level)
    logger.debug("tardis logger level set to %s", settings.log_level)
