"""Mini README: Centralised configuration models and helpers for the tracker.

Structure:
    * FinTrackSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FINTRACK_`` environment variables (or a
    local ``.env`` file) controlling log verbosity and how much guidance the
    interactive console prints. The configuration is cached so validation
    happens only once per process.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# Directives listed in the datetime.strftime documentation.
_STRFTIME_DIRECTIVES = frozenset("aAwdbBmyYHIpMSfzZjUWcxXGuV%")
_DIRECTIVE_PATTERN = re.compile(r"%(.?)", re.DOTALL)


class FinTrackSettings(BaseSettings):
    """Runtime configuration for the personal finance tracker."""

    environment: str = Field(
        "development",
        description="Environment label shown in debug logs.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level. Kept quiet by default so logs do not interleave with menus.",
    )
    show_banner: bool = Field(
        True,
        description="Print the welcome banner and usage steps on startup.",
    )
    show_menu_help: bool = Field(
        True,
        description="Print a one-line description under each menu option.",
    )
    timestamp_format: str = Field(
        "%Y-%m-%d %H:%M:%S",
        description="strftime pattern used when listing expense timestamps.",
    )

    class Config:
        env_prefix = "FINTRACK_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_log_level(cls, value: object) -> str:
        """Accept any casing but only the standard logging level names."""

        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Unsupported log level '{value}'. Choose one of {', '.join(_LOG_LEVELS)}.")
        return level

    @validator("timestamp_format")
    def _check_timestamp_format(cls, value: str) -> str:
        """Reject blank patterns and unknown or dangling ``%`` directives."""

        if not value.strip():
            raise ValueError("Timestamp format must not be empty.")
        for match in _DIRECTIVE_PATTERN.finditer(value):
            if match.group(1) not in _STRFTIME_DIRECTIVES:
                raise ValueError(f"Unknown strftime directive '%{match.group(1)}' in timestamp format.")
        return value


@lru_cache()
def get_settings() -> FinTrackSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinTrackSettings()
