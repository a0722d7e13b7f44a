"""
Configuration settings for the date utilities.

**Conceptual**: This module provides a strongly-typed configuration object that
loads from environment variables (via .env files). Settings are validated when
they are created, so a misconfigured timezone or log level fails at startup
instead of producing silently shifted dates later on.

**What is configurable?**
  - The "local" timezone. Naive date-times (no offset) and the leap-year
    check are interpreted in this zone. Defaults to the system timezone.
  - The log level used by setup_logging().

This module uses python-dotenv to load .env files, python-dateutil to resolve
timezone names, and dataclasses for type safety.
"""

import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Optional

from dateutil import tz
from dotenv import load_dotenv

# Load .env from project root (no-op if the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_timezone(name: Optional[str]) -> tzinfo:
    """
    Resolve an IANA timezone name (e.g. "Europe/Berlin") to a tzinfo object.

    An empty or missing name resolves to the system local timezone.

    Args:
        name: IANA timezone name, "UTC", or None/"" for the system zone.

    Returns:
        A dateutil tzinfo object usable with pandas Timestamps.

    Raises:
        ValueError: If the name is not a known timezone.
    """
    if not name:
        return tz.tzlocal()

    zone = tz.gettz(name)
    if zone is None:
        raise ValueError(
            f"Unknown timezone name: {name!r}. "
            "Use an IANA name such as 'UTC' or 'Europe/Berlin'."
        )
    return zone


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the date utilities.

    **Conceptual**: A single immutable object holding everything that is not
    part of a function's arguments. The date functions read it lazily through
    get_settings(), and tests can construct their own instance or set
    environment variables and call reset_settings().

    Attributes:
        local_timezone: Timezone used for naive date-times and for the
                        calendar year in is_leap_year().
        log_level: Standard logging level name used by setup_logging().
    """
    local_timezone: tzinfo
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings after initialization."""
        if not isinstance(self.local_timezone, tzinfo):
            raise ValueError(
                f"local_timezone must be a tzinfo instance, got: {self.local_timezone!r}"
            )
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Load settings from environment variables.

        **Environment variables**:
          - DATE_TASKS_LOCAL_TIMEZONE (optional): IANA timezone name.
            Defaults to the system local timezone if not set.
          - DATE_TASKS_LOG_LEVEL (optional): DEBUG, INFO, WARNING, ERROR or
            CRITICAL (case-insensitive). Defaults to WARNING.

        Returns:
            Settings object with values loaded from environment.

        Raises:
            ValueError: If the timezone name or log level is invalid.

        Usage example:
            >>> # In .env file:
            >>> # DATE_TASKS_LOCAL_TIMEZONE=Europe/Berlin
            >>>
            >>> settings = Settings.from_env()
            >>> settings.log_level
            'WARNING'
        """
        timezone_name = os.getenv("DATE_TASKS_LOCAL_TIMEZONE", "").strip()
        log_level = os.getenv("DATE_TASKS_LOG_LEVEL", "WARNING").strip().upper()

        return cls(
            local_timezone=load_timezone(timezone_name),
            log_level=log_level,
        )


# Global settings singleton (lazy-loaded)
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from the environment on first call, then cached for
    reuse. Tests can bypass the cache with reset_settings().

    Returns:
        Global Settings singleton.

    Raises:
        ValueError: If the environment holds an invalid timezone or log level.
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("DATE_TASKS_LOCAL_TIMEZONE", "Asia/Tokyo")
          reset_settings()

          settings = get_settings()
          assert settings.local_timezone is not None
      ```

    Returns:
        None (side effect: clears global settings cache).
    """
    global _default_settings
    _default_settings = None


def get_log_level_number(name: str) -> int:
    """Translate a validated level name into its logging constant."""
    return getattr(logging, name)
