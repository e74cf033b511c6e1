"""
Ambient configuration: default zone and default locale.

**Conceptual**: Every operation that takes an optional zone or locale falls
back to a default. Those defaults come from a DateTimeSettings object, which
is either injected by the caller (tests, applications with their own config)
or loaded from the environment on each call.

**Environment variables** (a .env file at the project root is honoured):
  - DATETIMEUTILS_TIMEZONE (optional): IANA zone name, e.g. "Europe/Moscow".
    Unset means the system zone.
  - DATETIMEUTILS_LOCALE (optional): locale identifier, e.g. "en_GB".
    Unset means the system locale (LANGUAGE / LC_ALL / LC_CTYPE / LANG).

**Why no singleton?** The system zone and locale are process-wide settings
that can change at runtime. get_settings() therefore builds a fresh object on
every call instead of caching the first one, and DateTimeUtils reads it per
operation. Tests inject a DateTimeSettings instead of mutating os.environ.
"""

import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Optional

from babel import Locale
from dotenv import load_dotenv

from datetimeutils.core.locales import resolve_locale, system_locale
from datetimeutils.core.zones import resolve_zone, system_zone
from datetimeutils.utils.logging import get_logger

env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

logger = get_logger(__name__)

TIMEZONE_ENV = "DATETIMEUTILS_TIMEZONE"
LOCALE_ENV = "DATETIMEUTILS_LOCALE"


@dataclass(frozen=True)
class DateTimeSettings:
    """
    Default zone and locale used when an operation is called without them.

    Attributes:
        timezone: IANA zone name, or None for the system zone.
        locale: Locale identifier, or None for the system locale.
    """
    timezone: Optional[str] = None
    locale: Optional[str] = None

    def __post_init__(self):
        """Validate identifiers so misconfiguration fails at load time."""
        if self.timezone is not None:
            try:
                resolve_zone(self.timezone)
            except ValueError as e:
                raise ValueError(
                    f"{TIMEZONE_ENV} must name a known time zone, got {self.timezone!r}"
                ) from e
        if self.locale is not None:
            try:
                resolve_locale(self.locale)
            except ValueError as e:
                raise ValueError(
                    f"{LOCALE_ENV} must name a known locale, got {self.locale!r}"
                ) from e

    @classmethod
    def from_env(cls) -> "DateTimeSettings":
        """
        Load settings from environment variables.

        Empty values are treated as unset.

        Returns:
            DateTimeSettings with values from the environment.

        Raises:
            ValueError: If a variable names an unknown zone or locale.

        Usage example:
            >>> # DATETIMEUTILS_TIMEZONE=Europe/London
            >>> settings = DateTimeSettings.from_env()
            >>> settings.timezone  # "Europe/London"
        """
        timezone_name = os.getenv(TIMEZONE_ENV, "").strip() or None
        locale_name = os.getenv(LOCALE_ENV, "").strip() or None
        logger.debug("settings_loaded", timezone=timezone_name, locale=locale_name)
        return cls(timezone=timezone_name, locale=locale_name)

    def zone(self) -> tzinfo:
        """The default zone: the configured one, else the system zone."""
        if self.timezone is None:
            return system_zone()
        return resolve_zone(self.timezone)

    def babel_locale(self) -> Locale:
        """The default locale: the configured one, else the system locale."""
        if self.locale is None:
            return system_locale()
        return resolve_locale(self.locale)


def get_settings() -> DateTimeSettings:
    """
    Load the current ambient settings.

    Unlike a cached singleton, this re-reads the environment on every call so
    that changes to the process configuration are picked up immediately.
    """
    return DateTimeSettings.from_env()
