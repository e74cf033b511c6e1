"""
Locale resolution and locale-sensitive calendar rules.

Locale data (month names, week conventions) is CLDR data provided by Babel.
A locale is passed either as a babel.Locale or as an identifier string;
"en_US", "en-US" and "en" are all accepted.

The first day of the week is a territory rule, not a language rule: en_US
weeks start on Sunday while en_GB weeks start on Monday. Locales without a
territory use the CLDR world default (Monday).
"""

from enum import Enum
from typing import Optional, Union

import babel
from babel import Locale, UnknownLocaleError
from babel.dates import get_month_names

from datetimeutils.utils.logging import get_logger

logger = get_logger(__name__)

LocaleLike = Union[Locale, str]

FALLBACK_LOCALE = "en_US"


class TextStyle(Enum):
    """
    Length and grammatical context of a display name.

    Each member maps to a (width, context) pair in CLDR terms. The "format"
    context is the form used inside a date ("4 июля"), "stand-alone" the form
    used on its own ("июль"); most languages do not distinguish them.
    """
    FULL = ("wide", "format")
    FULL_STANDALONE = ("wide", "stand-alone")
    SHORT = ("abbreviated", "format")
    SHORT_STANDALONE = ("abbreviated", "stand-alone")
    NARROW = ("narrow", "format")
    NARROW_STANDALONE = ("narrow", "stand-alone")

    @property
    def width(self) -> str:
        return self.value[0]

    @property
    def context(self) -> str:
        return self.value[1]


def resolve_locale(locale: LocaleLike) -> Locale:
    """
    Turn a locale identifier into a babel.Locale.

    Raises:
        ValueError: If the identifier is malformed or unknown to CLDR.
        TypeError: If locale is neither a string nor a babel.Locale.
    """
    if isinstance(locale, Locale):
        return locale
    if not isinstance(locale, str):
        raise TypeError(f"Locale must be a babel.Locale or an identifier, got {type(locale).__name__}")
    try:
        return Locale.parse(locale.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError) as e:
        raise ValueError(f"Unknown locale: {locale!r}") from e


def system_locale() -> Locale:
    """
    Return the process's configured locale, read from the environment on each call.

    Babel inspects LANGUAGE, LC_ALL, LC_CTYPE and LANG. When none is usable the
    fallback is en_US.
    """
    identifier = babel.default_locale("LC_TIME")
    if identifier:
        try:
            return Locale.parse(identifier)
        except (UnknownLocaleError, ValueError):
            logger.debug("system_locale_unparseable", identifier=identifier)
    logger.debug("system_locale_fallback", locale=FALLBACK_LOCALE)
    return Locale.parse(FALLBACK_LOCALE)


def first_weekday(locale: Locale) -> int:
    """
    First day of the week for a locale.

    Returns:
        ISO day-of-week number, 1 (Monday) to 7 (Sunday).
    """
    # Babel numbers weekdays from 0 (Monday)
    return locale.first_week_day + 1


def month_display_name(month: int, style: TextStyle, locale: Locale) -> str:
    """
    Display name of a month, e.g. 'January' or 'Jan'.

    Falls back to the month number when the locale has no name for the style.
    """
    names = get_month_names(width=style.width, context=style.context, locale=locale)
    try:
        return names[month]
    except KeyError:
        return str(month)
