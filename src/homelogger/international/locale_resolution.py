"""Resolve locale tags and IANA zone names for the formatters.

Both resolvers are fail-soft: an unknown locale falls back to ``en-US`` and
an unknown zone to UTC, so formatting never raises on bad settings data.
"""
from __future__ import annotations

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from babel import Locale, UnknownLocaleError

logger = structlog.get_logger(__name__)

DEFAULT_LOCALE = "en-US"
DEFAULT_TIME_ZONE = "UTC"


@lru_cache(maxsize=64)
def resolve_locale(tag: str | None) -> Locale:
    """Return a Babel ``Locale`` for a BCP 47 tag like ``en-US`` or ``en_GB``."""
    if tag:
        try:
            return Locale.parse(tag.replace("-", "_"))
        except (UnknownLocaleError, ValueError, TypeError):
            logger.warning("unknown_locale", locale=tag, fallback=DEFAULT_LOCALE)
    return Locale.parse(DEFAULT_LOCALE.replace("-", "_"))


@lru_cache(maxsize=64)
def resolve_time_zone(name: str | None) -> ZoneInfo:
    """Return the ``ZoneInfo`` for *name*, or UTC if it is empty or unknown."""
    if name:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError, OSError):
            logger.warning("unknown_time_zone", time_zone=name, fallback=DEFAULT_TIME_ZONE)
    return ZoneInfo(DEFAULT_TIME_ZONE)


def is_known_time_zone(name: str) -> bool:
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return False
    return True
