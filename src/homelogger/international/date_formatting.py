"""Locale-aware date formatting and parsing for regional settings.

Canonical dates are ``YYYY-MM-DD`` strings with no time or zone. Display
dates follow ``RegionalSettings.date_format`` (a ``YYYY``/``MM``/``DD`` token
pattern) or, in auto mode, the locale's medium date style.

None of these functions raise on bad input: parsing returns ``None`` and
formatting returns the input unchanged, so callers can show a validation
message instead of catching errors.
"""
from __future__ import annotations

import re
from datetime import date, datetime
from zoneinfo import ZoneInfo

from babel.dates import format_date as babel_format_date
from babel.dates import format_time as babel_format_time
from dateutil import parser as dateutil_parser

from ..models.regional import RegionalSettings
from .date_patterns import lookup_pattern
from .locale_resolution import resolve_locale, resolve_time_zone

ISO_DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}', re.ASCII)
AUTO = "auto"
DEFAULT_PATTERN = "YYYY-MM-DD"

# Fields missing from a free-form string are filled from here, never from "today"
_PARSE_DEFAULT = datetime(2000, 1, 1)
_UTC = ZoneInfo("UTC")


def _is_iso_date(text: str) -> bool:
    return ISO_DATE_RE.fullmatch(text) is not None


def _parse_instant(value: str, zone: ZoneInfo) -> datetime | None:
    """Parse *value* as a point in time, expressed in *zone*.

    ISO 8601 is tried first, then a generic parse. Naive results are taken as
    wall time in *zone*.
    """
    text = value.strip()
    if not text:
        return None
    try:
        parsed = dateutil_parser.isoparse(text)
    except (ValueError, OverflowError):
        try:
            parsed = dateutil_parser.parse(text, default=_PARSE_DEFAULT)
        except (ValueError, OverflowError, TypeError):
            return None
    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=zone)
        return parsed.astimezone(zone)
    except (OverflowError, ValueError):
        # Shifting into the zone left the supported year range (1-9999)
        return None


def _date_fields(value: str, zone: ZoneInfo) -> tuple[str, str, str] | None:
    """Zero-padded (year, month, day) for *value*, or None if it is not date-like."""
    if _is_iso_date(value):
        return value[0:4], value[5:7], value[8:10]
    instant = _parse_instant(value, zone)
    if instant is None:
        return None
    return f"{instant.year:04d}", f"{instant.month:02d}", f"{instant.day:02d}"


def _to_canonical(year: int, month: int, day: int) -> str | None:
    try:
        return date(year, month, day).isoformat()
    except ValueError:
        return None


def get_date_pattern(settings: RegionalSettings) -> str:
    """Pattern to show users as the expected input format.

    Unlike :func:`format_date`, an empty ``date_format`` here means
    ``YYYY-MM-DD`` rather than auto mode.
    """
    return (settings.date_format or "").strip() or DEFAULT_PATTERN


def format_date(value: str | None, settings: RegionalSettings) -> str:
    """Render a canonical date (or any date-like string) for display.

    Returns ``""`` for empty input and *value* unchanged if it cannot be
    understood as a date.
    """
    if not value:
        return ""
    fields = _date_fields(value, resolve_time_zone(settings.time_zone))
    if fields is None:
        return value

    pattern = settings.date_format
    if not pattern or pattern.lower() == AUTO:
        canonical = _to_canonical(*(int(f) for f in fields))
        if canonical is None:
            return value
        return babel_format_date(
            date.fromisoformat(canonical), format="medium", locale=resolve_locale(settings.locale)
        )

    year, month, day = fields
    return pattern.replace("YYYY", year).replace("MM", month).replace("DD", day)


def format_date_time(value: str | None, settings: RegionalSettings) -> str:
    """Like :func:`format_date`, followed by the local hour:minute when *value* has a time."""
    date_part = format_date(value, settings)
    if not date_part or _is_iso_date(value):
        return date_part

    zone = resolve_time_zone(settings.time_zone)
    instant = _parse_instant(value, zone)
    if instant is None:
        return date_part
    time_part = babel_format_time(
        instant, format="short", tzinfo=zone, locale=resolve_locale(settings.locale)
    )
    return f"{date_part} {time_part}"


def parse_date_input(value: str | None, settings: RegionalSettings) -> str | None:
    """Turn user input into a canonical ``YYYY-MM-DD`` date, or None.

    ISO input is always accepted as-is, whatever the configured pattern.
    Otherwise the input must match the configured registry pattern and name a
    real calendar date (``02/30/2024`` is rejected, not rolled into March).
    """
    text = (value or "").strip()
    if not text:
        return None
    if _is_iso_date(text):
        return text

    pattern = get_date_pattern(settings)
    if pattern.lower() == AUTO:
        instant = _parse_instant(text, _UTC)
        return instant.date().isoformat() if instant is not None else None

    entry = lookup_pattern(pattern)
    if entry is None:
        return None
    fields = entry.match(text)
    if fields is None:
        return None
    return _to_canonical(*fields)


def validate_date_input(
    value: str | None, settings: RegionalSettings
) -> tuple[str | None, str | None]:
    """Form helper. Returns (canonical, None) on success or (None, error_message)."""
    if not value or not value.strip():
        return None, "Date is required"
    canonical = parse_date_input(value, settings)
    if canonical is None:
        return None, f"Date must match {get_date_pattern(settings)}"
    return canonical, None
