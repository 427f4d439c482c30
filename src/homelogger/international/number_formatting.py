"""Locale-aware number and currency formatting for regional settings."""
from __future__ import annotations

import math

import structlog
from babel.numbers import UnsupportedNumberingSystemError
from babel.numbers import format_currency as babel_format_currency
from babel.numbers import format_decimal as babel_format_decimal

from ..models.regional import RegionalSettings
from .locale_resolution import resolve_locale

logger = structlog.get_logger(__name__)

DEFAULT_CURRENCY = "USD"
DEFAULT_NUMBERING_SYSTEM = "latn"


def _numbering_system(settings: RegionalSettings) -> str:
    return settings.numbering_system or DEFAULT_NUMBERING_SYSTEM


def format_number(value: float, settings: RegionalSettings) -> str:
    """Format a plain number, e.g. ``1234.5`` -> ``"1,234.5"`` for en-US.

    Non-finite values are returned as ``str(value)``.
    """
    if not math.isfinite(value):
        return str(value)
    locale = resolve_locale(settings.locale)
    try:
        return babel_format_decimal(value, locale=locale, numbering_system=_numbering_system(settings))
    except UnsupportedNumberingSystemError:
        logger.warning("unsupported_numbering_system", numbering_system=settings.numbering_system)
        return babel_format_decimal(value, locale=locale, numbering_system=DEFAULT_NUMBERING_SYSTEM)


def format_currency(value: float, settings: RegionalSettings) -> str:
    """Format a monetary amount in ``settings.currency`` (USD when unset)."""
    if not math.isfinite(value):
        return str(value)
    locale = resolve_locale(settings.locale)
    currency = settings.currency or DEFAULT_CURRENCY
    try:
        return babel_format_currency(
            value, currency, locale=locale, numbering_system=_numbering_system(settings)
        )
    except UnsupportedNumberingSystemError:
        logger.warning("unsupported_numbering_system", numbering_system=settings.numbering_system)
        return babel_format_currency(
            value, currency, locale=locale, numbering_system=DEFAULT_NUMBERING_SYSTEM
        )
