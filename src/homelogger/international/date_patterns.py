"""Registry of fixed display patterns the date parser understands.

Formatting accepts any pattern containing ``YYYY``/``MM``/``DD`` tokens, but
parsing is limited to the entries below.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

Fields = tuple[int, int, int]


@dataclass(frozen=True)
class DatePattern:
    """A fixed pattern: its name, the regex for a display string, and a field extractor."""

    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], Fields]

    def match(self, text: str) -> Fields | None:
        """Return (year, month, day) if *text* matches, else None. No calendar validation."""
        m = self.regex.fullmatch(text)
        if m is None:
            return None
        return self.extract(m)


def _ymd(m: re.Match[str]) -> Fields:
    return int(m[1]), int(m[2]), int(m[3])


def _dmy(m: re.Match[str]) -> Fields:
    return int(m[3]), int(m[2]), int(m[1])


def _mdy(m: re.Match[str]) -> Fields:
    return int(m[3]), int(m[1]), int(m[2])


# Priority order
DATE_PATTERNS: dict[str, DatePattern] = {
    p.name: p
    for p in (
        DatePattern("YYYY-MM-DD", re.compile(r'(\d{4})-(\d{1,2})-(\d{1,2})', re.ASCII), _ymd),
        DatePattern("YYYY/MM/DD", re.compile(r'(\d{4})/(\d{1,2})/(\d{1,2})', re.ASCII), _ymd),
        DatePattern("DD/MM/YYYY", re.compile(r'(\d{1,2})/(\d{1,2})/(\d{4})', re.ASCII), _dmy),
        DatePattern("MM/DD/YYYY", re.compile(r'(\d{1,2})/(\d{1,2})/(\d{4})', re.ASCII), _mdy),
        DatePattern("DD-MM-YYYY", re.compile(r'(\d{1,2})-(\d{1,2})-(\d{4})', re.ASCII), _dmy),
        DatePattern("MM-DD-YYYY", re.compile(r'(\d{1,2})-(\d{1,2})-(\d{4})', re.ASCII), _mdy),
    )
}

SUPPORTED_PATTERNS: tuple[str, ...] = tuple(DATE_PATTERNS)


def lookup_pattern(pattern: str) -> DatePattern | None:
    """Find the registry entry for *pattern*, case-insensitively."""
    return DATE_PATTERNS.get(pattern.strip().upper())
