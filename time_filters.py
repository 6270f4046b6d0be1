"""
TIME_FILTERS.PY - TODAY-ONLY PICK GATING
========================================

A pick is eligible only when its raw date, once parsed, is today's civil
date in America/New_York. "Today" comes from core.time_et (aware UTC instant
converted to ET), never from host-local time or UTC hour offsets.

Rules:
- The literal "TODAY" (any case) always passes
- An empty or missing date always fails (no eligible-by-default)
- A date that cannot be parsed fails
- Yesterday's date fails, even for late-night picks

Accepted formats (PICK_DATE_RULES, first match wins):
    2026-10-19, 2026-10-19T23:10:00Z
    10/19, 10/19/26, 10/19/2026        (missing year -> today's year)
    Oct 19, October 19, Oct. 19th, Sun, Oct 19, Oct 19, 2026

Usage:
    from time_filters import is_today_pick, parse_pick_date

    is_today_pick("TODAY")                         # True
    is_today_pick("10/19", today=date(2026, 10, 19))  # True
"""

from datetime import date
from typing import Callable, List, Optional
import logging
import re

from core.time_et import today_et

logger = logging.getLogger("time_filters")

TODAY_TOKEN = "TODAY"

MONTHS = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "sept": 9, "oct": 10, "nov": 11, "dec": 12,
}

DateRule = Callable[[str, date], Optional[date]]

_ISO = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[T\s].*)?$")
_SLASH = re.compile(r"^(\d{1,2})/(\d{1,2})(?:/(\d{2}|\d{4}))?$")
_MONTH_NAME = re.compile(
    r"^(?:(?:mon|tue|wed|thu|fri|sat|sun)[a-z]*\.?,?\s+)?"
    r"([a-z]{3,9})\.?\s+(\d{1,2})(?:st|nd|rd|th)?(?:,?\s+(\d{4}))?$",
    re.IGNORECASE,
)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


# =============================================================================
# DATE RULES
# =============================================================================

def iso_date_rule(raw: str, today: date) -> Optional[date]:
    m = _ISO.match(raw)
    if not m:
        return None
    return _safe_date(int(m.group(1)), int(m.group(2)), int(m.group(3)))


def slash_date_rule(raw: str, today: date) -> Optional[date]:
    m = _SLASH.match(raw)
    if not m:
        return None
    year = today.year
    if m.group(3):
        year = int(m.group(3))
        if year < 100:
            year += 2000
    return _safe_date(year, int(m.group(1)), int(m.group(2)))


def month_name_rule(raw: str, today: date) -> Optional[date]:
    m = _MONTH_NAME.match(raw)
    if not m:
        return None
    name = m.group(1).lower()
    month = MONTHS.get(name[:4]) or MONTHS.get(name[:3])
    if month is None:
        return None
    year = int(m.group(3)) if m.group(3) else today.year
    return _safe_date(year, month, int(m.group(2)))


PICK_DATE_RULES: List[DateRule] = [
    iso_date_rule,
    slash_date_rule,
    month_name_rule,
]


def parse_pick_date(raw: Optional[str], today: Optional[date] = None) -> Optional[date]:
    """
    Parse a raw pick date into a civil date.

    Args:
        raw: Date string as the source published it
        today: ET date used for "TODAY" and for missing years (defaults to today ET)

    Returns:
        date, or None when empty or unparseable
    """
    text = " ".join((raw or "").split())
    if not text:
        return None

    if today is None:
        today = today_et()

    if text.upper() == TODAY_TOKEN:
        return today

    for rule in PICK_DATE_RULES:
        parsed = rule(text, today)
        if parsed is not None:
            return parsed

    logger.debug("Unparseable pick date %r", raw)
    return None


def is_today_pick(raw: Optional[str], today: Optional[date] = None) -> bool:
    """
    True only when the pick is dated today in Eastern time.

    Example:
        >>> is_today_pick("TODAY")
        True
        >>> is_today_pick("")
        False
        >>> is_today_pick("10/18", today=date(2026, 10, 19))
        False
    """
    if today is None:
        today = today_et()
    parsed = parse_pick_date(raw, today)
    return parsed is not None and parsed == today
