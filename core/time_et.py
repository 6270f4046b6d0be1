"""
TIME_ET.PY - Single Source of Truth for ET Timezone Handling

RULES:
1. Server clock is UTC
2. All calendar logic enforces ET (America/New_York)
3. "Today" is a civil date derived by converting an aware UTC instant to ET,
   never by offsetting UTC hours by hand
4. Uses zoneinfo ONLY - no pytz

CANONICAL ET DAY WINDOW (HARD RULE):
    Start: 00:00:00 America/New_York (midnight ET) - inclusive
    End:   00:00:00 America/New_York next day (midnight, exclusive)
    Interval: [start_et, end_et)

Usage:
    from core.time_et import now_et, today_et, yesterday_et, to_et_date

    today = today_et()                          # date(2026, 1, 28)
    game_day = to_et_date("2026-01-29T00:30Z")  # date(2026, 1, 28)
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Tuple, Optional, Union
from zoneinfo import ZoneInfo
import logging

logger = logging.getLogger(__name__)

# America/New_York timezone (single source of truth)
ET = ZoneInfo("America/New_York")


def now_et(now_utc: Optional[datetime] = None) -> datetime:
    """
    Get current datetime in ET timezone.

    Server clock is UTC, we convert to ET.

    Args:
        now_utc: Optional aware instant to convert instead of the wall clock.

    Returns:
        datetime in America/New_York timezone
    """
    if now_utc is None:
        now_utc = datetime.now(timezone.utc)
    elif now_utc.tzinfo is None:
        now_utc = now_utc.replace(tzinfo=timezone.utc)
    return now_utc.astimezone(ET)


def today_et(now_utc: Optional[datetime] = None) -> date:
    """Today's civil date in Eastern time."""
    return now_et(now_utc).date()


def yesterday_et(now_utc: Optional[datetime] = None) -> date:
    """Yesterday's civil date in Eastern time (the grading day)."""
    return today_et(now_utc) - timedelta(days=1)


def et_day_bounds(day: Optional[date] = None) -> Tuple[datetime, datetime]:
    """
    Get ET day bounds [start, end).

    Args:
        day: ET civil date. If None, uses today in ET.

    Returns:
        Tuple of (start_et, end_et); end is the exclusive next midnight.
    """
    if day is None:
        day = today_et()
    start_et = datetime.combine(day, time(0, 0, 0), tzinfo=ET)
    end_et = datetime.combine(day + timedelta(days=1), time(0, 0, 0), tzinfo=ET)
    return start_et, end_et


def parse_event_time(event_time: Union[str, datetime]) -> Optional[datetime]:
    """
    Parse event time to timezone-aware datetime in ET.

    Args:
        event_time: ISO datetime string or datetime object

    Returns:
        datetime in ET timezone, or None if parsing fails

    Example:
        >>> parse_event_time("2026-01-28T19:30:00Z")
        datetime(2026, 1, 28, 14, 30, 0, tzinfo=ZoneInfo('America/New_York'))
    """
    if not event_time:
        return None

    try:
        if isinstance(event_time, datetime):
            event_dt = event_time
        else:
            # ESPN sends "2026-01-28T00:30Z" (no seconds); fromisoformat
            # on older interpreters rejects the bare 'Z'
            if event_time.endswith('Z'):
                event_time = event_time[:-1] + '+00:00'
            event_dt = datetime.fromisoformat(event_time)

        # If naive, assume UTC
        if event_dt.tzinfo is None:
            event_dt = event_dt.replace(tzinfo=timezone.utc)

        return event_dt.astimezone(ET)

    except (ValueError, AttributeError, TypeError) as e:
        logger.warning(f"Failed to parse event time '{event_time}': {e}")
        return None


def to_et_date(event_time: Union[str, datetime]) -> Optional[date]:
    """ET civil date of an instant, or None when unparseable."""
    event_et = parse_event_time(event_time)
    return event_et.date() if event_et else None


def is_in_et_day(event_time: Union[str, datetime], day: Optional[date] = None) -> bool:
    """
    Check if event time falls within the ET day [start, end).

    Example:
        >>> is_in_et_day("2026-01-28T19:30:00Z", date(2026, 1, 28))
        True
        >>> is_in_et_day("2026-01-29T05:00:00Z", date(2026, 1, 28))
        False
    """
    event_et = parse_event_time(event_time)
    if event_et is None:
        return False

    start, end = et_day_bounds(day)
    return start <= event_et < end


__all__ = [
    'ET',
    'now_et',
    'today_et',
    'yesterday_et',
    'et_day_bounds',
    'parse_event_time',
    'to_et_date',
    'is_in_et_day',
]
