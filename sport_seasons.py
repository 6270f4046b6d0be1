"""
Sport Season Gating Module
==========================
Month-range season enforcement for consensus eligibility

Rules:
- A pick for an out-of-season sport is dropped, even when dated today
- Ranges are whole months, inclusive at both ends
- A range whose end month is before its start month wraps across the new year
- An unknown sport is never in season
"""

from datetime import date
from typing import Dict, List, Optional, Tuple
from loguru import logger

from core.time_et import today_et


# (start_month, end_month), inclusive
SEASONS: Dict[str, Tuple[int, int]] = {
    "NFL": (9, 2),      # Sep -> Feb (spans year)
    "NBA": (10, 6),     # Oct -> Jun (spans year)
    "NHL": (10, 6),     # Oct -> Jun (spans year)
    "MLB": (3, 10),     # Mar -> Oct
    "WNBA": (5, 9),     # May -> Sep
    "NCAAF": (8, 1),    # Aug -> Jan (spans year)
    "NCAAB": (11, 4),   # Nov -> Apr (spans year)
}

# Friendly names for logging
SPORT_NAMES = {
    "NFL": "NFL Football",
    "NBA": "NBA Basketball",
    "NHL": "NHL Hockey",
    "MLB": "MLB Baseball",
    "WNBA": "WNBA Basketball",
    "NCAAF": "College Football",
    "NCAAB": "College Basketball",
}

MONTH_ABBR = ["", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def month_in_range(month: int, start: int, end: int) -> bool:
    """Inclusive month range test, wrapping when end < start."""
    if start <= end:
        return start <= month <= end
    return month >= start or month <= end


def is_in_season(sport: str, today: Optional[date] = None) -> bool:
    """
    Check if a sport is in season on the given Eastern calendar date.

    Examples:
        >>> is_in_season("NFL", date(2026, 1, 15))  # Mid-January
        True
        >>> is_in_season("MLB", date(2026, 1, 15))  # Baseball in January
        False
        >>> is_in_season("NCAAB", date(2026, 3, 20))
        True
    """
    sport = (sport or "").upper()

    if today is None:
        today = today_et()

    if sport not in SEASONS:
        logger.warning(f"Unknown sport '{sport}' - treating as out of season")
        return False

    start, end = SEASONS[sport]
    return month_in_range(today.month, start, end)


def get_in_season_sports(today: Optional[date] = None) -> List[str]:
    """Sport codes in season on the given date."""
    if today is None:
        today = today_et()

    return [sport for sport in SEASONS if is_in_season(sport, today)]


def get_season_info(sport: str, today: Optional[date] = None) -> dict:
    """
    Season status for a sport.

    Returns:
        Dict with in_season flag, the month window and a display message
    """
    sport = (sport or "").upper()

    if today is None:
        today = today_et()

    if sport not in SEASONS:
        return {
            "sport": sport,
            "valid": False,
            "in_season": False,
            "message": f"Unknown sport: {sport}"
        }

    start, end = SEASONS[sport]
    in_season = is_in_season(sport, today)
    name = SPORT_NAMES.get(sport, sport)

    return {
        "sport": sport,
        "sport_name": name,
        "valid": True,
        "in_season": in_season,
        "season_window": f"{MONTH_ABBR[start]}-{MONTH_ABBR[end]}",
        "spans_new_year": end < start,
        "message": f"{name} is {'IN SEASON' if in_season else 'OFF-SEASON'}",
        "checked_date": today.isoformat()
    }
