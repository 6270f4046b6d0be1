"""
SPORTS.PY - Single Source of Truth for Sports Constants

This module provides:
1. Sport enum for type-safe sport references
2. SUPPORTED_SPORTS allow-list (sports with a scores/schedule provider)
3. EXCLUDED_SPORTS deny-list (never eligible, even if mapped by accident)
4. SPORT_ALIASES raw league label -> canonical code
5. ESPN scoreboard path per sport

Usage:
    from core.sports import Sport, SUPPORTED_SPORTS_SET, ESPN_SPORTS

    sport = Sport.NBA
    path = ESPN_SPORTS[Sport.NBA]  # "basketball/nba"
"""

from enum import Enum
from typing import List, Dict, Set


class Sport(str, Enum):
    """
    Canonical sports enum - single source of truth.

    Inherits from str for JSON serialization compatibility.
    Use Sport.NBA.value to get "NBA" string.
    """
    NFL = "NFL"
    NBA = "NBA"
    MLB = "MLB"
    NHL = "NHL"
    NCAAF = "NCAAF"
    NCAAB = "NCAAB"
    WNBA = "WNBA"


# List of all supported sports (for iteration)
SUPPORTED_SPORTS: List[str] = [s.value for s in Sport]

# Set version for O(1) membership testing
SUPPORTED_SPORTS_SET: Set[str] = {s.value for s in Sport}

# Sports we never publish consensus for (no scores provider, no season model)
EXCLUDED_SPORTS: Set[str] = {"SOCCER", "TENNIS", "GOLF", "MMA", "UFC", "BOXING", "ESPORTS"}

# College sports: 350+ schools, schedule data is too sparse to reject on
COLLEGE_SPORTS: Set[str] = {Sport.NCAAB.value, Sport.NCAAF.value}


# Raw league label -> canonical code. Keys are uppercase with single spaces.
SPORT_ALIASES: Dict[str, str] = {
    # Pro leagues
    "NFL": "NFL",
    "PRO FOOTBALL": "NFL",
    "NBA": "NBA",
    "PRO BASKETBALL": "NBA",
    "MLB": "MLB",
    "BASEBALL": "MLB",
    "NHL": "NHL",
    "HOCKEY": "NHL",
    "WNBA": "WNBA",

    # College basketball
    "NCAAB": "NCAAB",
    "NCAA-B": "NCAAB",
    "NCAA B": "NCAAB",
    "NCAAM": "NCAAB",
    "NCAA-M": "NCAAB",
    "CBB": "NCAAB",
    "NCAA BASKETBALL": "NCAAB",
    "COLLEGE BASKETBALL": "NCAAB",
    "MENS COLLEGE BASKETBALL": "NCAAB",

    # College football
    "NCAAF": "NCAAF",
    "NCAA-F": "NCAAF",
    "NCAA F": "NCAAF",
    "CFB": "NCAAF",
    "NCAA FOOTBALL": "NCAAF",
    "COLLEGE FOOTBALL": "NCAAF",

    # Excluded families (mapped so the deny-list catches every spelling)
    "SOCCER": "SOCCER",
    "FUTBOL": "SOCCER",
    "EPL": "SOCCER",
    "MLS": "SOCCER",
    "UCL": "SOCCER",
    "LA LIGA": "SOCCER",
    "SERIE A": "SOCCER",
    "BUNDESLIGA": "SOCCER",
    "TENNIS": "TENNIS",
    "ATP": "TENNIS",
    "WTA": "TENNIS",
    "GOLF": "GOLF",
    "PGA": "GOLF",
    "LIV": "GOLF",
    "UFC": "MMA",
    "MMA": "MMA",
    "BOXING": "BOXING",
    "ESPORTS": "ESPORTS",
    "E-SPORTS": "ESPORTS",
    "CSGO": "ESPORTS",
    "LOL": "ESPORTS",
}


# ESPN API sport identifiers (scoreboard path segment)
ESPN_SPORTS: Dict[Sport, str] = {
    Sport.NFL: "football/nfl",
    Sport.NBA: "basketball/nba",
    Sport.MLB: "baseball/mlb",
    Sport.NHL: "hockey/nhl",
    Sport.NCAAF: "football/college-football",
    Sport.NCAAB: "basketball/mens-college-basketball",
    Sport.WNBA: "basketball/wnba",
}


def is_supported_sport(sport: str) -> bool:
    """
    Check if a canonical sport code is on the allow-list and not excluded.

    Example:
        >>> is_supported_sport("NBA")
        True
        >>> is_supported_sport("SOCCER")
        False
    """
    code = (sport or "").upper()
    return code in SUPPORTED_SPORTS_SET and code not in EXCLUDED_SPORTS


def is_excluded_sport(sport: str) -> bool:
    return (sport or "").upper() in EXCLUDED_SPORTS


def is_college_sport(sport: str) -> bool:
    return (sport or "").upper() in COLLEGE_SPORTS


# Export list
__all__ = [
    'Sport',
    'SUPPORTED_SPORTS',
    'SUPPORTED_SPORTS_SET',
    'EXCLUDED_SPORTS',
    'COLLEGE_SPORTS',
    'SPORT_ALIASES',
    'ESPN_SPORTS',
    'is_supported_sport',
    'is_excluded_sport',
    'is_college_sport',
]
