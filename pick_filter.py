"""
pick_filter.py - Eligibility Filter Layer
Version: 2.0

Runs AFTER raw picks are normalized and BEFORE aggregation to enforce:
- Dated today in Eastern time ("TODAY" passes, empty never does)
- Sport on the supported allow-list and not on the excluded deny-list
- Sport in season on today's date
- Optional: team on today's schedule (fail-open)

Every step returns (kept, rejected). A rejection carries a reason code and
is never an error; it exists for debugging output only.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, List, Mapping, Optional, Set, Tuple
from collections import defaultdict
import logging
import re

from core.sports import is_college_sport, is_excluded_sport, is_supported_sport
from core.time_et import today_et
from pick_schema import NormalizedPick
from sport_seasons import is_in_season
from time_filters import is_today_pick

logger = logging.getLogger("pick_filter")

# =============================================================================
# CONFIGURATION
# =============================================================================

# College schedules with fewer entries than this are too sparse to reject on
COLLEGE_MIN_SCHEDULE_ENTRIES = 20


class RejectReason(str, Enum):
    NO_DATE = "NO_DATE"
    NOT_TODAY = "NOT_TODAY"
    UNSUPPORTED_SPORT = "UNSUPPORTED_SPORT"
    EXCLUDED_SPORT = "EXCLUDED_SPORT"
    OUT_OF_SEASON = "OUT_OF_SEASON"
    TEAM_NOT_PLAYING = "TEAM_NOT_PLAYING"


@dataclass(frozen=True)
class RejectedPick:
    pick: NormalizedPick
    reason: RejectReason

    def to_dict(self) -> dict:
        return {
            "id": self.pick.id,
            "capper": self.pick.capper,
            "team": self.pick.standardized_team,
            "sport": self.pick.sport,
            "date": self.pick.date,
            "reason": self.reason.value,
        }


FilterResult = Tuple[List[NormalizedPick], List[RejectedPick]]


def check_eligibility(pick: NormalizedPick, today: date) -> Optional[RejectReason]:
    """Reason the pick is ineligible today, or None when it may be aggregated."""
    if not (pick.date or "").strip():
        return RejectReason.NO_DATE
    if not is_today_pick(pick.date, today):
        return RejectReason.NOT_TODAY
    if is_excluded_sport(pick.sport):
        return RejectReason.EXCLUDED_SPORT
    if not is_supported_sport(pick.sport):
        return RejectReason.UNSUPPORTED_SPORT
    if not is_in_season(pick.sport, today):
        return RejectReason.OUT_OF_SEASON
    return None


def filter_eligible_picks(
    picks: List[NormalizedPick],
    today: Optional[date] = None,
) -> FilterResult:
    """
    Keep picks dated today for a supported, in-season sport.

    Args:
        picks: Normalized picks in any order
        today: ET civil date (defaults to today ET)

    Returns:
        (kept, rejected), kept in input order
    """
    if today is None:
        today = today_et()

    kept: List[NormalizedPick] = []
    rejected: List[RejectedPick] = []
    for pick in picks:
        reason = check_eligibility(pick, today)
        if reason is None:
            kept.append(pick)
        else:
            logger.debug(f"Rejecting {pick.id} ({pick.sport}, {pick.date!r}): {reason.value}")
            rejected.append(RejectedPick(pick, reason))

    logger.info(
        f"Eligibility filter ({today.isoformat()}): {len(picks)} -> {len(kept)} picks "
        f"({len(rejected)} rejected)"
    )
    return kept, rejected


# =============================================================================
# SCHEDULE FILTER (secondary, fail-open)
# =============================================================================

def schedule_key(name: str) -> str:
    """Comparison form for schedule entries: lowercase alphanumerics only."""
    return re.sub(r"[^a-z0-9]", "", (name or "").lower())


def filter_to_scheduled_teams(
    picks: List[NormalizedPick],
    schedule: Optional[Mapping[str, Set[str]]],
) -> FilterResult:
    """
    Drop picks whose team is not playing today, when the schedule can tell.

    Passes everything through when the snapshot is missing or empty. A sport
    absent from the snapshot (or with no entries) passes, and so does a college
    sport whose schedule has fewer than COLLEGE_MIN_SCHEDULE_ENTRIES entries.
    """
    if not schedule or not any(schedule.values()):
        logger.warning("No schedule snapshot available, passing all picks through")
        return list(picks), []

    keyed: Dict[str, Set[str]] = {
        sport.upper(): {schedule_key(t) for t in teams if t}
        for sport, teams in schedule.items()
    }

    kept: List[NormalizedPick] = []
    rejected: List[RejectedPick] = []
    for pick in picks:
        teams = keyed.get(pick.sport.upper())
        if not teams:
            kept.append(pick)
            continue
        if is_college_sport(pick.sport) and len(teams) < COLLEGE_MIN_SCHEDULE_ENTRIES:
            kept.append(pick)
            continue
        if schedule_key(pick.standardized_team) in teams or schedule_key(pick.team) in teams:
            kept.append(pick)
            continue
        logger.debug(f"Rejecting {pick.standardized_team} ({pick.sport}) - not in today's schedule")
        rejected.append(RejectedPick(pick, RejectReason.TEAM_NOT_PLAYING))

    logger.info(
        f"Schedule filter: {len(picks)} -> {len(kept)} picks ({len(rejected)} filtered)"
    )
    return kept, rejected


def get_filter_stats(
    kept: List[NormalizedPick],
    rejected: List[RejectedPick],
) -> Dict[str, object]:
    """
    Counts by rejection reason and by surviving sport.
    Useful for debugging and transparency.
    """
    by_reason: Dict[str, int] = defaultdict(int)
    for r in rejected:
        by_reason[r.reason.value] += 1

    by_sport: Dict[str, int] = defaultdict(int)
    for p in kept:
        by_sport[p.sport] += 1

    return {
        "kept": len(kept),
        "rejected": len(rejected),
        "by_reason": dict(by_reason),
        "by_sport": dict(by_sport),
    }
