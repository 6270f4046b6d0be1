"""
CONSENSUS_ENGINE.PY - Agreement counting across independent analysts
=====================================================================

Pipeline (every stage is a pure function over an in-memory collection):

    RawPick --normalize_picks--> NormalizedPick
            --filter_eligible_picks / filter_to_scheduled_teams--> eligible
            --build_consensus--> ConsensusPick (capperCount >= 2)

BUCKET IDENTITY:
    (sport, subject key, bet type, rounded line)

    SPREAD  line >= 0 floors, line < 0 ceils    (+3/+3.5 -> +3, -7/-7.5 -> -7)
    TOTALS  line rounds half-up to a multiple of 2 (49 -> 50, 50 -> 50, 51 -> 52)
            subject key is both participants, sorted, joined with "/"
    others  subject key is the standardized team

A bucket holds a SET of canonical analysts, so one analyst can add at most one
vote to a bucket no matter how many of their picks map into it. Buckets below
the minimum (2) are discarded.

Output is deterministic: sorted by capperCount descending, then bucket id;
analysts sorted; representative matchup is the smallest contributing one.
Aggregating a shuffled input yields the identical result.
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Set

from bet_parser import UNKNOWN_SUBJECT, extract_team, parse_bet_type, split_matchup
from core.sports import Sport
from core.time_et import today_et
from env_config import Config
from identity.name_normalizer import (
    identify_sport,
    normalize_capper_name,
    normalize_sport,
    standardize_team_name,
)
from insights import build_insights
from pick_filter import filter_eligible_picks, filter_to_scheduled_teams, get_filter_stats
from pick_schema import TOTAL_BET_TYPES, BetType, ConsensusPick, NormalizedPick, RawPick
from tiering import confidence_from_count, is_fire

logger = logging.getLogger(__name__)

MIN_CONSENSUS_CAPPERS = 2
TOP_OVERALL_LIMIT = 5
FADE_THE_PUBLIC_MIN = 7
FADE_THE_PUBLIC_LIMIT = 5
UNKNOWN_SPORT = "OTHER"


# =============================================================================
# NORMALIZATION
# =============================================================================

def resolve_sport(raw: RawPick, subject: str) -> str:
    """Canonical sport from the league label, else inferred from team names."""
    sport = normalize_sport(raw.league)
    if sport:
        return sport
    return identify_sport(subject) or identify_sport(raw.matchup) or UNKNOWN_SPORT


def normalize_pick(raw: RawPick, index: int) -> NormalizedPick:
    """Derive canonical fields for one raw pick. Never raises."""
    team = extract_team(raw.text, raw.matchup)
    sport = resolve_sport(raw, team)
    bet_type, line = parse_bet_type(raw.text)

    return NormalizedPick(
        id=f"{raw.source}-{index}",
        source=raw.source,
        capper=normalize_capper_name(raw.capper),
        team=team,
        standardized_team=standardize_team_name(team, sport),
        bet_type=bet_type,
        line=line,
        sport=sport,
        matchup=raw.matchup,
        original_text=raw.text,
        date=raw.date,
    )


def normalize_picks(raw_picks: List[RawPick]) -> List[NormalizedPick]:
    return [normalize_pick(raw, i) for i, raw in enumerate(raw_picks)]


# =============================================================================
# LINE ROUNDING
# =============================================================================

def round_spread_line(value: float) -> int:
    """Non-negative lines floor, negative lines ceil (toward zero)."""
    return math.floor(value) if value >= 0 else math.ceil(value)


def round_total_line(value: float) -> int:
    """
    Nearest multiple of 2, halves rounding up.

    Example:
        >>> round_total_line(49), round_total_line(50.5), round_total_line(51)
        (50, 50, 52)
    """
    return 2 * math.floor(value / 2 + 0.5)


def format_spread(value: int) -> str:
    return f"{value:+d}"


def _parse_line(line: Optional[str]) -> Optional[float]:
    if line is None:
        return None
    try:
        return float(line)
    except ValueError:
        return None


# =============================================================================
# BUCKETS
# =============================================================================

class BucketKey(NamedTuple):
    sport: str
    subject: str
    bet_type: BetType
    line: Optional[str]

    @property
    def id(self) -> str:
        key = f"{self.sport}:{self.subject}_{self.bet_type.value}"
        if self.line is not None:
            key += f"_{self.line}"
        return key


@dataclass
class _Bucket:
    cappers: Set[str] = field(default_factory=set)
    matchups: Set[str] = field(default_factory=set)


def totals_subject_key(pick: NormalizedPick) -> str:
    """
    Both participants of the game, sorted and joined with "/".

    The pick's own side comes first; the second participant is pulled from
    the matchup when the pick text names only one side.
    """
    participants: List[str] = []
    for side in split_matchup(pick.team) + split_matchup(pick.matchup):
        name = standardize_team_name(side, pick.sport)
        if name and name != UNKNOWN_SUBJECT and name not in participants:
            participants.append(name)
        if len(participants) == 2:
            break
    if not participants:
        return pick.standardized_team or UNKNOWN_SUBJECT
    return "/".join(sorted(participants))


def bucket_key(pick: NormalizedPick) -> BucketKey:
    """Grouping identity deciding whether two picks are the same wager."""
    value = _parse_line(pick.line)

    if pick.bet_type == BetType.SPREAD and value is not None:
        return BucketKey(pick.sport, pick.standardized_team, pick.bet_type,
                         format_spread(round_spread_line(value)))

    if pick.bet_type in TOTAL_BET_TYPES:
        line = str(round_total_line(value)) if value is not None else None
        return BucketKey(pick.sport, totals_subject_key(pick), pick.bet_type, line)

    return BucketKey(pick.sport, pick.standardized_team, pick.bet_type, None)


def format_bet(key: BucketKey) -> str:
    """
    Human-readable bet string.

    "Yankees ML", "Yankees F5 ML", "Celtics 1H ML", "Chiefs -3",
    "Celtics/Lakers Over 50", "LeBron James Prop"
    """
    if key.bet_type == BetType.MONEYLINE:
        return f"{key.subject} ML"
    if key.bet_type == BetType.FIRST_HALF_MONEYLINE:
        marker = "F5" if key.sport == Sport.MLB.value else "1H"
        return f"{key.subject} {marker} ML"
    if key.bet_type == BetType.SPREAD:
        return f"{key.subject} {key.line}" if key.line else f"{key.subject} Spread"
    if key.bet_type in TOTAL_BET_TYPES:
        side = "Over" if key.bet_type == BetType.OVER else "Under"
        return f"{key.subject} {side} {key.line}" if key.line else f"{key.subject} {side}"
    return f"{key.subject} Prop"


# =============================================================================
# AGGREGATION
# =============================================================================

def build_consensus(
    picks: List[NormalizedPick],
    min_cappers: int = MIN_CONSENSUS_CAPPERS,
) -> List[ConsensusPick]:
    """
    Group eligible picks into bet buckets and keep those with enough analysts.

    Args:
        picks: Eligible normalized picks, any order
        min_cappers: Exposure floor, never below 2

    Returns:
        ConsensusPicks sorted by capperCount descending, then id
    """
    floor = max(MIN_CONSENSUS_CAPPERS, min_cappers)
    buckets: Dict[BucketKey, _Bucket] = defaultdict(_Bucket)

    for pick in picks:
        bucket = buckets[bucket_key(pick)]
        bucket.cappers.add(pick.capper)
        if pick.matchup:
            bucket.matchups.add(pick.matchup)

    consensus: List[ConsensusPick] = []
    for key, bucket in buckets.items():
        count = len(bucket.cappers)
        if count < floor:
            continue
        consensus.append(ConsensusPick(
            id=key.id,
            bet=format_bet(key),
            subject=key.subject,
            sport=key.sport,
            matchup=min(bucket.matchups) if bucket.matchups else "",
            bet_type=key.bet_type,
            line=key.line,
            capper_count=count,
            cappers=tuple(sorted(bucket.cappers)),
            is_fire=is_fire(count),
            confidence=confidence_from_count(count),
        ))

    consensus.sort(key=lambda c: (-c.capper_count, c.id))
    logger.info(
        f"Consensus built: {len(picks)} picks -> {len(buckets)} buckets -> "
        f"{len(consensus)} consensus (min {floor})"
    )
    return consensus


def format_consensus_output(consensus: List[ConsensusPick]) -> Dict[str, Any]:
    """
    Presentation groupings over an already sorted consensus list.

    topOverall: first 5; bySport: sport -> picks in the same order;
    fadeThePublic: capperCount >= 7, first 5; firePicks: every fire pick.
    """
    by_sport: Dict[str, List[ConsensusPick]] = {}
    for pick in consensus:
        by_sport.setdefault(pick.sport, []).append(pick)

    return {
        "topOverall": consensus[:TOP_OVERALL_LIMIT],
        "bySport": by_sport,
        "fadeThePublic": [p for p in consensus if p.capper_count >= FADE_THE_PUBLIC_MIN][:FADE_THE_PUBLIC_LIMIT],
        "firePicks": [p for p in consensus if p.is_fire],
    }


def group_picks_by_capper(picks: List[NormalizedPick]) -> Dict[str, List[NormalizedPick]]:
    """Eligible picks bucketed by canonical analyst, analysts in name order."""
    grouped: Dict[str, List[NormalizedPick]] = defaultdict(list)
    for pick in picks:
        grouped[pick.capper].append(pick)
    return {capper: grouped[capper] for capper in sorted(grouped)}


def _serialize_output(output: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "topOverall": [p.to_dict() for p in output["topOverall"]],
        "bySport": {s: [p.to_dict() for p in ps] for s, ps in output["bySport"].items()},
        "fadeThePublic": [p.to_dict() for p in output["fadeThePublic"]],
        "firePicks": [p.to_dict() for p in output["firePicks"]],
    }


def build_consensus_report(
    raw_picks: List[RawPick],
    today: Optional[date] = None,
    schedule: Optional[Mapping[str, Set[str]]] = None,
    sport: Optional[str] = None,
    min_cappers: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Run the whole forward pipeline and return a JSON-serializable report.

    Args:
        raw_picks: Picks from every source (parlays already split)
        today: ET civil date to aggregate for (defaults to today ET)
        schedule: Optional snapshot value, sport -> team names playing today
        sport: Restrict the report to one sport (any alias accepted)
        min_cappers: Exposure floor (defaults to Config.MIN_CAPPERS)
    """
    if today is None:
        today = today_et()
    floor = Config.MIN_CAPPERS if min_cappers is None else min_cappers

    normalized = normalize_picks(raw_picks)
    if sport:
        code = normalize_sport(sport)
        normalized = [p for p in normalized if p.sport == code]

    eligible, rejected = filter_eligible_picks(normalized, today)
    if schedule is not None:
        eligible, not_playing = filter_to_scheduled_teams(eligible, schedule)
        rejected = rejected + not_playing

    consensus = build_consensus(eligible, floor)
    output = format_consensus_output(consensus)
    by_capper = group_picks_by_capper(eligible)

    report = {
        "date": today.isoformat(),
        "engineVersion": Config.ENGINE_VERSION,
        "counts": {
            "raw": len(raw_picks),
            "normalized": len(normalized),
            "eligible": len(eligible),
            "cappers": len(by_capper),
            "consensus": len(consensus),
            "fire": len(output["firePicks"]),
        },
        "consensus": [p.to_dict() for p in consensus],
        **_serialize_output(output),
        "picksByCapper": {c: [p.to_dict() for p in ps] for c, ps in by_capper.items()},
        "filter": get_filter_stats(eligible, rejected),
        "insights": build_insights(consensus, eligible),
    }
    logger.info(
        f"Consensus report {report['date']}: {len(raw_picks)} raw, {len(eligible)} eligible, "
        f"{len(consensus)} consensus"
    )
    return report
