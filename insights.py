"""
insights.py - Presentation aggregates over a consensus run

Everything here is derived from build_consensus() output (and the eligible
picks it was built from). No new data, no network, no state.

Sections:
- fire tiers        consensus picks grouped by tiering.tier_from_count
- sport stacks      matchups carrying 2+ consensus picks
- fade the public   capperCount >= 7 (contrarian candidates)
- most active       analysts by eligible pick count
- most common       raw bet frequency before consensus
- trends            short notes (dominant sport, super consensus, dogs, totals)
"""

import logging
from collections import defaultdict
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Tuple

from pick_schema import BetType, ConsensusPick, NormalizedPick
from tiering import TIER_ORDER, get_tier_config, is_fire, tier_from_count

logger = logging.getLogger(__name__)

CONTRARIAN_MIN_CAPPERS = 7
DOMINANT_SPORT_MIN = 5
UNDERDOG_MIN_PICKS = 2
TOTALS_TREND_MIN = 3
TOTALS_TREND_RATIO = 1.5
STACK_MIN_PICKS = 2
LIST_LIMIT = 10


@dataclass
class Trend:
    type: str  # hot | interesting
    title: str
    description: str
    relevant_picks: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["relevantPicks"] = d.pop("relevant_picks")
        return d


def fire_tiers(consensus: List[ConsensusPick]) -> Dict[str, List[ConsensusPick]]:
    """Consensus picks per fire tier, hottest tier first, empty tiers omitted."""
    tiers: Dict[str, List[ConsensusPick]] = {}
    for tier in TIER_ORDER:
        members = [p for p in consensus if tier_from_count(p.capper_count) == tier]
        if members:
            tiers[tier] = members
    return tiers


def sport_stacks(consensus: List[ConsensusPick]) -> List[Dict[str, Any]]:
    """Games where analysts agree on two or more different bets."""
    games: Dict[Tuple[str, str], List[ConsensusPick]] = defaultdict(list)
    for pick in consensus:
        if pick.matchup:
            games[(pick.sport, pick.matchup)].append(pick)

    stacks = [
        {
            "sport": sport,
            "matchup": matchup,
            "bets": [p.bet for p in picks],
            "totalCappers": sum(p.capper_count for p in picks),
        }
        for (sport, matchup), picks in games.items()
        if len(picks) >= STACK_MIN_PICKS
    ]
    stacks.sort(key=lambda s: (-s["totalCappers"], s["sport"], s["matchup"]))
    return stacks


def contrarian_candidates(consensus: List[ConsensusPick]) -> List[ConsensusPick]:
    """Heavily agreed-on bets a contrarian would consider fading."""
    return [p for p in consensus if p.capper_count >= CONTRARIAN_MIN_CAPPERS]


def most_active_cappers(picks: List[NormalizedPick], limit: int = LIST_LIMIT) -> List[Dict[str, Any]]:
    counts: Dict[str, int] = defaultdict(int)
    sports: Dict[str, set] = defaultdict(set)
    for pick in picks:
        counts[pick.capper] += 1
        sports[pick.capper].add(pick.sport)

    ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))[:limit]
    return [
        {"capper": capper, "picks": n, "sports": sorted(sports[capper])}
        for capper, n in ranked
    ]


def most_common_bets(picks: List[NormalizedPick], limit: int = LIST_LIMIT) -> List[Dict[str, Any]]:
    """
    Raw bet frequency before line tolerance grouping.

    frequency counts every pick (an analyst repeating a bet counts twice);
    capperCount counts distinct analysts.
    """
    groups: Dict[Tuple[str, str, BetType, str], Dict[str, Any]] = {}
    for pick in picks:
        key = (pick.sport, pick.standardized_team, pick.bet_type, pick.line or "")
        entry = groups.setdefault(key, {"frequency": 0, "cappers": set(), "texts": set(), "matchups": set()})
        entry["frequency"] += 1
        entry["cappers"].add(pick.capper)
        entry["texts"].add(pick.original_text)
        if pick.matchup:
            entry["matchups"].add(pick.matchup)

    rows = []
    for (sport, team, bet_type, line), entry in groups.items():
        count = len(entry["cappers"])
        rows.append({
            "bet": min(entry["texts"]),
            "team": team,
            "sport": sport,
            "betType": bet_type.value,
            "line": line or None,
            "matchup": min(entry["matchups"]) if entry["matchups"] else "",
            "frequency": entry["frequency"],
            "capperCount": count,
            "isFire": is_fire(count),
        })
    rows.sort(key=lambda r: (-r["frequency"], -r["capperCount"], r["sport"], r["bet"]))
    return rows[:limit]


def generate_trends(consensus: List[ConsensusPick]) -> List[Trend]:
    trends: List[Trend] = []

    by_sport: Dict[str, List[ConsensusPick]] = defaultdict(list)
    for pick in consensus:
        by_sport[pick.sport].append(pick)
    if by_sport:
        sport, picks = sorted(by_sport.items(), key=lambda kv: (-len(kv[1]), kv[0]))[0]
        if len(picks) >= DOMINANT_SPORT_MIN:
            trends.append(Trend(
                type="hot",
                title=f"{sport} Dominates Today",
                description=f"{len(picks)} consensus picks in {sport}.",
                relevant_picks=[p.bet for p in picks[:3]],
            ))

    super_consensus = contrarian_candidates(consensus)
    if super_consensus:
        trends.append(Trend(
            type="hot",
            title="Super Consensus Picks",
            description=f"{len(super_consensus)} pick(s) with {CONTRARIAN_MIN_CAPPERS}+ analysts agreeing.",
            relevant_picks=[f"{p.bet} ({p.capper_count})" for p in super_consensus],
        ))

    dogs = [p for p in consensus if p.bet_type == BetType.SPREAD and _positive(p.line)]
    if len(dogs) >= UNDERDOG_MIN_PICKS:
        trends.append(Trend(
            type="interesting",
            title="Underdog Angle",
            description=f"{len(dogs)} consensus picks on underdogs getting points.",
            relevant_picks=[p.bet for p in dogs[:3]],
        ))

    overs = [p for p in consensus if p.bet_type == BetType.OVER]
    unders = [p for p in consensus if p.bet_type == BetType.UNDER]
    if len(overs) >= TOTALS_TREND_MIN and len(overs) > len(unders) * TOTALS_TREND_RATIO:
        trends.append(Trend(
            type="hot",
            title="Over Trend",
            description=f"{len(overs)} over picks vs {len(unders)} unders.",
            relevant_picks=[p.bet for p in overs[:3]],
        ))
    elif len(unders) >= TOTALS_TREND_MIN and len(unders) > len(overs) * TOTALS_TREND_RATIO:
        trends.append(Trend(
            type="interesting",
            title="Under Trend",
            description=f"{len(unders)} under picks vs {len(overs)} overs.",
            relevant_picks=[p.bet for p in unders[:3]],
        ))

    return trends


def _positive(line) -> bool:
    try:
        return float(line) > 0
    except (TypeError, ValueError):
        return False


def build_insights(consensus: List[ConsensusPick], picks: List[NormalizedPick]) -> Dict[str, Any]:
    """Serializable insights block for a consensus report."""
    tiers = fire_tiers(consensus)
    logger.debug("Insights: %d consensus, %d picks, tiers=%s",
                 len(consensus), len(picks), {t: len(m) for t, m in tiers.items()})
    return {
        "fireTiers": {
            tier: {
                "badge": get_tier_config(tier)["badge"],
                "count": len(members),
                "bets": [p.bet for p in members],
            }
            for tier, members in tiers.items()
        },
        "sportStacks": sport_stacks(consensus),
        "fadeThePublic": [p.to_dict() for p in contrarian_candidates(consensus)],
        "mostActiveCappers": most_active_cappers(picks),
        "mostCommonBets": most_common_bets(picks),
        "trends": [t.to_dict() for t in generate_trends(consensus)],
    }
