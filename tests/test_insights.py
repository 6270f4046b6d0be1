"""
Tests for the presentation aggregates over a consensus run.

Insights never add data: every number is recomputed from the consensus list
and the eligible picks it was built from.
"""

from insights import (
    CONTRARIAN_MIN_CAPPERS,
    build_insights,
    contrarian_candidates,
    fire_tiers,
    generate_trends,
    most_active_cappers,
    most_common_bets,
    sport_stacks,
)
from pick_schema import BetType, ConsensusPick


def cp(subject, count, sport="NFL", bet_type=BetType.MONEYLINE, line=None, matchup=""):
    bet = f"{subject} {line}" if line else f"{subject} ML"
    return ConsensusPick(
        id=f"{sport}:{subject}_{bet_type.value}" + (f"_{line}" if line else ""),
        bet=bet,
        subject=subject,
        sport=sport,
        matchup=matchup,
        bet_type=bet_type,
        line=line,
        capper_count=count,
        cappers=tuple(f"Analyst {i}" for i in range(count)),
        is_fire=count >= 3,
        confidence=min(count / 10, 1.0),
    )


class TestFireTiers:
    def test_grouped_hottest_first(self):
        consensus = [cp("Packers", 10), cp("Chiefs", 5), cp("Bills", 4), cp("Jets", 3), cp("Eagles", 2)]
        tiers = fire_tiers(consensus)
        assert list(tiers) == ["MAX_FIRE", "NUCLEAR", "HOT", "FIRE", "NONE"]
        assert [p.subject for p in tiers["HOT"]] == ["Bills"]

    def test_empty_tiers_omitted(self):
        assert list(fire_tiers([cp("Jets", 3)])) == ["FIRE"]


class TestSportStacks:
    def test_two_bets_same_game(self):
        consensus = [
            cp("Chiefs", 4, line="-3", bet_type=BetType.SPREAD, matchup="Raiders @ Chiefs"),
            cp("Raiders/Chiefs", 2, bet_type=BetType.OVER, line="46", matchup="Raiders @ Chiefs"),
            cp("Bills", 2, matchup="Bills vs Jets"),
        ]
        stacks = sport_stacks(consensus)
        assert len(stacks) == 1
        assert stacks[0]["matchup"] == "Raiders @ Chiefs"
        assert stacks[0]["totalCappers"] == 6


class TestContrarian:
    def test_threshold(self):
        consensus = [cp("Packers", CONTRARIAN_MIN_CAPPERS), cp("Chiefs", CONTRARIAN_MIN_CAPPERS - 1)]
        assert [p.subject for p in contrarian_candidates(consensus)] == ["Packers"]


class TestPickLists:
    def test_most_active(self, make_pick):
        picks = [
            make_pick("Chiefs -3", capper="Amy"),
            make_pick("Yankees ML", capper="Amy", league="MLB"),
            make_pick("Bills +3", capper="Zed"),
        ]
        active = most_active_cappers(picks)
        assert active[0] == {"capper": "Amy", "picks": 2, "sports": ["MLB", "NFL"]}
        assert active[1]["capper"] == "Zed"

    def test_most_common_counts_repeats(self, make_pick):
        picks = [
            make_pick("Chiefs -3", capper="Amy"),
            make_pick("Chiefs -3", capper="Amy"),
            make_pick("Chiefs -3", capper="Zed"),
            make_pick("Bills +3", capper="Zed"),
        ]
        rows = most_common_bets(picks)
        assert rows[0]["team"] == "Chiefs"
        assert rows[0]["frequency"] == 3
        assert rows[0]["capperCount"] == 2
        assert rows[0]["isFire"] is False


class TestTrends:
    def test_dominant_sport(self):
        consensus = [cp(f"Team {i}", 2, sport="NBA") for i in range(5)]
        titles = [t.title for t in generate_trends(consensus)]
        assert "NBA Dominates Today" in titles

    def test_super_consensus(self):
        titles = [t.title for t in generate_trends([cp("Packers", 8)])]
        assert "Super Consensus Picks" in titles

    def test_underdogs(self):
        consensus = [
            cp("Bills", 2, bet_type=BetType.SPREAD, line="+3"),
            cp("Jets", 2, bet_type=BetType.SPREAD, line="+7"),
        ]
        assert "Underdog Angle" in [t.title for t in generate_trends(consensus)]

    def test_over_trend(self):
        consensus = [cp(f"Game {i}", 2, bet_type=BetType.OVER, line="220") for i in range(3)]
        trend = [t for t in generate_trends(consensus) if t.title == "Over Trend"]
        assert trend
        assert trend[0].to_dict()["relevantPicks"]

    def test_no_trends_on_quiet_day(self):
        assert generate_trends([cp("Chiefs", 2)]) == []


class TestBuildInsights:
    def test_shape(self, make_pick):
        consensus = [cp("Packers", 7), cp("Chiefs", 3)]
        picks = [make_pick("Packers ML", capper="Amy")]
        insights = build_insights(consensus, picks)
        assert set(insights) == {
            "fireTiers", "sportStacks", "fadeThePublic",
            "mostActiveCappers", "mostCommonBets", "trends",
        }
        assert insights["fireTiers"]["NUCLEAR"]["count"] == 1
        assert insights["fireTiers"]["FIRE"]["bets"] == ["Chiefs ML"]
        assert insights["fadeThePublic"][0]["capperCount"] == 7
