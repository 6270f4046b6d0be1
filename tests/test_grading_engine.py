"""
Tests for consensus pick settlement

Tests cover:
- Bet string subject recovery
- Moneyline, spread and totals arithmetic (WIN / LOSS / PUSH)
- UNDETERMINED when no game matches, never coerced into a loss
- Sport-partitioned game matching
- Summary and win percentage
"""

import pytest

from grading_engine import (
    find_game,
    grade_consensus,
    grade_consensus_pick,
    parse_bet_subjects,
    settle,
    summarize_grades,
)
from pick_schema import BetType, ConsensusPick, GameResult, GradedPick, GradeOutcome


def make_consensus(bet, subject, sport, bet_type, line=None, count=3):
    cappers = tuple(f"Analyst {i}" for i in range(count))
    return ConsensusPick(
        id=f"{sport}:{subject}_{bet_type.value}" + (f"_{line}" if line else ""),
        bet=bet,
        subject=subject,
        sport=sport,
        matchup="",
        bet_type=bet_type,
        line=line,
        capper_count=count,
        cappers=cappers,
        is_fire=count >= 3,
        confidence=min(count / 10, 1.0),
    )


YANKEES_AT_RED_SOX = GameResult(sport="MLB", home_team="Red Sox", away_team="Yankees",
                                home_score=3, away_score=5, winner="Yankees")
RAIDERS_AT_CHIEFS = GameResult(sport="NFL", home_team="Chiefs", away_team="Raiders",
                               home_score=24, away_score=21)
CELTICS_AT_LAKERS = GameResult(sport="NBA", home_team="Lakers", away_team="Celtics",
                               home_score=110, away_score=108)


class TestParseBetSubjects:
    @pytest.mark.parametrize("bet,bet_type,expected", [
        ("Yankees ML", BetType.MONEYLINE, ["Yankees"]),
        ("Yankees F5 ML", BetType.FIRST_HALF_MONEYLINE, ["Yankees"]),
        ("Celtics 1H ML", BetType.FIRST_HALF_MONEYLINE, ["Celtics"]),
        ("Chiefs -3", BetType.SPREAD, ["Chiefs"]),
        ("Celtics/Lakers Over 218", BetType.OVER, ["Celtics", "Lakers"]),
        ("Red Sox/Yankees Under 9", BetType.UNDER, ["Red Sox", "Yankees"]),
        ("Gerrit Cole Prop", BetType.PROP, ["Gerrit Cole"]),
        ("", BetType.MONEYLINE, []),
    ])
    def test_subjects(self, bet, bet_type, expected):
        assert parse_bet_subjects(bet, bet_type) == expected


class TestSettle:
    """Settlement arithmetic against one final score."""

    def test_moneyline_win_and_loss(self):
        assert settle(BetType.MONEYLINE, "Yankees", None, YANKEES_AT_RED_SOX) == GradeOutcome.WIN
        assert settle(BetType.MONEYLINE, "Red Sox", None, YANKEES_AT_RED_SOX) == GradeOutcome.LOSS

    def test_moneyline_tie_is_push(self):
        game = GameResult(sport="NFL", home_team="Chiefs", away_team="Raiders", home_score=20, away_score=20)
        assert settle(BetType.MONEYLINE, "Chiefs", None, game) == GradeOutcome.PUSH

    def test_moneyline_tie_uses_declared_winner(self):
        """Shootout finals are level on goals but have a winner."""
        game = GameResult(sport="NHL", home_team="Bruins", away_team="Rangers",
                          home_score=3, away_score=3, winner="Bruins")
        assert settle(BetType.MONEYLINE, "Bruins", None, game) == GradeOutcome.WIN
        assert settle(BetType.MONEYLINE, "Rangers", None, game) == GradeOutcome.LOSS

    @pytest.mark.parametrize("home,away,line,expected", [
        (24, 21, -3.0, GradeOutcome.PUSH),
        (27, 21, -3.0, GradeOutcome.WIN),
        (23, 21, -3.0, GradeOutcome.LOSS),
    ])
    def test_favorite_spread(self, home, away, line, expected):
        game = GameResult(sport="NFL", home_team="Chiefs", away_team="Raiders",
                          home_score=home, away_score=away)
        assert settle(BetType.SPREAD, "Chiefs", line, game) == expected

    def test_underdog_spread(self):
        game = GameResult(sport="NFL", home_team="Jets", away_team="Bills", home_score=22, away_score=20)
        assert settle(BetType.SPREAD, "Bills", 3.0, game) == GradeOutcome.WIN
        game = GameResult(sport="NFL", home_team="Jets", away_team="Bills", home_score=23, away_score=20)
        assert settle(BetType.SPREAD, "Bills", 3.0, game) == GradeOutcome.PUSH

    @pytest.mark.parametrize("bet_type,line,expected", [
        (BetType.OVER, 217.0, GradeOutcome.WIN),
        (BetType.OVER, 218.0, GradeOutcome.PUSH),
        (BetType.OVER, 219.0, GradeOutcome.LOSS),
        (BetType.UNDER, 219.0, GradeOutcome.WIN),
        (BetType.UNDER, 218.0, GradeOutcome.PUSH),
        (BetType.UNDER, 217.0, GradeOutcome.LOSS),
    ])
    def test_totals(self, bet_type, line, expected):
        assert settle(bet_type, None, line, CELTICS_AT_LAKERS) == expected

    def test_missing_line_is_undetermined(self):
        assert settle(BetType.OVER, None, None, CELTICS_AT_LAKERS) == GradeOutcome.UNDETERMINED
        assert settle(BetType.SPREAD, "Chiefs", None, RAIDERS_AT_CHIEFS) == GradeOutcome.UNDETERMINED

    def test_team_not_in_game(self):
        assert settle(BetType.MONEYLINE, "Bills", None, RAIDERS_AT_CHIEFS) == GradeOutcome.UNDETERMINED


class TestFindGame:
    def test_sport_partitioned(self):
        mlb = GameResult(sport="MLB", home_team="Cardinals", away_team="Cubs", home_score=4, away_score=2)
        nfl = GameResult(sport="NFL", home_team="Cardinals", away_team="Rams", home_score=10, away_score=17)
        assert find_game(["Cardinals"], [mlb, nfl], "NFL") is nfl
        assert find_game(["Cardinals"], [mlb, nfl], "MLB") is mlb

    def test_totals_prefer_full_match(self):
        other = GameResult(sport="NBA", home_team="Lakers", away_team="Suns", home_score=100, away_score=99)
        assert find_game(["Celtics", "Lakers"], [other, CELTICS_AT_LAKERS], "NBA", dual=True) is CELTICS_AT_LAKERS

    def test_incomplete_games_ignored(self):
        live = GameResult(sport="NFL", home_team="Chiefs", away_team="Raiders",
                          home_score=7, away_score=0, completed=False)
        assert find_game(["Chiefs"], [live], "NFL") is None


class TestGradeConsensusPick:
    def test_yankees_moneyline_win(self):
        pick = make_consensus("Yankees ML", "Yankees", "MLB", BetType.MONEYLINE)
        graded = grade_consensus_pick(pick, [YANKEES_AT_RED_SOX])
        assert graded.outcome == GradeOutcome.WIN
        assert graded.final_score == "Yankees 5 @ Red Sox 3"

    def test_yankees_home_moneyline_win(self):
        game = GameResult(sport="MLB", home_team="Yankees", away_team="Orioles", home_score=6, away_score=2)
        pick = make_consensus("Yankees ML", "Yankees", "MLB", BetType.MONEYLINE, count=3)
        assert grade_consensus_pick(pick, [game]).outcome == GradeOutcome.WIN

    def test_spread_push(self):
        pick = make_consensus("Chiefs -3", "Chiefs", "NFL", BetType.SPREAD, line="-3")
        assert grade_consensus_pick(pick, [RAIDERS_AT_CHIEFS]).outcome == GradeOutcome.PUSH

    def test_total(self):
        pick = make_consensus("Celtics/Lakers Over 216", "Celtics/Lakers", "NBA", BetType.OVER, line="216")
        assert grade_consensus_pick(pick, [CELTICS_AT_LAKERS]).outcome == GradeOutcome.WIN

    def test_no_game_is_undetermined(self):
        pick = make_consensus("Bills +3", "Bills", "NFL", BetType.SPREAD, line="+3")
        graded = grade_consensus_pick(pick, [RAIDERS_AT_CHIEFS, YANKEES_AT_RED_SOX])
        assert graded.outcome == GradeOutcome.UNDETERMINED
        assert graded.final_score is None

    def test_total_with_no_matching_game_is_undetermined(self):
        """Neither side of the total played: not a loss."""
        pick = make_consensus("Celtics/Lakers Over 216", "Celtics/Lakers", "NBA", BetType.OVER, line="216")
        other = GameResult(sport="NBA", home_team="Knicks", away_team="Heat", home_score=100, away_score=120)
        graded = grade_consensus_pick(pick, [other, RAIDERS_AT_CHIEFS])
        assert graded.outcome == GradeOutcome.UNDETERMINED
        assert graded.final_score is None

    def test_props_are_undetermined(self):
        pick = make_consensus("Gerrit Cole Prop", "Gerrit Cole", "MLB", BetType.PROP)
        assert grade_consensus_pick(pick, [YANKEES_AT_RED_SOX]).outcome == GradeOutcome.UNDETERMINED

    def test_first_half_settled_on_full_game(self):
        pick = make_consensus("Yankees F5 ML", "Yankees", "MLB", BetType.FIRST_HALF_MONEYLINE)
        graded = grade_consensus_pick(pick, [YANKEES_AT_RED_SOX])
        assert graded.outcome == GradeOutcome.WIN
        assert graded.notes == ("settled on full-game score",)

    def test_to_dict(self):
        pick = make_consensus("Yankees ML", "Yankees", "MLB", BetType.MONEYLINE)
        d = grade_consensus_pick(pick, [YANKEES_AT_RED_SOX]).to_dict()
        assert d["result"] == "WIN"
        assert d["bet"] == "Yankees ML"
        assert d["finalScore"] == "Yankees 5 @ Red Sox 3"


class TestSummary:
    def test_counts_and_win_pct(self):
        picks = [
            make_consensus("Yankees ML", "Yankees", "MLB", BetType.MONEYLINE),
            make_consensus("Red Sox ML", "Red Sox", "MLB", BetType.MONEYLINE),
            make_consensus("Chiefs ML", "Chiefs", "NFL", BetType.MONEYLINE),
            make_consensus("Chiefs -3", "Chiefs", "NFL", BetType.SPREAD, line="-3"),
            make_consensus("Bills ML", "Bills", "NFL", BetType.MONEYLINE),
        ]
        graded = grade_consensus(picks, [YANKEES_AT_RED_SOX, RAIDERS_AT_CHIEFS])
        summary = summarize_grades(graded)
        assert summary == {
            "total": 5,
            "wins": 2,
            "losses": 1,
            "pushes": 1,
            "undetermined": 1,
            "winPct": 66.7,
        }

    def test_nothing_decided(self):
        pick = make_consensus("Bills ML", "Bills", "NFL", BetType.MONEYLINE)
        graded = [GradedPick(pick, GradeOutcome.UNDETERMINED)]
        assert summarize_grades(graded)["winPct"] == 0.0
        assert summarize_grades([])["total"] == 0
