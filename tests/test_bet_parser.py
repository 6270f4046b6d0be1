"""
TEST_BET_PARSER.PY - Bet type, line and subject extraction
==========================================================

Tests verify:
1. Rule order (first half > totals > spread > prop > moneyline)
2. Odds are never mistaken for spreads
3. Half-point glyphs become decimals
4. Subject fallback chain never raises and ends at "Unknown"

Run with: python -m pytest tests/test_bet_parser.py -v
"""

import pytest

from bet_parser import (
    BET_TYPE_RULES,
    SUBJECT_RULES,
    UNKNOWN_SUBJECT,
    extract_team,
    first_half_rule,
    moneyline_rule,
    normalize_half_points,
    parse_bet_type,
    split_matchup,
    strip_bet_noise,
)
from pick_schema import BetType


class TestParseBetType:
    """Bet type classification and line extraction."""

    @pytest.mark.parametrize("text,expected", [
        ("Yankees ML", (BetType.MONEYLINE, None)),
        ("Yankees -150", (BetType.MONEYLINE, None)),
        ("Chiefs PK", (BetType.MONEYLINE, None)),
        ("Chiefs -3.5 (-110)", (BetType.SPREAD, "-3.5")),
        ("Bills +3", (BetType.SPREAD, "+3")),
        ("Lakers/Celtics Over 220½", (BetType.OVER, "220.5")),
        ("Under 8.5", (BetType.UNDER, "8.5")),
        ("Celtics o220.5", (BetType.OVER, "220.5")),
        ("Bucks U 230", (BetType.UNDER, "230")),
        ("Celtics o 220.5", (BetType.OVER, "220.5")),
        ("Yankees F5 ML", (BetType.FIRST_HALF_MONEYLINE, None)),
        ("Celtics First Half ML", (BetType.FIRST_HALF_MONEYLINE, None)),
        ("Gerrit Cole Strikeouts", (BetType.PROP, None)),
    ])
    def test_classification(self, text, expected):
        assert parse_bet_type(text) == expected

    def test_odds_are_not_spreads(self):
        """Signed numbers above 20 are American odds, not spreads."""
        assert parse_bet_type("Dodgers +135")[0] == BetType.MONEYLINE
        assert parse_bet_type("Bills -21")[0] == BetType.MONEYLINE

    def test_spread_ignores_trailing_odds(self):
        assert parse_bet_type("Packers +7 -115") == (BetType.SPREAD, "+7")

    def test_spread_after_leading_odds(self):
        assert parse_bet_type("Chiefs (-110) -3") == (BetType.SPREAD, "-3")

    def test_totals_beat_props(self):
        """'Over 25.5 Points' is a total even though 'Points' is a prop noun."""
        assert parse_bet_type("LeBron James Over 25.5 Points") == (BetType.OVER, "25.5")

    def test_half_point_spread(self):
        assert parse_bet_type("Bills +½") == (BetType.SPREAD, "+0.5")

    def test_empty_text_is_moneyline(self):
        assert parse_bet_type("") == (BetType.MONEYLINE, None)
        assert parse_bet_type(None) == (BetType.MONEYLINE, None)

    def test_rule_order(self):
        assert BET_TYPE_RULES[0] is first_half_rule
        assert BET_TYPE_RULES[-1] is moneyline_rule
        assert len(SUBJECT_RULES) == 3


class TestHalfPoints:
    def test_glyph_after_digit(self):
        assert normalize_half_points("Over 50½") == "Over 50.5"

    def test_bare_glyph(self):
        assert normalize_half_points("Bills +½") == "Bills +0.5"

    def test_untouched(self):
        assert normalize_half_points("Bills +3") == "Bills +3"


class TestExtractTeam:
    """Subject fallback chain."""

    def test_strips_lines_odds_and_books(self):
        assert extract_team("Chiefs -3 (-110) at DraftKings", "Chiefs vs Bills") == "Chiefs"

    def test_spaced_total_shorthand(self):
        assert extract_team("Bucks U 230") == "Bucks"

    def test_moneyline(self):
        assert extract_team("Yankees ML") == "Yankees"
        assert extract_team("Yankees F5 ML") == "Yankees"

    def test_totals_fall_back_to_matchup(self):
        """A bare total names no team; the first matchup side is used."""
        assert extract_team("Over 220.5", "Lakers vs Celtics") == "Lakers"

    def test_totals_with_both_teams(self):
        assert extract_team("Lakers/Celtics Over 220") == "Lakers/Celtics"

    def test_unknown_when_nothing_left(self):
        assert extract_team("-3.5", "") == UNKNOWN_SUBJECT
        assert extract_team("", "") == UNKNOWN_SUBJECT


class TestMatchupHelpers:
    @pytest.mark.parametrize("matchup,expected", [
        ("Lakers vs Celtics", ["Lakers", "Celtics"]),
        ("Lakers vs. Celtics", ["Lakers", "Celtics"]),
        ("Yankees @ Red Sox", ["Yankees", "Red Sox"]),
        ("Bills at Jets", ["Bills", "Jets"]),
        ("Lakers/Celtics", ["Lakers", "Celtics"]),
        ("Atlanta vs Boston", ["Atlanta", "Boston"]),
        ("", []),
    ])
    def test_split_matchup(self, matchup, expected):
        assert split_matchup(matchup) == expected

    def test_strip_bet_noise(self):
        assert strip_bet_noise("Bills ML") == "Bills"
        assert strip_bet_noise("Jets -3 (-110)") == "Jets"
