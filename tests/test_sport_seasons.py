"""
TEST_SPORT_SEASONS.PY - Month-range season gating
=================================================

Tests verify:
1. Ranges are inclusive at both ends
2. Ranges that cross the new year wrap
3. Unknown sports are never in season

Run with: python -m pytest tests/test_sport_seasons.py -v
"""

from datetime import date

import pytest

from sport_seasons import (
    SEASONS,
    get_in_season_sports,
    get_season_info,
    is_in_season,
    month_in_range,
)


class TestMonthInRange:
    def test_plain_range(self):
        assert month_in_range(3, 3, 10)
        assert month_in_range(10, 3, 10)
        assert not month_in_range(11, 3, 10)

    def test_wrapping_range(self):
        assert month_in_range(9, 9, 2)
        assert month_in_range(1, 9, 2)
        assert month_in_range(2, 9, 2)
        assert not month_in_range(3, 9, 2)


class TestIsInSeason:
    @pytest.mark.parametrize("sport,day,expected", [
        ("NFL", date(2026, 1, 15), True),
        ("NFL", date(2026, 2, 8), True),
        ("NFL", date(2026, 6, 1), False),
        ("MLB", date(2026, 1, 15), False),
        ("MLB", date(2026, 3, 26), True),
        ("MLB", date(2026, 10, 31), True),
        ("NCAAB", date(2026, 3, 20), True),
        ("NCAAB", date(2026, 10, 19), False),
        ("NCAAF", date(2026, 1, 10), True),
        ("WNBA", date(2026, 7, 4), True),
        ("nba", date(2026, 10, 19), True),
    ])
    def test_seasons(self, sport, day, expected):
        assert is_in_season(sport, day) is expected

    def test_unknown_sport(self):
        assert is_in_season("CURLING", date(2026, 10, 19)) is False
        assert is_in_season("", date(2026, 10, 19)) is False


class TestSeasonHelpers:
    def test_in_season_sports_october(self):
        sports = get_in_season_sports(date(2026, 10, 19))
        assert set(sports) == {"NFL", "NBA", "NHL", "MLB", "NCAAF"}

    def test_season_info(self):
        info = get_season_info("NFL", date(2026, 10, 19))
        assert info["valid"] is True
        assert info["in_season"] is True
        assert info["season_window"] == "Sep-Feb"
        assert info["spans_new_year"] is True

    def test_season_info_unknown(self):
        info = get_season_info("XFL", date(2026, 10, 19))
        assert info["valid"] is False
        assert info["in_season"] is False

    def test_every_sport_has_a_window(self):
        assert set(SEASONS) == {"NFL", "NBA", "NHL", "MLB", "WNBA", "NCAAF", "NCAAB"}
