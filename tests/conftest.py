"""
tests/conftest.py - Pytest configuration and fixtures

Every test runs against a fixed Eastern date so season gating and "today"
checks never depend on the wall clock. 2026-10-19 is a Monday in October:
NFL, NBA, NHL, MLB and NCAAF are in season; NCAAB and WNBA are not.
"""

import os
import sys
from datetime import date
from typing import Callable, List

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from consensus_engine import normalize_pick
from pick_schema import NormalizedPick, RawPick

TEST_TODAY = date(2026, 10, 19)


@pytest.fixture
def today() -> date:
    """The injected ET civil date for the test session."""
    return TEST_TODAY


@pytest.fixture
def make_raw() -> Callable[..., RawPick]:
    """Build a RawPick with sensible defaults (dated TODAY)."""
    def _make(text: str, capper: str = "Dave Price", league: str = "NFL",
              matchup: str = "", date_str: str = "TODAY", source: str = "test") -> RawPick:
        return RawPick(
            source=source,
            league=league,
            date=date_str,
            matchup=matchup,
            capper=capper,
            text=text,
        )
    return _make


@pytest.fixture
def make_pick(make_raw) -> Callable[..., NormalizedPick]:
    """Build a NormalizedPick through the real normalization path."""
    counter: List[int] = [0]

    def _make(text: str, capper: str = "Dave Price", league: str = "NFL",
              matchup: str = "", date_str: str = "TODAY") -> NormalizedPick:
        counter[0] += 1
        raw = make_raw(text, capper=capper, league=league, matchup=matchup, date_str=date_str)
        return normalize_pick(raw, counter[0])
    return _make
