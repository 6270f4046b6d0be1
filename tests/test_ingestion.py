"""
Tests for the ingestion fan-out.

Tests cover:
- Parlay splitting (and what is not a parlay)
- Source isolation: a failing or hanging source contributes zero picks
- JSON file sources
"""

import asyncio
import json
import logging

import pytest

pytest.importorskip("pytest_asyncio")

from ingestion import (
    JsonFilePickSource,
    PickSource,
    StaticPickSource,
    expand_parlays,
    gather_raw_picks,
    split_parlay_legs,
)
from pick_schema import RawPick


def raw(text, capper="Dave Price", matchup=""):
    return RawPick(source="site", league="NFL", date="TODAY", matchup=matchup, capper=capper, text=text)


class BrokenSource(PickSource):
    name = "broken"

    async def fetch(self):
        raise RuntimeError("site changed its markup")


class HangingSource(PickSource):
    name = "hanging"

    async def fetch(self):
        await asyncio.sleep(10)
        return [raw("Chiefs -3")]


class TestParlays:
    def test_split_legs(self):
        assert split_parlay_legs("Bills ML + Jets -3") == ["Bills ML", "Jets -3"]

    def test_single_bet_not_split(self):
        assert split_parlay_legs("Bills +3") == []
        assert split_parlay_legs("Bills ML") == []

    def test_legs_must_start_with_letter(self):
        assert split_parlay_legs("Bills ML + 3 units") == []

    def test_expand(self):
        picks = expand_parlays([raw("Bills ML + Jets -3", matchup="Parlay"), raw("Chiefs -3")])
        assert [p.text for p in picks] == ["Bills ML", "Jets -3", "Chiefs -3"]
        assert picks[0].matchup == "Bills"
        assert picks[1].matchup == "Jets"
        assert picks[0].capper == "Dave Price"


class TestGatherRawPicks:
    @pytest.mark.asyncio
    async def test_failing_sources_isolated(self, caplog):
        good = StaticPickSource("good", [raw("Chiefs -3"), raw("Bills ML + Jets ML")])
        picks = await gather_raw_picks([BrokenSource(), good, HangingSource()], timeout=0.05)
        assert [p.text for p in picks] == ["Chiefs -3", "Bills ML", "Jets ML"]
        messages = " ".join(r.getMessage() for r in caplog.records)
        assert "broken" in messages
        assert "hanging" in messages

    @pytest.mark.asyncio
    async def test_all_sources_failing_is_empty(self):
        assert await gather_raw_picks([BrokenSource()], timeout=0.05) == []

    @pytest.mark.asyncio
    async def test_source_counts_logged_as_fields(self, caplog):
        caplog.set_level(logging.INFO, logger="ingestion")
        await gather_raw_picks([StaticPickSource("covers", [raw("Chiefs -3"), raw("Bills ML")])])
        [record] = [r for r in caplog.records if r.getMessage() == "Source fetched"]
        assert record.source == "covers"
        assert record.picks == 2

    @pytest.mark.asyncio
    async def test_no_sources(self):
        assert await gather_raw_picks([]) == []

    @pytest.mark.asyncio
    async def test_static_source_accepts_dicts(self):
        source = StaticPickSource("sheet", [{
            "site": "sheet", "league": "NBA", "date": "TODAY",
            "matchup": "Lakers vs Celtics", "service": "Amy", "pick": "Celtics -4",
        }])
        [pick] = await gather_raw_picks([source])
        assert pick.capper == "Amy"
        assert pick.text == "Celtics -4"


class TestJsonFileSource:
    @pytest.mark.asyncio
    async def test_list_file(self, tmp_path):
        path = tmp_path / "covers.json"
        path.write_text(json.dumps([
            {"league": "NFL", "date": "TODAY", "matchup": "", "service": "Amy", "pick": "Chiefs -3"},
        ]))
        [pick] = await JsonFilePickSource(path).fetch()
        assert pick.source == "covers"
        assert pick.text == "Chiefs -3"

    @pytest.mark.asyncio
    async def test_wrapped_file(self, tmp_path):
        path = tmp_path / "picks.json"
        path.write_text(json.dumps({"picks": [{"site": "x", "service": "Amy", "pick": "Jets ML"}]}))
        [pick] = await JsonFilePickSource(path, name="drop").fetch()
        assert pick.source == "x"

    @pytest.mark.asyncio
    async def test_missing_file_contributes_nothing(self, tmp_path):
        source = JsonFilePickSource(tmp_path / "nope.json")
        assert await gather_raw_picks([source]) == []
