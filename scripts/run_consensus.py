#!/usr/bin/env python3
"""
Run Consensus
=============
Operator entry point for the consensus engine. Prints JSON to stdout,
logs to stderr.

Usage:
    python3 scripts/run_consensus.py consensus picks.json
    python3 scripts/run_consensus.py consensus picks.json --date 2026-10-19 --sport NBA
    python3 scripts/run_consensus.py consensus picks.json --min-cappers 3 --fetch-schedule

    python3 scripts/run_consensus.py grade consensus.json scores.json
    python3 scripts/run_consensus.py grade consensus.json --fetch --date 2026-10-18

Inputs:
    picks.json      list of RawPick dicts (site/league/date/matchup/service/pick)
    consensus.json  a consensus report, or a bare list of consensus picks
    scores.json     list of GameResult dicts, or {"results": [...]}
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from datetime import date
from typing import Any, Dict, List, Optional

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from consensus_engine import build_consensus_report
from core.structured_logging import configure_structured_logging, run_context
from core.time_et import today_et, yesterday_et
from env_config import Config
from grading_engine import grade_consensus, summarize_grades
from ingestion import JsonFilePickSource, gather_raw_picks
from pick_schema import ConsensusPick, GameResult
from services.espn_api import ScheduleProvider, ScoresProvider

logger = logging.getLogger("run_consensus")


def _load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _parse_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD")


def load_consensus(path: str) -> List[ConsensusPick]:
    data = _load_json(path)
    if isinstance(data, dict):
        data = data.get("consensus", [])
    return [ConsensusPick.from_dict(d) for d in data]


def load_results(path: str) -> List[GameResult]:
    data = _load_json(path)
    if isinstance(data, dict):
        data = data.get("results", [])
    return [GameResult.from_dict(d) for d in data]


async def cmd_consensus(args) -> Dict[str, Any]:
    day = args.date or today_et()
    raw_picks = await gather_raw_picks([JsonFilePickSource(p) for p in args.picks])

    schedule = None
    if args.fetch_schedule and Config.ENABLE_SCHEDULE_FILTER:
        snapshot = await ScheduleProvider().get_schedule(day)
        schedule = snapshot.value

    return build_consensus_report(
        raw_picks,
        today=day,
        schedule=schedule,
        sport=args.sport,
        min_cappers=args.min_cappers,
    )


async def cmd_grade(args) -> Dict[str, Any]:
    picks = load_consensus(args.consensus)

    if args.fetch:
        day = args.date or yesterday_et()
        snapshot = await ScoresProvider().get_results(day)
        results = snapshot.value
    elif args.scores:
        results = load_results(args.scores)
    else:
        raise SystemExit("grade needs a scores file or --fetch")

    graded = grade_consensus(picks, results)
    return {
        "engineVersion": Config.ENGINE_VERSION,
        "graded": [g.to_dict() for g in graded],
        "summary": summarize_grades(graded),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Capper consensus engine")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR")
    parser.add_argument("--log-format", default=None, choices=["json", "text"])
    sub = parser.add_subparsers(dest="command", required=True)

    consensus = sub.add_parser("consensus", help="Build today's consensus report")
    consensus.add_argument("picks", nargs="+", help="JSON file(s) of raw picks")
    consensus.add_argument("--date", type=_parse_date, default=None, help="ET date, YYYY-MM-DD")
    consensus.add_argument("--sport", default=None, help="Restrict to one sport (NBA, nfl, ...)")
    consensus.add_argument("--min-cappers", type=int, default=None, help="Consensus floor (>= 2)")
    consensus.add_argument("--fetch-schedule", action="store_true",
                           help="Drop picks on teams ESPN has no game for")

    grade = sub.add_parser("grade", help="Grade consensus picks against final scores")
    grade.add_argument("consensus", help="Consensus report JSON")
    grade.add_argument("scores", nargs="?", default=None, help="Final scores JSON")
    grade.add_argument("--fetch", action="store_true", help="Fetch final scores from ESPN")
    grade.add_argument("--date", type=_parse_date, default=None, help="ET date of the games")

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_structured_logging(level=args.log_level, format_type=args.log_format)
    Config.log_status()

    with run_context() as run_id:
        logger.info(f"run {run_id}: {args.command} (engine {Config.ENGINE_VERSION})")
        if args.command == "consensus":
            output = await cmd_consensus(args)
        else:
            output = await cmd_grade(args)

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
