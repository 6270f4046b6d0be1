# services/__init__.py
# External data providers for the consensus engine (schedule, final scores)

from .espn_api import (
    ScheduleProvider,
    ScoresProvider,
    fetch_scoreboard,
    parse_final_scores,
    parse_schedule_teams,
)

__all__ = [
    "ScheduleProvider",
    "ScoresProvider",
    "fetch_scoreboard",
    "parse_final_scores",
    "parse_schedule_teams",
]
