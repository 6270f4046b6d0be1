"""
ESPN Scoreboard Service
Fetches today's schedule and yesterday's final scores from ESPN's free
scoreboard API. Powers: schedule filter (eligibility), grading (results)

Boundary rules:
- Every HTTP / payload failure resolves to "no data" plus a WARNING
- Parsers are pure (payload in, values out) and testable without a network
- Results are handed to the engine as Snapshots; the engine never calls ESPN
"""

import asyncio
import logging
from datetime import date
from typing import Any, Dict, Iterable, List, Optional, Set

import httpx

from core.snapshot import Snapshot, SnapshotCache
from core.sports import ESPN_SPORTS, Sport, SUPPORTED_SPORTS
from core.time_et import is_in_et_day, to_et_date, today_et, yesterday_et
from env_config import Config
from identity.name_normalizer import standardize_team_name
from pick_schema import GameResult

logger = logging.getLogger(__name__)

# Without a group ESPN returns only featured college games
ESPN_GROUPS = {
    Sport.NCAAB.value: "50",
    Sport.NCAAF.value: "80",
}
SCOREBOARD_LIMIT = 300

Schedule = Dict[str, Set[str]]


def _safe_int(value) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def _events(payload: Any) -> List[Dict[str, Any]]:
    if not isinstance(payload, dict):
        return []
    events = payload.get("events") or []
    return [e for e in events if isinstance(e, dict)]


def _competitors(event: Dict[str, Any]) -> List[Dict[str, Any]]:
    competitions = event.get("competitions") or []
    if not competitions or not isinstance(competitions[0], dict):
        return []
    return [c for c in competitions[0].get("competitors") or [] if isinstance(c, dict)]


# ==========================================
# PARSERS
# ==========================================

def parse_schedule_teams(payload: Any, sport: str, day: date) -> Set[str]:
    """
    Lowercased names of every team playing on the given ET date.

    Each team contributes its display name, short name, abbreviation and
    standardized identity, so a pick matches however it spelled the team.
    """
    teams: Set[str] = set()
    for event in _events(payload):
        if not is_in_et_day(event.get("date") or "", day):
            continue
        for competitor in _competitors(event):
            team = competitor.get("team") or {}
            names = [team.get("displayName"), team.get("shortDisplayName"), team.get("abbreviation")]
            for name in names:
                if name:
                    teams.add(str(name).lower())
            if team.get("displayName"):
                teams.add(standardize_team_name(team["displayName"], sport).lower())
    return teams


def parse_final_scores(payload: Any, sport: str) -> List[GameResult]:
    """
    Completed games with standardized team names.

    The winner is ESPN's winner flag when present, otherwise the higher score
    (None on a tie).
    """
    results: List[GameResult] = []
    for event in _events(payload):
        competitions = event.get("competitions") or []
        competition = competitions[0] if competitions and isinstance(competitions[0], dict) else {}
        completed = (((competition.get("status") or {}).get("type") or {}).get("completed")) is True
        if not completed:
            continue

        competitors = _competitors(event)
        home = next((c for c in competitors if c.get("homeAway") == "home"), None)
        away = next((c for c in competitors if c.get("homeAway") == "away"), None)
        if home is None or away is None:
            continue

        home_name = (home.get("team") or {}).get("displayName") or ""
        away_name = (away.get("team") or {}).get("displayName") or ""
        home_team = standardize_team_name(home_name, sport)
        away_team = standardize_team_name(away_name, sport)
        home_score = _safe_int(home.get("score"))
        away_score = _safe_int(away.get("score"))

        if home.get("winner") is True:
            winner = home_team
        elif away.get("winner") is True:
            winner = away_team
        elif home_score != away_score:
            winner = home_team if home_score > away_score else away_team
        else:
            winner = None

        game_day = to_et_date(event.get("date") or "")
        results.append(GameResult(
            sport=sport,
            home_team=home_team,
            away_team=away_team,
            home_score=home_score,
            away_score=away_score,
            winner=winner,
            completed=True,
            game_id=str(event.get("id")) if event.get("id") is not None else None,
            game_date=game_day.isoformat() if game_day else None,
        ))
    return results


# ==========================================
# HTTP
# ==========================================

async def fetch_scoreboard(
    sport: str,
    day: date,
    client: Optional[httpx.AsyncClient] = None,
    base_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> Optional[Dict[str, Any]]:
    """
    Raw scoreboard payload for one sport and date, None on any failure.
    """
    code = (sport or "").upper()
    path = ESPN_SPORTS.get(Sport(code)) if code in SUPPORTED_SPORTS else None
    if not path:
        logger.warning("No ESPN scoreboard for sport %s", code)
        return None

    url = f"{(base_url or Config.ESPN_API_BASE).rstrip('/')}/{path}/scoreboard"
    params = {"dates": day.strftime("%Y%m%d"), "limit": SCOREBOARD_LIMIT}
    if code in ESPN_GROUPS:
        params["groups"] = ESPN_GROUPS[code]
    timeout = Config.HTTP_TIMEOUT if timeout is None else timeout

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                resp = await own_client.get(url, params=params)
        else:
            resp = await client.get(url, params=params, timeout=timeout)

        if resp.status_code != 200:
            logger.warning("ESPN %s scoreboard returned %d", code, resp.status_code)
            return None

        data = resp.json()
        if not isinstance(data, dict):
            logger.warning("ESPN %s scoreboard payload is not an object", code)
            return None
        return data

    except httpx.HTTPError as e:
        logger.warning("ESPN %s scoreboard request failed: %s", code, e)
        return None
    except ValueError as e:
        logger.warning("ESPN %s scoreboard returned invalid JSON: %s", code, e)
        return None


# ==========================================
# PROVIDERS
# ==========================================

class _ScoreboardProvider:
    """Shared plumbing: one SnapshotCache keyed by (sport, date)."""

    def __init__(
        self,
        ttl_seconds: float,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[SnapshotCache] = None,
        sports: Optional[Iterable[str]] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client = client
        self.cache = cache or SnapshotCache(ttl_seconds)
        self.sports = [s.upper() for s in (sports or SUPPORTED_SPORTS)]
        self.base_url = base_url
        self.timeout = timeout

    async def _payload(self, sport: str, day: date) -> Optional[Dict[str, Any]]:
        return await fetch_scoreboard(
            sport, day, client=self.client, base_url=self.base_url, timeout=self.timeout,
        )

    @staticmethod
    def _combine(snapshots: List[Snapshot], value, ttl: float) -> Snapshot:
        fetched_at = min((s.fetched_at for s in snapshots), default=0.0)
        return Snapshot(value=value, fetched_at=fetched_at, ttl_seconds=ttl)


class ScheduleProvider(_ScoreboardProvider):
    """Today's teams per sport, refreshed every SCHEDULE_CACHE_TTL seconds."""

    def __init__(self, **kwargs):
        kwargs.setdefault("ttl_seconds", Config.SCHEDULE_CACHE_TTL)
        super().__init__(**kwargs)

    async def get_schedule(self, day: Optional[date] = None) -> Snapshot:
        day = day or today_et()

        async def load(sport: str) -> Snapshot:
            async def loader() -> Set[str]:
                return parse_schedule_teams(await self._payload(sport, day), sport, day)
            return await self.cache.get_or_refresh((sport, day.isoformat()), loader)

        snapshots = await asyncio.gather(*(load(s) for s in self.sports))
        schedule: Schedule = {
            sport: snap.value for sport, snap in zip(self.sports, snapshots) if snap.value
        }
        logger.info(
            "Schedule %s: %s", day.isoformat(),
            {sport: len(teams) for sport, teams in schedule.items()},
        )
        return self._combine(list(snapshots), schedule, self.cache.ttl_seconds)


class ScoresProvider(_ScoreboardProvider):
    """Completed games per sport for a date (yesterday ET by default)."""

    def __init__(self, **kwargs):
        kwargs.setdefault("ttl_seconds", Config.SCORES_CACHE_TTL)
        super().__init__(**kwargs)

    async def get_results(self, day: Optional[date] = None) -> Snapshot:
        day = day or yesterday_et()

        async def load(sport: str) -> Snapshot:
            async def loader() -> List[GameResult]:
                return parse_final_scores(await self._payload(sport, day), sport)
            return await self.cache.get_or_refresh((sport, day.isoformat()), loader)

        snapshots = await asyncio.gather(*(load(s) for s in self.sports))
        results: List[GameResult] = [g for snap in snapshots for g in snap.value]
        logger.info("Final scores %s: %d completed games", day.isoformat(), len(results))
        return self._combine(list(snapshots), results, self.cache.ttl_seconds)
