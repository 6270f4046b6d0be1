"""
Pick Schema - Canonical records for the consensus pipeline

raw picks -> normalized picks -> consensus picks -> graded picks

Every record is a frozen dataclass: a stage derives new values from the
previous stage's output and never mutates what it was handed. to_dict()
yields plain JSON-serializable values with camelCase keys for consumers.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from enum import Enum


class BetType(str, Enum):
    MONEYLINE = "MONEYLINE"
    SPREAD = "SPREAD"
    OVER = "OVER"
    UNDER = "UNDER"
    FIRST_HALF_MONEYLINE = "FIRST_HALF_MONEYLINE"
    PROP = "PROP"


class GradeOutcome(str, Enum):
    WIN = "WIN"
    LOSS = "LOSS"
    PUSH = "PUSH"
    # No matching final score was found. Never a loss.
    UNDETERMINED = "UNDETERMINED"


TOTAL_BET_TYPES = (BetType.OVER, BetType.UNDER)


@dataclass(frozen=True)
class RawPick:
    """
    One analyst's pick exactly as an ingestion adapter produced it.

    The date is unparsed (MM/DD, MM/DD/YYYY, "Mon DD", "TODAY", ...).
    """
    source: str
    league: str
    date: str
    matchup: str
    capper: str
    text: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "RawPick":
        """Build from the adapter dict shape (site/league/date/matchup/service/pick)."""
        def _s(*keys: str) -> str:
            for key in keys:
                value = raw.get(key)
                if value is not None:
                    return str(value)
            return ""

        return cls(
            source=_s("site", "source"),
            league=_s("league", "sport"),
            date=_s("date"),
            matchup=_s("matchup"),
            capper=_s("service", "capper"),
            text=_s("pick", "text"),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "site": self.source,
            "league": self.league,
            "date": self.date,
            "matchup": self.matchup,
            "service": self.capper,
            "pick": self.text,
        }


@dataclass(frozen=True)
class NormalizedPick:
    """A RawPick enriched with canonical identities and the parsed bet."""
    id: str
    source: str
    capper: str
    team: str
    standardized_team: str
    bet_type: BetType
    line: Optional[str]
    sport: str
    matchup: str
    original_text: str
    date: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source": self.source,
            "capper": self.capper,
            "team": self.team,
            "standardizedTeam": self.standardized_team,
            "betType": self.bet_type.value,
            "line": self.line,
            "sport": self.sport,
            "matchup": self.matchup,
            "originalPick": self.original_text,
            "date": self.date,
        }


@dataclass(frozen=True)
class ConsensusPick:
    """
    A bet bucket that at least two distinct analysts agreed on.

    is_fire is exactly capper_count >= 3; confidence is capper_count / 10
    capped at 1.0. Presentational tiers live in tiering.py.
    """
    id: str
    bet: str
    subject: str
    sport: str
    matchup: str
    bet_type: BetType
    line: Optional[str]
    capper_count: int
    cappers: Tuple[str, ...]
    is_fire: bool
    confidence: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "bet": self.bet,
            "subject": self.subject,
            "sport": self.sport,
            "matchup": self.matchup,
            "betType": self.bet_type.value,
            "line": self.line,
            "capperCount": self.capper_count,
            "cappers": list(self.cappers),
            "isFire": self.is_fire,
            "confidence": self.confidence,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "ConsensusPick":
        """Rebuild from to_dict() output (used to grade yesterday's saved report)."""
        cappers = tuple(raw.get("cappers") or ())
        count = int(raw.get("capperCount", len(cappers)))
        return cls(
            id=str(raw.get("id", "")),
            bet=str(raw.get("bet", "")),
            subject=str(raw.get("subject", "")),
            sport=str(raw.get("sport", "")),
            matchup=str(raw.get("matchup", "")),
            bet_type=BetType(raw.get("betType", BetType.MONEYLINE.value)),
            line=raw.get("line"),
            capper_count=count,
            cappers=cappers,
            is_fire=bool(raw.get("isFire", count >= 3)),
            confidence=float(raw.get("confidence", min(count / 10, 1.0))),
        )


@dataclass(frozen=True)
class GameResult:
    """A completed game from the scores provider, teams already standardized."""
    sport: str
    home_team: str
    away_team: str
    home_score: int
    away_score: int
    winner: Optional[str] = None
    completed: bool = True
    game_id: Optional[str] = None
    game_date: Optional[str] = None

    @property
    def total(self) -> int:
        return self.home_score + self.away_score

    @property
    def final_score(self) -> str:
        return f"{self.away_team} {self.away_score} @ {self.home_team} {self.home_score}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gameId": self.game_id,
            "sport": self.sport,
            "homeTeam": self.home_team,
            "awayTeam": self.away_team,
            "homeScore": self.home_score,
            "awayScore": self.away_score,
            "total": self.total,
            "winner": self.winner,
            "completed": self.completed,
            "gameDate": self.game_date,
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "GameResult":
        return cls(
            sport=str(raw.get("sport", "")).upper(),
            home_team=str(raw.get("homeTeam", "")),
            away_team=str(raw.get("awayTeam", "")),
            home_score=int(raw.get("homeScore", 0)),
            away_score=int(raw.get("awayScore", 0)),
            winner=raw.get("winner"),
            completed=bool(raw.get("completed", True)),
            game_id=raw.get("gameId"),
            game_date=raw.get("gameDate"),
        )


@dataclass(frozen=True)
class GradedPick:
    """A ConsensusPick plus its settlement."""
    pick: ConsensusPick
    outcome: GradeOutcome
    final_score: Optional[str] = None
    notes: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        d = self.pick.to_dict()
        d["result"] = self.outcome.value
        d["finalScore"] = self.final_score
        if self.notes:
            d["notes"] = list(self.notes)
        return d
