"""
Grading Engine - Settlement of consensus picks against final scores

Responsibilities:
1. Recover the subject team(s) from each consensus bet string
2. Match a completed GameResult of the same sport by exact standardized team
3. Settle WIN / LOSS / PUSH with bet-type arithmetic
4. Summarize a grading run (wins, losses, pushes, undetermined, win %)

Conservative approach:
- No matching game -> UNDETERMINED (never a loss)
- PROP bets -> UNDETERMINED (no generic stat source)
- Pure: results arrive as a snapshot from services/espn_api.py
"""
import logging
import math
import re
from typing import Any, Dict, List, Optional, Sequence

from pick_schema import TOTAL_BET_TYPES, BetType, ConsensusPick, GameResult, GradedPick, GradeOutcome

logger = logging.getLogger(__name__)

# ============================================================================
# BET STRING PARSING
# ============================================================================

_ML_SUFFIX = re.compile(r"\s+ML$", re.IGNORECASE)
_FIRST_HALF_SUFFIX = re.compile(r"\s+(?:F5|1H)\s+ML$", re.IGNORECASE)
_SPREAD_SUFFIX = re.compile(r"\s+([+-]\d+(?:\.\d+)?)$")
_TOTAL_SUFFIX = re.compile(r"\s+(?:Over|Under)(?:\s+(\d+(?:\.\d+)?))?$", re.IGNORECASE)
_PROP_SUFFIX = re.compile(r"\s+Prop$", re.IGNORECASE)


def parse_bet_subjects(bet: str, bet_type: BetType) -> List[str]:
    """
    Subject team(s) of a bet string.

    Example:
        >>> parse_bet_subjects("Yankees ML", BetType.MONEYLINE)
        ['Yankees']
        >>> parse_bet_subjects("Celtics/Lakers Over 220", BetType.OVER)
        ['Celtics', 'Lakers']
    """
    text = (bet or "").strip()
    if bet_type == BetType.FIRST_HALF_MONEYLINE:
        text = _FIRST_HALF_SUFFIX.sub("", text)
    elif bet_type == BetType.MONEYLINE:
        text = _ML_SUFFIX.sub("", text)
    elif bet_type == BetType.SPREAD:
        text = _SPREAD_SUFFIX.sub("", text)
    elif bet_type in TOTAL_BET_TYPES:
        text = _TOTAL_SUFFIX.sub("", text)
        return [side.strip() for side in text.split("/") if side.strip()]
    elif bet_type == BetType.PROP:
        text = _PROP_SUFFIX.sub("", text)
    text = text.strip()
    return [text] if text else []


def _line_value(pick: ConsensusPick) -> Optional[float]:
    """Numeric line from the pick, falling back to the bet string."""
    raw = pick.line
    if raw is None:
        pattern = _SPREAD_SUFFIX if pick.bet_type == BetType.SPREAD else _TOTAL_SUFFIX
        m = pattern.search(pick.bet or "")
        raw = m.group(1) if m else None
    try:
        return float(raw) if raw is not None else None
    except ValueError:
        return None


# ============================================================================
# GAME MATCHING
# ============================================================================

def _same_team(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


def find_game(
    subjects: Sequence[str],
    results: Sequence[GameResult],
    sport: str,
    dual: bool = False,
) -> Optional[GameResult]:
    """
    Completed game of the pick's sport involving the subject team(s).

    Single-subject bets need an exact standardized-team match on home or away.
    Totals match on either participant, preferring a game that has both.
    """
    code = (sport or "").upper()
    candidates = [
        r for r in results
        if r.completed and (not code or r.sport.upper() == code)
    ]
    if not subjects:
        return None

    if not dual:
        team = subjects[0]
        for game in candidates:
            if _same_team(game.home_team, team) or _same_team(game.away_team, team):
                return game
        return None

    partial: Optional[GameResult] = None
    for game in candidates:
        hits = sum(
            1 for s in subjects
            if _same_team(game.home_team, s) or _same_team(game.away_team, s)
        )
        if hits == len(subjects):
            return game
        if hits and partial is None:
            partial = game
    return partial


# ============================================================================
# SETTLEMENT
# ============================================================================

def _compare(mine: float, theirs: float) -> GradeOutcome:
    if mine > theirs:
        return GradeOutcome.WIN
    if mine < theirs:
        return GradeOutcome.LOSS
    return GradeOutcome.PUSH


def settle(
    bet_type: BetType,
    team: Optional[str],
    line: Optional[float],
    game: GameResult,
) -> GradeOutcome:
    """
    Bet-type settlement arithmetic against one final score.

    ML / first half:  team score vs opponent score (tie -> PUSH unless the
                      provider declared a winner, e.g. a shootout)
    SPREAD:           team score + line vs opponent score
    OVER / UNDER:     home + away vs line
    """
    if bet_type in TOTAL_BET_TYPES:
        if line is None:
            return GradeOutcome.UNDETERMINED
        outcome = _compare(game.total, line)
        if bet_type == BetType.UNDER and outcome != GradeOutcome.PUSH:
            outcome = GradeOutcome.LOSS if outcome == GradeOutcome.WIN else GradeOutcome.WIN
        return outcome

    if not team:
        return GradeOutcome.UNDETERMINED
    if _same_team(game.home_team, team):
        mine, theirs = game.home_score, game.away_score
    elif _same_team(game.away_team, team):
        mine, theirs = game.away_score, game.home_score
    else:
        return GradeOutcome.UNDETERMINED

    if bet_type in (BetType.MONEYLINE, BetType.FIRST_HALF_MONEYLINE):
        outcome = _compare(mine, theirs)
        if outcome == GradeOutcome.PUSH and game.winner:
            if _same_team(game.winner, team):
                return GradeOutcome.WIN
            if _same_team(game.winner, game.home_team) or _same_team(game.winner, game.away_team):
                return GradeOutcome.LOSS
        return outcome

    if bet_type == BetType.SPREAD:
        if line is None:
            return GradeOutcome.UNDETERMINED
        return _compare(mine + line, theirs)

    return GradeOutcome.UNDETERMINED


def grade_consensus_pick(pick: ConsensusPick, results: Sequence[GameResult]) -> GradedPick:
    """Settle one consensus pick against the day's completed games."""
    if pick.bet_type == BetType.PROP:
        return GradedPick(pick, GradeOutcome.UNDETERMINED, notes=("props are not graded",))

    dual = pick.bet_type in TOTAL_BET_TYPES
    subjects = parse_bet_subjects(pick.bet, pick.bet_type)
    game = find_game(subjects, results, pick.sport, dual=dual)
    if game is None:
        logger.debug(f"No final score for {pick.bet} ({pick.sport})")
        return GradedPick(pick, GradeOutcome.UNDETERMINED, notes=("no matching game",))

    team = None if dual else subjects[0]
    outcome = settle(pick.bet_type, team, _line_value(pick), game)
    notes = ()
    if pick.bet_type == BetType.FIRST_HALF_MONEYLINE:
        notes = ("settled on full-game score",)
    return GradedPick(pick, outcome, final_score=game.final_score, notes=notes)


def grade_consensus(picks: Sequence[ConsensusPick], results: Sequence[GameResult]) -> List[GradedPick]:
    graded = [grade_consensus_pick(p, results) for p in picks]
    summary = summarize_grades(graded)
    logger.info(
        f"Graded {summary['total']} picks: {summary['wins']}W-{summary['losses']}L-"
        f"{summary['pushes']}P, {summary['undetermined']} undetermined"
    )
    return graded


def summarize_grades(graded: Sequence[GradedPick]) -> Dict[str, Any]:
    """
    Totals for a grading run.

    winPct = wins / (wins + losses) as a percentage with one decimal;
    pushes and undetermined picks are not decided bets. 0 when nothing decided.
    """
    wins = sum(1 for g in graded if g.outcome == GradeOutcome.WIN)
    losses = sum(1 for g in graded if g.outcome == GradeOutcome.LOSS)
    pushes = sum(1 for g in graded if g.outcome == GradeOutcome.PUSH)
    undetermined = sum(1 for g in graded if g.outcome == GradeOutcome.UNDETERMINED)
    decided = wins + losses
    win_pct = math.floor(wins / decided * 1000 + 0.5) / 10 if decided else 0.0
    return {
        "total": len(graded),
        "wins": wins,
        "losses": losses,
        "pushes": pushes,
        "undetermined": undetermined,
        "winPct": win_pct,
    }
