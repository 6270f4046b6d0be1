"""
bet_parser.py - Bet type, line and subject from free-text pick strings

Two ordered rule chains, first match wins:

BET_TYPE_RULES:
    1. first-half / first-5 marker        -> FIRST_HALF_MONEYLINE
    2. over/under marker + number         -> OVER / UNDER, line = number
    3. signed number with |n| <= 20       -> SPREAD, line = number
    4. player-stat noun                   -> PROP
    5. anything else                      -> MONEYLINE

SUBJECT_RULES:
    1. pick text with bet noise stripped, if letters remain
    2. first matchup side that contains letters
    3. leading word run of the pick text (bet keywords excluded)
    4. UNKNOWN_SUBJECT

Each rule is a small function returning a result or None, so a rule can be
tested (and reordered) on its own. Nothing here raises on bad input.
"""

import re
from typing import Callable, List, Optional, Tuple

from pick_schema import BetType

UNKNOWN_SUBJECT = "Unknown"

# American odds start at 100; anything with |n| <= 20 is treated as a spread
MAX_SPREAD_ABS = 20.0

ParsedBet = Tuple[BetType, Optional[str]]
BetRule = Callable[[str], Optional[ParsedBet]]
SubjectRule = Callable[[str, str], Optional[str]]

_NUMBER = r"\d+(?:\.\d+)?"

FIRST_HALF_PATTERN = re.compile(
    r"\b(?:F5|FIRST\s*5|1H|FIRST\s+HALF|1ST\s+HALF|1P|1ST\s+PERIOD)\b",
    re.IGNORECASE,
)
OVER_UNDER_PATTERN = re.compile(
    rf"\b(OVER|UNDER)\s*({_NUMBER})|(?<![A-Za-z])([OU])\s*({_NUMBER})\b",
    re.IGNORECASE,
)
SIGNED_NUMBER_PATTERN = re.compile(rf"(?<![\w.])([+-]{_NUMBER})")
PROP_PATTERN = re.compile(
    r"\b(?:STRIKEOUTS?|HITS|POINTS|PTS|REBOUNDS?|REBS|ASSISTS?|YARDS|YDS|"
    r"TOUCHDOWNS?|RECEPTIONS|SAVES|SHOTS\s+ON\s+GOAL|SOG|HOME\s+RUNS?|RBIS?|"
    r"THREES|3PM|PRA|TOTAL\s+BASES)\b",
    re.IGNORECASE,
)

SPORTSBOOKS = (
    "DraftKings", "DK", "FanDuel", "FD", "BetMGM", "MGM", "Caesars", "BetRivers",
    "Bet365", "ESPN Bet", "ESPNBet", "Fanatics", "Hard Rock", "Bovada",
    "BetOnline", "Pinnacle", "Circa", "PointsBet", "Buckeye", "Consensus",
)
_BOOK_SUFFIX = re.compile(
    r"\s+(?:at|@|on)\s+(?:" + "|".join(re.escape(b) for b in SPORTSBOOKS) + r")\b.*$",
    re.IGNORECASE,
)
_PARENTHETICAL = re.compile(r"\([^)]*\)|\[[^\]]*\]")
_TRAILING_ODDS = re.compile(r"\s*[-+]?\d{3,}\s*$")
_SPREAD_NUMBERS = re.compile(rf"(?<![\w.])[+-]{_NUMBER}")
_PICK_EVEN = re.compile(r"\b(?:PK|PICK'?EM|PICK\s+EM|EVEN|EV)\b", re.IGNORECASE)
_BET_KEYWORDS = re.compile(
    r"\b(?:ML|MONEYLINE|MONEY\s+LINE|F5|FIRST\s*5|1H|FIRST\s+HALF|1ST\s+HALF|1P|"
    r"1ST\s+PERIOD|RL|RUN\s*LINE|PUCK\s*LINE|ATS|SPREAD|ALT|TT|TEAM\s+TOTAL|TO\s+WIN)\b",
    re.IGNORECASE,
)
_OVER_UNDER_AMOUNT = re.compile(
    rf"\b(?:OVER|UNDER)\b\s*(?:{_NUMBER})?|(?<![A-Za-z])[OU]\s*{_NUMBER}\b",
    re.IGNORECASE,
)
_MATCHUP_SPLIT = re.compile(r"\s+(?:vs\.?|v\.?|@|at)\s+|\s*/\s*", re.IGNORECASE)
_LEADING_WORDS = re.compile(r"^\s*([A-Za-z][\w.'&-]*(?:\s+[A-Za-z][\w.'&-]*)*)")
_HAS_LETTER = re.compile(r"[A-Za-z]")


# =============================================================================
# HALF POINTS
# =============================================================================

def normalize_half_points(text: str) -> str:
    """
    Rewrite the one-half glyph as a decimal.

    "Over 50½" -> "Over 50.5", "Bills +½" -> "Bills +0.5"
    """
    if not text or "½" not in text:
        return text or ""
    text = re.sub(r"(\d)½", r"\1.5", text)
    return text.replace("½", "0.5")


def _abs_value(signed: str) -> Optional[float]:
    try:
        return abs(float(signed))
    except ValueError:
        return None


# =============================================================================
# BET TYPE RULES
# =============================================================================

def first_half_rule(text: str) -> Optional[ParsedBet]:
    if FIRST_HALF_PATTERN.search(text):
        return BetType.FIRST_HALF_MONEYLINE, None
    return None


def over_under_rule(text: str) -> Optional[ParsedBet]:
    m = OVER_UNDER_PATTERN.search(text)
    if not m:
        return None
    if m.group(1):
        word, number = m.group(1), m.group(2)
    else:
        word, number = m.group(3), m.group(4)
    bet_type = BetType.OVER if word.upper().startswith("O") else BetType.UNDER
    return bet_type, number


def spread_rule(text: str) -> Optional[ParsedBet]:
    for m in SIGNED_NUMBER_PATTERN.finditer(text):
        value = _abs_value(m.group(1))
        if value is not None and value <= MAX_SPREAD_ABS:
            return BetType.SPREAD, m.group(1)
    return None


def prop_rule(text: str) -> Optional[ParsedBet]:
    if PROP_PATTERN.search(text):
        return BetType.PROP, None
    return None


def moneyline_rule(text: str) -> Optional[ParsedBet]:
    return BetType.MONEYLINE, None


BET_TYPE_RULES: List[BetRule] = [
    first_half_rule,
    over_under_rule,
    spread_rule,
    prop_rule,
    moneyline_rule,
]


def parse_bet_type(text: str) -> ParsedBet:
    """
    Bet type and optional line for a pick string.

    Example:
        >>> parse_bet_type("Chiefs -3.5 (-110)")
        (<BetType.SPREAD: 'SPREAD'>, '-3.5')
        >>> parse_bet_type("Lakers/Celtics Over 220½")
        (<BetType.OVER: 'OVER'>, '220.5')
        >>> parse_bet_type("Yankees -150")
        (<BetType.MONEYLINE: 'MONEYLINE'>, None)
    """
    normalized = normalize_half_points(text or "")
    for rule in BET_TYPE_RULES:
        result = rule(normalized)
        if result is not None:
            return result
    return BetType.MONEYLINE, None


# =============================================================================
# SUBJECT RULES
# =============================================================================

def strip_bet_noise(text: str) -> str:
    """Remove books, odds, lines, PK markers, bet keywords and totals from a pick."""
    cleaned = normalize_half_points(text or "")
    cleaned = _BOOK_SUFFIX.sub("", cleaned)
    cleaned = _PARENTHETICAL.sub(" ", cleaned)
    # Totals first: "U 230" must not lose its number to the odds pattern
    cleaned = _OVER_UNDER_AMOUNT.sub(" ", cleaned)
    cleaned = _TRAILING_ODDS.sub("", cleaned)
    cleaned = _SPREAD_NUMBERS.sub(" ", cleaned)
    cleaned = _PICK_EVEN.sub(" ", cleaned)
    cleaned = _BET_KEYWORDS.sub(" ", cleaned)
    cleaned = PROP_PATTERN.sub(" ", cleaned)
    cleaned = " ".join(cleaned.split())
    return cleaned.strip(" -,:;|")


def split_matchup(matchup: str) -> List[str]:
    """Sides of "A vs B", "A vs. B", "A @ B", "A at B" or "A/B"."""
    if not matchup:
        return []
    return [side.strip() for side in _MATCHUP_SPLIT.split(matchup) if side and side.strip()]


def stripped_text_rule(text: str, matchup: str) -> Optional[str]:
    cleaned = strip_bet_noise(text)
    if _HAS_LETTER.search(cleaned):
        return cleaned
    return None


def matchup_rule(text: str, matchup: str) -> Optional[str]:
    for side in split_matchup(matchup):
        if _HAS_LETTER.search(side):
            return side
    return None


def leading_words_rule(text: str, matchup: str) -> Optional[str]:
    m = _LEADING_WORDS.match(text or "")
    if not m:
        return None
    words = []
    for word in m.group(1).split():
        if _BET_KEYWORDS.fullmatch(word) or _OVER_UNDER_AMOUNT.fullmatch(word):
            break
        words.append(word)
    return " ".join(words) or None


SUBJECT_RULES: List[SubjectRule] = [
    stripped_text_rule,
    matchup_rule,
    leading_words_rule,
]


def extract_team(pick_text: str, matchup: str = "") -> str:
    """
    Best-effort subject (team or player) of a pick, UNKNOWN_SUBJECT if none.

    Example:
        >>> extract_team("Chiefs -3 (-110) at DraftKings", "Chiefs vs Bills")
        'Chiefs'
        >>> extract_team("Over 220.5", "Lakers vs Celtics")
        'Lakers'
    """
    for rule in SUBJECT_RULES:
        subject = rule(pick_text or "", matchup or "")
        if subject:
            return subject
    return UNKNOWN_SUBJECT


__all__ = [
    "UNKNOWN_SUBJECT",
    "MAX_SPREAD_ABS",
    "BET_TYPE_RULES",
    "SUBJECT_RULES",
    "normalize_half_points",
    "parse_bet_type",
    "strip_bet_noise",
    "split_matchup",
    "extract_team",
]
