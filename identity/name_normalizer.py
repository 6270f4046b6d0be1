"""
Name Normalizer - Canonical identities for teams, analysts and sports

Rules:
- Team: table-driven alias containment (identity/team_mappings.py), longest
  alias wins, unmatched names pass through trimmed
- Analyst: collapse whitespace, known entities, "Capper N", then title-case
  preserving short all-caps tokens
- Sport: alias table (core/sports.py), unmapped labels pass through uppercased
"""

import logging
import re
import unicodedata
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from core.sports import SPORT_ALIASES
from identity.team_mappings import TEAM_MAPPINGS

logger = logging.getLogger(__name__)

# Multi-word services and bots that must count as one analyst however they
# are spelled. Keys are matched with whitespace removed, case-insensitive.
SPECIAL_CAPPERS: Dict[str, str] = {
    "dimers": "Dimers",
    "consensusleans": "Consensus Leans",
    "ballparkpal": "Ballpark Pal",
    "lightningbolt": "Lightning Bolt",
    "covers consensus": "Covers Consensus",
    "actionnetwork": "Action Network",
    "pickswise": "Pickswise",
}

UNKNOWN_CAPPER = "Unknown"

_NUMBERED_CAPPER = re.compile(r"capper\s*(\d+)", re.IGNORECASE)

# Leading noise that scrapers leave in front of a team name
_NOISE_PREFIXES = [
    re.compile(r"^(?:OF THE DAY|PICK OF THE DAY|POTD|BET LABS?)\s+", re.IGNORECASE),
    re.compile(r"^(?:LIVE|TONIGHT|TODAY)\s+", re.IGNORECASE),
]

# "Team -4½ -118 at DraftKings", "Team +4 at Buckeye", "Team at Sportsbook"
_BOOK_SUFFIXES = [
    re.compile(r"\s+[-+][\d½.]+\s+[-+]\d+\s+at\s+\w+.*$", re.IGNORECASE),
    re.compile(r"\s+[-+][\d½.]+\s+at\s+\w+.*$", re.IGNORECASE),
    re.compile(r"\s+at\s+\w+.*$", re.IGNORECASE),
]

# Aliases that are also ordinary words only match in their table casing
WORD_ALIASES = frozenset({"no"})


def remove_accents(text: str) -> str:
    """Remove accents/diacritics from text."""
    normalized = unicodedata.normalize('NFD', text)
    return ''.join(c for c in normalized if unicodedata.category(c) != 'Mn')


def _match_form(text: str) -> str:
    """
    Punctuation-free, single-spaced form used on both sides of alias matching.

    Case is preserved here; callers lowercase when they need to.
    "St. John's" -> "St Johns", "Miami (OH)" -> "Miami OH", "Texas A&M" -> "Texas A&M"
    """
    text = remove_accents(text)
    text = re.sub(r"['.’]", "", text)
    text = re.sub(r"[^\w&]+", " ", text)
    return " ".join(text.split())


@lru_cache(maxsize=None)
def _alias_index(sport: str) -> Tuple[Tuple[str, str, bool], ...]:
    """
    (alias, canonical, exact_case) for one sport, longest alias first.

    Aliases claimed by two canonicals of the same sport are left out.
    """
    table = TEAM_MAPPINGS.get(sport, {})
    owners: Dict[str, set] = {}
    spelled: Dict[str, str] = {}
    for canonical, aliases in table.items():
        for alias in [canonical] + list(aliases):
            form = _match_form(alias)
            if not form:
                continue
            key = form.lower()
            owners.setdefault(key, set()).add(canonical)
            spelled.setdefault(key, form)

    entries: List[Tuple[str, str, bool]] = []
    for key, canonicals in owners.items():
        if len(canonicals) != 1:
            continue
        canonical = next(iter(canonicals))
        if key in WORD_ALIASES:
            entries.append((spelled[key], canonical, True))
        else:
            entries.append((key, canonical, False))

    # Stable: equal lengths keep table order
    entries.sort(key=lambda e: -len(e[0]))
    return tuple(entries)


def clean_team_name(name: str) -> str:
    """Strip scraper prefixes ("POTD", "LIVE") and trailing "at <sportsbook>" text."""
    if not name:
        return ""
    cleaned = name.strip()
    for pattern in _NOISE_PREFIXES:
        cleaned = pattern.sub("", cleaned)
    for pattern in _BOOK_SUFFIXES:
        cleaned = pattern.sub("", cleaned)
    return cleaned.strip()


def _best_match(raw: str, sports: List[str]) -> Optional[Tuple[str, str]]:
    """Longest whole-word alias contained in raw across the given sports."""
    form = _match_form(clean_team_name(raw))
    if not form:
        return None
    padded = f" {form} "
    padded_lower = padded.lower()

    best: Optional[Tuple[int, str, str]] = None
    for sport in sports:
        for alias, canonical, exact_case in _alias_index(sport):
            if best is not None and len(alias) <= best[0]:
                break
            haystack = padded if exact_case else padded_lower
            if f" {alias} " in haystack:
                best = (len(alias), canonical, sport)
                break
    if best is None:
        return None
    return best[1], best[2]


def standardize_team_name(raw: str, sport: Optional[str] = None) -> str:
    """
    Canonical team name for the sport, or the trimmed input when unmapped.

    Without a sport every table is searched.

    Example:
        >>> standardize_team_name("Yale Bulldogs", "NCAAB")
        'Yale'
        >>> standardize_team_name("KC -3", "NFL")
        'Chiefs'
    """
    if not raw or not raw.strip():
        return (raw or "").strip()

    code = normalize_sport(sport) if sport else None
    sports = [code] if code in TEAM_MAPPINGS else list(TEAM_MAPPINGS)
    match = _best_match(raw, sports)
    if match is None:
        logger.info("Unmapped team %r (sport=%s)", raw.strip(), code or "-")
        return raw.strip()
    return match[0]


def identify_sport(raw_team: str) -> Optional[str]:
    """Sport whose table best matches the name, None when nothing matches."""
    if not raw_team:
        return None
    match = _best_match(raw_team, list(TEAM_MAPPINGS))
    return match[1] if match else None


def normalize_capper_name(raw: str) -> str:
    """
    Canonical analyst identity.

    "dave  price" and "Dave Price" are the same analyst; "DIMERS bot" is
    "Dimers"; "capper7" is "Capper 7"; "NFL Guru" keeps its "NFL".
    """
    name = " ".join((raw or "").split())
    if not name:
        return UNKNOWN_CAPPER

    squashed = re.sub(r"\s+", "", name).lower()
    for key, display in SPECIAL_CAPPERS.items():
        if re.sub(r"\s+", "", key) in squashed:
            return display

    numbered = _NUMBERED_CAPPER.search(name)
    if numbered:
        return f"Capper {int(numbered.group(1))}"

    words = []
    for word in name.split(" "):
        if word.isupper() and len(word) <= 4:
            words.append(word)
        else:
            words.append(word[:1].upper() + word[1:].lower())
    display = " ".join(words)
    logger.info("Unmapped analyst %r -> %r", name, display)
    return display


def normalize_sport(raw: Optional[str]) -> str:
    """
    Canonical sport code for a raw league label.

    Example:
        >>> normalize_sport("ncaa-b")
        'NCAAB'
        >>> normalize_sport("Curling")
        'CURLING'
    """
    label = " ".join((raw or "").upper().split())
    if not label:
        return ""
    code = SPORT_ALIASES.get(label)
    if code is None:
        code = SPORT_ALIASES.get(label.replace("-", " "))
    if code is None:
        logger.info("Unmapped sport label %r", raw)
        return label
    return code


__all__ = [
    "SPECIAL_CAPPERS",
    "UNKNOWN_CAPPER",
    "remove_accents",
    "clean_team_name",
    "standardize_team_name",
    "identify_sport",
    "normalize_capper_name",
    "normalize_sport",
]
