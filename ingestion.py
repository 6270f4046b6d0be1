"""
ingestion.py - Fan-out over raw pick sources

Each PickSource produces RawPicks for today from one place (a site scrape,
a sheet export, a JSON drop). gather_raw_picks() runs every source at once:

- each source is bounded by Config.SOURCE_TIMEOUT
- a source that raises or times out contributes zero picks and a WARNING
- parlay picks ("Bills ML + Jets ML") are split into one RawPick per leg

Order of the returned picks follows the order of the sources; consensus does
not depend on it.
"""

import asyncio
import json
import logging
import re
from dataclasses import replace
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from bet_parser import strip_bet_noise
from core.structured_logging import log_with_context
from env_config import Config
from pick_schema import RawPick

logger = logging.getLogger(__name__)

PARLAY_SEPARATOR = re.compile(r"\s+\+\s+")
_STARTS_WITH_LETTER = re.compile(r"^[A-Za-z]")


# ============================================================================
# SOURCES
# ============================================================================

class PickSource:
    """Base adapter. Subclasses override fetch()."""

    name: str = "source"

    async def fetch(self) -> List[RawPick]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class StaticPickSource(PickSource):
    """Picks already in memory (operators, tests)."""

    def __init__(self, name: str, picks: Iterable[Union[RawPick, dict]]):
        self.name = name
        self.picks = [p if isinstance(p, RawPick) else RawPick.from_dict(p) for p in picks]

    async def fetch(self) -> List[RawPick]:
        return list(self.picks)


class JsonFilePickSource(PickSource):
    """
    A JSON file holding a list of RawPick dicts, or {"picks": [...]}.

    Missing source labels are filled with the source name.
    """

    def __init__(self, path: Union[str, Path], name: Optional[str] = None):
        self.path = Path(path)
        self.name = name or self.path.stem

    def _load(self) -> List[RawPick]:
        with open(self.path, "r", encoding="utf-8") as f:
            data: Any = json.load(f)
        if isinstance(data, dict):
            data = data.get("picks", [])
        if not isinstance(data, list):
            raise ValueError(f"{self.path} does not contain a list of picks")

        picks = []
        for entry in data:
            if not isinstance(entry, dict):
                continue
            pick = RawPick.from_dict(entry)
            if not pick.source:
                pick = replace(pick, source=self.name)
            picks.append(pick)
        return picks

    async def fetch(self) -> List[RawPick]:
        return await asyncio.to_thread(self._load)


# ============================================================================
# PARLAYS
# ============================================================================

def split_parlay_legs(text: str) -> List[str]:
    """
    Legs of a parlay pick, or [] when the text is a single bet.

    Example:
        >>> split_parlay_legs("Bills ML + Jets -3")
        ['Bills ML', 'Jets -3']
        >>> split_parlay_legs("Bills +3")
        []
    """
    parts = [p.strip() for p in PARLAY_SEPARATOR.split(text or "")]
    if len(parts) < 2:
        return []
    if not all(_STARTS_WITH_LETTER.match(p) for p in parts):
        return []
    return parts


def expand_parlays(picks: Sequence[RawPick]) -> List[RawPick]:
    """Replace every parlay pick with one RawPick per leg."""
    expanded: List[RawPick] = []
    for pick in picks:
        legs = split_parlay_legs(pick.text)
        if not legs:
            expanded.append(pick)
            continue
        for leg in legs:
            expanded.append(replace(pick, text=leg, matchup=strip_bet_noise(leg) or pick.matchup))
        logger.debug("Split parlay from %s into %d legs: %s", pick.capper, len(legs), pick.text)
    return expanded


# ============================================================================
# FAN-OUT
# ============================================================================

async def _fetch_source(source: PickSource, timeout: float) -> List[RawPick]:
    try:
        picks = await asyncio.wait_for(source.fetch(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning("Pick source %s timed out after %ss", source.name, timeout)
        return []
    except Exception as e:
        logger.warning("Pick source %s failed: %s", source.name, e)
        return []
    log_with_context(logger, logging.INFO, "Source fetched", source=source.name, picks=len(picks))
    return list(picks)


async def gather_raw_picks(
    sources: Sequence[PickSource],
    timeout: Optional[float] = None,
) -> List[RawPick]:
    """
    Fetch every source concurrently and return all picks with parlays split.

    Never raises because of a source; total failure yields [].
    """
    timeout = Config.SOURCE_TIMEOUT if timeout is None else timeout
    batches = await asyncio.gather(*(_fetch_source(s, timeout) for s in sources))
    picks = [pick for batch in batches for pick in batch]
    expanded = expand_parlays(picks)
    ok = sum(1 for b in batches if b)
    logger.info(
        f"Ingestion: {ok}/{len(sources)} sources returned picks, "
        f"{len(picks)} raw -> {len(expanded)} after parlay split"
    )
    return expanded
