"""
SNAPSHOT.PY - Time-boxed, replaceable snapshots of external data

Schedule and final-score lookups are shared across callers for a TTL window.
They are modeled as immutable snapshots (value + fetch time + TTL) that the
boundary refreshes and hands to the pure stages. Nothing downstream of the
boundary reads a cache directly.

A refresh race is harmless: two callers may both fetch, and either result is
a valid snapshot. The per-key lock only avoids the duplicate network call.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Hashable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class Snapshot(Generic[T]):
    """A fetched value with the monotonic time it was fetched and its TTL."""
    value: T
    fetched_at: float
    ttl_seconds: float

    def is_fresh(self, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.monotonic()
        return (now - self.fetched_at) < self.ttl_seconds

    def age_seconds(self, now: Optional[float] = None) -> float:
        if now is None:
            now = time.monotonic()
        return max(0.0, now - self.fetched_at)


class SnapshotCache(Generic[T]):
    """
    Keyed snapshot store with optional single-flight refresh.

    Args:
        ttl_seconds: Lifetime of every snapshot stored here
        single_flight: Serialize refreshes of the same key behind an asyncio.Lock
        clock: Monotonic clock (injectable for tests)
    """

    def __init__(
        self,
        ttl_seconds: float,
        single_flight: bool = True,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.single_flight = single_flight
        self._clock = clock
        self._snapshots: Dict[Hashable, Snapshot[T]] = {}
        self._locks: Dict[Hashable, asyncio.Lock] = {}

    def peek(self, key: Hashable) -> Optional[Snapshot[T]]:
        """Return the stored snapshot for key if it is still fresh."""
        snap = self._snapshots.get(key)
        if snap is not None and snap.is_fresh(self._clock()):
            return snap
        return None

    def put(self, key: Hashable, value: T) -> Snapshot[T]:
        snap = Snapshot(value=value, fetched_at=self._clock(), ttl_seconds=self.ttl_seconds)
        self._snapshots[key] = snap
        return snap

    def invalidate(self, key: Optional[Hashable] = None) -> None:
        if key is None:
            self._snapshots.clear()
        else:
            self._snapshots.pop(key, None)

    async def get_or_refresh(
        self,
        key: Hashable,
        loader: Callable[[], Awaitable[T]],
    ) -> Snapshot[T]:
        """
        Return a fresh snapshot for key, calling loader when stale or missing.

        The loader is expected to resolve failures to an empty value itself;
        whatever it returns is stored.
        """
        snap = self.peek(key)
        if snap is not None:
            return snap

        if not self.single_flight:
            return self.put(key, await loader())

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            # Another caller may have refreshed while we waited
            snap = self.peek(key)
            if snap is not None:
                return snap
            logger.debug("Refreshing snapshot %s", key)
            return self.put(key, await loader())

    def stats(self) -> Dict[str, Any]:
        now = self._clock()
        return {
            "entries": len(self._snapshots),
            "fresh": sum(1 for s in self._snapshots.values() if s.is_fresh(now)),
            "ttl_seconds": self.ttl_seconds,
        }
