"""
In-memory expiring cache for upstream responses.

Entries are (value, timestamp) pairs. A read is a hit while
now - timestamp < ttl; stale entries stay in place until the next write
to the same key overwrites them. Nothing is ever persisted, and there is
no lock: two requests racing on the same stale key both fetch and the
last write wins.
"""

from __future__ import annotations
import time
from typing import Any, Callable, Hashable, Optional

from articlepages.config import CACHE_TTL_MS

LIST_KEY = ("list",)


def article_key(article_id) -> tuple:
    return ("article", str(article_id))


def _wall_clock_ms() -> float:
    return time.time() * 1000


class ExpiringCache:
    def __init__(self, ttl_ms: int = CACHE_TTL_MS,
                 clock: Optional[Callable[[], float]] = None):
        self._ttl_ms = ttl_ms
        self._clock = clock or _wall_clock_ms
        self._entries: dict = {}

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    def now(self) -> float:
        return self._clock()

    def get(self, key: Hashable, now: Optional[float] = None) -> Optional[Any]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, ts = entry
        if now is None:
            now = self.now()
        if now - ts < self._ttl_ms:
            return value
        return None

    def set(self, key: Hashable, value: Any, timestamp: Optional[float] = None):
        if timestamp is None:
            timestamp = self.now()
        self._entries[key] = (value, timestamp)

    def __contains__(self, key) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
