"""In-memory TTL cache fronting the upstream lookups."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from app.schemas.search import SearchResult

DEFAULT_TTL_SECONDS = 60 * 60


@dataclass
class CacheEntry:
    key: str
    data: SearchResult
    created_at: float


class SearchCache:
    """Map of lookup key to search result with expiry checked on read.

    Stale entries are ignored, not purged; the next resolution for the same
    key overwrites them. Growth is bounded only by process lifetime.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[SearchResult]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.created_at >= self.ttl_seconds:
            return None
        return entry.data

    def set(self, key: str, value: SearchResult) -> None:
        self._entries[key] = CacheEntry(key=key, data=value, created_at=self._clock())

    def invalidate(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def __len__(self) -> int:
        return len(self._entries)
