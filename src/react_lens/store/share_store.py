"""In-memory store for shareable scan results.

Single-process only — each worker has its own instance, injected
through app state. Entries expire ``ttl_seconds`` after creation and
at most ``max_entries`` are kept, oldest evicted first.
"""

from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from pydantic import BaseModel, ConfigDict

from react_lens.analysis.schemas import ScanResult


class SharedScan(BaseModel):
    model_config = ConfigDict(frozen=True)

    created_at: datetime
    result: ScanResult


def _utcnow() -> datetime:
    return datetime.now(UTC)


class ShareStore:
    """Dict-backed, insertion-ordered store with TTL and size cap."""

    def __init__(
        self,
        ttl_seconds: int = 86_400,
        max_entries: int = 1000,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._ttl = timedelta(seconds=ttl_seconds)
        self._max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, SharedScan] = OrderedDict()

    def save(self, share_id: str, result: ScanResult) -> SharedScan:
        self._evict_expired()
        self._entries.pop(share_id, None)
        shared = SharedScan(created_at=self._clock(), result=result)
        self._entries[share_id] = shared
        while len(self._entries) > self._max_entries:
            self._entries.popitem(last=False)
        return shared

    def load(self, share_id: str) -> SharedScan | None:
        shared = self._entries.get(share_id)
        if shared is None:
            return None
        if self._is_expired(shared):
            del self._entries[share_id]
            return None
        return shared

    def __len__(self) -> int:
        return len(self._entries)

    def _is_expired(self, shared: SharedScan) -> bool:
        return self._clock() - shared.created_at >= self._ttl

    def _evict_expired(self) -> None:
        # Insertion order is creation order, so expired entries lead
        while self._entries:
            oldest = next(iter(self._entries.values()))
            if not self._is_expired(oldest):
                break
            self._entries.popitem(last=False)
