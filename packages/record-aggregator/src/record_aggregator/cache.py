from __future__ import annotations

from collections.abc import Iterable

from record_aggregator.core.models import CacheEntry
from record_aggregator.schemas.record import BaseRecord


class RecordCache:
    """Holds the latest aggregated snapshot.

    Each ``replace`` swaps in a new immutable entry in a single assignment;
    concurrent writers race and the last one wins.
    """

    def __init__(self, ttl_seconds: float = 300) -> None:
        self.ttl_seconds = ttl_seconds
        self._entry: CacheEntry | None = None

    @property
    def entry(self) -> CacheEntry | None:
        return self._entry

    def is_stale(self, now: float) -> bool:
        entry = self._entry
        if entry is None or not entry.records:
            return True
        return now - entry.fetched_at >= self.ttl_seconds

    def replace(self, records: Iterable[BaseRecord], using_real_source: bool, now: float) -> CacheEntry:
        entry = CacheEntry(records=tuple(records), fetched_at=now, using_real_source=using_real_source)
        self._entry = entry
        return entry

    def clear(self) -> None:
        self._entry = None
