from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from typing import Protocol

from record_aggregator.cache import RecordCache
from record_aggregator.config import ModeSettings
from record_aggregator.core.models import AggregationResult, SourceDescriptor, SourceSummary
from record_aggregator.fallback import fallback_records
from record_aggregator.schemas.record import BaseRecord

logger = logging.getLogger(__name__)


class SourceFetcherLike(Protocol):
    async def fetch(
        self,
        endpoint: str | None,
        credential: str | None,
        type_label: str,
    ) -> list[BaseRecord]: ...


class RecordAggregator:
    """Serves the aggregated record set from sources, cache or fallback."""

    def __init__(
        self,
        sources: Sequence[SourceDescriptor],
        fetcher: SourceFetcherLike,
        cache: RecordCache,
        mode: ModeSettings,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sources = tuple(sources)
        self._fetcher = fetcher
        self._cache = cache
        self._mode = mode
        self._clock = clock

    async def get_all(self, force_refresh: bool = False) -> AggregationResult:
        now = self._clock()
        entry = self._cache.entry
        use_cache = not force_refresh and not self._mode.force_real_active
        if use_cache and entry is not None and not self._cache.is_stale(now):
            logger.debug("record_cache_hit", extra={"record_count": len(entry.records)})
            return AggregationResult(records=entry.records, using_real_source=entry.using_real_source)

        configured = [source for source in self._sources if source.is_configured]
        if self._mode.force_real_active or (self._mode.use_production_apis and configured):
            records = await self._fan_out(configured)
            if records:
                logger.info(
                    "record_aggregation_completed",
                    extra={"record_count": len(records), "using_real_source": True},
                )
                return self._store(records, using_real_source=True, now=now)
            logger.warning(
                "record_sources_exhausted",
                extra={"configured_source_count": len(configured)},
            )

        return self._store(fallback_records(), using_real_source=False, now=now)

    async def find_by_identifier(self, identifier: str) -> BaseRecord | None:
        result = await self.get_all()
        for record in result.records:
            if record.matches_identifier(identifier):
                return record
        return None

    async def count(self) -> int:
        result = await self.get_all()
        return len(result.records)

    def source_summary(self) -> SourceSummary:
        return SourceSummary(
            configured=tuple(source.type_label for source in self._sources if source.is_configured),
            unconfigured=tuple(source.type_label for source in self._sources if not source.is_configured),
        )

    async def _fan_out(self, sources: Sequence[SourceDescriptor]) -> list[BaseRecord]:
        logger.info("record_fan_out_started", extra={"source_count": len(sources)})
        tasks = [self._fetcher.fetch(source.endpoint, source.credential, source.type_label) for source in sources]
        outcomes = await asyncio.gather(*tasks, return_exceptions=True)

        records: list[BaseRecord] = []
        failed: list[str] = []
        for source, outcome in zip(sources, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "record_source_crashed",
                    extra={"source": source.type_label, "error": repr(outcome)},
                )
                failed.append(source.type_label)
                continue
            if not outcome:
                failed.append(source.type_label)
                continue
            records.extend(outcome)
        if failed:
            logger.warning("record_sources_empty", extra={"sources": failed})
        return records

    def _store(self, records: Sequence[BaseRecord], using_real_source: bool, now: float) -> AggregationResult:
        entry = self._cache.replace(records, using_real_source=using_real_source, now=now)
        return AggregationResult(records=entry.records, using_real_source=entry.using_real_source)
