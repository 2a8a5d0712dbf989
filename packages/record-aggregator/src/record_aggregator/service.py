from __future__ import annotations

import logging
import time
from collections.abc import Callable

import httpx

from record_aggregator.aggregator import RecordAggregator
from record_aggregator.cache import RecordCache
from record_aggregator.config import AggregatorSettings, log_settings_status, validate_settings
from record_aggregator.health import HealthMonitor
from record_aggregator.sources.fetcher import SourceFetcher, build_client

logger = logging.getLogger(__name__)


class ServiceContext:
    """Owns the aggregator state for one running service instance.

    The cache and health counters live as long as the context does. The
    shared HTTP client is opened by ``start`` and closed by ``stop``.
    """

    def __init__(
        self,
        settings: AggregatorSettings,
        *,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        validate_settings(settings)
        self.settings = settings
        self.health = HealthMonitor()
        self.cache = RecordCache(ttl_seconds=settings.RECORD_CACHE_TTL_SECONDS)
        self._client_factory = client_factory
        self._clock = clock
        self._client: httpx.AsyncClient | None = None
        self._aggregator: RecordAggregator | None = None

    @property
    def started(self) -> bool:
        return self._aggregator is not None

    @property
    def aggregator(self) -> RecordAggregator:
        if self._aggregator is None:
            raise RuntimeError("service context is not started")
        return self._aggregator

    async def start(self) -> None:
        if self._aggregator is not None:
            return
        retry = self.settings.retry
        self._client = self._new_client(retry.timeout_seconds)
        fetcher = SourceFetcher(
            health=self.health,
            max_retries=retry.max_retries,
            retry_delay_seconds=retry.retry_delay_seconds,
            timeout_seconds=retry.timeout_seconds,
            verification_level=self.settings.VERIFICATION_LEVEL,
            client=self._client,
        )
        self._aggregator = RecordAggregator(
            sources=self.settings.source_descriptors(),
            fetcher=fetcher,
            cache=self.cache,
            mode=self.settings.mode,
            clock=self._clock,
        )
        log_settings_status(self.settings)
        logger.info("service_context_started", extra={"service": self.settings.SERVICE_NAME})

    async def stop(self) -> None:
        client, self._client = self._client, None
        self._aggregator = None
        if client is not None:
            await client.aclose()
        logger.info("service_context_stopped", extra={"service": self.settings.SERVICE_NAME})

    async def __aenter__(self) -> ServiceContext:
        await self.start()
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.stop()

    def _new_client(self, timeout_seconds: float) -> httpx.AsyncClient:
        if self._client_factory is not None:
            return self._client_factory()
        return build_client(timeout_seconds)
