from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import httpx
from opentelemetry import trace

from record_aggregator.core.exceptions import RecordValidationError, SourceRequestError, SourceTemporaryError
from record_aggregator.core.retry import with_linear_backoff
from record_aggregator.health import HealthMonitor
from record_aggregator.schemas.record import BaseRecord, parse_record

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

RETRYABLE_STATUS_CODES = frozenset({408, 429, 500, 502, 503, 504})
# Checked in order; the first key holding a non-empty list wins.
RECORD_CONTAINER_KEYS: tuple[str, ...] = ("permits", "records", "data", "results")
USER_AGENT = "record-aggregator/0.1.0"


def build_client(timeout_seconds: float, transport: httpx.AsyncBaseTransport | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=timeout_seconds, transport=transport, follow_redirects=True)


def _pick_record_list(payload: Any) -> list[Any] | None:
    if not isinstance(payload, dict):
        return None
    found_empty = False
    for key in RECORD_CONTAINER_KEYS:
        items = payload.get(key)
        if isinstance(items, list):
            if items:
                return items
            found_empty = True
    return [] if found_empty else None


class SourceFetcher:
    def __init__(
        self,
        health: HealthMonitor,
        max_retries: int = 2,
        retry_delay_seconds: float = 1.0,
        timeout_seconds: float = 5.0,
        verification_level: str = "high",
        client: httpx.AsyncClient | None = None,
        client_factory: Callable[[], httpx.AsyncClient] | None = None,
    ) -> None:
        self._health = health
        self._max_retries = max_retries
        self._retry_delay_seconds = retry_delay_seconds
        self._timeout_seconds = timeout_seconds
        self._verification_level = verification_level
        self._client = client
        self._client_factory = client_factory

    async def fetch(self, endpoint: str | None, credential: str | None, type_label: str) -> list[BaseRecord]:
        """Fetch one source's records; never raises for source failures.

        Returns an empty list when the source is unconfigured, rejects the
        request, exhausts its retries, or answers with an unrecognizable body.
        """
        if not endpoint or not credential:
            logger.debug("source_unconfigured", extra={"source": type_label})
            return []

        with tracer.start_as_current_span("source_fetch") as span:
            span.set_attribute("source.type", type_label)
            span.set_attribute("source.endpoint", endpoint)
            try:
                if self._client is not None:
                    records = await self._fetch_with_retry(self._client, endpoint, credential, type_label)
                else:
                    factory = self._client_factory or (lambda: build_client(self._timeout_seconds))
                    async with factory() as client:
                        records = await self._fetch_with_retry(client, endpoint, credential, type_label)
            except SourceRequestError as exc:
                span.set_attribute("source.record_count", 0)
                logger.warning(
                    "source_fetch_failed",
                    extra={"source": type_label, "endpoint": endpoint, "error": str(exc)},
                )
                return []
            span.set_attribute("source.record_count", len(records))

        if records:
            logger.info(
                "source_fetch_completed",
                extra={"source": type_label, "endpoint": endpoint, "record_count": len(records)},
            )
        return records

    async def _fetch_with_retry(
        self,
        client: httpx.AsyncClient,
        endpoint: str,
        credential: str,
        type_label: str,
    ) -> list[BaseRecord]:
        headers = self._headers(credential)
        attempts = 0

        async def _request_once() -> list[BaseRecord]:
            nonlocal attempts
            attempts += 1
            logger.info(
                "source_attempt_started",
                extra={
                    "source": type_label,
                    "endpoint": endpoint,
                    "attempt": attempts,
                    "max_attempts": self._max_retries + 1,
                },
            )
            try:
                response = await asyncio.wait_for(
                    client.get(endpoint, headers=headers),
                    timeout=self._timeout_seconds,
                )
            except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
                self._health.record_attempt(endpoint, success=False)
                raise SourceTemporaryError(f"source timeout: source={type_label}, attempt={attempts}") from exc
            except httpx.HTTPError as exc:
                self._health.record_attempt(endpoint, success=False)
                raise SourceTemporaryError(
                    f"source request error: source={type_label}, attempt={attempts}, error={exc}"
                ) from exc

            if response.status_code in RETRYABLE_STATUS_CODES:
                self._health.record_attempt(endpoint, success=False)
                raise SourceTemporaryError(
                    f"source temporary error: status={response.status_code}, source={type_label}"
                )
            if not response.is_success:
                self._health.record_attempt(endpoint, success=False)
                raise SourceRequestError(
                    f"source request rejected: status={response.status_code}, source={type_label}"
                )

            self._health.record_attempt(endpoint, success=True)
            return self._extract_records(response, endpoint, type_label)

        def _on_retry(attempt: int, delay: float) -> None:
            logger.warning(
                "source_retry_scheduled",
                extra={"source": type_label, "endpoint": endpoint, "retry": attempt, "delay_seconds": delay},
            )

        return await with_linear_backoff(
            _request_once,
            max_retries=self._max_retries,
            delay_seconds=self._retry_delay_seconds,
            should_retry=lambda exc: isinstance(exc, SourceTemporaryError),
            on_retry=_on_retry,
        )

    def _headers(self, credential: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {credential}",
            "Accept": "application/json, text/plain, */*",
            "User-Agent": USER_AGENT,
            "X-Client-Type": "record-aggregator",
            "X-Verification-Level": self._verification_level,
            "Cache-Control": "no-cache",
            "Pragma": "no-cache",
        }

    def _extract_records(self, response: httpx.Response, endpoint: str, type_label: str) -> list[BaseRecord]:
        try:
            payload = response.json()
        except ValueError:
            logger.warning("source_payload_malformed", extra={"source": type_label, "endpoint": endpoint})
            return []
        items = _pick_record_list(payload)
        if items is None:
            logger.warning("source_payload_malformed", extra={"source": type_label, "endpoint": endpoint})
            return []

        records: list[BaseRecord] = []
        rejected = 0
        for item in items:
            if isinstance(item, dict) and item.get("type") is None:
                item = {**item, "type": type_label}
            try:
                records.append(parse_record(item))
            except RecordValidationError:
                rejected += 1
        if rejected:
            logger.warning(
                "source_records_rejected",
                extra={"source": type_label, "endpoint": endpoint, "rejected_count": rejected, "total": len(items)},
            )
        return records
