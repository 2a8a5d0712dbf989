from __future__ import annotations

import asyncio

import httpx
import pytest

from record_aggregator.aggregator import RecordAggregator
from record_aggregator.cache import RecordCache
from record_aggregator.config import ModeSettings
from record_aggregator.core.models import SourceDescriptor
from record_aggregator.fallback import FALLBACK_RECORDS
from record_aggregator.health import HealthMonitor
from record_aggregator.schemas.record import DOCUMENT_TYPES, BaseRecord, parse_record
from record_aggregator.sources.fetcher import SourceFetcher

PRODUCTION = ModeSettings(use_production_apis=True, force_real_apis=False, verification_level="high")
FORCED = ModeSettings(use_production_apis=True, force_real_apis=True, verification_level="high")
OFFLINE = ModeSettings(use_production_apis=False, force_real_apis=False, verification_level="high")


def _record(type_label: str, identifier: str) -> BaseRecord:
    return parse_record({"type": type_label, "name": f"Holder {identifier}", "permitNumber": identifier})


class Clock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


class StubFetcher:
    def __init__(self, responses: dict[str, list[BaseRecord] | Exception]) -> None:
        self._responses = responses
        self.calls: list[str] = []

    async def fetch(self, endpoint: str | None, credential: str | None, type_label: str) -> list[BaseRecord]:
        self.calls.append(type_label)
        await asyncio.sleep(0)
        response = self._responses.get(type_label, [])
        if isinstance(response, Exception):
            raise response
        return response


def _sources(*labels: str) -> list[SourceDescriptor]:
    return [
        SourceDescriptor(type_label=label, endpoint=f"https://{index}.example.com", credential="key")
        for index, label in enumerate(labels)
    ]


@pytest.mark.asyncio
async def test_get_all_serves_cache_within_ttl_without_fetching() -> None:
    clock = Clock()
    fetcher = StubFetcher({"Work Visa": [_record("Work Visa", "WV-1")]})
    aggregator = RecordAggregator(
        sources=_sources("Work Visa"),
        fetcher=fetcher,
        cache=RecordCache(ttl_seconds=300),
        mode=PRODUCTION,
        clock=clock,
    )

    first = await aggregator.get_all()
    clock.now += 299
    second = await aggregator.get_all()

    assert first.using_real_source is True
    assert second == first
    assert second.records is first.records
    assert fetcher.calls == ["Work Visa"]


@pytest.mark.asyncio
async def test_get_all_refetches_when_stale_or_forced() -> None:
    clock = Clock()
    fetcher = StubFetcher({"Work Visa": [_record("Work Visa", "WV-1")]})
    aggregator = RecordAggregator(
        sources=_sources("Work Visa"),
        fetcher=fetcher,
        cache=RecordCache(ttl_seconds=300),
        mode=PRODUCTION,
        clock=clock,
    )

    await aggregator.get_all()
    await aggregator.get_all(force_refresh=True)
    clock.now += 300
    await aggregator.get_all()

    assert len(fetcher.calls) == 3


@pytest.mark.asyncio
async def test_force_real_mode_bypasses_cache() -> None:
    fetcher = StubFetcher({"Work Visa": [_record("Work Visa", "WV-1")]})
    aggregator = RecordAggregator(
        sources=_sources("Work Visa"),
        fetcher=fetcher,
        cache=RecordCache(ttl_seconds=300),
        mode=FORCED,
        clock=Clock(),
    )

    await aggregator.get_all()
    await aggregator.get_all()

    assert len(fetcher.calls) == 2


@pytest.mark.asyncio
async def test_get_all_returns_fallback_when_no_source_is_configured() -> None:
    fetcher = StubFetcher({})
    sources = [SourceDescriptor(type_label=label) for label in DOCUMENT_TYPES]
    aggregator = RecordAggregator(
        sources=sources,
        fetcher=fetcher,
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert result.records == FALLBACK_RECORDS
    assert result.using_real_source is False
    assert fetcher.calls == []


@pytest.mark.asyncio
async def test_get_all_returns_fallback_with_zero_sources() -> None:
    aggregator = RecordAggregator(
        sources=[],
        fetcher=StubFetcher({}),
        cache=RecordCache(),
        mode=FORCED,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert len(result.records) == 13
    assert result.records == FALLBACK_RECORDS
    assert result.using_real_source is False


@pytest.mark.asyncio
async def test_get_all_uses_fallback_outside_production_mode() -> None:
    fetcher = StubFetcher({"Work Visa": [_record("Work Visa", "WV-1")]})
    cache = RecordCache()
    aggregator = RecordAggregator(
        sources=_sources("Work Visa"),
        fetcher=fetcher,
        cache=cache,
        mode=OFFLINE,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert result.records == FALLBACK_RECORDS
    assert result.using_real_source is False
    assert fetcher.calls == []
    assert cache.entry is not None
    assert cache.entry.using_real_source is False


@pytest.mark.asyncio
async def test_get_all_falls_back_when_every_source_is_empty() -> None:
    aggregator = RecordAggregator(
        sources=_sources("Work Visa", "Birth Certificate"),
        fetcher=StubFetcher({}),
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert result.records == FALLBACK_RECORDS
    assert result.using_real_source is False


@pytest.mark.asyncio
async def test_fan_out_isolates_crashing_source_and_keeps_source_order() -> None:
    fetcher = StubFetcher(
        {
            "Permanent Residence": [_record("Permanent Residence", "PR-1")],
            "General Work Permit": RuntimeError("boom"),
            "Work Visa": [_record("Work Visa", "WV-1"), _record("Work Visa", "WV-2")],
        }
    )
    aggregator = RecordAggregator(
        sources=_sources("Permanent Residence", "General Work Permit", "Work Visa"),
        fetcher=fetcher,
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert [record.permit_number for record in result.records] == ["PR-1", "WV-1", "WV-2"]
    assert result.using_real_source is True


@pytest.mark.asyncio
async def test_fan_out_runs_sources_concurrently() -> None:
    started: list[str] = []
    release = asyncio.Event()

    class BlockingFetcher:
        async def fetch(self, endpoint, credential, type_label):
            started.append(type_label)
            if len(started) == 2:
                release.set()
            await asyncio.wait_for(release.wait(), timeout=1.0)
            return [_record(type_label, f"{type_label}-1")]

    aggregator = RecordAggregator(
        sources=_sources("Work Visa", "Birth Certificate"),
        fetcher=BlockingFetcher(),
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    result = await aggregator.get_all()

    assert len(result.records) == 2


@pytest.mark.asyncio
async def test_eight_sources_with_partial_failure() -> None:
    healthy_hosts = {"source-0.example.com", "source-1.example.com", "source-2.example.com"}
    counts = {"source-0.example.com": 4, "source-1.example.com": 5, "source-2.example.com": 6}

    def handler(request: httpx.Request) -> httpx.Response:
        host = request.url.host
        if host in healthy_hosts:
            items = [{"name": f"Holder {index}", "referenceNumber": f"{host}-{index}"} for index in range(counts[host])]
            return httpx.Response(status_code=200, json={"records": items})
        return httpx.Response(status_code=503)

    health = HealthMonitor()
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    fetcher = SourceFetcher(health=health, max_retries=2, retry_delay_seconds=0.0, client=client)
    sources = [
        SourceDescriptor(type_label=label, endpoint=f"https://source-{index}.example.com/records", credential="key")
        for index, label in enumerate(DOCUMENT_TYPES)
    ]
    aggregator = RecordAggregator(
        sources=sources,
        fetcher=fetcher,
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    result = await aggregator.get_all()
    await client.aclose()

    assert len(result.records) == 15
    assert result.using_real_source is True
    report = health.get_health_report()
    statuses = [endpoint.status for endpoint in report.endpoints]
    assert len(report.endpoints) == 8
    assert statuses.count("OPERATIONAL") == 3
    assert statuses.count("OFFLINE") == 5
    offline = [endpoint for endpoint in report.endpoints if endpoint.status == "OFFLINE"]
    assert all(endpoint.total_attempts == 3 for endpoint in offline)


@pytest.mark.asyncio
async def test_find_by_identifier_matches_any_identifier_field() -> None:
    aggregator = RecordAggregator(
        sources=[],
        fetcher=StubFetcher({}),
        cache=RecordCache(),
        mode=OFFLINE,
        clock=Clock(),
    )

    by_permit = await aggregator.find_by_identifier("PR/TST/2025/09/00001")
    by_reference = await aggregator.find_by_identifier("BCT0000009")
    by_file = await aggregator.find_by_identifier("TSTREF000000013")
    missing = await aggregator.find_by_identifier("NOPE-404")

    assert by_permit is not None and by_permit.name == "Alex Sample"
    assert by_reference is not None and by_reference.type == "Birth Certificate"
    assert by_file is not None and by_file.name == "Morgan Fixture"
    assert missing is None


@pytest.mark.asyncio
async def test_count_returns_cached_record_total() -> None:
    fetcher = StubFetcher({"Work Visa": [_record("Work Visa", "WV-1"), _record("Work Visa", "WV-2")]})
    aggregator = RecordAggregator(
        sources=_sources("Work Visa"),
        fetcher=fetcher,
        cache=RecordCache(),
        mode=PRODUCTION,
        clock=Clock(),
    )

    assert await aggregator.count() == 2
    assert await aggregator.count() == 2
    assert fetcher.calls == ["Work Visa"]


def test_source_summary_splits_configured_sources() -> None:
    sources = _sources("Work Visa") + [SourceDescriptor(type_label="Birth Certificate", endpoint="https://x")]
    aggregator = RecordAggregator(
        sources=sources,
        fetcher=StubFetcher({}),
        cache=RecordCache(),
        mode=PRODUCTION,
    )

    summary = aggregator.source_summary()

    assert summary.configured == ("Work Visa",)
    assert summary.unconfigured == ("Birth Certificate",)
