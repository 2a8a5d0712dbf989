from __future__ import annotations

from prometheus_client import CollectorRegistry, Gauge, generate_latest

from record_aggregator.cache import RecordCache
from record_aggregator.health import HealthMonitor


class SourcePrometheusExporter:
    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._attempts_total = Gauge(
            "source_attempts_total",
            "Source fetch attempts grouped by endpoint",
            labelnames=("endpoint",),
            registry=self._registry,
        )
        self._successful_attempts_total = Gauge(
            "source_successful_attempts_total",
            "Successful source fetch attempts grouped by endpoint",
            labelnames=("endpoint",),
            registry=self._registry,
        )
        self._success_rate = Gauge(
            "source_success_rate_percent",
            "Source success rate in percent",
            labelnames=("endpoint",),
            registry=self._registry,
        )
        self._cache_records = Gauge(
            "record_cache_records",
            "Records held in the aggregated snapshot",
            registry=self._registry,
        )
        self._cache_real_source = Gauge(
            "record_cache_using_real_source",
            "1 when the cached snapshot came from real sources",
            registry=self._registry,
        )

    def render(self, health: HealthMonitor, cache: RecordCache) -> str:
        for item in health.get_health_report().endpoints:
            self._attempts_total.labels(endpoint=item.endpoint).set(item.total_attempts)
            self._successful_attempts_total.labels(endpoint=item.endpoint).set(item.successful_attempts)
            self._success_rate.labels(endpoint=item.endpoint).set(item.success_rate)
        entry = cache.entry
        self._cache_records.set(len(entry.records) if entry else 0)
        self._cache_real_source.set(1 if entry and entry.using_real_source else 0)
        return generate_latest(self._registry).decode("utf-8")
