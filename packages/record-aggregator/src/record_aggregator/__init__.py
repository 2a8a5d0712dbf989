"""Resilient aggregation of document records from unreliable providers."""

from record_aggregator.aggregator import RecordAggregator
from record_aggregator.cache import RecordCache
from record_aggregator.config import AggregatorSettings, load_settings
from record_aggregator.core.models import AggregationResult, CacheEntry, SourceDescriptor
from record_aggregator.fallback import FALLBACK_RECORDS, fallback_records
from record_aggregator.health import HealthMonitor
from record_aggregator.service import ServiceContext
from record_aggregator.sources.fetcher import SourceFetcher

__all__ = [
    "AggregationResult",
    "AggregatorSettings",
    "CacheEntry",
    "FALLBACK_RECORDS",
    "HealthMonitor",
    "RecordAggregator",
    "RecordCache",
    "ServiceContext",
    "SourceDescriptor",
    "SourceFetcher",
    "fallback_records",
    "load_settings",
]
