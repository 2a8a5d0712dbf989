"""Source fetching."""

from record_aggregator.sources.fetcher import RECORD_CONTAINER_KEYS, RETRYABLE_STATUS_CODES, SourceFetcher, build_client

__all__ = [
    "RECORD_CONTAINER_KEYS",
    "RETRYABLE_STATUS_CODES",
    "SourceFetcher",
    "build_client",
]
