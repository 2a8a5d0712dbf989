from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from record_aggregator.schemas.record import BaseRecord


@dataclass(frozen=True)
class SourceDescriptor:
    type_label: str
    endpoint: str | None = None
    credential: str | None = field(default=None, repr=False)

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint) and bool(self.credential)


@dataclass(frozen=True)
class CacheEntry:
    records: tuple[BaseRecord, ...]
    fetched_at: float
    using_real_source: bool


@dataclass(frozen=True)
class AggregationResult:
    records: tuple[BaseRecord, ...]
    using_real_source: bool


@dataclass
class HealthRecord:
    total_attempts: int = 0
    successful_attempts: int = 0
    last_success: datetime | None = None
    last_failure: datetime | None = None


@dataclass(frozen=True)
class SourceSummary:
    configured: tuple[str, ...]
    unconfigured: tuple[str, ...]
