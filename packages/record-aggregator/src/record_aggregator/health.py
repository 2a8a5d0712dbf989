from __future__ import annotations

from datetime import datetime, timezone

from record_aggregator.core.models import HealthRecord
from record_aggregator.schemas.health import EndpointHealth, HealthReport


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


class HealthMonitor:
    """Per-source attempt counters kept for the life of the process.

    Keys are source endpoints. Counters only grow; nothing is reset or
    persisted. ``record_attempt`` never awaits, so each update is atomic
    with respect to other tasks on the event loop.
    """

    def __init__(self) -> None:
        self._records: dict[str, HealthRecord] = {}
        self._last_check: datetime | None = None

    def record_attempt(self, source_key: str, success: bool) -> None:
        health = self._records.setdefault(source_key, HealthRecord())
        now = _now_utc()
        health.total_attempts += 1
        if success:
            health.successful_attempts += 1
            health.last_success = now
        else:
            health.last_failure = now
        self._last_check = now

    def get_health_report(self) -> HealthReport:
        endpoints: list[EndpointHealth] = []
        for source_key, health in self._records.items():
            success_rate = _success_rate(health)
            endpoints.append(
                EndpointHealth(
                    endpoint=source_key,
                    success_rate=success_rate,
                    total_attempts=health.total_attempts,
                    successful_attempts=health.successful_attempts,
                    last_success=health.last_success,
                    last_failure=health.last_failure,
                    status="OPERATIONAL" if success_rate > 0 else "OFFLINE",
                )
            )
        return HealthReport(timestamp=self._last_check, endpoints=endpoints)

    def is_healthy(self) -> bool:
        return any(health.successful_attempts > 0 for health in self._records.values())


def _success_rate(health: HealthRecord) -> float:
    if health.total_attempts == 0:
        return 0.0
    return round(health.successful_attempts / health.total_attempts * 100, 1)
