from __future__ import annotations

from record_aggregator.config import AggregatorSettings
from record_aggregator.telemetry import build_resource


def test_resource_describes_service_mode_and_sources() -> None:
    settings = AggregatorSettings(
        SERVICE_NAME="records-test",
        USE_PRODUCTION_APIS=True,
        FORCE_REAL_APIS=True,
        VERIFICATION_LEVEL="medium",
        SOURCE_NPR_ENDPOINT="https://npr.example.com",
        SOURCE_NPR_API_KEY="npr-key",
        SOURCE_DMS_ENDPOINT="https://dms.example.com",
    )

    attributes = build_resource(settings).attributes

    assert attributes["service.name"] == "records-test"
    assert attributes["record_aggregator.production_mode"] is True
    assert attributes["record_aggregator.force_real_mode"] is True
    assert attributes["record_aggregator.verification_level"] == "medium"
    assert attributes["record_aggregator.sources_configured"] == 1
    assert attributes["record_aggregator.sources_total"] == 8


def test_resource_carries_no_credentials() -> None:
    settings = AggregatorSettings(
        USE_PRODUCTION_APIS=False,
        SOURCE_VISA_ENDPOINT="https://visa.example.com",
        SOURCE_VISA_API_KEY="visa-secret",
    )

    attributes = build_resource(settings).attributes

    assert attributes["record_aggregator.production_mode"] is False
    assert attributes["record_aggregator.force_real_mode"] is False
    assert "visa-secret" not in {str(value) for value in attributes.values()}
