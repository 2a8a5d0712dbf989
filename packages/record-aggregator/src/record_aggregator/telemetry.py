from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

from record_aggregator.config import AggregatorSettings

logger = logging.getLogger(__name__)

_configured = False


def build_resource(settings: AggregatorSettings) -> Resource:
    """Resource attached to every ``source_fetch`` span this service emits."""
    descriptors = settings.source_descriptors()
    return Resource.create(
        {
            "service.name": settings.SERVICE_NAME,
            "record_aggregator.production_mode": settings.USE_PRODUCTION_APIS,
            "record_aggregator.force_real_mode": settings.mode.force_real_active,
            "record_aggregator.verification_level": settings.VERIFICATION_LEVEL,
            "record_aggregator.sources_configured": sum(1 for item in descriptors if item.is_configured),
            "record_aggregator.sources_total": len(descriptors),
        }
    )


def configure_otel(settings: AggregatorSettings) -> None:
    global _configured
    if _configured:
        return
    resource = build_resource(settings)
    trace.set_tracer_provider(TracerProvider(resource=resource))
    _configured = True
    logger.info("otel_configured", extra={"service": settings.SERVICE_NAME})
