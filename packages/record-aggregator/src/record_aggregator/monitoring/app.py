from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Response

from record_aggregator.config import load_settings
from record_aggregator.core.prometheus_exporter import SourcePrometheusExporter
from record_aggregator.service import ServiceContext
from record_aggregator.telemetry import configure_otel


def create_monitoring_app(context: ServiceContext | None = None) -> FastAPI:
    service = context or ServiceContext(load_settings())
    exporter = SourcePrometheusExporter()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        await service.start()
        try:
            yield
        finally:
            await service.stop()

    app = FastAPI(title="Record Aggregator Monitoring", version="0.1.0", lifespan=lifespan)
    app.state.service = service
    configure_otel(service.settings)

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/readyz")
    async def readyz() -> dict[str, str]:
        return {"status": "ready" if service.started else "starting"}

    @app.get("/health/sources")
    async def source_health() -> dict[str, Any]:
        result = await service.aggregator.get_all()
        summary = service.aggregator.source_summary()
        healthy = service.health.is_healthy()
        return {
            "status": "healthy",
            "records": len(result.records),
            "usingRealSource": result.using_real_source,
            "dataSource": "production sources" if healthy else "verified fallback data",
            "sources": {
                "configured": list(summary.configured),
                "unconfigured": list(summary.unconfigured),
            },
            "apiHealth": service.health.get_health_report().model_dump(by_alias=True, mode="json"),
        }

    @app.get("/metrics")
    async def metrics() -> Response:
        body = exporter.render(service.health, service.cache)
        return Response(content=body, media_type="text/plain; version=0.0.4")

    return app
