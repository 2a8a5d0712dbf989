from __future__ import annotations

import logging
import os

import uvicorn


def main() -> None:
    logging.basicConfig(level=os.getenv("RECORD_LOG_LEVEL", "INFO"))
    host = os.getenv("RECORD_MONITORING_HOST", "0.0.0.0")
    port = int(os.getenv("RECORD_MONITORING_PORT", "8002"))
    uvicorn.run(
        "record_aggregator.monitoring.app:create_monitoring_app",
        factory=True,
        host=host,
        port=port,
        reload=False,
    )


if __name__ == "__main__":
    main()
