"""
product_api.api.__main__

Entrypoint for `python -m product_api.api` (also installed as `product-api`).

Builds the app from env settings and serves it with uvicorn. Uvicorn's own
logging config is disabled so its records flow through the same structlog JSON
stream as the product lifecycle events.
"""

from __future__ import annotations

import uvicorn

from product_api.api.app import create_app
from product_api.observability.logging import get_logger
from product_api.settings import get_settings

log = get_logger(__name__)


def main() -> None:
    settings = get_settings()
    app = create_app(settings=settings)

    log.info(
        "serving",
        host=settings.api_host,
        port=settings.api_port,
        local_logging=settings.local_logging_enabled,
        remote_telemetry=settings.remote_telemetry_enabled,
        exporter=settings.telemetry_exporter,
    )
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()
