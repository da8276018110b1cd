"""
product_api.api.app

FastAPI app factory for the Product API service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Own the shared infrastructure: the in-memory store, the telemetry helper and
  the OpenTelemetry tracer provider behind the remote collector.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from opentelemetry.sdk.trace import TracerProvider

from product_api import __version__
from product_api.api.routers.health import router as health_router
from product_api.api.routers.products import router as products_router
from product_api.observability.logging import configure_logging, get_logger, level_value
from product_api.observability.middleware import RequestContextMiddleware
from product_api.observability.sinks import (
    LocalLogSink,
    NullCollector,
    OpenTelemetryCollector,
    TelemetryCollector,
)
from product_api.observability.telemetry import TelemetryHelper
from product_api.observability.tracing import create_tracer_provider, get_tracer
from product_api.settings import Settings
from product_api.store import ProductStore

log = get_logger(__name__)


def build_telemetry(
    settings: Settings, tracer_provider: TracerProvider | None
) -> TelemetryHelper:
    local = LocalLogSink() if settings.local_logging_enabled else None
    remote: TelemetryCollector = NullCollector()
    if settings.remote_telemetry_enabled and tracer_provider is not None:
        remote = OpenTelemetryCollector(
            get_tracer(tracer_provider), application_name=settings.application_name
        )
    return TelemetryHelper(
        local=local,
        remote=remote,
        application_name=settings.application_name,
        min_level=level_value(settings.log_level),
    )


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info("startup", products=app.state.store.count())
    try:
        yield
    finally:
        # Flush buffered spans so the last requests reach the collector.
        provider = getattr(app.state, "tracer_provider", None)
        if provider is not None:
            provider.shutdown()
        log.info("shutdown")


def create_app(
    *,
    settings: Settings,
    store: ProductStore | None = None,
    tracer_provider: TracerProvider | None = None,
) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    app = FastAPI(
        title="Product API",
        lifespan=_lifespan,
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
    )

    if tracer_provider is None and settings.remote_telemetry_enabled:
        tracer_provider = create_tracer_provider(settings)

    # Nothing here does I/O, so state is ready before the first request.
    app.state.store = store if store is not None else ProductStore()
    app.state.tracer_provider = tracer_provider
    app.state.telemetry = build_telemetry(settings, tracer_provider)

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(products_router)

    return app


# --- Module Notes -----------------------------------------------------------
# This file is intentionally small: app composition stays here; reporting logic
# stays in observability and business flow in services.
