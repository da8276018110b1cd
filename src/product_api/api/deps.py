"""
product_api.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Provide dependency functions for the store and the telemetry helper.
- Build a request-scoped `ProductService` over the shared store.
"""

from __future__ import annotations

from fastapi import Depends, Request

from product_api.observability.telemetry import TelemetryHelper
from product_api.repositories.products import ProductRepo
from product_api.services.product_service import ProductService
from product_api.store import ProductStore


def store_from_app(request: Request) -> ProductStore:
    # Created once in `product_api.api.app.create_app`.
    return request.app.state.store  # type: ignore[attr-defined]


def telemetry_from_app(request: Request) -> TelemetryHelper:
    return request.app.state.telemetry  # type: ignore[attr-defined]


def product_service(
    store: ProductStore = Depends(store_from_app),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> ProductService:
    return ProductService(repo=ProductRepo(store), telemetry=telemetry)


# --- Module Notes -----------------------------------------------------------
# Tests pass a store to `create_app` or replace `app.state.telemetry`; no dependency
# overrides are needed.
