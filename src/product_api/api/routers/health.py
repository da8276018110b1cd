"""
product_api.api.routers.health

Health and readiness endpoints.

Responsibilities:
- Provide liveness probe (`/healthz`).
- Provide readiness probe (`/readyz`) that confirms the store is reachable.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from product_api.api.deps import store_from_app
from product_api.store import ProductStore

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    # Liveness: process is up and serving HTTP.
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(store: ProductStore = Depends(store_from_app)) -> dict[str, Any]:
    # Readiness: the store answers under its lock.
    return {"status": "ready", "products": store.count()}


# --- Module Notes -----------------------------------------------------------
# Probes are excluded from lifecycle telemetry; they would drown the product events.
