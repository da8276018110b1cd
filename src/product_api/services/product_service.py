"""
product_api.services.product_service

Pass-through business layer for products.

Responsibilities:
- Mirror `ProductRepo` one-to-one (get, get all, add, update, delete).
- Report every repository failure exactly once as an Exception-phase event, then
  re-raise the same exception object (no wrapping, no retry).
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from product_api.models import Product
from product_api.observability.telemetry import Phase, TelemetryHelper, process_name
from product_api.repositories.products import ProductRepo


class ProductService:
    def __init__(self, *, repo: ProductRepo, telemetry: TelemetryHelper) -> None:
        self._repo = repo
        self._telemetry = telemetry

    async def get_product(self, product_id: int) -> Product:
        with self._reported(process_name("get_product", id=product_id), {"product_id": product_id}):
            return await self._repo.get(product_id)

    async def get_all_products(self) -> list[Product]:
        with self._reported(process_name("get_all_products")):
            return await self._repo.list_all()

    async def add_product(self, product: Product) -> Product:
        with self._reported(process_name("add_product"), product):
            return await self._repo.add(product)

    async def update_product(self, product: Product) -> Product:
        with self._reported(process_name("update_product", id=product.id), product):
            return await self._repo.update(product)

    async def delete_product(self, product_id: int) -> None:
        with self._reported(
            process_name("delete_product", id=product_id), {"product_id": product_id}
        ):
            await self._repo.delete(product_id)

    @contextmanager
    def _reported(self, name: str, context: Any = None) -> Iterator[None]:
        try:
            yield
        except Exception as e:
            self._telemetry.log_process(name, Phase.exception, context, e)
            raise


# --- Module Notes -----------------------------------------------------------
# The controller emits Start/Warning/Success around these calls using the same
# process names, so one request reads as a single lifecycle in the logs.
