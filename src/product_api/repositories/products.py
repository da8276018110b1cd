"""
product_api.repositories.products

Repository for `Product` entities.

Responsibilities:
- Existence-checked CRUD over the injected `ProductStore`.
- Surface typed failures (`ProductNotFoundError`, `ProductAlreadyExistsError`).
- Wrap anything unexpected from the store in `PersistenceError`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from product_api.errors import PersistenceError, ProductApiError, ProductNotFoundError
from product_api.models import Product
from product_api.store import ProductStore


class ProductRepo:
    def __init__(self, store: ProductStore) -> None:
        self._store = store

    async def get(self, product_id: int) -> Product:
        with _store_errors():
            product = self._store.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def list_all(self) -> list[Product]:
        with _store_errors():
            return self._store.list_all()

    async def add(self, product: Product) -> Product:
        # Duplicate ids are rejected by the store; nothing is overwritten.
        with _store_errors():
            return self._store.insert(product)

    async def update(self, product: Product) -> Product:
        # Full replace; last writer wins. Unknown ids raise ProductNotFoundError.
        with _store_errors():
            return self._store.update(product)

    async def delete(self, product_id: int) -> None:
        with _store_errors():
            self._store.remove(product_id)


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except ProductApiError:
        raise
    except Exception as e:
        raise PersistenceError(f"product store failure: {e}") from e


# --- Module Notes -----------------------------------------------------------
# No logging here: failures are reported exactly once, at the service boundary.
