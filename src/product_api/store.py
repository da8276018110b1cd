"""
product_api.store

In-memory product store.

Responsibilities:
- Own the process-lifetime collection of products, keyed by id.
- Make every check-then-write atomic under a single lock.
- Hand out copies so callers never mutate stored state in place.
"""

from __future__ import annotations

from dataclasses import replace
from threading import RLock

from product_api.errors import ProductAlreadyExistsError, ProductNotFoundError
from product_api.models import Product


class ProductStore:
    """Dict-backed store guarded by an RLock; one instance per application."""

    def __init__(self, products: list[Product] | None = None) -> None:
        self._lock = RLock()
        self._storage: dict[int, Product] = {}
        self._last_id = 0
        for p in products or []:
            self.insert(p)

    def get(self, product_id: int) -> Product | None:
        with self._lock:
            product = self._storage.get(product_id)
            return replace(product) if product is not None else None

    def list_all(self) -> list[Product]:
        # Insertion order; an update keeps the original slot.
        with self._lock:
            return [replace(p) for p in self._storage.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def insert(self, product: Product) -> Product:
        with self._lock:
            if product.id is None:
                product_id = self._last_id + 1
            else:
                product_id = product.id
                if product_id in self._storage:
                    raise ProductAlreadyExistsError(product_id)
            stored = replace(product, id=product_id)
            self._storage[product_id] = stored
            # Generated ids are never reused, even after deletes.
            self._last_id = max(self._last_id, product_id)
            return replace(stored)

    def update(self, product: Product) -> Product:
        if product.id is None:
            raise ValueError("cannot update a product without an id")
        with self._lock:
            if product.id not in self._storage:
                raise ProductNotFoundError(product.id)
            stored = replace(product)
            self._storage[product.id] = stored
            return replace(stored)

    def remove(self, product_id: int) -> Product:
        with self._lock:
            try:
                return self._storage.pop(product_id)
            except KeyError:
                raise ProductNotFoundError(product_id) from None


# --- Module Notes -----------------------------------------------------------
# Swapping this for a durable backend only requires a class with the same methods;
# `ProductRepo` wraps anything unexpected in `PersistenceError`.
