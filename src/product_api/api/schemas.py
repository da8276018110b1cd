"""
product_api.api.schemas

Request/response models for the product endpoints.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel

from product_api.models import Product


class ProductIn(BaseModel):
    # Omit `id` on create to let the store assign one.
    id: int | None = None
    name: str
    price: Decimal

    def to_domain(self, *, product_id: int | None = None) -> Product:
        return Product(
            id=product_id if product_id is not None else self.id,
            name=self.name,
            price=self.price,
        )


class ProductOut(BaseModel):
    id: int
    name: str
    price: Decimal

    @classmethod
    def from_domain(cls, product: Product) -> ProductOut:
        return cls(id=product.id, name=product.name, price=product.price)
