"""
product_api.models

Domain model for the single resource served by the API.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(slots=True)
class Product:
    # `id` is None until the store assigns one on insert.
    id: int | None
    name: str
    price: Decimal


# --- Module Notes -----------------------------------------------------------
# HTTP request/response shapes live in `product_api.api.schemas`; this type stays
# free of transport concerns.
