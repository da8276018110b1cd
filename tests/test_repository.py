"""
tests.test_repository

ProductRepo contract over the in-memory store.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from product_api.errors import PersistenceError, ProductNotFoundError
from product_api.models import Product
from product_api.repositories.products import ProductRepo
from product_api.store import ProductStore
from tests.fakes import BrokenStore


def _repo() -> ProductRepo:
    return ProductRepo(ProductStore())


@pytest.mark.asyncio
async def test_add_then_get_until_update() -> None:
    repo = _repo()
    product = Product(id=1, name="Widget", price=Decimal("9.99"))
    await repo.add(product)
    assert await repo.get(1) == product

    await repo.update(Product(id=1, name="Widget", price=Decimal("12.50")))
    assert (await repo.get(1)).price == Decimal("12.50")


@pytest.mark.asyncio
async def test_get_never_added_raises_not_found() -> None:
    with pytest.raises(ProductNotFoundError):
        await _repo().get(7)


@pytest.mark.asyncio
async def test_delete_then_get_raises_not_found() -> None:
    repo = _repo()
    await repo.add(Product(id=1, name="Widget", price=Decimal("9.99")))
    await repo.delete(1)
    with pytest.raises(ProductNotFoundError):
        await repo.get(1)


@pytest.mark.asyncio
async def test_delete_missing_raises_not_found() -> None:
    with pytest.raises(ProductNotFoundError):
        await _repo().delete(1)


@pytest.mark.asyncio
async def test_update_is_existence_checked() -> None:
    repo = _repo()
    with pytest.raises(ProductNotFoundError):
        await repo.update(Product(id=9, name="Ghost", price=Decimal("1")))
    assert await repo.list_all() == []


@pytest.mark.asyncio
async def test_list_all_cardinality_matches_adds_minus_deletes() -> None:
    repo = _repo()
    for i in range(1, 6):
        await repo.add(Product(id=i, name=f"P{i}", price=Decimal(i)))
    await repo.delete(2)
    await repo.delete(4)
    products = await repo.list_all()
    assert [p.id for p in products] == [1, 3, 5]


@pytest.mark.asyncio
async def test_untyped_store_failure_becomes_persistence_error() -> None:
    repo = ProductRepo(BrokenStore())
    with pytest.raises(PersistenceError) as exc_info:
        await repo.list_all()
    assert isinstance(exc_info.value.__cause__, OSError)
