"""
tests.test_service

ProductService: pass-through results and log-once-then-propagate failures.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from product_api.errors import ProductNotFoundError
from product_api.models import Product
from product_api.observability.sinks import NullCollector
from product_api.observability.telemetry import Phase, TelemetryHelper
from product_api.repositories.products import ProductRepo
from product_api.services.product_service import ProductService
from product_api.store import ProductStore
from tests.fakes import (
    FailingCollector,
    FailingLogSink,
    RecordingCollector,
    RecordingLogSink,
)


def _service(telemetry: TelemetryHelper) -> ProductService:
    return ProductService(repo=ProductRepo(ProductStore()), telemetry=telemetry)


@pytest.mark.asyncio
async def test_success_returns_repository_result_without_events(
    telemetry: TelemetryHelper, log_sink: RecordingLogSink
) -> None:
    svc = _service(telemetry)
    created = await svc.add_product(Product(id=None, name="Widget", price=Decimal("9.99")))
    assert created.id == 1
    assert await svc.get_all_products() == [created]
    assert log_sink.events == []


@pytest.mark.asyncio
async def test_failure_logged_once_and_same_exception_reraised(
    telemetry: TelemetryHelper,
    log_sink: RecordingLogSink,
    collector: RecordingCollector,
) -> None:
    svc = _service(telemetry)
    with pytest.raises(ProductNotFoundError) as exc_info:
        await svc.get_product(3)

    assert log_sink.phases() == [Phase.exception]
    event = log_sink.events[0]
    assert event.process_name == "get_product with id: 3"
    assert event.exception is exc_info.value
    assert event.context == '{"product_id":3}'

    assert collector.trace_phases() == ["EXCEPTION"]
    assert len(collector.exceptions) == 1
    assert collector.exceptions[0][0] is exc_info.value


@pytest.mark.asyncio
async def test_every_operation_reports_its_own_failure(
    telemetry: TelemetryHelper, log_sink: RecordingLogSink
) -> None:
    svc = _service(telemetry)
    ghost = Product(id=8, name="Ghost", price=Decimal("1"))
    await svc.add_product(Product(id=1, name="Widget", price=Decimal("9.99")))

    for call in (
        svc.get_product(8),
        svc.update_product(ghost),
        svc.delete_product(8),
        svc.add_product(Product(id=1, name="Dup", price=Decimal("1"))),
    ):
        with pytest.raises(Exception):
            await call

    assert [e.process_name for e in log_sink.events] == [
        "get_product with id: 8",
        "update_product with id: 8",
        "delete_product with id: 8",
        "add_product",
    ]
    assert all(e.phase is Phase.exception for e in log_sink.events)


@pytest.mark.asyncio
async def test_failing_sinks_do_not_change_business_outcome() -> None:
    svc = _service(TelemetryHelper(local=FailingLogSink(), remote=FailingCollector()))

    created = await svc.add_product(Product(id=1, name="Widget", price=Decimal("9.99")))
    assert await svc.get_product(1) == created

    with pytest.raises(ProductNotFoundError):
        await svc.delete_product(99)


@pytest.mark.asyncio
async def test_scenario_add_update_delete() -> None:
    svc = _service(TelemetryHelper(local=None, remote=NullCollector()))

    await svc.add_product(Product(id=1, name="Widget", price=Decimal("9.99")))
    assert await svc.get_all_products() == [Product(id=1, name="Widget", price=Decimal("9.99"))]

    await svc.update_product(Product(id=1, name="Widget", price=Decimal("12.50")))
    assert await svc.get_product(1) == Product(id=1, name="Widget", price=Decimal("12.50"))

    await svc.delete_product(1)
    with pytest.raises(ProductNotFoundError):
        await svc.get_product(1)
