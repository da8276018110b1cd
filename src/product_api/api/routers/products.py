"""
product_api.api.routers.products

Product CRUD endpoints (the controller).

Responsibilities:
- Bind HTTP parameters and bodies to domain types.
- Emit Start, Warning and Success lifecycle events around each service call.
- Map service failures to HTTP responses (see `product_api.api.errors`).

Input anomalies such as a non-positive id are reported as Warning events and the
call proceeds; a path/body id mismatch on update is rejected with 400 because the
target product is ambiguous.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT, HTTP_400_BAD_REQUEST

from product_api.api.deps import product_service, telemetry_from_app
from product_api.api.errors import http_errors
from product_api.api.schemas import ProductIn, ProductOut
from product_api.errors import ValidationWarning
from product_api.observability.telemetry import Phase, TelemetryHelper, process_name
from product_api.services.product_service import ProductService

router = APIRouter(prefix="/api/product", tags=["product"])


def check_product_id(product_id: int | None) -> ValidationWarning | None:
    if product_id is not None and product_id <= 0:
        return ValidationWarning(f"Invalid product ID: {product_id}")
    return None


def _warn(telemetry: TelemetryHelper, name: str, warning: ValidationWarning, context: Any) -> None:
    telemetry.log_process(name, Phase.warning, {"warning": str(warning), "subject": context})


@router.get("/{product_id}", response_model=ProductOut)
async def get_product(
    product_id: int,
    svc: ProductService = Depends(product_service),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> ProductOut:
    name = process_name("get_product", id=product_id)
    telemetry.log_process(name, Phase.start, {"product_id": product_id})

    if (warning := check_product_id(product_id)) is not None:
        _warn(telemetry, name, warning, {"product_id": product_id})

    with http_errors():
        product = await svc.get_product(product_id)

    telemetry.log_process(name, Phase.success, product)
    return ProductOut.from_domain(product)


@router.get("", response_model=list[ProductOut])
async def get_all_products(
    svc: ProductService = Depends(product_service),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> list[ProductOut]:
    name = process_name("get_all_products")
    telemetry.log_process(name, Phase.start)

    with http_errors():
        products = await svc.get_all_products()

    telemetry.log_process(name, Phase.success, products)
    return [ProductOut.from_domain(p) for p in products]


@router.post("", response_model=ProductOut, status_code=HTTP_201_CREATED)
async def add_product(
    request: Request,
    response: Response,
    body: ProductIn,
    svc: ProductService = Depends(product_service),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> ProductOut:
    name = process_name("add_product")
    telemetry.log_process(name, Phase.start, body)

    if (warning := check_product_id(body.id)) is not None:
        _warn(telemetry, name, warning, body)

    with http_errors():
        product = await svc.add_product(body.to_domain())

    telemetry.log_process(name, Phase.success, product)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return ProductOut.from_domain(product)


@router.put("/{product_id}", status_code=HTTP_204_NO_CONTENT)
async def update_product(
    product_id: int,
    body: ProductIn,
    svc: ProductService = Depends(product_service),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> Response:
    name = process_name("update_product", id=product_id)
    telemetry.log_process(name, Phase.start, body)

    if body.id is not None and body.id != product_id:
        mismatch = ValidationWarning(
            f"Product ID mismatch: expected {product_id}, received {body.id}"
        )
        _warn(telemetry, name, mismatch, body)
        # Rejected before the service runs, so the lifecycle is closed here.
        telemetry.log_process(name, Phase.exception, body, mismatch)
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Product ID mismatch")

    if (warning := check_product_id(product_id)) is not None:
        _warn(telemetry, name, warning, body)

    with http_errors():
        product = await svc.update_product(body.to_domain(product_id=product_id))

    telemetry.log_process(name, Phase.success, product)
    return Response(status_code=HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int,
    svc: ProductService = Depends(product_service),
    telemetry: TelemetryHelper = Depends(telemetry_from_app),
) -> Response:
    name = process_name("delete_product", id=product_id)
    telemetry.log_process(name, Phase.start, {"product_id": product_id})

    if (warning := check_product_id(product_id)) is not None:
        _warn(telemetry, name, warning, {"product_id": product_id})

    with http_errors():
        await svc.delete_product(product_id)

    telemetry.log_process(name, Phase.success, {"product_id": product_id})
    return Response(status_code=HTTP_204_NO_CONTENT)


# --- Module Notes -----------------------------------------------------------
# Exception-phase events for failed repository calls come from ProductService, not
# here, so each is reported exactly once. The only Exception event emitted here
# closes an update rejected before the service runs.
