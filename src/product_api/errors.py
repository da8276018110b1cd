"""
product_api.errors

Error taxonomy for the service.

Responsibilities:
- Typed failures raised by the store/repository boundary.
- A telemetry failure type that never escapes the telemetry helper.
- A warning category for non-fatal input anomalies.
"""

from __future__ import annotations


class ProductApiError(Exception):
    """Base class for all service errors."""


class ProductNotFoundError(ProductApiError):
    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class ProductAlreadyExistsError(ProductApiError):
    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product already exists: {product_id}")
        self.product_id = product_id


class PersistenceError(ProductApiError):
    """Unexpected failure inside the store/repository boundary."""


class TelemetryError(ProductApiError):
    """A log or telemetry sink failed to record an event."""


class ValidationWarning(UserWarning):
    """
    Non-fatal input anomaly (e.g. a non-positive id).
    Recorded as a Warning-phase event; the operation proceeds.
    """


# --- Module Notes -----------------------------------------------------------
# Repository errors propagate unchanged through the service layer; mapping to HTTP
# status codes happens only in `product_api.api.errors`.
