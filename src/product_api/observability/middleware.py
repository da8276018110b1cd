"""
product_api.observability.middleware

Per-request correlation for product telemetry.

Every lifecycle event emitted while a request is in flight (controller Start/
Warning/Success, service Exception) should be traceable back to that request in
both sinks. This middleware binds the correlation fields into structlog
contextvars; the local sink picks them up through `merge_contextvars` and
`TelemetryHelper` copies them into the remote span properties.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "x-request-id"

# Probes would otherwise dominate the correlation ids seen by the collector.
_UNCORRELATED_PATHS = frozenset({"/healthz", "/readyz"})


def correlation_fields(request: Request, request_id: str) -> dict[str, str]:
    return {"request_id": request_id, "path": request.url.path, "method": request.method}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds `request_id`, `path` and `method` for the lifetime of one request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        # A caller-supplied id keeps the trace continuous across services.
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        if request.url.path in _UNCORRELATED_PATHS:
            response: Response = await call_next(request)
        else:
            structlog.contextvars.clear_contextvars()
            with structlog.contextvars.bound_contextvars(
                **correlation_fields(request, request_id)
            ):
                response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


# --- Module Notes -----------------------------------------------------------
# `bound_contextvars` restores the previous values on exit, so nothing leaks into
# the next request handled by the same task.
