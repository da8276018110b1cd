"""
product_api.api.errors

Mapping from service failures to HTTP responses.

Responsibilities:
- Translate typed failures (not found, duplicate id) into 404/409.
- Turn anything else into a generic 500 without leaking details to the caller.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import HTTPException
from starlette.status import (
    HTTP_404_NOT_FOUND,
    HTTP_409_CONFLICT,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from product_api.errors import ProductAlreadyExistsError, ProductNotFoundError

INTERNAL_ERROR_DETAIL = "Internal server error"


@contextmanager
def http_errors() -> Iterator[None]:
    # The service layer already reported the failure; only the response is decided here.
    try:
        yield
    except ProductNotFoundError as e:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Product not found") from e
    except ProductAlreadyExistsError as e:
        raise HTTPException(status_code=HTTP_409_CONFLICT, detail="Product already exists") from e
    except HTTPException:
        raise
    except Exception as e:
        raise HTTPException(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL
        ) from e


# --- Module Notes -----------------------------------------------------------
# Exceptions are converted inside the route (not via app-level handlers) so the
# generic 500 path never reaches Starlette's server-error middleware.
