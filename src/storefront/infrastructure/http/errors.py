"""Maps domain exceptions to HTTP responses.

Every error body has the same envelope: ``success`` is False and
``message`` is human-readable. Upstream failures add ``error`` with the
underlying detail, for display only.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ForbiddenError,
    OrderPersistenceError,
    UpstreamFailure,
    ValidationError,
)

logger = structlog.get_logger(__name__)

_STATUS_BY_EXCEPTION: list[tuple[type[DomainException], int]] = [
    (ValidationError, 400),
    (ForbiddenError, 403),
    (EntityNotFoundError, 404),
    (ConflictError, 409),
    (UpstreamFailure, 502),
]


def status_for(exc: DomainException) -> int:
    for exc_type, status in _STATUS_BY_EXCEPTION:
        if isinstance(exc, exc_type):
            return status
    return 500


async def _domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    status = status_for(exc)
    content = {"success": False, "message": str(exc)}
    if isinstance(exc, UpstreamFailure):
        content["error"] = exc.detail
        logger.error("upstream_failure", path=request.url.path, error_type=type(exc).__name__, message=str(exc))
    if isinstance(exc, OrderPersistenceError):
        content["transaction_id"] = exc.transaction_id
    return JSONResponse(status_code=status, content=jsonable_encoder(content))


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "message": "Invalid request",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", path=request.url.path)
    return JSONResponse(status_code=500, content={"success": False, "message": "Internal server error"})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainException, _domain_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_exception_handler)
