"""FastAPI application factory.

Run with ``uvicorn --factory storefront.infrastructure.http.app:create_app``.
"""

from __future__ import annotations

from uuid import uuid4

from fastapi import FastAPI, Request

from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.http.errors import register_exception_handlers
from storefront.infrastructure.http.routes.categories import category_router
from storefront.infrastructure.http.routes.payments import payment_router
from storefront.infrastructure.http.routes.products import product_router
from storefront.infrastructure.http.routes.reviews import review_router
from storefront.infrastructure.logging import (
    bind_request_context,
    clear_request_context,
    configure_logging,
)

API_PREFIX = "/api/v1"


def create_app(settings: Settings | None = None, container: Container | None = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.environment)

    app = FastAPI(title="Storefront API")
    app.state.container = container or build_container(settings)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        clear_request_context()
        bind_request_context(
            request_id=request.headers.get("x-request-id") or uuid4().hex,
            method=request.method,
            path=request.url.path,
        )
        return await call_next(request)

    app.include_router(category_router, prefix=API_PREFIX)
    app.include_router(product_router, prefix=API_PREFIX)
    app.include_router(review_router, prefix=API_PREFIX)
    app.include_router(payment_router, prefix=API_PREFIX)
    register_exception_handlers(app)
    return app
