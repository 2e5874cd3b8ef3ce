"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.photo_store import PhotoStore
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.infrastructure.config import Settings, get_settings
from storefront.infrastructure.gateway.braintree_gateway import BraintreeGateway
from storefront.infrastructure.gateway.fake_gateway import FakeGateway
from storefront.infrastructure.persistence.filesystem_photo_store import (
    FilesystemPhotoStore,
)
from storefront.infrastructure.persistence.json_category_repository import (
    JsonCategoryRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_review_repository import (
    JsonReviewRepository,
)


def product_repository(settings: Settings | None = None) -> JsonProductRepository:
    settings = settings or get_settings()
    return JsonProductRepository(settings.data_dir / "products.json", settings.store_timeout_seconds)


def category_repository(settings: Settings | None = None) -> JsonCategoryRepository:
    settings = settings or get_settings()
    return JsonCategoryRepository(settings.data_dir / "categories.json", settings.store_timeout_seconds)


def review_repository(settings: Settings | None = None) -> JsonReviewRepository:
    settings = settings or get_settings()
    return JsonReviewRepository(settings.data_dir / "reviews.json", settings.store_timeout_seconds)


def order_repository(settings: Settings | None = None) -> JsonOrderRepository:
    settings = settings or get_settings()
    return JsonOrderRepository(settings.data_dir / "orders.json", settings.store_timeout_seconds)


def photo_store(settings: Settings | None = None) -> FilesystemPhotoStore:
    settings = settings or get_settings()
    return FilesystemPhotoStore(settings.data_dir / "photos")


def payment_gateway(settings: Settings | None = None) -> PaymentGateway:
    settings = settings or get_settings()
    if settings.payment_gateway == "fake":
        return _fake_gateway()
    return BraintreeGateway(
        merchant_id=settings.braintree_merchant_id,
        public_key=settings.braintree_public_key,
        private_key=settings.braintree_private_key,
        environment=settings.braintree_environment,
        timeout=settings.gateway_timeout_seconds,
    )


def checkout_price_source(settings: Settings | None = None) -> ProductRepository | None:
    """Repository used to re-price carts, or None to trust client prices."""
    settings = settings or get_settings()
    if settings.trust_client_prices:
        return None
    return product_repository(settings)


@lru_cache
def _fake_gateway() -> FakeGateway:
    # One instance per process so its configuration survives between calls.
    return FakeGateway()


@dataclass
class Container:
    """Every collaborator an inbound adapter needs, built once per process."""

    product_repo: ProductRepository
    category_repo: CategoryRepository
    review_repo: ReviewRepository
    order_repo: OrderRepository
    photo_store: PhotoStore
    gateway: PaymentGateway
    price_source: ProductRepository | None


def build_container(settings: Settings | None = None) -> Container:
    settings = settings or get_settings()
    products = product_repository(settings)
    return Container(
        product_repo=products,
        category_repo=category_repository(settings),
        review_repo=review_repository(settings),
        order_repo=order_repository(settings),
        photo_store=photo_store(settings),
        gateway=payment_gateway(settings),
        price_source=None if settings.trust_client_prices else products,
    )
