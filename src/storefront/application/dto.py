"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP adapters and the application layer
without exposing domain internals. Catalog listings use
``ProductSummaryDTO``, which has no photo and no reviews; only the
single-product view carries hydrated reviews.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any

from storefront.domain.model.category import Category
from storefront.domain.model.product import Product
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Photo


# --- Inputs -------------------------------------------------------------------


@dataclass(frozen=True)
class ProductInput:
    """Input: raw product form fields, as received from the outside."""

    name: str | None = None
    description: str | None = None
    price: Any = None
    category: str | None = None
    quantity: Any = None
    shipping: Any = None
    photo: Photo | None = None


@dataclass(frozen=True)
class CartItemSpec:
    """Input: one cart entry as sent by the client (one unit)."""

    price: Any
    product_id: str | None = None
    product_name: str | None = None


# --- Outputs ------------------------------------------------------------------


@dataclass(frozen=True)
class CategoryDTO:

    id: str
    name: str
    slug: str

    @staticmethod
    def from_category(category: Category) -> CategoryDTO:
        return CategoryDTO(id=category.id, name=category.name, slug=category.slug)


@dataclass(frozen=True)
class AuthorDTO:

    id: str
    name: str | None


@dataclass(frozen=True)
class ReviewDTO:

    id: str
    body: str
    rating: int
    author: AuthorDTO
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_review(review: Review) -> ReviewDTO:
        return ReviewDTO(
            id=review.id,
            body=review.body,
            rating=review.rating.value,
            author=AuthorDTO(id=review.author_id, name=review.author_name),
            created_at=review.created_at,
            updated_at=review.updated_at,
        )


@dataclass(frozen=True)
class ProductSummaryDTO:
    """Output: a product in any listing. Never carries photo or reviews."""

    id: str
    name: str
    slug: str
    description: str
    price: Decimal
    quantity: int
    category: CategoryDTO | None
    shipping: bool
    created_at: datetime
    updated_at: datetime

    @staticmethod
    def from_product(product: Product, category: Category | None) -> ProductSummaryDTO:
        return ProductSummaryDTO(
            id=product.id,
            name=product.name,
            slug=product.slug,
            description=product.description,
            price=product.price.amount,
            quantity=product.quantity,
            category=CategoryDTO.from_category(category) if category else None,
            shipping=product.shipping,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


@dataclass(frozen=True)
class ProductDetailDTO:
    """Output: the single-product view, reviews newest-updated first."""

    id: str
    name: str
    slug: str
    description: str
    price: Decimal
    quantity: int
    category: CategoryDTO | None
    shipping: bool
    created_at: datetime
    updated_at: datetime
    reviews: list[ReviewDTO]


@dataclass(frozen=True)
class PaymentReceiptDTO:
    """Output: acknowledgement of a settled checkout."""

    order_id: str
    transaction_id: str | None
    amount: Decimal
    status: str | None
