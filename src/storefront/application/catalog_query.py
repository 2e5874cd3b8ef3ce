"""Application service: Catalog Query Engine (read side).

Answers browse, filter, search and related-product requests. Every
listing returns ``ProductSummaryDTO`` so photo payloads and review
bodies never leave through a listing; ``get_by_slug`` is the one place
reviews are hydrated and ``get_photo`` the one place photos are read.
"""

from __future__ import annotations

from storefront.application.dto import (
    CategoryDTO,
    ProductDetailDTO,
    ProductSummaryDTO,
    ReviewDTO,
)
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.category import Category
from storefront.domain.model.product import Product
from storefront.domain.model.product_query import ProductQuery
from storefront.domain.model.value_objects import Photo
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.photo_store import PhotoStore
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository

FILTER_PAGE_SIZE = 8
LIST_PAGE_SIZE = 6
RELATED_LIMIT = 4


class CatalogQueryEngine:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        review_repo: ReviewRepository,
        photo_store: PhotoStore,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._review_repo = review_repo
        self._photo_store = photo_store

    # --- Single product -------------------------------------------------------

    def get_by_slug(self, slug: str) -> ProductDetailDTO:
        product = self._product_repo.get_by_slug(slug)
        if product is None:
            raise EntityNotFoundError(f"Product '{slug}' not found")

        category = self._category_repo.get_by_id(product.category_id)
        reviews = self._review_repo.get_many(list(product.review_ids))
        reviews.sort(key=lambda r: r.updated_at, reverse=True)

        return ProductDetailDTO(
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
            reviews=[ReviewDTO.from_review(r) for r in reviews],
        )

    def get_photo(self, product_id: str) -> Photo | None:
        """Stored photo of a product; None means "no body", not an error."""
        return self._photo_store.get(product_id)

    # --- Listings -------------------------------------------------------------

    def list_all(self) -> list[ProductSummaryDTO]:
        products = self._product_repo.find(ProductQuery.everything(), newest_first=True)
        return self._summaries(products)

    def list_page(self, page: int = 1) -> list[ProductSummaryDTO]:
        skip = _offset(page, LIST_PAGE_SIZE)
        products = self._product_repo.find(
            ProductQuery.everything(),
            newest_first=True,
            skip=skip,
            limit=LIST_PAGE_SIZE,
        )
        return self._summaries(products)

    def count_all(self) -> int:
        return self._product_repo.count_all()

    def filter(
        self,
        category_ids: list[str] | None,
        price_bounds: list | None,
        page: int = 1,
    ) -> list[ProductSummaryDTO]:
        query = ProductQuery.for_filter(category_ids, price_bounds)
        skip = _offset(page, FILTER_PAGE_SIZE)
        products = self._product_repo.find(
            query,
            newest_first=True,
            skip=skip,
            limit=FILTER_PAGE_SIZE,
        )
        return self._summaries(products)

    def count_filtered(self, category_ids: list[str] | None, price_bounds: list | None) -> int:
        query = ProductQuery.for_filter(category_ids, price_bounds)
        return self._product_repo.count(query)

    def search(self, keyword: str | None) -> list[ProductSummaryDTO]:
        products = self._product_repo.find(ProductQuery.for_keyword(keyword))
        return self._summaries(products)

    def related(self, product_id: str, category_id: str) -> list[ProductSummaryDTO]:
        products = self._product_repo.find(
            ProductQuery.related_to(product_id, category_id),
            limit=RELATED_LIMIT,
        )
        return self._summaries(products)

    def by_category(self, slug: str) -> tuple[CategoryDTO, list[ProductSummaryDTO]]:
        category = self._category_repo.get_by_slug(slug)
        if category is None:
            raise EntityNotFoundError(f"Category '{slug}' not found")
        products = self._product_repo.find(ProductQuery.in_category(category.id))
        return CategoryDTO.from_category(category), self._summaries(products, {category.id: category})

    # --- Mapping --------------------------------------------------------------

    def _summaries(
        self,
        products: list[Product],
        categories: dict[str, Category] | None = None,
    ) -> list[ProductSummaryDTO]:
        if categories is None:
            categories = {c.id: c for c in self._category_repo.list_all()}
        return [
            ProductSummaryDTO.from_product(p, categories.get(p.category_id))
            for p in products
        ]


def _offset(page: int, size: int) -> int:
    if isinstance(page, bool) or not isinstance(page, int):
        raise ValidationError(f"Page must be an integer, got {page!r}")
    if page < 1:
        raise ValidationError("Page must be 1 or greater")
    return (page - 1) * size
