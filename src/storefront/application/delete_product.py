"""Application service: Delete Product use case.

Removes the product together with the things only it references: its
photo and its reviews.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.photo_store import PhotoStore
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository

logger = structlog.get_logger(__name__)


class DeleteProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
        photo_store: PhotoStore,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo
        self._photo_store = photo_store

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete_by_id(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._photo_store.delete(product_id)
        removed = self._review_repo.delete_for_product(product_id)
        logger.info("product_deleted", product_id=product_id, reviews_removed=removed)
