"""Domain service: Review Ledger.

Coordinates the two aggregates a review touches: the Review record and
the Product's list of review references.

The one-review-per-author rule is checked by scanning the product's
reviews, and enforced again by the review store's (product, author)
uniqueness constraint, which catches two concurrent posts that both
passed the scan.

Withdrawing a review pulls the reference first and deletes the record
second. Both steps are idempotent, so re-running a withdrawal that
failed halfway finishes the cleanup instead of leaving a dangling
reference.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import ConflictError, EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Actor
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository

logger = structlog.get_logger(__name__)


class ReviewLedger:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo

    def reviews_of(self, product: Product) -> list[Review]:
        """Resolve the product's review references, skipping dangling ones."""
        return self._review_repo.get_many(list(product.review_ids))

    def ensure_no_review_by(self, product: Product, actor: Actor) -> None:
        for review in self.reviews_of(product):
            if review.is_authored_by(actor):
                raise ConflictError("Review already posted for this product")

    def record(self, product: Product, review: Review) -> None:
        """Store the review and link it to the product.

        If linking fails the stored review is removed again so no orphan
        record outlives the failed post.
        """
        self._review_repo.add(review)
        try:
            linked = self._product_repo.push_review(product.id, review.id)
        except Exception:
            self._discard(review)
            raise
        if not linked:
            self._discard(review)
            raise EntityNotFoundError(f"Product with ID '{product.id}' not found")
        product.attach_review(review.id)

    def withdraw(self, product_id: str, review: Review) -> None:
        pulled = self._product_repo.pull_review(product_id, review.id)
        deleted = self._review_repo.delete_by_id(review.id)
        logger.info(
            "review_withdrawn",
            product_id=product_id,
            review_id=review.id,
            reference_pulled=pulled,
            record_deleted=deleted,
        )

    def _discard(self, review: Review) -> None:
        logger.warning(
            "review_link_failed",
            product_id=review.product_id,
            review_id=review.id,
        )
        self._review_repo.delete_by_id(review.id)
