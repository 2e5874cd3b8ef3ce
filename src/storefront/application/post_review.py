"""Application service: Post Review use case.

Checks, in order: the product exists, the actor has not reviewed it yet,
the body is present, the rating is on the scale. Nothing is written
until every check has passed.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Actor, Rating
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.domain.service.review_ledger import ReviewLedger

logger = structlog.get_logger(__name__)


class PostReviewHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo

    def handle(self, product_id: str, body: str | None, rating, actor: Actor) -> Review:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        ledger = ReviewLedger(self._product_repo, self._review_repo)
        ledger.ensure_no_review_by(product, actor)

        if not body or not body.strip():
            raise ValidationError("Body is Required")
        review = Review.post(product.id, actor, body, Rating.of(rating))
        ledger.record(product, review)

        logger.info("review_posted", product_id=product.id, review_id=review.id, author_id=actor.id)
        return review
