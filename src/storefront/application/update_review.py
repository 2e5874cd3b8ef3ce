"""Application service: Update Review use case."""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Actor, Rating
from storefront.domain.repository.review_repository import ReviewRepository

logger = structlog.get_logger(__name__)


class UpdateReviewHandler:

    def __init__(self, review_repo: ReviewRepository) -> None:
        self._review_repo = review_repo

    def handle(self, review_id: str | None, body: str | None, rating, actor: Actor) -> Review:
        """Overwrite body and rating of the actor's own review."""
        if not review_id:
            raise ValidationError("Review ID is Required")
        if not body or not body.strip():
            raise ValidationError("Body is Required")
        new_rating = Rating.of(rating)

        review = self._review_repo.get_by_id(review_id)
        if review is None:
            raise EntityNotFoundError("Review not found")

        review.edit(actor, body, new_rating)
        self._review_repo.save(review)

        logger.info("review_updated", review_id=review.id, author_id=actor.id)
        return review
