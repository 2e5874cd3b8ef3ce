"""Application service: Delete Review use case.

Only the author may delete a review. The product's reference is pulled
and the record deleted; see ReviewLedger.withdraw for the ordering.
"""

from __future__ import annotations

from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.value_objects import Actor
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.domain.service.review_ledger import ReviewLedger


class DeleteReviewHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        review_repo: ReviewRepository,
    ) -> None:
        self._product_repo = product_repo
        self._review_repo = review_repo

    def handle(self, product_id: str | None, review_id: str | None, actor: Actor) -> None:
        if not product_id:
            raise ValidationError("Product ID is Required")
        if not review_id:
            raise ValidationError("Review ID is Required")

        review = self._review_repo.get_by_id(review_id)
        if review is None or review.product_id != product_id:
            raise EntityNotFoundError("Review not found")
        review.ensure_author(actor, "delete")

        ReviewLedger(self._product_repo, self._review_repo).withdraw(product_id, review)
