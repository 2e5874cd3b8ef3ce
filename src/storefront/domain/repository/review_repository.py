"""Abstract repository for Review aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.review import Review


class ReviewRepository(ABC):

    @abstractmethod
    def get_by_id(self, review_id: str) -> Review | None:
        """Return a review by its ID, or None if not found."""

    @abstractmethod
    def get_many(self, review_ids: list[str]) -> list[Review]:
        """Return the reviews that exist among ``review_ids``; unknown IDs are skipped."""

    @abstractmethod
    def add(self, review: Review) -> None:
        """Insert a new review.

        Implementations enforce one review per (product, author) and
        raise ConflictError when the pair is already taken.
        """

    @abstractmethod
    def save(self, review: Review) -> None:
        """Persist changes to an existing review."""

    @abstractmethod
    def delete_by_id(self, review_id: str) -> bool:
        """Delete a review. Idempotent: returns False if it was already gone."""

    @abstractmethod
    def delete_for_product(self, product_id: str) -> int:
        """Delete every review of a product and return how many were removed."""
