"""JSON-file-backed implementation of ReviewRepository.

``add`` checks the (product, author) pair under the file lock, which
gives the store-level uniqueness constraint the review ledger relies on.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.review import Review
from storefront.domain.model.value_objects import Rating
from storefront.domain.repository.review_repository import ReviewRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonReviewRepository(ReviewRepository):

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file = JsonFile(file_path, timeout)

    # --- ReviewRepository interface -------------------------------------------

    def get_by_id(self, review_id: str) -> Review | None:
        for raw in self._file.read():
            if raw["id"] == review_id:
                return self._to_domain(raw)
        return None

    def get_many(self, review_ids: list[str]) -> list[Review]:
        by_id = {raw["id"]: raw for raw in self._file.read()}
        return [self._to_domain(by_id[rid]) for rid in review_ids if rid in by_id]

    def add(self, review: Review) -> None:
        with self._file.update() as records:
            for raw in records:
                if raw["product_id"] == review.product_id and raw["author_id"] == review.author_id:
                    raise ConflictError("Review already posted for this product")
            records.append(self._to_raw(review))

    def save(self, review: Review) -> None:
        with self._file.update() as records:
            for i, raw in enumerate(records):
                if raw["id"] == review.id:
                    records[i] = self._to_raw(review)
                    break
            else:
                records.append(self._to_raw(review))

    def delete_by_id(self, review_id: str) -> bool:
        with self._file.update() as records:
            before = len(records)
            records[:] = [raw for raw in records if raw["id"] != review_id]
            return len(records) != before

    def delete_for_product(self, product_id: str) -> int:
        with self._file.update() as records:
            before = len(records)
            records[:] = [raw for raw in records if raw["product_id"] != product_id]
            return before - len(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(review: Review) -> dict:
        return {
            "id": review.id,
            "product_id": review.product_id,
            "author_id": review.author_id,
            "author_name": review.author_name,
            "body": review.body,
            "rating": review.rating.value,
            "created_at": review.created_at.isoformat(),
            "updated_at": review.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Review:
        return Review(
            id=raw["id"],
            product_id=raw["product_id"],
            author_id=raw["author_id"],
            author_name=raw.get("author_name"),
            body=raw["body"],
            rating=Rating(raw["rating"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
