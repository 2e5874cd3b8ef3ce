"""Review aggregate.

A review belongs to exactly one product and one author. Only the author
may edit it; the product and author never change after posting.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.domain.exceptions import ForbiddenError, ValidationError
from storefront.domain.model.value_objects import Actor, Rating


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Review:

    id: str
    product_id: str
    author_id: str
    body: str
    rating: Rating
    author_name: str | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @staticmethod
    def post(product_id: str, author: Actor, body: str, rating: Rating) -> Review:
        if not body or not body.strip():
            raise ValidationError("Body is Required")
        return Review(
            id=uuid4().hex,
            product_id=product_id,
            author_id=author.id,
            author_name=author.name,
            body=body,
            rating=rating,
        )

    def is_authored_by(self, actor: Actor) -> bool:
        return str(self.author_id) == str(actor.id)

    def ensure_author(self, actor: Actor, action: str) -> None:
        if not self.is_authored_by(actor):
            raise ForbiddenError(f"You are not authorized to {action} this review")

    def edit(self, actor: Actor, body: str, rating: Rating) -> None:
        """Overwrite body and rating in place."""
        self.ensure_author(actor, "update")
        if not body or not body.strip():
            raise ValidationError("Body is Required")
        self.body = body
        self.rating = rating
        self.updated_at = _utcnow()
