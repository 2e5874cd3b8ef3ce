"""Product aggregate.

Products live independently of orders. They have their own lifecycle:
details change through explicit updates, and reviews are attached and
detached only by the review ledger.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money, slugify


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    The slug is always derived from the name; two products may end up
    with the same slug, in which case slug lookups return whichever the
    store yields first.
    """

    id: str
    name: str
    slug: str
    description: str
    price: Money
    quantity: int
    category_id: str
    shipping: bool = False
    review_ids: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) ---------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money,
        quantity: int,
        category_id: str,
        shipping: bool = False,
    ) -> Product:
        _check_quantity(quantity)
        name = name.strip()
        return Product(
            id=uuid4().hex,
            name=name,
            slug=slugify(name),
            description=description,
            price=price,
            quantity=quantity,
            category_id=category_id,
            shipping=shipping,
        )

    # --- Mutations ------------------------------------------------------------

    def revise(
        self,
        name: str,
        description: str,
        price: Money,
        quantity: int,
        category_id: str,
        shipping: bool = False,
    ) -> None:
        """Overwrite the editable details; identity and reviews are kept."""
        _check_quantity(quantity)
        self.name = name.strip()
        self.slug = slugify(self.name)
        self.description = description
        self.price = price
        self.quantity = quantity
        self.category_id = category_id
        self.shipping = shipping
        self.updated_at = _utcnow()

    def attach_review(self, review_id: str) -> bool:
        """Append a review reference. Returns False if already attached."""
        if review_id in self.review_ids:
            return False
        self.review_ids.append(review_id)
        return True

    def detach_review(self, review_id: str) -> bool:
        """Remove a review reference. Returns False if it was not attached."""
        if review_id not in self.review_ids:
            return False
        self.review_ids = [rid for rid in self.review_ids if rid != review_id]
        return True


def _check_quantity(quantity: int) -> None:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError(
            f"Quantity must be an integer, got {type(quantity).__name__}"
        )
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
