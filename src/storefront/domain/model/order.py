"""Order aggregate: the terminal record of a settled checkout.

Orders are write-once: created after the gateway approved the sale and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Actor, Money


@dataclass(frozen=True)
class CartLineItem:
    """One cart entry: a product price snapshot, one unit.

    ``product_id`` and ``product_name`` are whatever the caller resolved;
    only ``unit_price`` takes part in the charge.
    """

    unit_price: Money
    product_id: str | None = None
    product_name: str | None = None


def cart_total(items: list[CartLineItem]) -> Money:
    """Sum of unit prices; each entry counts as exactly one unit."""
    total = Money.zero()
    for item in items:
        total = total + item.unit_price
    return total


@dataclass(frozen=True)
class Order:

    id: str
    buyer_id: str
    items: tuple[CartLineItem, ...]
    amount: Money
    payment: dict[str, Any]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def place(buyer: Actor, items: list[CartLineItem], payment: dict[str, Any]) -> Order:
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(
            id=uuid4().hex,
            buyer_id=buyer.id,
            items=tuple(items),
            amount=cart_total(items),
            payment=dict(payment),
        )
