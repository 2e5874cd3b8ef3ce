"""Abstract repository for Order aggregate.

Orders are write-once records of settled checkouts. ``add`` is the only
write; ``get_by_id`` is the read-back port used for reconciliation
against the gateway's transaction log (``storefront payment show``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: str) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def add(self, order: Order) -> None:
        """Persist a new order. Orders are never updated."""
