"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import CartLineItem, Order
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file = JsonFile(file_path, timeout)

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def add(self, order: Order) -> None:
        with self._file.update() as records:
            records.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "buyer_id": order.buyer_id,
            "amount": str(order.amount.amount),
            "currency": order.amount.currency,
            "payment": order.payment,
            "created_at": order.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                }
                for item in order.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = tuple(
            CartLineItem(
                unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                product_id=i.get("product_id"),
                product_name=i.get("product_name"),
            )
            for i in raw["items"]
        )
        return Order(
            id=raw["id"],
            buyer_id=raw["buyer_id"],
            items=items,
            amount=Money(Decimal(raw["amount"]), raw.get("currency", "USD")),
            payment=raw.get("payment", {}),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
