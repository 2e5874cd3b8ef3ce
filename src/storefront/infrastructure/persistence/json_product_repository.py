"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.product import Product
from storefront.domain.model.product_query import ProductQuery
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.product_repository import ProductRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file = JsonFile(file_path, timeout)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.read():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def get_by_slug(self, slug: str) -> Product | None:
        for raw in self._file.read():
            if raw["slug"] == slug:
                return self._to_domain(raw)
        return None

    def find(
        self,
        query: ProductQuery,
        *,
        newest_first: bool = False,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        products = [p for p in self._all() if query.matches(p)]
        if newest_first:
            products.sort(key=lambda p: p.created_at, reverse=True)
        end = None if limit is None else skip + limit
        return products[skip:end]

    def count(self, query: ProductQuery) -> int:
        return sum(1 for p in self._all() if query.matches(p))

    def count_all(self) -> int:
        return len(self._file.read())

    def save(self, product: Product) -> None:
        with self._file.update() as records:
            for i, raw in enumerate(records):
                if raw["id"] == product.id:
                    records[i] = self._to_raw(product)
                    break
            else:
                records.append(self._to_raw(product))

    def delete_by_id(self, product_id: str) -> bool:
        with self._file.update() as records:
            before = len(records)
            records[:] = [raw for raw in records if raw["id"] != product_id]
            return len(records) != before

    def push_review(self, product_id: str, review_id: str) -> bool:
        return self._modify(product_id, lambda p: p.attach_review(review_id)) is not None

    def pull_review(self, product_id: str, review_id: str) -> bool:
        return bool(self._modify(product_id, lambda p: p.detach_review(review_id)))

    # --- Internal helpers -----------------------------------------------------

    def _all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def _modify(self, product_id: str, change) -> bool | None:
        """Apply ``change`` to one product under the file lock.

        Returns None if the product does not exist, otherwise whatever
        ``change`` returned.
        """
        with self._file.update() as records:
            for i, raw in enumerate(records):
                if raw["id"] == product_id:
                    product = self._to_domain(raw)
                    changed = change(product)
                    records[i] = self._to_raw(product)
                    return changed
        return None

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "slug": product.slug,
            "description": product.description,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "quantity": product.quantity,
            "category_id": product.category_id,
            "shipping": product.shipping,
            "review_ids": list(product.review_ids),
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            slug=raw["slug"],
            description=raw["description"],
            price=Money(Decimal(raw["price"]), raw.get("currency", "USD")),
            quantity=raw["quantity"],
            category_id=raw["category_id"],
            shipping=raw.get("shipping", False),
            review_ids=list(raw.get("review_ids", [])),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
