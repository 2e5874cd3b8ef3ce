"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.product import Product
from storefront.domain.model.product_query import ProductQuery


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_slug(self, slug: str) -> Product | None:
        """Return the first product with this slug, or None."""

    @abstractmethod
    def find(
        self,
        query: ProductQuery,
        *,
        newest_first: bool = False,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[Product]:
        """Return products matching ``query``.

        Without ``newest_first`` the store's own (insertion) order is kept.
        ``skip``/``limit`` are applied after sorting.
        """

    @abstractmethod
    def count(self, query: ProductQuery) -> int:
        """Number of products matching ``query``."""

    @abstractmethod
    def count_all(self) -> int:
        """Number of products in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def delete_by_id(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""

    @abstractmethod
    def push_review(self, product_id: str, review_id: str) -> bool:
        """Atomically append a review reference.

        Returns False if the product does not exist. Appending a reference
        that is already present is a no-op.
        """

    @abstractmethod
    def pull_review(self, product_id: str, review_id: str) -> bool:
        """Atomically remove a review reference.

        Idempotent: returns False when there was nothing to remove.
        """
