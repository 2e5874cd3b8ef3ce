"""Product predicate shared by catalog listings and counts.

Listing and counting the same filter must never disagree, so both go
through one ``ProductQuery`` built by one constructor, and stores decide
membership with ``matches`` (or translate the same fields one-to-one).
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import PriceRange


@dataclass(frozen=True)
class ProductQuery:

    category_ids: frozenset[str] = frozenset()
    price_range: PriceRange | None = None
    keyword: str | None = None
    exclude_id: str | None = None

    def matches(self, product: Product) -> bool:
        if self.category_ids and product.category_id not in self.category_ids:
            return False
        if self.price_range is not None and not self.price_range.contains(product.price):
            return False
        if self.exclude_id is not None and product.id == self.exclude_id:
            return False
        if self.keyword:
            needle = self.keyword.casefold()
            if needle not in product.name.casefold() and needle not in product.description.casefold():
                return False
        return True

    # --- Constructors ---------------------------------------------------------

    @staticmethod
    def everything() -> ProductQuery:
        return ProductQuery()

    @staticmethod
    def for_filter(category_ids: list[str] | None, price_bounds: list | None) -> ProductQuery:
        """Category set (empty = any) AND inclusive price range (empty = any)."""
        return ProductQuery(
            category_ids=frozenset(str(c) for c in category_ids or () if c),
            price_range=PriceRange.from_bounds(price_bounds),
        )

    @staticmethod
    def for_keyword(keyword: str | None) -> ProductQuery:
        return ProductQuery(keyword=keyword or None)

    @staticmethod
    def related_to(product_id: str, category_id: str) -> ProductQuery:
        return ProductQuery(category_ids=frozenset({category_id}), exclude_id=product_id)

    @staticmethod
    def in_category(category_id: str) -> ProductQuery:
        return ProductQuery(category_ids=frozenset({category_id}))
