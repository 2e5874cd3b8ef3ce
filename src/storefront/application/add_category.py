"""Application service: Add Category use case."""

from __future__ import annotations

from storefront.domain.exceptions import ConflictError
from storefront.domain.model.category import Category
from storefront.domain.repository.category_repository import CategoryRepository


class AddCategoryHandler:

    def __init__(self, category_repo: CategoryRepository) -> None:
        self._category_repo = category_repo

    def handle(self, name: str) -> Category:
        category = Category.create(name)
        if self._category_repo.get_by_slug(category.slug) is not None:
            raise ConflictError(f"Category '{category.name}' already exists")
        self._category_repo.save(category)
        return category
