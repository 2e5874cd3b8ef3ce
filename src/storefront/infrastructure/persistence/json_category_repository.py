"""JSON-file-backed implementation of CategoryRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.category import Category
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonCategoryRepository(CategoryRepository):

    def __init__(self, file_path: Path, timeout: float = 5.0) -> None:
        self._file = JsonFile(file_path, timeout)

    def get_by_id(self, category_id: str) -> Category | None:
        return self._first(lambda raw: raw["id"] == category_id)

    def get_by_slug(self, slug: str) -> Category | None:
        return self._first(lambda raw: raw["slug"] == slug)

    def list_all(self) -> list[Category]:
        return [self._to_domain(raw) for raw in self._file.read()]

    def save(self, category: Category) -> None:
        with self._file.update() as records:
            for i, raw in enumerate(records):
                if raw["id"] == category.id:
                    records[i] = self._to_raw(category)
                    break
            else:
                records.append(self._to_raw(category))

    def _first(self, predicate) -> Category | None:
        for raw in self._file.read():
            if predicate(raw):
                return self._to_domain(raw)
        return None

    @staticmethod
    def _to_raw(category: Category) -> dict:
        return {"id": category.id, "name": category.name, "slug": category.slug}

    @staticmethod
    def _to_domain(raw: dict) -> Category:
        return Category(id=raw["id"], name=raw["name"], slug=raw["slug"])
