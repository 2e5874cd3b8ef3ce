"""Category entity: referenced, never owned, by products."""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import slugify


@dataclass
class Category:

    id: str
    name: str
    slug: str

    @staticmethod
    def create(name: str) -> Category:
        if not name or not name.strip():
            raise ValidationError("Name is Required")
        name = name.strip()
        return Category(id=uuid4().hex, name=name, slug=slugify(name))
