"""Binary-blob store for product photos."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.value_objects import Photo


class PhotoStore(ABC):

    @abstractmethod
    def get(self, product_id: str) -> Photo | None:
        """Return the stored photo, or None if the product has none."""

    @abstractmethod
    def put(self, product_id: str, photo: Photo) -> None:
        """Store (or replace) the photo of a product."""

    @abstractmethod
    def delete(self, product_id: str) -> None:
        """Remove the photo of a product; no-op if there is none."""
