"""Application service: Add Product use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import ProductInput
from storefront.application.product_form import validate_product_input
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.product import Product
from storefront.domain.repository.category_repository import CategoryRepository
from storefront.domain.repository.photo_store import PhotoStore
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        category_repo: CategoryRepository,
        photo_store: PhotoStore,
    ) -> None:
        self._product_repo = product_repo
        self._category_repo = category_repo
        self._photo_store = photo_store

    def handle(self, data: ProductInput) -> Product:
        """Add a new product to the catalog."""
        fields = validate_product_input(data)

        if self._category_repo.get_by_id(fields.category_id) is None:
            raise EntityNotFoundError(f"Category with ID '{fields.category_id}' not found")

        product = Product.create(
            name=fields.name,
            description=fields.description,
            price=fields.price,
            quantity=fields.quantity,
            category_id=fields.category_id,
            shipping=fields.shipping,
        )
        self._product_repo.save(product)
        if data.photo is not None:
            self._photo_store.put(product.id, data.photo)

        logger.info("product_created", product_id=product.id, slug=product.slug)
        return product
