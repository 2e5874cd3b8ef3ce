"""HTTP routes for categories."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.application.add_category import AddCategoryHandler
from storefront.application.dto import CategoryDTO
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.http.dependencies import get_container
from storefront.infrastructure.http.schemas import CategoryRequest

category_router = APIRouter(prefix="/categories", tags=["categories"])


@category_router.post("", status_code=201)
def create_category(body: CategoryRequest, container: Container = Depends(get_container)):
    category = AddCategoryHandler(container.category_repo).handle(body.name or "")
    return {
        "success": True,
        "message": "Category Created Successfully",
        "category": CategoryDTO.from_category(category),
    }


@category_router.get("")
def list_categories(container: Container = Depends(get_container)):
    categories = [CategoryDTO.from_category(c) for c in container.category_repo.list_all()]
    return {"success": True, "categories": categories}
