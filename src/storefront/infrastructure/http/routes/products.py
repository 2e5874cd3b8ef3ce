"""HTTP routes for product administration and catalog browsing.

Static paths (``/count``, ``/list/{page}``, ``/search``...) are declared
before ``/{slug}`` so they are not swallowed by it.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from storefront.application.add_product import AddProductHandler
from storefront.application.catalog_query import CatalogQueryEngine
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductInput, ProductSummaryDTO
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import MAX_PHOTO_BYTES, Photo
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.http.dependencies import get_container
from storefront.infrastructure.http.schemas import FilterRequest

product_router = APIRouter(prefix="/products", tags=["products"])


def _engine(container: Container) -> CatalogQueryEngine:
    return CatalogQueryEngine(
        container.product_repo,
        container.category_repo,
        container.review_repo,
        container.photo_store,
    )


def _summary(container: Container, product: Product) -> ProductSummaryDTO:
    category = container.category_repo.get_by_id(product.category_id)
    return ProductSummaryDTO.from_product(product, category)


def product_form(
    name: str | None = Form(default=None),
    description: str | None = Form(default=None),
    price: str | None = Form(default=None),
    category: str | None = Form(default=None),
    quantity: str | None = Form(default=None),
    shipping: str | None = Form(default=None),
    photo: UploadFile | None = File(default=None),
) -> ProductInput:
    # At most one byte past the limit is read.
    stored_photo = None
    if photo is not None and photo.filename:
        stored_photo = Photo(
            data=photo.file.read(MAX_PHOTO_BYTES + 1),
            content_type=photo.content_type or "application/octet-stream",
        )
    return ProductInput(
        name=name,
        description=description,
        price=price,
        category=category,
        quantity=quantity,
        shipping=shipping,
        photo=stored_photo,
    )


# --- Administration -----------------------------------------------------------


@product_router.post("", status_code=201)
def create_product(
    data: ProductInput = Depends(product_form),
    container: Container = Depends(get_container),
):
    handler = AddProductHandler(container.product_repo, container.category_repo, container.photo_store)
    product = handler.handle(data)
    return {
        "success": True,
        "message": "Product Created Successfully",
        "product": _summary(container, product),
    }


@product_router.put("/{product_id}")
def update_product(
    product_id: str,
    data: ProductInput = Depends(product_form),
    container: Container = Depends(get_container),
):
    handler = UpdateProductHandler(container.product_repo, container.category_repo, container.photo_store)
    product = handler.handle(product_id, data)
    return {
        "success": True,
        "message": "Product Updated Successfully",
        "product": _summary(container, product),
    }


@product_router.delete("/{product_id}")
def delete_product(product_id: str, container: Container = Depends(get_container)):
    DeleteProductHandler(container.product_repo, container.review_repo, container.photo_store).handle(product_id)
    return {"success": True, "message": "Product Deleted Successfully"}


# --- Browsing -----------------------------------------------------------------


@product_router.get("")
def list_products(container: Container = Depends(get_container)):
    products = _engine(container).list_all()
    return {
        "success": True,
        "message": "All Products",
        "total": len(products),
        "products": products,
    }


@product_router.get("/count")
def count_products(container: Container = Depends(get_container)):
    return {"success": True, "total": _engine(container).count_all()}


@product_router.get("/list/{page}")
def list_products_page(page: int, container: Container = Depends(get_container)):
    return {"success": True, "products": _engine(container).list_page(page)}


@product_router.get("/search")
@product_router.get("/search/{keyword}")
def search_products(keyword: str = "", container: Container = Depends(get_container)):
    return {"success": True, "products": _engine(container).search(keyword)}


@product_router.post("/filters")
def filter_products(
    body: FilterRequest,
    page: int = 1,
    container: Container = Depends(get_container),
):
    return {"success": True, "products": _engine(container).filter(body.checked, body.radio, page)}


@product_router.post("/filters/count")
def count_filtered_products(body: FilterRequest, container: Container = Depends(get_container)):
    return {"success": True, "total": _engine(container).count_filtered(body.checked, body.radio)}


@product_router.get("/related/{product_id}/{category_id}")
def related_products(product_id: str, category_id: str, container: Container = Depends(get_container)):
    return {"success": True, "products": _engine(container).related(product_id, category_id)}


@product_router.get("/category/{slug}")
def products_by_category(slug: str, container: Container = Depends(get_container)):
    category, products = _engine(container).by_category(slug)
    return {"success": True, "category": category, "products": products}


@product_router.get("/{product_id}/photo")
def product_photo(product_id: str, container: Container = Depends(get_container)):
    photo = _engine(container).get_photo(product_id)
    if photo is None:
        return Response(status_code=204)
    return Response(content=photo.data, media_type=photo.content_type)


@product_router.get("/{slug}")
def get_product(slug: str, container: Container = Depends(get_container)):
    return {
        "success": True,
        "message": "Single Product Fetched",
        "product": _engine(container).get_by_slug(slug),
    }
