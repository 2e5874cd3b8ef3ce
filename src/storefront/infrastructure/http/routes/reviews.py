"""HTTP routes for the review ledger. All of them need an acting user."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.application.delete_review import DeleteReviewHandler
from storefront.application.dto import ReviewDTO
from storefront.application.post_review import PostReviewHandler
from storefront.application.update_review import UpdateReviewHandler
from storefront.domain.model.value_objects import Actor
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.http.dependencies import current_actor, get_container
from storefront.infrastructure.http.schemas import ReviewRequest

review_router = APIRouter(tags=["reviews"])


@review_router.post("/products/{product_id}/reviews", status_code=201)
def post_review(
    product_id: str,
    body: ReviewRequest,
    actor: Actor = Depends(current_actor),
    container: Container = Depends(get_container),
):
    handler = PostReviewHandler(container.product_repo, container.review_repo)
    review = handler.handle(product_id, body.body, body.rating, actor)
    return {
        "success": True,
        "message": "Review Posted Successfully",
        "review": ReviewDTO.from_review(review),
    }


@review_router.put("/reviews/{review_id}")
def update_review(
    review_id: str,
    body: ReviewRequest,
    actor: Actor = Depends(current_actor),
    container: Container = Depends(get_container),
):
    review = UpdateReviewHandler(container.review_repo).handle(review_id, body.body, body.rating, actor)
    return {
        "success": True,
        "message": "Review Updated Successfully",
        "review": ReviewDTO.from_review(review),
    }


@review_router.delete("/products/{product_id}/reviews/{review_id}")
def delete_review(
    product_id: str,
    review_id: str,
    actor: Actor = Depends(current_actor),
    container: Container = Depends(get_container),
):
    DeleteReviewHandler(container.product_repo, container.review_repo).handle(product_id, review_id, actor)
    return {"success": True, "message": "Review Deleted Successfully"}
