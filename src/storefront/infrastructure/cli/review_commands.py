"""CLI commands for product reviews."""

from __future__ import annotations

import click

from storefront.application.delete_review import DeleteReviewHandler
from storefront.application.post_review import PostReviewHandler
from storefront.application.update_review import UpdateReviewHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import product_repository, review_repository
from storefront.infrastructure.cli._common import actor_from_options

_as_user = click.option("--as-user", "user_id", required=True, help="ID of the acting user.")
_as_name = click.option("--as-name", "user_name", default=None, help="Display name of the acting user.")


@click.command("post")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--body", required=True, help="Review text.")
@click.option("--rating", required=True, type=int, help="Rating from 1 to 5.")
@_as_user
@_as_name
def review_post(product_id: str, body: str, rating: int, user_id: str, user_name: str | None) -> None:
    """Post a review on a product."""
    handler = PostReviewHandler(product_repository(), review_repository())

    try:
        review = handler.handle(product_id, body, rating, actor_from_options(user_id, user_name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review {review.id} posted on product #{product_id}")


@click.command("edit")
@click.option("--id", "review_id", required=True, help="Review ID.")
@click.option("--body", required=True, help="New review text.")
@click.option("--rating", required=True, type=int, help="New rating from 1 to 5.")
@_as_user
def review_edit(review_id: str, body: str, rating: int, user_id: str) -> None:
    """Edit your own review."""
    handler = UpdateReviewHandler(review_repository())

    try:
        handler.handle(review_id, body, rating, actor_from_options(user_id, None))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review {review_id} updated.")


@click.command("delete")
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--id", "review_id", required=True, help="Review ID.")
@_as_user
def review_delete(product_id: str, review_id: str, user_id: str) -> None:
    """Delete your own review."""
    handler = DeleteReviewHandler(product_repository(), review_repository())

    try:
        handler.handle(product_id, review_id, actor_from_options(user_id, None))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Review {review_id} deleted.")
