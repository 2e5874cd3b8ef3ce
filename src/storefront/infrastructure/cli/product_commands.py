"""CLI commands for the Product aggregate."""

from __future__ import annotations

import mimetypes
from pathlib import Path

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.catalog_query import CatalogQueryEngine
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.dto import ProductInput
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import Photo
from storefront.infrastructure.bootstrap import (
    category_repository,
    photo_store,
    product_repository,
    review_repository,
)
from storefront.infrastructure.cli._common import echo_product_table


def _engine() -> CatalogQueryEngine:
    return CatalogQueryEngine(
        product_repository(), category_repository(), review_repository(), photo_store()
    )


def _read_photo(path: Path | None) -> Photo | None:
    if path is None:
        return None
    content_type, _ = mimetypes.guess_type(path.name)
    return Photo(data=path.read_bytes(), content_type=content_type or "application/octet-stream")


def _product_options(func):
    options = [
        click.option("--name", default=None, help="Product name."),
        click.option("--description", default=None, help="Product description."),
        click.option("--price", default=None, help="Price (e.g. 15.00)."),
        click.option("--category", default=None, help="Category ID."),
        click.option("--quantity", default=None, help="Units in stock."),
        click.option("--shipping/--no-shipping", default=False, help="Whether the product ships."),
        click.option(
            "--photo",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            default=None,
            help="Photo file (max 1MB).",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command("add")
@_product_options
def product_add(name, description, price, category, quantity, shipping, photo) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repository(), category_repository(), photo_store())
    data = ProductInput(
        name=name,
        description=description,
        price=price,
        category=category,
        quantity=quantity,
        shipping=shipping,
        photo=_read_photo(photo),
    )

    try:
        product = handler.handle(data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{product.name}' added at {product.price} (id={product.id}, slug={product.slug})")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@_product_options
def product_update(product_id, name, description, price, category, quantity, shipping, photo) -> None:
    """Replace a product's details."""
    handler = UpdateProductHandler(product_repository(), category_repository(), photo_store())
    data = ProductInput(
        name=name,
        description=description,
        price=price,
        category=category,
        quantity=quantity,
        shipping=shipping,
        photo=_read_photo(photo),
    )

    try:
        product = handler.handle(product_id, data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated (slug={product.slug})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product with its photo and reviews."""
    handler = DeleteProductHandler(product_repository(), review_repository(), photo_store())

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("list")
@click.option("--page", type=int, default=None, help="Page number (6 per page).")
def product_list(page: int | None) -> None:
    """List products, newest first."""
    engine = _engine()

    try:
        products = engine.list_all() if page is None else engine.list_page(page)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product_table(products)
    click.echo(f"\n{engine.count_all()} products in catalog")


@click.command("show")
@click.option("--slug", required=True, help="Product slug.")
def product_show(slug: str) -> None:
    """Show one product with its reviews."""
    try:
        dto = _engine().get_by_slug(slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.name}  (id={dto.id})")
    click.echo(f"Category: {dto.category.name if dto.category else '-'}")
    click.echo(f"Price:    ${dto.price:.2f}   Qty: {dto.quantity}   Shipping: {'yes' if dto.shipping else 'no'}")
    click.echo()
    click.echo(dto.description)
    click.echo()
    if not dto.reviews:
        click.echo("No reviews yet.")
        return
    click.echo(f"Reviews ({len(dto.reviews)}):")
    for r in dto.reviews:
        author = r.author.name or r.author.id
        click.echo(f"  [{r.rating}/5] {author}: {r.body}")


@click.command("search")
@click.argument("keyword", default="")
def product_search(keyword: str) -> None:
    """Search products by name or description."""
    echo_product_table(_engine().search(keyword))


@click.command("filter")
@click.option("--category", "categories", multiple=True, help="Category ID (repeatable).")
@click.option("--min", "low", default=None, help="Lowest price (inclusive).")
@click.option("--max", "high", default=None, help="Highest price (inclusive).")
@click.option("--page", type=int, default=1, show_default=True, help="Page number (8 per page).")
def product_filter(categories: tuple[str, ...], low: str | None, high: str | None, page: int) -> None:
    """Filter products by category and price range."""
    if (low is None) != (high is None):
        raise click.UsageError("--min and --max must be given together")
    bounds = [low, high] if low is not None else []
    engine = _engine()

    try:
        products = engine.filter(list(categories), bounds, page)
        total = engine.count_filtered(list(categories), bounds)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    echo_product_table(products)
    click.echo(f"\nPage {page}: {len(products)} of {total} matching products")


@click.command("related")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--category", "category_id", required=True, help="Category ID.")
def product_related(product_id: str, category_id: str) -> None:
    """Show up to 4 other products in the same category."""
    echo_product_table(_engine().related(product_id, category_id))
