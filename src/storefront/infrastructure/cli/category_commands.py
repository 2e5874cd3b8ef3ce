"""CLI commands for categories."""

from __future__ import annotations

import click

from storefront.application.add_category import AddCategoryHandler
from storefront.application.catalog_query import CatalogQueryEngine
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    category_repository,
    photo_store,
    product_repository,
    review_repository,
)
from storefront.infrastructure.cli._common import echo_product_table


@click.command("add")
@click.option("--name", required=True, help="Category name.")
def category_add(name: str) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(category_repo=category_repository())

    try:
        category = handler.handle(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category '{category.name}' added (id={category.id}, slug={category.slug})")


@click.command("list")
def category_list() -> None:
    """List all categories."""
    categories = category_repository().list_all()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Slug':<24}")
    click.echo("-" * 84)
    for c in categories:
        click.echo(f"{c.id:<34} {c.name:<24} {c.slug:<24}")


@click.command("products")
@click.option("--slug", required=True, help="Category slug.")
def category_products(slug: str) -> None:
    """List the products of one category."""
    engine = CatalogQueryEngine(
        product_repository(), category_repository(), review_repository(), photo_store()
    )

    try:
        category, products = engine.by_category(slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category: {category.name}")
    echo_product_table(products)
