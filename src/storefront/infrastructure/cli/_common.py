"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import click

from storefront.application.dto import ProductSummaryDTO
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Actor


def actor_from_options(user_id: str, user_name: str | None) -> Actor:
    try:
        return Actor(id=user_id, name=user_name)
    except ValidationError as exc:
        raise click.BadParameter(str(exc)) from exc


def echo_product_table(products: list[ProductSummaryDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<34} {'Name':<24} {'Category':<16} {'Price':>10} {'Qty':>5}")
    click.echo("-" * 93)
    for p in products:
        category = p.category.name if p.category else "-"
        click.echo(
            f"{p.id:<34} {p.name[:24]:<24} {category[:16]:<16} {'$' + format(p.price, '.2f'):>10} {p.quantity:>5}"
        )
