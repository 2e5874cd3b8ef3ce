"""CLI commands for checkout."""

from __future__ import annotations

import click

from storefront.application.dto import CartItemSpec
from storefront.application.issue_client_token import IssueClientTokenHandler
from storefront.application.process_payment import ProcessPaymentHandler
from storefront.domain.exceptions import DomainException, EntityNotFoundError
from storefront.infrastructure.bootstrap import (
    checkout_price_source,
    order_repository,
    payment_gateway,
    product_repository,
)
from storefront.infrastructure.cli._common import actor_from_options


@click.command("token")
def payment_token() -> None:
    """Print a client token for the payment SDK."""
    handler = IssueClientTokenHandler(payment_gateway())

    try:
        token = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(token)


@click.command("pay")
@click.option("--nonce", required=True, help="Payment method nonce from the client SDK.")
@click.option("--item", "product_ids", multiple=True, required=True, help="Product ID, one unit each (repeatable).")
@click.option("--as-user", "user_id", required=True, help="ID of the buyer.")
def payment_pay(nonce: str, product_ids: tuple[str, ...], user_id: str) -> None:
    """Charge a cart of catalog products and record the order."""
    products = product_repository()
    handler = ProcessPaymentHandler(payment_gateway(), order_repository(), checkout_price_source())

    try:
        cart = []
        for pid in product_ids:
            product = products.get_by_id(pid)
            if product is None:
                raise EntityNotFoundError(f"Product with ID '{pid}' not found")
            cart.append(CartItemSpec(price=product.price.amount, product_id=product.id, product_name=product.name))
        receipt = handler.handle(nonce, cart, actor_from_options(user_id, None))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {receipt.order_id} placed: ${receipt.amount:.2f} (transaction {receipt.transaction_id})")


@click.command("show")
@click.option("--order", "order_id", required=True, help="Order ID.")
def payment_show(order_id: str) -> None:
    """Show a recorded order with its gateway transaction."""
    order = order_repository().get_by_id(order_id)
    if order is None:
        raise click.ClickException(f"Order with ID '{order_id}' not found")

    click.echo(f"Order {order.id}  buyer={order.buyer_id}  placed={order.created_at:%Y-%m-%d %H:%M}")
    click.echo(f"Transaction: {order.payment.get('id', '-')} ({order.payment.get('status', '-')})")
    for item in order.items:
        click.echo(f"  {item.product_name or item.product_id or '-':<30} {item.unit_price}")
    click.echo(f"Total: {order.amount}")
