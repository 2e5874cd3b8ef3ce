import click

from storefront.infrastructure.cli.category_commands import (
    category_add,
    category_list,
    category_products,
)
from storefront.infrastructure.cli.payment_commands import (
    payment_pay,
    payment_show,
    payment_token,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_filter,
    product_list,
    product_related,
    product_search,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.review_commands import (
    review_delete,
    review_edit,
    review_post,
)
from storefront.infrastructure.config import get_settings
from storefront.infrastructure.logging import configure_logging


@click.group()
def cli() -> None:
    """Storefront: catalog, reviews and checkout."""
    configure_logging(get_settings().environment)


@cli.group()
def product() -> None:
    """Manage and browse products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def review() -> None:
    """Post, edit and delete reviews."""


@cli.group()
def payment() -> None:
    """Checkout."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_filter)
product.add_command(product_list)
product.add_command(product_related)
product.add_command(product_search)
product.add_command(product_show)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_list)
category.add_command(category_products)
review.add_command(review_delete)
review.add_command(review_edit)
review.add_command(review_post)
payment.add_command(payment_pay)
payment.add_command(payment_show)
payment.add_command(payment_token)
