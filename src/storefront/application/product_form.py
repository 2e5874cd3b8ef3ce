"""Validation of product create/update input.

Fields are checked in a fixed order (name, description, price,
category, quantity, photo size) and the first failure is reported, so
a client always sees the same message for the same incomplete form.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.application.dto import ProductInput
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.value_objects import Money

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"", "0", "false", "no", "off"}


@dataclass(frozen=True)
class ProductFields:
    """Product input after validation and type coercion."""

    name: str
    description: str
    price: Money
    category_id: str
    quantity: int
    shipping: bool


def validate_product_input(data: ProductInput) -> ProductFields:
    if _blank(data.name):
        raise ValidationError("Name is Required")
    if _blank(data.description):
        raise ValidationError("Description is Required")
    if _blank(data.price):
        raise ValidationError("Price is Required")
    price = Money.of(data.price)
    if _blank(data.category):
        raise ValidationError("Category is Required")
    if _blank(data.quantity):
        raise ValidationError("Quantity is Required")
    quantity = _parse_quantity(data.quantity)
    if data.photo is not None and data.photo.is_oversized:
        raise ValidationError("Photo should be less than 1MB")

    return ProductFields(
        name=data.name.strip(),
        description=data.description,
        price=price,
        category_id=str(data.category).strip(),
        quantity=quantity,
        shipping=_parse_shipping(data.shipping),
    )


def _blank(value) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def _parse_quantity(raw) -> int:
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid quantity: {raw!r}")
    try:
        quantity = int(str(raw).strip())
    except ValueError as exc:
        raise ValidationError(f"Invalid quantity: {raw!r}") from exc
    if quantity < 0:
        raise ValidationError("Quantity cannot be negative")
    return quantity


def _parse_shipping(raw) -> bool:
    if raw is None:
        return False
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValidationError(f"Invalid shipping flag: {raw!r}")
