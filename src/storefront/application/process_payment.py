"""Application service: Process Payment use case.

Turns a cart into a settled sale and a persisted order:

1. Build line items, re-pricing them from the catalog when a product
   repository is configured (otherwise the client's prices are used).
2. Charge the sum of unit prices, one unit per entry, with immediate
   settlement.
3. On approval, write the Order and only then acknowledge. On decline,
   raise with the gateway payload and write nothing.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartItemSpec, PaymentReceiptDTO
from storefront.domain.exceptions import (
    EntityNotFoundError,
    OrderPersistenceError,
    PaymentDeclinedError,
    ValidationError,
)
from storefront.domain.gateway.payment_gateway import PaymentGateway
from storefront.domain.model.order import CartLineItem, Order, cart_total
from storefront.domain.model.value_objects import Actor, Money
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class ProcessPaymentHandler:

    def __init__(
        self,
        gateway: PaymentGateway,
        order_repo: OrderRepository,
        product_repo: ProductRepository | None = None,
    ) -> None:
        self._gateway = gateway
        self._order_repo = order_repo
        self._product_repo = product_repo

    def handle(self, nonce: str | None, cart: list[CartItemSpec], buyer: Actor) -> PaymentReceiptDTO:
        if not nonce or not nonce.strip():
            raise ValidationError("Payment nonce is Required")
        if not cart:
            raise ValidationError("Cart is empty")

        items = [self._line_item(spec) for spec in cart]
        amount = cart_total(items)

        result = self._gateway.sale(amount, nonce, submit_for_settlement=True)
        if not result.success:
            logger.warning(
                "payment_declined",
                buyer_id=buyer.id,
                amount=str(amount.amount),
                gateway_message=result.message,
            )
            raise PaymentDeclinedError(result.message or "Payment was declined", result.payload)

        order = Order.place(buyer, items, result.payload)
        try:
            self._order_repo.add(order)
        except Exception as exc:
            logger.error(
                "order_persist_failed",
                buyer_id=buyer.id,
                transaction_id=result.transaction_id,
                amount=str(amount.amount),
                exc_info=True,
            )
            raise OrderPersistenceError(
                "Payment was captured but the order could not be recorded",
                transaction_id=result.transaction_id,
                detail=str(exc),
            ) from exc

        logger.info(
            "order_placed",
            order_id=order.id,
            buyer_id=buyer.id,
            transaction_id=result.transaction_id,
            amount=str(amount.amount),
        )
        return PaymentReceiptDTO(
            order_id=order.id,
            transaction_id=result.transaction_id,
            amount=amount.amount,
            status=result.status,
        )

    # --- Internal helpers -----------------------------------------------------

    def _line_item(self, spec: CartItemSpec) -> CartLineItem:
        if self._product_repo is None:
            if spec.price is None or spec.price == "":
                raise ValidationError("Cart item price is Required")
            return CartLineItem(
                unit_price=Money.of(spec.price),
                product_id=spec.product_id,
                product_name=spec.product_name,
            )

        if not spec.product_id:
            raise ValidationError("Cart item product ID is Required")
        product = self._product_repo.get_by_id(spec.product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{spec.product_id}' not found")
        return CartLineItem(
            unit_price=product.price,
            product_id=product.id,
            product_name=product.name,
        )
