"""HTTP routes for checkout."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from storefront.application.dto import CartItemSpec
from storefront.application.issue_client_token import IssueClientTokenHandler
from storefront.application.process_payment import ProcessPaymentHandler
from storefront.domain.model.value_objects import Actor
from storefront.infrastructure.bootstrap import Container
from storefront.infrastructure.http.dependencies import current_actor, get_container
from storefront.infrastructure.http.schemas import PaymentRequest

payment_router = APIRouter(prefix="/payments", tags=["payments"])


@payment_router.get("/token")
def client_token(container: Container = Depends(get_container)):
    token = IssueClientTokenHandler(container.gateway).handle()
    return {"success": True, "client_token": token}


@payment_router.post("")
def process_payment(
    body: PaymentRequest,
    actor: Actor = Depends(current_actor),
    container: Container = Depends(get_container),
):
    cart = [
        CartItemSpec(price=entry.product.price, product_id=entry.product.id, product_name=entry.product.name)
        for entry in body.cart
    ]
    handler = ProcessPaymentHandler(container.gateway, container.order_repo, container.price_source)
    receipt = handler.handle(body.nonce, cart, actor)
    return {
        "success": True,
        "ok": True,
        "message": "Payment Completed Successfully",
        "order_id": receipt.order_id,
        "transaction_id": receipt.transaction_id,
        "amount": receipt.amount,
    }
