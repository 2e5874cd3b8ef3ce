"""Braintree payment gateway adapter.

Wraps the braintree SDK behind the PaymentGateway port. SDK exceptions
(network, authentication, timeouts) become GatewayError; a sale the
gateway answered but refused comes back as an unsuccessful SaleResult
carrying the gateway's error payload.
"""

from __future__ import annotations

from typing import Any

import braintree
import structlog
from braintree.exceptions.braintree_error import BraintreeError

from storefront.domain.exceptions import GatewayError
from storefront.domain.gateway.payment_gateway import PaymentGateway, SaleResult
from storefront.domain.model.value_objects import Money

logger = structlog.get_logger(__name__)

_ENVIRONMENTS = {
    "sandbox": braintree.Environment.Sandbox,
    "production": braintree.Environment.Production,
}


class BraintreeGateway(PaymentGateway):

    def __init__(
        self,
        merchant_id: str,
        public_key: str,
        private_key: str,
        environment: str = "sandbox",
        timeout: float = 30.0,
        sdk_gateway: Any = None,
    ) -> None:
        if sdk_gateway is None:
            sdk_gateway = braintree.BraintreeGateway(
                braintree.Configuration(
                    environment=_ENVIRONMENTS[environment],
                    merchant_id=merchant_id,
                    public_key=public_key,
                    private_key=private_key,
                    timeout=timeout,
                )
            )
        self._sdk = sdk_gateway

    # --- PaymentGateway interface ---------------------------------------------

    def generate_client_token(self) -> str:
        try:
            return self._sdk.client_token.generate()
        except BraintreeError as exc:
            logger.error("client_token_failed", error=repr(exc))
            raise GatewayError("Could not generate a client token", detail=repr(exc)) from exc

    def sale(self, amount: Money, nonce: str, submit_for_settlement: bool = True) -> SaleResult:
        try:
            result = self._sdk.transaction.sale(
                {
                    "amount": amount.to_gateway_amount(),
                    "payment_method_nonce": nonce,
                    "options": {"submit_for_settlement": submit_for_settlement},
                }
            )
        except BraintreeError as exc:
            logger.error("sale_failed", amount=amount.to_gateway_amount(), error=repr(exc))
            raise GatewayError("Payment gateway request failed", detail=repr(exc)) from exc

        transaction = getattr(result, "transaction", None)
        if result.is_success:
            return SaleResult(
                success=True,
                transaction_id=transaction.id,
                status=transaction.status,
                payload=_transaction_payload(transaction),
            )

        payload: dict[str, Any] = {
            "message": result.message,
            "errors": [
                {"attribute": e.attribute, "code": e.code, "message": e.message}
                for e in result.errors.deep_errors
            ],
        }
        if transaction is not None:
            payload["transaction"] = _transaction_payload(transaction)
        return SaleResult(
            success=False,
            transaction_id=transaction.id if transaction is not None else None,
            status=transaction.status if transaction is not None else None,
            message=result.message,
            payload=payload,
        )


def _transaction_payload(transaction: Any) -> dict[str, Any]:
    return {
        "id": transaction.id,
        "status": transaction.status,
        "type": getattr(transaction, "type", None),
        "amount": str(transaction.amount),
        "currency_iso_code": getattr(transaction, "currency_iso_code", None),
        "processor_response_code": getattr(transaction, "processor_response_code", None),
        "processor_response_text": getattr(transaction, "processor_response_text", None),
    }
