"""Configurable fake payment gateway for development and testing.

Simulates the gateway without any external calls. It can be switched to
decline sales or to fail outright, and records every call it receives.
"""

from __future__ import annotations

from uuid import uuid4

from storefront.domain.exceptions import GatewayError
from storefront.domain.gateway.payment_gateway import PaymentGateway, SaleResult
from storefront.domain.model.value_objects import Money


class FakeGateway(PaymentGateway):

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.should_raise: bool = False
        self.failure_reason: str = "Do Not Honor"
        self.calls: list[dict] = []

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Do Not Honor",
        should_raise: bool = False,
    ) -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.should_raise = should_raise

    def generate_client_token(self) -> str:
        self.calls.append({"method": "generate_client_token"})
        if self.should_raise:
            raise GatewayError("Fake gateway unavailable")
        return f"fake_client_token_{uuid4().hex[:12]}"

    def sale(self, amount: Money, nonce: str, submit_for_settlement: bool = True) -> SaleResult:
        self.calls.append(
            {
                "method": "sale",
                "amount": amount,
                "nonce": nonce,
                "submit_for_settlement": submit_for_settlement,
            }
        )
        if self.should_raise:
            raise GatewayError("Fake gateway unavailable")

        if self.should_succeed:
            transaction_id = f"fake_txn_{uuid4().hex[:12]}"
            status = "submitted_for_settlement" if submit_for_settlement else "authorized"
            return SaleResult(
                success=True,
                transaction_id=transaction_id,
                status=status,
                payload={
                    "id": transaction_id,
                    "status": status,
                    "amount": amount.to_gateway_amount(),
                },
            )
        return SaleResult(
            success=False,
            status="processor_declined",
            message=self.failure_reason,
            payload={"message": self.failure_reason, "errors": []},
        )
