"""Application service: Issue Client Token use case (gateway pass-through)."""

from __future__ import annotations

from storefront.domain.gateway.payment_gateway import PaymentGateway


class IssueClientTokenHandler:

    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    def handle(self) -> str:
        return self._gateway.generate_client_token()
