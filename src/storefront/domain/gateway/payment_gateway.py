"""Payment gateway port (abstract interface).

Adapters (Braintree for production, a configurable fake for development
and tests) translate their SDK's callbacks and exceptions into this
synchronous contract: a call either returns a result or raises
GatewayError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class SaleResult:
    """Outcome of a sale the gateway actually processed.

    ``payload`` is the gateway's own view of the transaction, kept
    verbatim on the order.
    """

    success: bool
    transaction_id: str | None = None
    status: str | None = None
    message: str | None = None
    payload: dict[str, Any] = field(default_factory=dict)


class PaymentGateway(ABC):

    @abstractmethod
    def generate_client_token(self) -> str:
        """Return an opaque token the client SDK uses to collect a payment method."""

    @abstractmethod
    def sale(self, amount: Money, nonce: str, submit_for_settlement: bool = True) -> SaleResult:
        """Charge ``amount`` against the payment method behind ``nonce``."""
