"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and map each class to a
user-facing message and status.
"""

from __future__ import annotations

from typing import Any


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is missing, malformed or out of bounds."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ConflictError(DomainException):
    """The operation would break a uniqueness rule."""


class ForbiddenError(DomainException):
    """The acting user does not own the resource."""


class UpstreamFailure(DomainException):
    """The payment gateway or the store failed.

    ``detail`` carries the underlying error payload for display only;
    callers should rely on the exception class, not on its content.
    """

    def __init__(self, message: str, detail: Any = None) -> None:
        super().__init__(message)
        self.detail = detail


class GatewayError(UpstreamFailure):
    """The payment gateway could not be reached or returned an error."""


class PaymentDeclinedError(UpstreamFailure):
    """The gateway processed the sale but did not approve it."""


class StoreUnavailableError(UpstreamFailure):
    """The persistent store did not answer in time."""


class OrderPersistenceError(UpstreamFailure):
    """The charge succeeded but the order could not be recorded."""

    def __init__(self, message: str, transaction_id: str | None, detail: Any = None) -> None:
        super().__init__(message, detail)
        self.transaction_id = transaction_id
