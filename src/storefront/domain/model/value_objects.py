"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from storefront.domain.exceptions import ValidationError

MAX_PHOTO_BYTES = 1_000_000
MIN_RATING = 1
MAX_RATING = 5

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. Zero is a valid amount
    (free items exist), negative amounts are not.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise ValidationError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount >= other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    def to_gateway_amount(self) -> str:
        """Two-decimal string, the format payment gateways expect."""
        return f"{self.amount.quantize(Decimal('0.01'))}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Coerce outside input to Money.

        Only whole cents are accepted, so the amount the gateway charges
        is always exactly the amount recorded.
        """
        money = Money(_parse_decimal(amount, "money amount"))
        try:
            cents = money.amount.quantize(_CENT)
        except InvalidOperation as exc:
            raise ValidationError(f"Money amount out of range: {amount!r}") from exc
        if cents != money.amount:
            raise ValidationError(
                f"Money amount cannot have more than two decimal places, got {amount!r}"
            )
        return money

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


@dataclass(frozen=True)
class PriceRange:
    """Inclusive ``[low, high]`` price bounds used by catalog filters.

    Bounds are plain numbers, not Money: a negative lower bound is a
    valid filter that simply matches from zero up.
    """

    low: Decimal
    high: Decimal

    def __post_init__(self) -> None:
        if self.low > self.high:
            raise ValidationError(
                f"Price range lower bound {self.low} exceeds upper bound {self.high}"
            )

    def contains(self, price: Money) -> bool:
        return self.low <= price.amount <= self.high

    @staticmethod
    def from_bounds(bounds: list | tuple | None) -> PriceRange | None:
        """Build a range from a two-element sequence; empty means no constraint."""
        if not bounds:
            return None
        if len(bounds) != 2:
            raise ValidationError(
                f"Price range must have exactly two bounds, got {len(bounds)}"
            )
        return PriceRange(
            _parse_decimal(bounds[0], "price bound"),
            _parse_decimal(bounds[1], "price bound"),
        )


@dataclass(frozen=True)
class Rating:
    """Review score on a closed 1-5 scale."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Rating must be an integer, got {type(self.value).__name__}"
            )
        if not MIN_RATING <= self.value <= MAX_RATING:
            raise ValidationError(
                f"Rating must be between {MIN_RATING} and {MAX_RATING}"
            )

    @staticmethod
    def of(raw: int | str | None) -> Rating:
        if raw is None or raw == "":
            raise ValidationError("Rating is Required")
        if isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError as exc:
                raise ValidationError(f"Invalid rating: {raw!r}") from exc
        return Rating(raw)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Photo:
    """Binary product image together with its MIME type.

    Size is checked by the product handlers, after the other fields, so
    that validation messages come out in a fixed order.
    """

    data: bytes
    content_type: str

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def is_oversized(self) -> bool:
        return self.size > MAX_PHOTO_BYTES


@dataclass(frozen=True)
class Actor:
    """The authenticated user on whose behalf an operation runs."""

    id: str
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.id or not str(self.id).strip():
            raise ValidationError("Acting user identity is required")


def slugify(text: str) -> str:
    """Derive a URL-safe slug from a display name.

    ``"Blue Denim Jacket!"`` becomes ``"Blue-Denim-Jacket"``; case is kept.
    """
    normalized = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^A-Za-z0-9]+", "-", normalized).strip("-")


def _parse_decimal(raw, what: str) -> Decimal:
    if isinstance(raw, bool) or raw is None:
        raise ValidationError(f"Invalid {what}: {raw!r}")
    try:
        value = Decimal(str(raw).strip())
    except (InvalidOperation, ValueError) as exc:
        raise ValidationError(f"Invalid {what}: {raw!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Invalid {what}: {raw!r}")
    return value
