"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist; a bad
argument here is a caller defect and raises ``GuardError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from commerce.domain.exceptions import (
    CurrencyMismatchError,
    GuardError,
    UnsupportedCurrencyError,
)


class Currency(str, Enum):
    """ISO 4217 codes supported by the system."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"

    def __str__(self) -> str:
        return self.value

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Resolve a currency from its code, case-insensitively."""
        if isinstance(code, Currency):
            return code
        normalized = (code or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            supported = ", ".join(c.value for c in cls)
            raise UnsupportedCurrencyError(
                f"Unsupported currency code: {code!r}. Supported currencies: {supported}"
            ) from None


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise GuardError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if not self.amount.is_finite():
            raise GuardError(f"Money amount must be finite, got {self.amount}")
        if self.amount < Decimal("0"):
            raise GuardError(f"Money amount cannot be negative, got {self.amount}")
        if not isinstance(self.currency, Currency):
            raise GuardError("Money currency is required")

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def multiply(self, factor: int) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise GuardError(
                f"Can only multiply Money by int, got {type(factor).__name__}"
            )
        if factor < 0:
            raise GuardError(f"Money multiplier cannot be negative, got {factor}")
        return Money(self.amount * factor, self.currency)

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __mul__(self, factor: int) -> Money:
        return self.multiply(factor)

    # --- Predicates -----------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_positive(self) -> bool:
        return self.amount > 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency.value}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise GuardError(f"Cannot combine Money with {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency.value, other.currency.value)

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero(currency: Currency) -> Money:
        return Money(Decimal("0"), currency)

    @staticmethod
    def of(amount: str | int | Decimal, currency: Currency | str = Currency.USD) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        try:
            value = Decimal(str(amount).strip())
        except (InvalidOperation, ValueError) as exc:
            raise GuardError(f"Invalid money amount: {amount!r}") from exc
        return Money(value, Currency.from_code(currency))


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that you cannot order zero or negative items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise GuardError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise GuardError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Text:
    """Trimmed, non-empty string.

    Use ``Text.parse`` on raw input: it returns ``None`` for blank or
    missing values so callers can turn that into their own Error.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise GuardError(f"Text must be a str, got {type(self.value).__name__}")
        if not self.value or self.value != self.value.strip():
            raise GuardError("Text must be non-empty and trimmed")

    @classmethod
    def parse(cls, raw: str | None):
        if raw is None or not isinstance(raw, str):
            return None
        stripped = raw.strip()
        if not stripped:
            return None
        return cls(stripped)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class FeatureName(Text):
    """Feature name; two names are equal when they match case-insensitively."""

    @property
    def key(self) -> str:
        return self.value.casefold()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FeatureName):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


def optional_text(raw: str | None) -> str | None:
    """Trim an optional free-text field; blank becomes ``None``."""
    text = Text.parse(raw)
    return text.value if text is not None else None
