"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from pricetracker.domain.exceptions import ValidationError

CENTS = Decimal("0.01")
# Keeps two-decimal rounding well inside the default 28-digit context.
MAX_AMOUNT = Decimal("999999999999.99")


def format_amount(amount: Decimal) -> str:
    """Two-decimal text used by every price display, e.g. ``"4.50"``."""
    return str(amount.quantize(CENTS, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal so prices typed as ``4.5`` come back as exactly ``4.5``.
    """

    amount: Decimal
    currency: str = "BRL"

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
        if self.amount > MAX_AMOUNT:
            raise ValidationError(
                f"Money amount cannot exceed {MAX_AMOUNT}, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        result = self.amount - other.amount
        if result < Decimal("0"):
            raise ValidationError("Money subtraction would result in a negative amount")
        return Money(result, self.currency)

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount < other.amount

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount > other.amount

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"R$ {format_amount(self.amount)}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))


class PromoFlag(Enum):
    """Whether the price was only available with the store's loyalty club."""

    WITH_LOYALTY = "WITH_LOYALTY"
    WITHOUT_LOYALTY = "WITHOUT_LOYALTY"


class ColorTag(Enum):
    """Fixed palette used to tag stores in listings."""

    BLUE = "blue"
    RED = "red"
    ORANGE = "orange"
    GREEN = "green"
    VIOLET = "violet"
    YELLOW = "yellow"
    PINK = "pink"
    SLATE = "slate"


DEFAULT_COLOR = ColorTag.BLUE
