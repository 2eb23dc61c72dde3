"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from localshop.domain.exceptions import ValidationError

CURRENCY = "PKR"


@dataclass(frozen=True)
class Quantity:
    """A positive integer quantity.

    Enforces the invariant that a cart line never holds zero or negative
    items.
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValidationError(
                f"Quantity must be an integer, got {type(self.value).__name__}"
            )
        if self.value <= 0:
            raise ValidationError("Quantity must be positive")

    def __str__(self) -> str:
        return str(self.value)

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def coerce(raw: object) -> Quantity:
        """Lenient factory for user input.

        Anything that is not a positive number becomes 1; fractional input
        is truncated.
        """
        try:
            value = int(float(str(raw).strip()))
        except (TypeError, ValueError, OverflowError):
            return Quantity(1)
        return Quantity(max(1, value))


def format_price(amount: int | float) -> str:
    """Render an amount in the smallest currency unit, e.g. ``PKR 1,250``."""
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"{CURRENCY} {amount:,}"
