"""Decimal helpers for monetary values.

Rounding happens in exactly one place (round_money) so every boundary that
rounds uses the same rule.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from hearth.domain.models import Money

Numeric = int | float | str | Decimal

ZERO = Money(Decimal(0))

DEFAULT_FRACTION_DIGITS = 2


def to_decimal(value: Numeric) -> Decimal:
    """Convert a numeric value to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.

    Raises:
        InvalidOperation: If the value is not numeric (e.g. "abc").
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Not a monetary value: {value!r}")
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def quantum(fraction_digits: int) -> Decimal:
    """Smallest currency unit for the given number of fraction digits."""
    return Decimal(1).scaleb(-fraction_digits)


def round_money(value: Numeric, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> Money:
    """Round to the currency's precision using ROUND_HALF_UP.

    Args:
        value: Amount to round.
        fraction_digits: Digits after the decimal point (2 for USD, 0 for JPY).

    Returns:
        Rounded amount.
    """
    return Money(to_decimal(value).quantize(quantum(fraction_digits), rounding=ROUND_HALF_UP))
