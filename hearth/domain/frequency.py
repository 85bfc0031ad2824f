"""Pure functions for normalizing recurring amounts to a monthly cadence.

No rounding happens here. Converted amounts are summed and distributed in full
precision and only rounded at display boundaries, so many small conversions
never compound rounding error.
"""

from decimal import Decimal, InvalidOperation

from hearth.domain.errors import InvalidAmount, UnsupportedFrequency
from hearth.domain.models import Money, Recurrence
from hearth.domain.money import ZERO, Numeric, to_decimal

MONTHS_PER_YEAR = Decimal(12)

DAYS_PER_YEAR = Decimal("365.25")

# 365.25 / 7, to four places
WEEKS_PER_YEAR = Decimal("52.1786")


def coerce_frequency(frequency: Recurrence | str) -> Recurrence:
    """Convert a frequency value to Recurrence.

    Args:
        frequency: Recurrence member or its string value (e.g. "weekly").

    Returns:
        The matching Recurrence.

    Raises:
        UnsupportedFrequency: If the value is not a known cadence.
    """
    if isinstance(frequency, Recurrence):
        return frequency
    try:
        return Recurrence(frequency)
    except ValueError:
        raise UnsupportedFrequency(f"Unsupported frequency: {frequency!r}") from None


def validate_amount(amount: Numeric) -> Decimal:
    """Convert an amount to Decimal, rejecting negative and non-finite values.

    Raises:
        InvalidAmount: If the amount is negative, NaN, infinite or not numeric.
    """
    try:
        value = to_decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmount(f"Not a monetary amount: {amount!r}") from None

    if not value.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {amount!r}")
    if value < 0:
        raise InvalidAmount(f"Amount must not be negative, got {amount!r}")
    return value


def monthly_amount(amount: Numeric, frequency: Recurrence | str) -> Money:
    """Convert an amount at the given cadence into its monthly equivalent.

    One-time amounts contribute nothing to the recurring monthly view.

    Args:
        amount: Non-negative amount charged or received once per period.
        frequency: How often the amount recurs.

    Returns:
        Equivalent monthly amount, unrounded.

    Raises:
        InvalidAmount: If amount is negative or not finite.
        UnsupportedFrequency: If frequency is unknown.
    """
    value = validate_amount(amount)
    cadence = coerce_frequency(frequency)

    if cadence == Recurrence.ONE_TIME:
        return ZERO
    if cadence == Recurrence.DAILY:
        return Money(value * DAYS_PER_YEAR / MONTHS_PER_YEAR)
    if cadence == Recurrence.WEEKLY:
        return Money(value * WEEKS_PER_YEAR / MONTHS_PER_YEAR)
    if cadence == Recurrence.YEARLY:
        return Money(value / MONTHS_PER_YEAR)
    return Money(value)


def annual_amount(amount: Numeric, frequency: Recurrence | str) -> Money:
    """Convert an amount at the given cadence into its yearly equivalent.

    Computed directly rather than as monthly * 12 so a yearly amount comes
    back unchanged.

    Args:
        amount: Non-negative amount charged or received once per period.
        frequency: How often the amount recurs.

    Returns:
        Equivalent yearly amount, unrounded.
    """
    value = validate_amount(amount)
    cadence = coerce_frequency(frequency)

    if cadence == Recurrence.ONE_TIME:
        return ZERO
    if cadence == Recurrence.DAILY:
        return Money(value * DAYS_PER_YEAR)
    if cadence == Recurrence.WEEKLY:
        return Money(value * WEEKS_PER_YEAR)
    if cadence == Recurrence.MONTHLY:
        return Money(value * MONTHS_PER_YEAR)
    return Money(value)
