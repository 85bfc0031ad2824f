"""Pure functions for credit card payoff projections.

The simulation works like a card statement: each month the interest charge is
rounded to the currency's precision before it is posted, then the rest of the
payment goes to principal. Rounded figures are accumulated, never rounded
again at the end.

A payment that does not strictly exceed the month's interest can never reduce
the balance, so the simulation stops at once and reports the card as never
repaid rather than running to the iteration cap.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from hearth.domain.errors import InvalidInput
from hearth.domain.models import Money
from hearth.domain.money import DEFAULT_FRACTION_DIGITS, ZERO, Numeric, round_money, to_decimal

# The preview shows the first few statements only
SCHEDULE_PREVIEW_MONTHS = 3

# 100 years; rounding residue can in theory keep a balance from reaching zero
MAX_PAYOFF_MONTHS = 1200


@dataclass(frozen=True)
class PayoffInputs:
    """Immutable echo of the inputs a payoff was calculated from."""

    balance: Money
    apr: Decimal
    monthly_payment: Money


@dataclass(frozen=True)
class PayoffRow:
    """Immutable single month of a payoff schedule."""

    month: int
    payment: Money
    interest: Money
    principal: Money
    remaining: Money


@dataclass(frozen=True)
class PayoffResult:
    """Immutable payoff projection.

    When never_repaid is True, months and total_interest are 0 and the
    schedule is empty.
    """

    months: int
    total_interest: Money
    schedule: tuple[PayoffRow, ...]
    never_repaid: bool
    inputs: PayoffInputs
    monthly_rate: Decimal
    final_balance: Money


def _require(value: Numeric, name: str, allow_zero: bool = False) -> Decimal:
    """Convert a calculator input to Decimal, checking it is finite and in range.

    Raises:
        InvalidInput: If the value is not numeric, not finite, negative, or zero
            when zero is not allowed.
    """
    try:
        number = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInput(f"{name} must be a number, got {value!r}") from None

    if not number.is_finite():
        raise InvalidInput(f"{name} must be finite, got {value!r}")
    if allow_zero and number < 0:
        raise InvalidInput(f"{name} must be 0 or positive, got {value!r}")
    if not allow_zero and number <= 0:
        raise InvalidInput(f"{name} must be positive, got {value!r}")
    return number


def _require_fraction_digits(fraction_digits: int) -> int:
    if isinstance(fraction_digits, bool) or not isinstance(fraction_digits, int) or fraction_digits < 0:
        raise InvalidInput(f"Fraction digits must be a non-negative integer, got {fraction_digits!r}")
    return fraction_digits


def monthly_rate(apr_percent: Numeric) -> Decimal:
    """Convert an APR percentage to a monthly rate (24 -> 0.02)."""
    return to_decimal(apr_percent) / Decimal(100) / Decimal(12)


def compute_interest_only_minimum(balance: Numeric, apr_percent: Numeric, fraction_digits: int) -> Money:
    """Calculate the payment that exactly covers one month's interest.

    Paying this amount (or less) every month never reduces the balance.

    Args:
        balance: Current card balance, positive.
        apr_percent: Annual percentage rate, 0 or positive (24 means 24%).
        fraction_digits: Currency precision (2 for USD, 0 for JPY).

    Returns:
        Interest-only monthly payment rounded to currency precision.

    Raises:
        InvalidInput: If balance is not positive, APR is negative, or
            fraction_digits is negative.
    """
    principal = _require(balance, "Balance")
    apr = _require(apr_percent, "APR", allow_zero=True)
    digits = _require_fraction_digits(fraction_digits)

    return round_money(principal * monthly_rate(apr), digits)


def compute_credit_card_payoff(
    balance: Numeric,
    apr_percent: Numeric,
    monthly_payment: Numeric,
    fraction_digits: int = DEFAULT_FRACTION_DIGITS,
) -> PayoffResult:
    """Simulate paying off a card balance with a fixed monthly payment.

    Each month:
    1. Interest is charged on the remaining balance, rounded to currency precision.
    2. If the payment does not exceed that interest, the card is never repaid.
    3. Otherwise the rest of the payment reduces the balance; the final payment
       is capped so the balance never goes below zero.

    Args:
        balance: Current card balance, positive.
        apr_percent: Annual percentage rate, 0 or positive.
        monthly_payment: Fixed payment made every month, positive.
        fraction_digits: Currency precision (default 2).

    Returns:
        PayoffResult with months to payoff, total interest and the first
        SCHEDULE_PREVIEW_MONTHS rows of the schedule.

    Raises:
        InvalidInput: If balance or payment is not positive, APR is negative,
            or fraction_digits is negative.
    """
    principal_owed = _require(balance, "Balance")
    apr = _require(apr_percent, "APR", allow_zero=True)
    payment = _require(monthly_payment, "Monthly payment")
    digits = _require_fraction_digits(fraction_digits)

    rate = monthly_rate(apr)
    inputs = PayoffInputs(balance=Money(principal_owed), apr=apr, monthly_payment=Money(payment))
    never_repaid = PayoffResult(
        months=0,
        total_interest=ZERO,
        schedule=(),
        never_repaid=True,
        inputs=inputs,
        monthly_rate=rate,
        final_balance=Money(principal_owed),
    )

    remaining = principal_owed
    total_interest = ZERO
    schedule: list[PayoffRow] = []
    months = 0

    while remaining > 0:
        if months >= MAX_PAYOFF_MONTHS:
            return never_repaid

        interest = round_money(remaining * rate, digits)
        if payment <= interest:
            return never_repaid

        principal = min(payment - interest, remaining)
        remaining = remaining - principal
        total_interest = Money(total_interest + interest)
        months += 1

        if len(schedule) < SCHEDULE_PREVIEW_MONTHS:
            schedule.append(
                PayoffRow(
                    month=months,
                    payment=Money(interest + principal),
                    interest=interest,
                    principal=Money(principal),
                    remaining=Money(remaining),
                )
            )

    return PayoffResult(
        months=months,
        total_interest=total_interest,
        schedule=tuple(schedule),
        never_repaid=False,
        inputs=inputs,
        monthly_rate=rate,
        final_balance=Money(remaining),
    )
