"""Pure functions for splitting pooled household expenses between people.

Two policies are supported:
- even: everyone pays the same share
- income-based: each person pays in proportion to their monthly income

Shares are unrounded; summing every person's share gives back the total
(to within Decimal context precision).
"""

from collections.abc import Iterable, Sequence

from hearth.domain.aggregation import person_income
from hearth.domain.errors import UnsupportedDistribution
from hearth.domain.frequency import monthly_amount
from hearth.domain.models import DistributionMethod, Expense, ExpenseCategory, Money, Person
from hearth.domain.money import ZERO


def coerce_distribution_method(method: DistributionMethod | str) -> DistributionMethod:
    """Convert a distribution method value to DistributionMethod.

    Raises:
        UnsupportedDistribution: If the value is not a known method.
    """
    if isinstance(method, DistributionMethod):
        return method
    try:
        return DistributionMethod(method)
    except ValueError:
        raise UnsupportedDistribution(f"Unsupported distribution method: {method!r}") from None


def household_expenses_total(expenses: Iterable[Expense]) -> Money:
    """Calculate monthly total of household expenses.

    Household expenses are pooled: any person_id they carry is ignored.

    Args:
        expenses: Expenses to consider (already filtered for validity).

    Returns:
        Monthly household expenses.
    """
    return Money(
        sum(
            (monthly_amount(e.amount, e.frequency) for e in expenses if e.category == ExpenseCategory.HOUSEHOLD),
            ZERO,
        )
    )


def even_share(total_household_monthly: Money, people: Sequence[Person]) -> Money:
    """Split the household total evenly by headcount (0 with nobody to bill)."""
    if not people:
        return ZERO
    return Money(total_household_monthly / len(people))


def household_share(
    total_household_monthly: Money,
    people: Sequence[Person],
    method: DistributionMethod | str,
    person_id: str,
) -> Money:
    """Calculate one person's share of the household expenses.

    With income-based distribution and nobody earning, the even split is used
    instead so the share is always defined.

    Args:
        total_household_monthly: Monthly household expenses to split.
        people: Everyone sharing the household expenses.
        method: Distribution policy.
        person_id: Person whose share to calculate.

    Returns:
        The person's monthly share. 0 when people is empty, and 0 under
        income-based distribution for a person not in people.

    Raises:
        UnsupportedDistribution: If method is unknown.
    """
    policy = coerce_distribution_method(method)

    if policy == DistributionMethod.EVEN:
        return even_share(total_household_monthly, people)

    incomes = {p.id: person_income(p) for p in people}
    income_pool = sum(incomes.values(), ZERO)
    if income_pool == 0:
        return even_share(total_household_monthly, people)

    if person_id not in incomes:
        return ZERO

    # Multiply first: equal incomes then divide out exactly to the even share
    return Money(incomes[person_id] * total_household_monthly / income_pool)


def household_shares(
    total_household_monthly: Money,
    people: Sequence[Person],
    method: DistributionMethod | str,
) -> dict[str, Money]:
    """Calculate every person's share of the household expenses.

    Args:
        total_household_monthly: Monthly household expenses to split.
        people: Everyone sharing the household expenses.
        method: Distribution policy.

    Returns:
        Dictionary of person id to monthly share, in people order.
    """
    return {p.id: household_share(total_household_monthly, people, method, p.id) for p in people}
