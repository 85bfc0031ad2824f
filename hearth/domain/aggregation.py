"""Pure functions for per-person and household-wide totals.

All totals are monthly equivalents and unrounded. Nothing here looks at the
calendar: callers decide which expenses are currently active (see
hearth.dates.active_expenses) and pass only those in.
"""

from collections.abc import Iterable

from hearth.domain.frequency import monthly_amount
from hearth.domain.models import Expense, ExpenseCategory, Money, Person
from hearth.domain.money import ZERO


def person_income(person: Person) -> Money:
    """Calculate a person's monthly income across all their income entries.

    Args:
        person: Person whose income to total.

    Returns:
        Monthly income (0 if the person has no income entries).
    """
    return Money(sum((monthly_amount(i.amount, i.frequency) for i in person.income), ZERO))


def personal_expenses(expenses: Iterable[Expense], person_id: str) -> Money:
    """Calculate the monthly total of expenses charged to one person.

    Household expenses are ignored even when tagged with this person.

    Args:
        expenses: Expenses to consider (already filtered for validity).
        person_id: Person whose personal expenses to total.

    Returns:
        Monthly personal expenses for the person.
    """
    return Money(
        sum(
            (
                monthly_amount(e.amount, e.frequency)
                for e in expenses
                if e.category == ExpenseCategory.PERSONAL and e.person_id == person_id
            ),
            ZERO,
        )
    )


def total_income(people: Iterable[Person]) -> Money:
    """Calculate combined monthly income for everyone in the household."""
    return Money(sum((person_income(p) for p in people), ZERO))


def total_expenses(expenses: Iterable[Expense]) -> Money:
    """Calculate monthly total of all expenses, household and personal."""
    return Money(sum((monthly_amount(e.amount, e.frequency) for e in expenses), ZERO))
