"""Pure functions composing totals into per-person and household summaries.

The central figure is a person's remaining income:

    income - personal expenses - share of household expenses

Negative values are meaningful (the person is over budget) and are returned
as-is.
"""

from collections.abc import Sequence
from dataclasses import dataclass, replace
from decimal import Decimal

from hearth.domain.aggregation import person_income, personal_expenses, total_expenses, total_income
from hearth.domain.categories import normalize_category_tag
from hearth.domain.distribution import household_expenses_total, household_share
from hearth.domain.frequency import MONTHS_PER_YEAR, monthly_amount
from hearth.domain.models import Expense, ExpenseCategory, HouseholdSettings, Money, Person
from hearth.domain.money import DEFAULT_FRACTION_DIGITS, ZERO, round_money

HUNDRED = Decimal(100)


@dataclass(frozen=True)
class PersonBreakdown:
    """Immutable monthly breakdown for one person."""

    person_id: str
    name: str
    income: Money
    personal_expenses: Money
    household_share: Money
    remaining: Money


@dataclass(frozen=True)
class IncomeAllocation:
    """Immutable split of a person's income, as percentages summing to at most 100."""

    personal: Decimal
    household: Decimal
    remaining: Decimal


@dataclass(frozen=True)
class BudgetOverview:
    """Immutable monthly overview of the whole household."""

    total_income: Money
    total_expenses: Money
    household_expenses: Money
    personal_expenses: Money
    remaining: Money
    people: tuple[PersonBreakdown, ...]


def remaining_income(
    person: Person,
    expenses: Sequence[Expense],
    people: Sequence[Person],
    settings: HouseholdSettings,
) -> Money:
    """Calculate what a person has left each month.

    Args:
        person: Person to calculate for.
        expenses: All household and personal expenses (already filtered for validity).
        people: Everyone sharing the household expenses.
        settings: Household settings selecting the distribution policy.

    Returns:
        Monthly remaining income (negative if over budget).
    """
    share = household_share(household_expenses_total(expenses), people, settings.distribution_method, person.id)
    return Money(person_income(person) - personal_expenses(expenses, person.id) - share)


def person_breakdown(
    person: Person,
    expenses: Sequence[Expense],
    people: Sequence[Person],
    settings: HouseholdSettings,
) -> PersonBreakdown:
    """Build the monthly breakdown for one person.

    Args:
        person: Person to calculate for.
        expenses: All expenses (already filtered for validity).
        people: Everyone sharing the household expenses.
        settings: Household settings selecting the distribution policy.

    Returns:
        PersonBreakdown whose remaining equals remaining_income() for the person.
    """
    income = person_income(person)
    personal = personal_expenses(expenses, person.id)
    share = household_share(household_expenses_total(expenses), people, settings.distribution_method, person.id)

    return PersonBreakdown(
        person_id=person.id,
        name=person.name,
        income=income,
        personal_expenses=personal,
        household_share=share,
        remaining=Money(income - personal - share),
    )


def income_allocation(breakdown: PersonBreakdown) -> IncomeAllocation:
    """Express a person's breakdown as percentages of their income.

    Personal expenses are capped at 100%, household share at whatever personal
    leaves, and remaining gets the rest. A person with no income gets 0 across
    the board.

    Args:
        breakdown: Person's monthly breakdown.

    Returns:
        IncomeAllocation with clamped percentages.
    """
    if breakdown.income <= 0:
        return IncomeAllocation(personal=ZERO, household=ZERO, remaining=ZERO)

    personal = min(breakdown.personal_expenses / breakdown.income * HUNDRED, HUNDRED)
    household = min(breakdown.household_share / breakdown.income * HUNDRED, HUNDRED - personal)
    remaining = max(ZERO, HUNDRED - personal - household)

    return IncomeAllocation(personal=personal, household=household, remaining=remaining)


def budget_overview(
    people: Sequence[Person],
    expenses: Sequence[Expense],
    settings: HouseholdSettings,
) -> BudgetOverview:
    """Build the monthly overview for a household.

    Args:
        people: Everyone in the household.
        expenses: All expenses (already filtered for validity).
        settings: Household settings selecting the distribution policy.

    Returns:
        BudgetOverview with household totals and per-person breakdowns in people order.
    """
    income = total_income(people)
    spent = total_expenses(expenses)
    personal = Money(
        sum(
            (monthly_amount(e.amount, e.frequency) for e in expenses if e.category == ExpenseCategory.PERSONAL),
            ZERO,
        )
    )

    return BudgetOverview(
        total_income=income,
        total_expenses=spent,
        household_expenses=household_expenses_total(expenses),
        personal_expenses=personal,
        remaining=Money(income - spent),
        people=tuple(person_breakdown(p, expenses, people, settings) for p in people),
    )


def round_breakdown(breakdown: PersonBreakdown, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> PersonBreakdown:
    """Round every amount in a person's breakdown for display."""
    return replace(
        breakdown,
        income=round_money(breakdown.income, fraction_digits),
        personal_expenses=round_money(breakdown.personal_expenses, fraction_digits),
        household_share=round_money(breakdown.household_share, fraction_digits),
        remaining=round_money(breakdown.remaining, fraction_digits),
    )


def round_overview(overview: BudgetOverview, fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> BudgetOverview:
    """Round every amount in an overview for display.

    Amounts are rounded once each, from their unrounded values, so the rounded
    per-person figures may differ from the rounded totals by a unit.
    """
    return BudgetOverview(
        total_income=round_money(overview.total_income, fraction_digits),
        total_expenses=round_money(overview.total_expenses, fraction_digits),
        household_expenses=round_money(overview.household_expenses, fraction_digits),
        personal_expenses=round_money(overview.personal_expenses, fraction_digits),
        remaining=round_money(overview.remaining, fraction_digits),
        people=tuple(round_breakdown(b, fraction_digits) for b in overview.people),
    )


def annualize_overview(overview: BudgetOverview) -> BudgetOverview:
    """Scale a monthly overview to yearly figures."""
    return BudgetOverview(
        total_income=Money(overview.total_income * MONTHS_PER_YEAR),
        total_expenses=Money(overview.total_expenses * MONTHS_PER_YEAR),
        household_expenses=Money(overview.household_expenses * MONTHS_PER_YEAR),
        personal_expenses=Money(overview.personal_expenses * MONTHS_PER_YEAR),
        remaining=Money(overview.remaining * MONTHS_PER_YEAR),
        people=tuple(
            replace(
                b,
                income=Money(b.income * MONTHS_PER_YEAR),
                personal_expenses=Money(b.personal_expenses * MONTHS_PER_YEAR),
                household_share=Money(b.household_share * MONTHS_PER_YEAR),
                remaining=Money(b.remaining * MONTHS_PER_YEAR),
            )
            for b in overview.people
        ),
    )


@dataclass(frozen=True)
class TagBreakdown:
    """Immutable monthly total for one category tag within an expense type."""

    tag: str
    amount: Money
    count: int
    percentage: Decimal


@dataclass(frozen=True)
class TypeBreakdown:
    """Immutable monthly total for household or personal expenses, split by tag."""

    category: ExpenseCategory
    amount: Money
    count: int
    percentage: Decimal
    tags: tuple[TagBreakdown, ...]


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    if whole <= 0:
        return ZERO
    return part / whole * HUNDRED


def _type_breakdown(category: ExpenseCategory, expenses: Sequence[Expense], total: Decimal) -> TypeBreakdown:
    amounts: dict[str, Decimal] = {}
    counts: dict[str, int] = {}

    for expense in expenses:
        tag = normalize_category_tag(expense.category_tag)
        amounts[tag] = amounts.get(tag, ZERO) + monthly_amount(expense.amount, expense.frequency)
        counts[tag] = counts.get(tag, 0) + 1

    type_amount = sum(amounts.values(), ZERO)
    tags = sorted(
        (
            TagBreakdown(tag=tag, amount=Money(amount), count=counts[tag], percentage=_percentage(amount, type_amount))
            for tag, amount in amounts.items()
        ),
        key=lambda t: (-t.amount, t.tag),
    )

    return TypeBreakdown(
        category=category,
        amount=Money(type_amount),
        count=len(expenses),
        percentage=_percentage(type_amount, total),
        tags=tuple(tags),
    )


def category_breakdown(expenses: Sequence[Expense]) -> tuple[TypeBreakdown, ...]:
    """Group monthly expense amounts by type, then by category tag.

    Args:
        expenses: Expenses to group (already filtered for validity).

    Returns:
        One TypeBreakdown per expense type that has expenses, household first,
        each with its tags ordered largest first. Empty when the monthly total
        is zero, since there is nothing to apportion.
    """
    total = total_expenses(expenses)
    if total <= 0:
        return ()

    breakdowns = []
    for category in ExpenseCategory:
        of_type = [e for e in expenses if e.category == category]
        if of_type:
            breakdowns.append(_type_breakdown(category, of_type, total))

    return tuple(breakdowns)


def round_category_breakdown(
    breakdowns: Sequence[TypeBreakdown],
    fraction_digits: int = DEFAULT_FRACTION_DIGITS,
) -> tuple[TypeBreakdown, ...]:
    """Round every amount in a category breakdown for display."""
    return tuple(
        replace(
            b,
            amount=round_money(b.amount, fraction_digits),
            tags=tuple(replace(t, amount=round_money(t.amount, fraction_digits)) for t in b.tags),
        )
        for b in breakdowns
    )
