"""Tests for hearth.domain.aggregation pure functions."""

from datetime import date
from decimal import Decimal

from hearth.domain.aggregation import person_income, personal_expenses, total_expenses, total_income
from hearth.domain.models import Expense, ExpenseCategory, ExpenseId, Income, Money, Person, PersonId, Recurrence


def make_person(person_id: str, *incomes: tuple[str, Recurrence]) -> Person:
    """Build a person with income entries given as (amount, frequency)."""
    return Person(
        id=PersonId(person_id),
        name=person_id.title(),
        income=tuple(
            Income(
                id=f"{person_id}-{i}",
                person_id=PersonId(person_id),
                amount=Money(Decimal(amount)),
                label=f"Income {i}",
                frequency=frequency,
            )
            for i, (amount, frequency) in enumerate(incomes)
        ),
    )


def make_expense(
    amount: str,
    category: ExpenseCategory = ExpenseCategory.HOUSEHOLD,
    person_id: str | None = None,
    frequency: Recurrence = Recurrence.MONTHLY,
) -> Expense:
    """Build an expense dated 2025-01-01."""
    return Expense(
        id=ExpenseId(f"exp-{amount}-{category.value}-{person_id}"),
        description=f"Expense {amount}",
        amount=Money(Decimal(amount)),
        category=category,
        frequency=frequency,
        date=date(2025, 1, 1),
        person_id=PersonId(person_id) if person_id else None,
    )


class TestPersonIncome:
    """Tests for person_income."""

    def test_no_income_is_zero(self) -> None:
        """Should return 0 for a person with no income entries."""
        assert person_income(make_person("alex")) == 0

    def test_sums_monthly_equivalents(self) -> None:
        """Should sum all income entries converted to monthly."""
        person = make_person(
            "alex",
            ("3000", Recurrence.MONTHLY),
            ("1200", Recurrence.YEARLY),
            ("12", Recurrence.WEEKLY),
        )

        assert person_income(person) == Decimal("3000") + Decimal("100") + Decimal("52.1786")

    def test_ignores_one_time_income(self) -> None:
        """Should leave one-time income out of the monthly figure."""
        person = make_person("alex", ("2000", Recurrence.MONTHLY), ("5000", Recurrence.ONE_TIME))

        assert person_income(person) == Decimal("2000")

    def test_does_not_mutate_person(self) -> None:
        """Should leave the person record untouched."""
        person = make_person("alex", ("100", Recurrence.MONTHLY))
        before = person

        person_income(person)

        assert person == before
        assert len(person.income) == 1


class TestPersonalExpenses:
    """Tests for personal_expenses."""

    def test_only_counts_matching_person(self) -> None:
        """Should only sum personal expenses for the given person."""
        expenses = [
            make_expense("50", ExpenseCategory.PERSONAL, "alex"),
            make_expense("70", ExpenseCategory.PERSONAL, "sam"),
        ]

        assert personal_expenses(expenses, "alex") == Decimal("50")
        assert personal_expenses(expenses, "sam") == Decimal("70")

    def test_ignores_household_expenses_tagged_with_person(self) -> None:
        """Should not count household expenses even when tagged with the person."""
        expenses = [
            make_expense("1000", ExpenseCategory.HOUSEHOLD, "alex"),
            make_expense("25", ExpenseCategory.PERSONAL, "alex"),
        ]

        assert personal_expenses(expenses, "alex") == Decimal("25")

    def test_converts_frequencies(self) -> None:
        """Should convert each expense to its monthly equivalent."""
        expenses = [
            make_expense("120", ExpenseCategory.PERSONAL, "alex", Recurrence.YEARLY),
            make_expense("10", ExpenseCategory.PERSONAL, "alex", Recurrence.ONE_TIME),
        ]

        assert personal_expenses(expenses, "alex") == Decimal("10")

    def test_no_expenses_is_zero(self) -> None:
        """Should return 0 when nothing matches."""
        assert personal_expenses([], "alex") == 0
        assert personal_expenses([make_expense("10", ExpenseCategory.PERSONAL, "sam")], "alex") == 0

    def test_accepts_generators(self) -> None:
        """Should work with any iterable of expenses."""
        expenses = (make_expense(a, ExpenseCategory.PERSONAL, "alex") for a in ("1", "2", "3"))

        assert personal_expenses(expenses, "alex") == Decimal("6")


class TestTotals:
    """Tests for total_income and total_expenses."""

    def test_total_income_sums_people(self) -> None:
        """Should add up everyone's monthly income."""
        people = [
            make_person("alex", ("3000", Recurrence.MONTHLY)),
            make_person("sam", ("24000", Recurrence.YEARLY)),
            make_person("kid"),
        ]

        assert total_income(people) == Decimal("5000")

    def test_total_expenses_counts_both_categories(self) -> None:
        """Should add household and personal expenses together."""
        expenses = [
            make_expense("1500"),
            make_expense("40", ExpenseCategory.PERSONAL, "alex"),
            make_expense("600", frequency=Recurrence.YEARLY),
        ]

        assert total_expenses(expenses) == Decimal("1590")

    def test_empty_totals_are_zero(self) -> None:
        """Should return 0 for empty inputs."""
        assert total_income([]) == 0
        assert total_expenses([]) == 0
