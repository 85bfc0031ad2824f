"""Tests for hearth.domain.models record invariants."""

import dataclasses
from datetime import date
from decimal import Decimal

import pytest

from hearth.domain.errors import InvalidInput
from hearth.domain.models import (
    Budget,
    DistributionMethod,
    Expense,
    ExpenseCategory,
    ExpenseId,
    HouseholdSettings,
    Money,
    Person,
    PersonId,
    Recurrence,
)


def make_expense(category: ExpenseCategory, person_id: str | None) -> Expense:
    return Expense(
        id=ExpenseId("e1"),
        description="Phone",
        amount=Money(Decimal("30")),
        category=category,
        frequency=Recurrence.MONTHLY,
        date=date(2025, 3, 1),
        person_id=PersonId(person_id) if person_id else None,
    )


class TestExpense:
    """Tests for Expense invariants."""

    def test_personal_expense_requires_person(self) -> None:
        """Should refuse a personal expense with no person."""
        with pytest.raises(InvalidInput):
            make_expense(ExpenseCategory.PERSONAL, None)

    def test_household_expense_may_be_unassigned(self) -> None:
        """Should allow household expenses without a person."""
        expense = make_expense(ExpenseCategory.HOUSEHOLD, None)

        assert expense.person_id is None
        assert expense.category_tag == "Misc"

    def test_household_expense_may_be_tagged(self) -> None:
        """Should allow household expenses tagged with a person."""
        assert make_expense(ExpenseCategory.HOUSEHOLD, "alex").person_id == "alex"

    def test_is_immutable(self) -> None:
        """Should not allow fields to change after creation."""
        expense = make_expense(ExpenseCategory.PERSONAL, "alex")

        with pytest.raises(dataclasses.FrozenInstanceError):
            expense.amount = Money(Decimal("1"))  # type: ignore[misc]


class TestBudget:
    """Tests for Budget."""

    def test_defaults_to_even_split(self) -> None:
        """Should default to even distribution."""
        assert Budget(id="b", name="B").settings == HouseholdSettings(DistributionMethod.EVEN)

    def test_find_person(self) -> None:
        """Should find people by id."""
        alex = Person(id=PersonId("alex"), name="Alex")
        budget = Budget(id="b", name="B", people=(alex,))

        assert budget.find_person("alex") is alex
        assert budget.find_person("sam") is None


class TestEnums:
    """Tests for the string enums used in budget files."""

    def test_values(self) -> None:
        """Should use the budget file spellings."""
        assert [r.value for r in Recurrence] == ["one-time", "daily", "weekly", "monthly", "yearly"]
        assert [m.value for m in DistributionMethod] == ["even", "income-based"]
        assert [c.value for c in ExpenseCategory] == ["household", "personal"]
