"""Tests for hearth.domain.categories pure functions."""

from datetime import date
from decimal import Decimal

import pytest

from hearth.domain.categories import available_category_tags, filter_expenses, normalize_category_tag
from hearth.domain.models import (
    DEFAULT_CATEGORY_TAGS,
    Expense,
    ExpenseCategory,
    ExpenseId,
    Money,
    PersonId,
    Recurrence,
)


def make_expense(
    expense_id: str,
    description: str,
    tag: str = "Misc",
    person_id: str | None = None,
) -> Expense:
    """Build a monthly expense, personal when a person is given."""
    return Expense(
        id=ExpenseId(expense_id),
        description=description,
        amount=Money(Decimal("10")),
        category=ExpenseCategory.PERSONAL if person_id else ExpenseCategory.HOUSEHOLD,
        frequency=Recurrence.MONTHLY,
        date=date(2025, 1, 1),
        person_id=PersonId(person_id) if person_id else None,
        category_tag=tag,
    )


EXPENSES = [
    make_expense("rent", "Flat rent", "Rent"),
    make_expense("food", "Weekly shop", "groceries"),
    make_expense("gym", "Gym membership", "Health", person_id="alex"),
    make_expense("books", "Book club", "Misc", person_id="sam"),
]


class TestNormalizeCategoryTag:
    """Tests for normalize_category_tag."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("groceries", "Groceries"),
            ("EATING out", "Eating Out"),
            ("  pets & vets!! ", "Pets Vets"),
            ("car2go", "Car2go"),
        ],
    )
    def test_title_cases_letters_and_digits(self, raw: str, expected: str) -> None:
        """Should keep letters, digits and single spaces in title case."""
        assert normalize_category_tag(raw) == expected

    def test_empty_falls_back_to_misc(self) -> None:
        """Should use Misc when nothing usable remains."""
        assert normalize_category_tag("!!!") == "Misc"
        assert normalize_category_tag("") == "Misc"
        assert normalize_category_tag(None) == "Misc"

    def test_truncates_long_tags(self) -> None:
        """Should cap tags at twenty characters without a trailing space."""
        result = normalize_category_tag("very long category name here")

        assert result == "Very Long Category N"
        assert len(result) <= 20

    def test_idempotent(self) -> None:
        """Should leave an already normalized tag unchanged."""
        assert normalize_category_tag(normalize_category_tag("home & garden")) == "Home Garden"


class TestAvailableCategoryTags:
    """Tests for available_category_tags."""

    def test_includes_defaults_when_empty(self) -> None:
        """Should offer the default tags for a budget with no expenses."""
        assert set(available_category_tags([])) == set(DEFAULT_CATEGORY_TAGS)

    def test_adds_tags_in_use_sorted(self) -> None:
        """Should merge tags in use with the defaults, sorted and without duplicates."""
        tags = available_category_tags(EXPENSES)

        assert "Health" in tags
        assert tags.count("Groceries") == 1
        assert list(tags) == sorted(tags, key=str.lower)


class TestFilterExpenses:
    """Tests for filter_expenses."""

    def test_no_filters_keeps_everything(self) -> None:
        """Should return every expense when no filter is given."""
        assert filter_expenses(EXPENSES) == EXPENSES

    def test_by_category(self) -> None:
        """Should keep only the requested expense type."""
        result = filter_expenses(EXPENSES, category=ExpenseCategory.PERSONAL)

        assert [e.id for e in result] == ["gym", "books"]

    def test_by_person(self) -> None:
        """Should keep only expenses charged to the person."""
        result = filter_expenses(EXPENSES, person_id="alex")

        assert [e.id for e in result] == ["gym"]

    def test_by_tag_normalized(self) -> None:
        """Should compare tags after normalization."""
        result = filter_expenses(EXPENSES, tag="GROCERIES")

        assert [e.id for e in result] == ["food"]

    def test_by_search_ignores_case(self) -> None:
        """Should match description text regardless of case."""
        result = filter_expenses(EXPENSES, search="RENT")

        assert [e.id for e in result] == ["rent"]

    def test_filters_combine(self) -> None:
        """Should require every given filter to match."""
        assert filter_expenses(EXPENSES, category=ExpenseCategory.HOUSEHOLD, tag="Health") == []
