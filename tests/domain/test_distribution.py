"""Tests for hearth.domain.distribution pure functions."""

from datetime import date
from decimal import Decimal

import pytest

from hearth.domain.distribution import (
    coerce_distribution_method,
    household_expenses_total,
    household_share,
    household_shares,
)
from hearth.domain.errors import UnsupportedDistribution
from hearth.domain.models import (
    DistributionMethod,
    Expense,
    ExpenseCategory,
    ExpenseId,
    Income,
    Money,
    Person,
    PersonId,
    Recurrence,
)
from hearth.domain.money import round_money

EVEN = DistributionMethod.EVEN
INCOME_BASED = DistributionMethod.INCOME_BASED


def make_person(person_id: str, monthly_income: str | None = None) -> Person:
    """Build a person with at most one monthly income entry."""
    income: tuple[Income, ...] = ()
    if monthly_income is not None:
        income = (
            Income(
                id=f"{person_id}-salary",
                person_id=PersonId(person_id),
                amount=Money(Decimal(monthly_income)),
                label="Salary",
                frequency=Recurrence.MONTHLY,
            ),
        )
    return Person(id=PersonId(person_id), name=person_id.title(), income=income)


def make_expense(
    expense_id: str,
    amount: str,
    category: ExpenseCategory = ExpenseCategory.HOUSEHOLD,
    person_id: str | None = None,
    frequency: Recurrence = Recurrence.MONTHLY,
) -> Expense:
    """Build an expense dated 2025-01-01."""
    return Expense(
        id=ExpenseId(expense_id),
        description=expense_id,
        amount=Money(Decimal(amount)),
        category=category,
        frequency=frequency,
        date=date(2025, 1, 1),
        person_id=PersonId(person_id) if person_id else None,
    )


class TestHouseholdExpensesTotal:
    """Tests for household_expenses_total."""

    def test_sums_household_only(self) -> None:
        """Should ignore personal expenses."""
        expenses = [
            make_expense("rent", "1500"),
            make_expense("gym", "40", ExpenseCategory.PERSONAL, "alex"),
            make_expense("insurance", "1200", frequency=Recurrence.YEARLY),
        ]

        assert household_expenses_total(expenses) == Decimal("1600")

    def test_includes_tagged_household_expenses(self) -> None:
        """Should pool household expenses regardless of any person tag."""
        expenses = [
            make_expense("rent", "1000", person_id="alex"),
            make_expense("power", "100"),
        ]

        assert household_expenses_total(expenses) == Decimal("1100")

    def test_empty_is_zero(self) -> None:
        """Should return 0 with no expenses."""
        assert household_expenses_total([]) == 0


class TestEvenDistribution:
    """Tests for household_share with even distribution."""

    def test_three_way_split(self) -> None:
        """Should give each of three people exactly 100 of 300."""
        people = [make_person("a"), make_person("b"), make_person("c")]
        total = Money(Decimal("300"))

        shares = [household_share(total, people, EVEN, p.id) for p in people]

        assert shares == [Decimal("100.00")] * 3
        assert sum(round_money(s) for s in shares) == Decimal("300.00")

    def test_no_people_is_zero(self) -> None:
        """Should return 0 when there is nobody to bill."""
        assert household_share(Money(Decimal("300")), [], EVEN, "a") == 0

    def test_shares_sum_to_total_within_rounding(self) -> None:
        """Should sum to the total within one rounding unit for awkward splits."""
        for count in range(1, 8):
            people = [make_person(f"p{i}") for i in range(count)]
            for total in (Decimal("100"), Decimal("0.01"), Decimal("1234.57")):
                rounded = sum(round_money(household_share(Money(total), people, EVEN, p.id)) for p in people)
                assert abs(rounded - total) <= Decimal("0.01") * count
                unrounded = sum(household_share(Money(total), people, EVEN, p.id) for p in people)
                assert abs(unrounded - total) < Decimal("0.01")

    def test_ignores_income(self) -> None:
        """Should split evenly whatever people earn."""
        people = [make_person("a", "9000"), make_person("b", "1000")]

        assert household_share(Money(Decimal("1000")), people, EVEN, "a") == Decimal("500")
        assert household_share(Money(Decimal("1000")), people, EVEN, "b") == Decimal("500")

    def test_accepts_string_method(self) -> None:
        """Should accept the string value of the method."""
        people = [make_person("a"), make_person("b")]

        assert household_share(Money(Decimal("90")), people, "even", "a") == Decimal("45")


class TestIncomeBasedDistribution:
    """Tests for household_share with income-based distribution."""

    def test_proportional_to_income(self) -> None:
        """Should split in proportion to monthly income."""
        people = [make_person("a", "3000"), make_person("b", "1000")]
        total = Money(Decimal("2000"))

        assert household_share(total, people, INCOME_BASED, "a") == Decimal("1500")
        assert household_share(total, people, INCOME_BASED, "b") == Decimal("500")

    def test_equal_incomes_match_even_split(self) -> None:
        """Should equal the even split when everyone earns the same."""
        people = [make_person("a", "2500"), make_person("b", "2500"), make_person("c", "2500")]
        total = Money(Decimal("1000"))

        for person in people:
            assert household_share(total, people, INCOME_BASED, person.id) == household_share(
                total, people, EVEN, person.id
            )

    def test_zero_income_falls_back_to_even(self) -> None:
        """Should use the even split when nobody earns anything."""
        people = [make_person("a"), make_person("b", "0"), make_person("c")]
        total = Money(Decimal("300"))

        for person in people:
            assert household_share(total, people, INCOME_BASED, person.id) == Decimal("100")

    def test_no_people_is_zero(self) -> None:
        """Should return 0 when there is nobody to bill."""
        assert household_share(Money(Decimal("300")), [], INCOME_BASED, "a") == 0

    def test_non_earner_pays_nothing(self) -> None:
        """Should give a zero share to someone without income while others earn."""
        people = [make_person("a", "4000"), make_person("b")]
        total = Money(Decimal("800"))

        assert household_share(total, people, INCOME_BASED, "a") == Decimal("800")
        assert household_share(total, people, INCOME_BASED, "b") == 0

    def test_unknown_person_is_zero(self) -> None:
        """Should give 0 to a person who is not part of the household."""
        people = [make_person("a", "4000")]

        assert household_share(Money(Decimal("800")), people, INCOME_BASED, "stranger") == 0

    def test_shares_sum_to_total(self) -> None:
        """Should distribute the whole total across everyone."""
        people = [make_person("a", "3100"), make_person("b", "1777.77"), make_person("c", "245.10")]
        total = Money(Decimal("2345.67"))

        shares = household_shares(total, people, INCOME_BASED)

        assert abs(sum(shares.values()) - total) < Decimal("1e-20")
        assert abs(sum(round_money(s) for s in shares.values()) - total) <= Decimal("0.01")

    def test_order_independent(self) -> None:
        """Should give the same share whatever order people are listed in."""
        people = [make_person("a", "3100"), make_person("b", "1777.77"), make_person("c", "245.10")]
        total = Money(Decimal("999.99"))

        forward = household_shares(total, people, INCOME_BASED)
        backward = household_shares(total, list(reversed(people)), INCOME_BASED)

        assert forward == backward


class TestHouseholdShares:
    """Tests for household_shares."""

    def test_returns_share_per_person_in_order(self) -> None:
        """Should map every person id to their share, in input order."""
        people = [make_person("b"), make_person("a")]

        shares = household_shares(Money(Decimal("50")), people, EVEN)

        assert list(shares) == ["b", "a"]
        assert shares == {"b": Decimal("25"), "a": Decimal("25")}

    def test_idempotent(self) -> None:
        """Should return identical results on repeated calls."""
        people = [make_person("a", "1234.56"), make_person("b", "789.01")]
        total = Money(Decimal("432.10"))

        assert household_shares(total, people, INCOME_BASED) == household_shares(total, people, INCOME_BASED)


class TestCoerceDistributionMethod:
    """Tests for coerce_distribution_method."""

    def test_parses_strings(self) -> None:
        """Should parse both method names."""
        assert coerce_distribution_method("even") is EVEN
        assert coerce_distribution_method("income-based") is INCOME_BASED

    def test_unknown_method_raises(self) -> None:
        """Should reject unknown methods."""
        with pytest.raises(UnsupportedDistribution):
            coerce_distribution_method("by-age")

    def test_household_share_rejects_unknown_method(self) -> None:
        """Should raise before calculating anything."""
        with pytest.raises(UnsupportedDistribution):
            household_share(Money(Decimal("100")), [make_person("a")], "random", "a")
