"""Budget file storage.

A budget lives in a single TOML file holding its people (with their income),
its expenses and its household settings. Amounts are written as strings so
decimals survive a round trip exactly.

Example:

    id = "home"
    name = "Home"

    [settings]
    distribution_method = "income-based"

    [[people]]
    id = "alex"
    name = "Alex"

    [[people.income]]
    id = "alex-salary"
    label = "Salary"
    amount = "3200.00"
    frequency = "monthly"

    [[expenses]]
    id = "rent"
    description = "Rent"
    amount = "1500.00"
    category = "household"
    frequency = "monthly"
    date = 2025-01-01
"""

import os
import tomllib
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any

import tomli_w

from hearth.dates import parse_date
from hearth.domain.categories import normalize_category_tag
from hearth.domain.distribution import coerce_distribution_method
from hearth.domain.errors import BudgetError
from hearth.domain.frequency import coerce_frequency, validate_amount
from hearth.domain.models import (
    Budget,
    DistributionMethod,
    Expense,
    ExpenseCategory,
    ExpenseId,
    HouseholdSettings,
    Income,
    Money,
    Person,
    PersonId,
)


class BudgetFileError(ValueError):
    """A budget file is malformed."""


def new_budget(budget_id: str = "default", name: str = "My Budget") -> Budget:
    """Create an empty budget with default settings."""
    return Budget(id=budget_id, name=name)


def with_distribution_method(budget: Budget, method: DistributionMethod | str) -> Budget:
    """Return a copy of the budget using a different distribution method.

    Raises:
        UnsupportedDistribution: If method is unknown.
    """
    settings = HouseholdSettings(distribution_method=coerce_distribution_method(method))
    return replace(budget, settings=settings)


def _as_date(value: Any, field_name: str) -> date:
    # datetime is a date subclass, so it must be narrowed first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return parse_date(value)
    raise BudgetFileError(f"{field_name} must be a date, got {value!r}")


def _income_from_dict(data: dict[str, Any], person_id: PersonId) -> Income:
    return Income(
        id=str(data["id"]),
        person_id=person_id,
        amount=Money(validate_amount(data["amount"])),
        label=str(data.get("label", "")),
        frequency=coerce_frequency(data.get("frequency", "monthly")),
    )


def _person_from_dict(data: dict[str, Any]) -> Person:
    person_id = PersonId(str(data["id"]))
    return Person(
        id=person_id,
        name=str(data.get("name", person_id)),
        income=tuple(_income_from_dict(i, person_id) for i in data.get("income", [])),
    )


def _expense_from_dict(data: dict[str, Any]) -> Expense:
    try:
        category = ExpenseCategory(data["category"])
    except ValueError:
        raise BudgetFileError(f"Unknown expense category: {data['category']!r}") from None

    person_id = data.get("person_id")
    end_date = data.get("end_date")

    return Expense(
        id=ExpenseId(str(data["id"])),
        description=str(data.get("description", "")),
        amount=Money(validate_amount(data["amount"])),
        category=category,
        frequency=coerce_frequency(data.get("frequency", "monthly")),
        date=_as_date(data["date"], "date"),
        person_id=PersonId(str(person_id)) if person_id else None,
        end_date=_as_date(end_date, "end_date") if end_date else None,
        category_tag=normalize_category_tag(data.get("category_tag", "Misc")),
        notes=data.get("notes"),
    )


def budget_from_dict(data: dict[str, Any]) -> Budget:
    """Build a budget from its TOML dictionary form.

    Args:
        data: Parsed TOML document.

    Returns:
        Budget with validated records.

    Raises:
        BudgetFileError: If a record is missing a field or holds an invalid value.
    """
    people: list[Person] = []
    for index, raw in enumerate(data.get("people", []), 1):
        try:
            people.append(_person_from_dict(raw))
        except KeyError as e:
            raise BudgetFileError(f"Person #{index} is missing field {e}") from e
        except (BudgetError, ValueError) as e:
            raise BudgetFileError(f"Person #{index}: {e}") from e

    expenses: list[Expense] = []
    for index, raw in enumerate(data.get("expenses", []), 1):
        try:
            expenses.append(_expense_from_dict(raw))
        except KeyError as e:
            raise BudgetFileError(f"Expense #{index} is missing field {e}") from e
        except (BudgetError, ValueError) as e:
            raise BudgetFileError(f"Expense #{index}: {e}") from e

    settings_data = data.get("settings", {})
    try:
        method = coerce_distribution_method(settings_data.get("distribution_method", "even"))
    except BudgetError as e:
        raise BudgetFileError(str(e)) from e

    return Budget(
        id=str(data.get("id", "default")),
        name=str(data.get("name", "My Budget")),
        people=tuple(people),
        expenses=tuple(expenses),
        settings=HouseholdSettings(distribution_method=method),
    )


def _income_to_dict(income: Income) -> dict[str, Any]:
    return {
        "id": income.id,
        "label": income.label,
        "amount": str(income.amount),
        "frequency": income.frequency.value,
    }


def _expense_to_dict(expense: Expense) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": expense.id,
        "description": expense.description,
        "amount": str(expense.amount),
        "category": expense.category.value,
        "frequency": expense.frequency.value,
        "date": expense.date,
        "category_tag": expense.category_tag,
    }
    # TOML has no null, so unset optional fields are left out
    if expense.person_id:
        data["person_id"] = expense.person_id
    if expense.end_date:
        data["end_date"] = expense.end_date
    if expense.notes:
        data["notes"] = expense.notes
    return data


def budget_to_dict(budget: Budget) -> dict[str, Any]:
    """Convert a budget to its TOML dictionary form."""
    return {
        "id": budget.id,
        "name": budget.name,
        "settings": {"distribution_method": budget.settings.distribution_method.value},
        "people": [
            {
                "id": p.id,
                "name": p.name,
                "income": [_income_to_dict(i) for i in p.income],
            }
            for p in budget.people
        ],
        "expenses": [_expense_to_dict(e) for e in budget.expenses],
    }


def load_budget(budget_path: Path) -> Budget:
    """Load a budget from a TOML file.

    Args:
        budget_path: Path to the budget file.

    Returns:
        Loaded budget.

    Raises:
        FileNotFoundError: If the budget file doesn't exist.
        BudgetFileError: If the file is not valid TOML or holds invalid records.
    """
    with open(budget_path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise BudgetFileError(f"{budget_path} is not valid TOML: {e}") from e

    return budget_from_dict(data)


def save_budget(budget: Budget, budget_path: Path) -> None:
    """Save a budget to a TOML file with secure permissions.

    Args:
        budget: Budget to save.
        budget_path: Path to the budget file.
    """
    budget_path.parent.mkdir(parents=True, exist_ok=True)

    with open(budget_path, "wb") as f:
        tomli_w.dump(budget_to_dict(budget), f)

    os.chmod(budget_path, 0o600)
