"""Domain type definitions for hearth.

Records are immutable value objects. The calculation core never mutates them;
callers build new records when something changes.

- Money: Decimal amount in major currency units (e.g. 12.50)
- PersonId / ExpenseId: opaque record identifiers
"""

from dataclasses import dataclass, field
from datetime import date as Date
from decimal import Decimal
from enum import Enum
from typing import NewType

from hearth.domain.errors import InvalidInput

# Money amounts are Decimals so repeated conversions never pick up float drift
Money = NewType("Money", Decimal)

PersonId = NewType("PersonId", str)

ExpenseId = NewType("ExpenseId", str)


class Recurrence(str, Enum):
    """How often an income or expense repeats."""

    ONE_TIME = "one-time"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ExpenseCategory(str, Enum):
    """Whether an expense is pooled across the household or charged to one person."""

    HOUSEHOLD = "household"
    PERSONAL = "personal"


class DistributionMethod(str, Enum):
    """Policy for splitting household expenses between people."""

    EVEN = "even"
    INCOME_BASED = "income-based"


DEFAULT_CATEGORY_TAGS: tuple[str, ...] = (
    "Groceries",
    "Rent",
    "Utilities",
    "Transport",
    "Entertainment",
    "Healthcare",
    "Misc",
)


@dataclass(frozen=True)
class Income:
    """Immutable income entry owned by a single person."""

    id: str
    person_id: PersonId
    amount: Money
    label: str
    frequency: Recurrence = Recurrence.MONTHLY


@dataclass(frozen=True)
class Person:
    """Immutable household member with their income entries."""

    id: PersonId
    name: str
    income: tuple[Income, ...] = ()


@dataclass(frozen=True)
class Expense:
    """Immutable expense record.

    A personal expense must name the person it belongs to. A household expense
    may carry a person_id for reference, but it is pooled regardless.
    """

    id: ExpenseId
    description: str
    amount: Money
    category: ExpenseCategory
    frequency: Recurrence
    date: Date
    person_id: PersonId | None = None
    end_date: Date | None = None
    category_tag: str = "Misc"
    notes: str | None = None

    def __post_init__(self) -> None:
        if self.category == ExpenseCategory.PERSONAL and not self.person_id:
            raise InvalidInput(f"Personal expense '{self.description}' must be assigned to a person")


@dataclass(frozen=True)
class HouseholdSettings:
    """Immutable household-wide settings."""

    distribution_method: DistributionMethod = DistributionMethod.EVEN


@dataclass(frozen=True)
class Budget:
    """Immutable budget: the people, their expenses and household settings."""

    id: str
    name: str
    people: tuple[Person, ...] = ()
    expenses: tuple[Expense, ...] = ()
    settings: HouseholdSettings = field(default_factory=HouseholdSettings)

    def find_person(self, person_id: str) -> Person | None:
        """Return the person with the given id, or None."""
        for person in self.people:
            if person.id == person_id:
                return person
        return None
