"""Domain models and calculations for hearth.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations and no clock reads
- Decimal arithmetic, rounded only at display boundaries
- Easy to test
"""

from hearth.domain.aggregation import person_income, personal_expenses, total_expenses, total_income
from hearth.domain.categories import available_category_tags, filter_expenses, normalize_category_tag
from hearth.domain.distribution import household_expenses_total, household_share, household_shares
from hearth.domain.errors import (
    BudgetError,
    InvalidAmount,
    InvalidInput,
    UnsupportedDistribution,
    UnsupportedFrequency,
)
from hearth.domain.frequency import annual_amount, monthly_amount
from hearth.domain.models import (
    Budget,
    DistributionMethod,
    Expense,
    ExpenseCategory,
    HouseholdSettings,
    Income,
    Money,
    Person,
    Recurrence,
)
from hearth.domain.payoff import (
    PayoffInputs,
    PayoffResult,
    PayoffRow,
    compute_credit_card_payoff,
    compute_interest_only_minimum,
)
from hearth.domain.summary import budget_overview, category_breakdown, person_breakdown, remaining_income

__all__ = [
    # Models
    "Budget",
    "DistributionMethod",
    "Expense",
    "ExpenseCategory",
    "HouseholdSettings",
    "Income",
    "Money",
    "Person",
    "Recurrence",
    # Errors
    "BudgetError",
    "InvalidAmount",
    "InvalidInput",
    "UnsupportedDistribution",
    "UnsupportedFrequency",
    # Calculations
    "annual_amount",
    "available_category_tags",
    "budget_overview",
    "category_breakdown",
    "filter_expenses",
    "household_expenses_total",
    "household_share",
    "household_shares",
    "monthly_amount",
    "normalize_category_tag",
    "person_breakdown",
    "person_income",
    "personal_expenses",
    "remaining_income",
    "total_expenses",
    "total_income",
    # Payoff
    "PayoffInputs",
    "PayoffResult",
    "PayoffRow",
    "compute_credit_card_payoff",
    "compute_interest_only_minimum",
]
