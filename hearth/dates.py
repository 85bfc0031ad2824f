"""Date utilities for hearth.

Pure functions deciding which expenses count towards the current budget. The
calculation core sums whatever it is given; these helpers do the filtering
beforehand. Every function takes an explicit as_of date and never reads the
clock.
"""

from collections.abc import Iterable
from datetime import date, datetime, timedelta

from hearth.domain.models import Expense, Recurrence


def parse_date(value: str) -> date:
    """Parse a YYYY-MM-DD date, ignoring any time part after the date.

    Args:
        value: Date string such as "2025-01-31" or "2025-01-31T09:00:00Z".

    Returns:
        Parsed date.

    Raises:
        ValueError: If the first ten characters are not a valid YYYY-MM-DD date.
    """
    return datetime.strptime(value.strip()[:10], "%Y-%m-%d").date()


def is_expense_active(expense: Expense, as_of: date) -> bool:
    """Check whether an expense counts towards the budget on a given day.

    One-time expenses always count. Recurring expenses count until their end
    date (inclusive), or indefinitely without one.

    Args:
        expense: Expense to check.
        as_of: Day to check against.

    Returns:
        True if the expense is active on as_of.
    """
    if expense.frequency == Recurrence.ONE_TIME:
        return True
    if expense.end_date is None:
        return True
    return expense.end_date >= as_of


def active_expenses(expenses: Iterable[Expense], as_of: date) -> list[Expense]:
    """Filter expenses down to those active on a given day, keeping order."""
    return [e for e in expenses if is_expense_active(e, as_of)]


def ending_soon(expenses: Iterable[Expense], as_of: date, days: int = 30) -> list[Expense]:
    """Find recurring expenses that have ended or will end within a window.

    Args:
        expenses: Expenses to search.
        as_of: Day the window starts from.
        days: Window length in days.

    Returns:
        Recurring expenses with an end date before as_of + days, sorted by end
        date. An id appearing twice is listed once, with its last record.
    """
    limit = as_of + timedelta(days=days)

    matches = [
        e
        for e in expenses
        if e.frequency != Recurrence.ONE_TIME and e.end_date is not None and e.end_date <= limit
    ]
    matches.sort(key=lambda e: e.end_date or as_of)

    by_id: dict[str, Expense] = {}
    for expense in matches:
        by_id[expense.id] = expense
    return list(by_id.values())


def split_ended(expenses: Iterable[Expense], as_of: date) -> tuple[list[Expense], list[Expense]]:
    """Split expenses with end dates into (still running, already ended) as of a day."""
    running: list[Expense] = []
    ended: list[Expense] = []
    for expense in expenses:
        if expense.end_date is not None and expense.end_date < as_of:
            ended.append(expense)
        else:
            running.append(expense)
    return running, ended
