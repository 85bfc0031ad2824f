"""Pure functions for category tags and expense filtering.

Tags are free-form labels grouping expenses within household or personal
spending (Groceries, Rent, ...). They are normalized to title case so
"groceries" and "GROCERIES!" land in the same group.
"""

import re
from collections.abc import Sequence
from typing import Any

from hearth.domain.models import DEFAULT_CATEGORY_TAGS, Expense, ExpenseCategory

FALLBACK_TAG = "Misc"
MAX_TAG_LENGTH = 20

_DISALLOWED = re.compile(r"[^A-Za-z0-9 ]+")
_WHITESPACE = re.compile(r"\s+")


def normalize_category_tag(name: Any) -> str:
    """Normalize a category tag to title case letters, digits and spaces.

    Args:
        name: Raw tag as typed or stored.

    Returns:
        Normalized tag of at most 20 characters, or "Misc" when nothing usable remains.
    """
    if not isinstance(name, str):
        return FALLBACK_TAG

    cleaned = _WHITESPACE.sub(" ", _DISALLOWED.sub(" ", name)).strip()
    if not cleaned:
        return FALLBACK_TAG

    titled = " ".join(word[0].upper() + word[1:].lower() for word in cleaned.split(" "))
    return titled[:MAX_TAG_LENGTH].strip()


def available_category_tags(expenses: Sequence[Expense]) -> tuple[str, ...]:
    """List the default tags plus any tag used by an expense, sorted."""
    used = {normalize_category_tag(e.category_tag) for e in expenses}
    return tuple(sorted(set(DEFAULT_CATEGORY_TAGS) | used, key=str.lower))


def filter_expenses(
    expenses: Sequence[Expense],
    category: ExpenseCategory | None = None,
    person_id: str | None = None,
    tag: str | None = None,
    search: str | None = None,
) -> list[Expense]:
    """Select expenses matching every filter given.

    Args:
        expenses: Expenses to filter.
        category: Keep only household or only personal expenses.
        person_id: Keep only expenses charged to this person.
        tag: Keep only expenses with this tag (compared after normalization).
        search: Keep only expenses whose description contains this text, ignoring case.

    Returns:
        Matching expenses in their original order.
    """
    selected = list(expenses)

    if category is not None:
        selected = [e for e in selected if e.category == category]
    if person_id:
        selected = [e for e in selected if e.person_id == person_id]
    if tag:
        wanted = normalize_category_tag(tag)
        selected = [e for e in selected if normalize_category_tag(e.category_tag) == wanted]
    if search:
        query = search.lower()
        selected = [e for e in selected if query in e.description.lower()]

    return selected
