"""Summary, person and ending-soon commands for viewing the budget."""

import sys
from decimal import Decimal

from rich.console import Console
from rich.table import Table

from hearth.commands.common import load_budget_or_exit, resolve_as_of
from hearth.config import get_currency_code
from hearth.currency import currency_fraction_digits, format_money
from hearth.dates import active_expenses, ending_soon, split_ended
from hearth.domain.aggregation import total_expenses
from hearth.domain.categories import available_category_tags, filter_expenses, normalize_category_tag
from hearth.domain.errors import BudgetError
from hearth.domain.frequency import annual_amount, monthly_amount
from hearth.domain.models import ExpenseCategory, Person
from hearth.domain.money import round_money
from hearth.domain.summary import (
    BudgetOverview,
    PersonBreakdown,
    TypeBreakdown,
    annualize_overview,
    budget_overview,
    category_breakdown,
    income_allocation,
    round_category_breakdown,
    round_overview,
)

console = Console()

BAR_WIDTH = 40
TAG_BAR_WIDTH = 20


def format_remaining(amount: Decimal, code: str) -> str:
    """Format a remaining amount, red when over budget."""
    if amount < 0:
        return f"[red]{format_money(amount, code)}[/red]"
    return f"[green]{format_money(amount, code)}[/green]"


def calculate_bar_length(percentage: Decimal, bar_width: int = BAR_WIDTH) -> int:
    """Calculate how many characters of a bar a percentage fills."""
    if percentage <= 0:
        return 0
    return int(percentage / 100 * bar_width)


def render_overview(overview: BudgetOverview, code: str, period: str) -> None:
    """Render household totals and the per-person table."""
    console.print(f"\n[bold]Household Overview ({period})[/bold]\n")
    console.print(f"  Total income:        {format_money(overview.total_income, code):>14}")
    console.print(f"  Total expenses:      {format_money(overview.total_expenses, code):>14}")
    console.print(f"  [dim]Household:         {format_money(overview.household_expenses, code):>14}[/dim]")
    console.print(f"  [dim]Personal:          {format_money(overview.personal_expenses, code):>14}[/dim]")
    console.print(f"  Remaining:           {format_remaining(overview.remaining, code)}\n")

    if not overview.people:
        console.print("[yellow]No people in this budget yet[/yellow]")
        return

    table = Table(title="Individual Breakdowns")
    table.add_column("Person", style="cyan")
    table.add_column("Income", justify="right")
    table.add_column("Personal", justify="right")
    table.add_column("Household share", justify="right")
    table.add_column("Remaining", justify="right")

    for breakdown in overview.people:
        table.add_row(
            breakdown.name,
            format_money(breakdown.income, code),
            format_money(breakdown.personal_expenses, code),
            format_money(breakdown.household_share, code),
            format_remaining(breakdown.remaining, code),
        )

    console.print(table)


def render_person(breakdown: PersonBreakdown, code: str, period: str) -> None:
    """Render one person's breakdown with an income allocation bar."""
    allocation = income_allocation(breakdown)

    console.print(f"\n[bold]{breakdown.name} ({period})[/bold]\n")
    console.print(f"  Income:              {format_money(breakdown.income, code):>14}")
    console.print(f"  Personal expenses:   {format_money(breakdown.personal_expenses, code):>14}")
    console.print(f"  Household share:     {format_money(breakdown.household_share, code):>14}")
    console.print(f"  Remaining:           {format_remaining(breakdown.remaining, code)}\n")

    if breakdown.income <= 0:
        console.print("[dim]No income recorded[/dim]")
        return

    personal_bar = "█" * calculate_bar_length(allocation.personal)
    household_bar = "█" * calculate_bar_length(allocation.household)
    remaining_bar = "█" * calculate_bar_length(allocation.remaining)
    console.print(f"  [magenta]{personal_bar}[/magenta][blue]{household_bar}[/blue][green]{remaining_bar}[/green]")
    console.print(
        f"  [magenta]Personal {allocation.personal:.0f}%[/magenta]  "
        f"[blue]Household {allocation.household:.0f}%[/blue]  "
        f"[green]Remaining {allocation.remaining:.0f}%[/green]"
    )


def _build_overview(budget_file: str | None, yearly: bool, as_of: str | None) -> tuple[BudgetOverview, str, str]:
    budget, _ = load_budget_or_exit(budget_file)
    as_of_date = resolve_as_of(as_of)
    code = get_currency_code()

    try:
        overview = budget_overview(budget.people, active_expenses(budget.expenses, as_of_date), budget.settings)
    except BudgetError as e:
        console.print(f"[red]Calculation error: {e}[/red]", style="bold")
        sys.exit(1)

    if yearly:
        overview = annualize_overview(overview)
    period = "yearly" if yearly else "monthly"

    method = budget.settings.distribution_method.value
    console.print(f"[dim]{budget.name} · as of {as_of_date.isoformat()} · split: {method}[/dim]")

    return round_overview(overview, currency_fraction_digits(code)), code, period


def summary_command(yearly: bool = False, as_of: str | None = None, budget_file: str | None = None) -> None:
    """Show household totals and everyone's remaining income."""
    overview, code, period = _build_overview(budget_file, yearly, as_of)
    render_overview(overview, code, period)


def person_command(
    person_id: str,
    yearly: bool = False,
    as_of: str | None = None,
    budget_file: str | None = None,
) -> None:
    """Show one person's breakdown."""
    overview, code, period = _build_overview(budget_file, yearly, as_of)

    for breakdown in overview.people:
        if breakdown.person_id == person_id or breakdown.name.lower() == person_id.lower():
            render_person(breakdown, code, period)
            return

    console.print(f"[red]No person '{person_id}' in this budget[/red]", style="bold")
    sys.exit(1)


def ending_command(days: int = 30, as_of: str | None = None, budget_file: str | None = None) -> None:
    """List recurring expenses that are ending soon or have already ended."""
    budget, _ = load_budget_or_exit(budget_file)
    as_of_date = resolve_as_of(as_of)
    code = get_currency_code()

    running, ended = split_ended(ending_soon(budget.expenses, as_of_date, days), as_of_date)

    if not running and not ended:
        console.print(f"[green]No recurring expenses ending in the next {days} days[/green]")
        return

    for title, expenses, style in (
        (f"Ending within {days} days", running, "yellow"),
        ("Already ended", ended, "dim"),
    ):
        if not expenses:
            continue

        table = Table(title=title)
        table.add_column("Ends", style=style)
        table.add_column("Description", style="white")
        table.add_column("Category", style="magenta")
        table.add_column("Amount", justify="right")
        table.add_column("Monthly", justify="right", style="dim")
        table.add_column("Yearly", justify="right", style="dim")

        for expense in expenses:
            table.add_row(
                expense.end_date.isoformat() if expense.end_date else "",
                expense.description,
                expense.category.value,
                f"{format_money(expense.amount, code)} {expense.frequency.value}",
                format_money(monthly_amount(expense.amount, expense.frequency), code),
                format_money(annual_amount(expense.amount, expense.frequency), code),
            )

        console.print(table)


def render_category_breakdown(breakdowns: tuple[TypeBreakdown, ...], total: Decimal, code: str) -> None:
    """Render expense totals by type and category tag."""
    console.print(f"\n[bold]Expense Breakdown (monthly)[/bold]  {format_money(total, code)}\n")

    for breakdown in breakdowns:
        noun = "expense" if breakdown.count == 1 else "expenses"
        table = Table(
            title=(
                f"{breakdown.category.value.title()}: {format_money(breakdown.amount, code)} "
                f"({breakdown.percentage:.0f}% of total, {breakdown.count} {noun})"
            )
        )
        table.add_column("Tag", style="cyan")
        table.add_column("Count", justify="right", style="dim")
        table.add_column("Monthly", justify="right")
        table.add_column("Share", justify="right")
        table.add_column("", style="blue")

        for tag in breakdown.tags:
            table.add_row(
                tag.tag,
                str(tag.count),
                format_money(tag.amount, code),
                f"{tag.percentage:.0f}%",
                "█" * calculate_bar_length(tag.percentage, TAG_BAR_WIDTH),
            )

        console.print(table)


def _resolve_person_id(people: tuple[Person, ...], person: str) -> str:
    for candidate in people:
        if candidate.id == person or candidate.name.lower() == person.lower():
            return candidate.id

    console.print(f"[red]No person '{person}' in this budget[/red]", style="bold")
    sys.exit(1)


def breakdown_command(
    expense_type: str | None = None,
    person: str | None = None,
    tag: str | None = None,
    search: str | None = None,
    as_of: str | None = None,
    budget_file: str | None = None,
) -> None:
    """Show monthly expenses grouped by type and category tag."""
    budget, _ = load_budget_or_exit(budget_file)
    as_of_date = resolve_as_of(as_of)
    code = get_currency_code()

    try:
        category = ExpenseCategory(expense_type) if expense_type else None
    except ValueError:
        console.print(f"[red]Unknown expense type: {expense_type!r} (use 'household' or 'personal')[/red]", style="bold")
        sys.exit(1)

    if tag:
        known = available_category_tags(budget.expenses)
        if normalize_category_tag(tag) not in known:
            console.print(f"[red]Unknown category tag: {tag}[/red]", style="bold")
            console.print(f"[dim]Known tags: {', '.join(known)}[/dim]")
            sys.exit(1)

    person_id = _resolve_person_id(budget.people, person) if person else None
    expenses = filter_expenses(active_expenses(budget.expenses, as_of_date), category, person_id, tag, search)

    digits = currency_fraction_digits(code)
    breakdowns = round_category_breakdown(category_breakdown(expenses), digits)
    if not breakdowns:
        console.print("[yellow]No recurring expenses match[/yellow]")
        return

    render_category_breakdown(breakdowns, round_money(total_expenses(expenses), digits), code)
