"""CLI entry point for hearth."""

import typer

from hearth.commands.admin import currency_command, distribution_command, init_command
from hearth.commands.payoff import payoff_command
from hearth.commands.summary import breakdown_command, ending_command, person_command, summary_command

app = typer.Typer(
    name="hearth",
    help="Hearth - household budgeting with shared expenses",
    add_completion=False,
)

BUDGET_HELP = "Budget file (default: from config)"
AS_OF_HELP = "Evaluate expenses as of this date (YYYY-MM-DD, default: today)"


@app.callback()
def main() -> None:
    """Hearth - household budgeting with shared expenses."""
    pass


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config and budget file"),
) -> None:
    """Initialize hearth configuration and an empty budget file."""
    init_command(force)


@app.command()
def summary(
    yearly: bool = typer.Option(False, "--yearly", "-y", help="Show yearly instead of monthly figures"),
    as_of: str = typer.Option(None, "--as-of", help=AS_OF_HELP),
    budget: str = typer.Option(None, "--budget", "-b", help=BUDGET_HELP),
) -> None:
    """Show household totals and what everyone has left."""
    summary_command(yearly, as_of, budget)


@app.command()
def person(
    person_id: str,
    yearly: bool = typer.Option(False, "--yearly", "-y", help="Show yearly instead of monthly figures"),
    as_of: str = typer.Option(None, "--as-of", help=AS_OF_HELP),
    budget: str = typer.Option(None, "--budget", "-b", help=BUDGET_HELP),
) -> None:
    """Show one person's income, expenses and household share."""
    person_command(person_id, yearly, as_of, budget)


@app.command()
def ending(
    days: int = typer.Option(30, "--days", help="How many days ahead to look"),
    as_of: str = typer.Option(None, "--as-of", help=AS_OF_HELP),
    budget: str = typer.Option(None, "--budget", "-b", help=BUDGET_HELP),
) -> None:
    """List recurring expenses ending soon or already ended."""
    ending_command(days, as_of, budget)


@app.command()
def breakdown(
    expense_type: str = typer.Option(None, "--type", "-t", help="Only 'household' or only 'personal' expenses"),
    person: str = typer.Option(None, "--person", "-p", help="Only expenses charged to this person (id or name)"),
    tag: str = typer.Option(None, "--tag", help="Only expenses with this category tag"),
    search: str = typer.Option(None, "--search", "-s", help="Only expenses whose description contains this text"),
    as_of: str = typer.Option(None, "--as-of", help=AS_OF_HELP),
    budget: str = typer.Option(None, "--budget", "-b", help=BUDGET_HELP),
) -> None:
    """Show monthly expenses grouped by type and category tag."""
    breakdown_command(expense_type, person, tag, search, as_of, budget)


@app.command()
def distribution(
    method: str = typer.Argument(..., help="'even' or 'income-based'"),
    budget: str = typer.Option(None, "--budget", "-b", help=BUDGET_HELP),
) -> None:
    """Choose how household expenses are split between people."""
    distribution_command(method, budget)


@app.command()
def payoff(
    balance: str = typer.Argument(..., help="Current card balance"),
    apr: str = typer.Argument(..., help="Annual percentage rate (e.g. 24 for 24%)"),
    payment: str = typer.Option(None, "--payment", "-p", help="Monthly payment (default: interest-only minimum)"),
) -> None:
    """Project how long a credit card balance takes to pay off."""
    payoff_command(balance, apr, payment)


@app.command()
def currency(
    code: str = typer.Argument(None, help="Currency code to use (e.g. GBP); omit to list currencies"),
) -> None:
    """Show or set the display currency."""
    currency_command(code)


if __name__ == "__main__":
    app()
