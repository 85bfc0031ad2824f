"""Helpers shared by the CLI commands."""

import sys
from datetime import date
from pathlib import Path

from rich.console import Console

from hearth.config import get_budget_path
from hearth.dates import parse_date
from hearth.domain.models import Budget
from hearth.store import BudgetFileError, load_budget

console = Console()


def resolve_budget_path(budget_file: str | None) -> Path:
    """Use the --budget option if given, else the configured budget file."""
    if budget_file:
        return Path(budget_file).expanduser()
    return get_budget_path()


def load_budget_or_exit(budget_file: str | None) -> tuple[Budget, Path]:
    """Load the budget file, printing an error and exiting if it can't be read.

    Returns:
        Tuple of (budget, budget_path).
    """
    budget_path = resolve_budget_path(budget_file)

    try:
        return load_budget(budget_path), budget_path
    except FileNotFoundError:
        console.print(f"[red]Budget file not found: {budget_path}[/red]", style="bold")
        console.print("[dim]Run 'hearth init' to create one.[/dim]")
        sys.exit(1)
    except BudgetFileError as e:
        console.print(f"[red]Invalid budget file: {e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)


def resolve_as_of(as_of: str | None) -> date:
    """Parse the --as-of option, defaulting to today.

    Only impure part of the reporting commands: reading the current date.
    """
    if not as_of:
        return date.today()
    try:
        return parse_date(as_of)
    except ValueError:
        console.print(f"[red]Invalid date '{as_of}'. Use YYYY-MM-DD.[/red]")
        sys.exit(1)
