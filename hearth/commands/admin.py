"""Admin commands for initialization and settings."""

import sys

from rich.console import Console
from rich.table import Table

from hearth.commands.common import load_budget_or_exit
from hearth.config import create_default_config, get_config_path, get_currency_code, set_currency_code
from hearth.currency import CURRENCIES
from hearth.domain.errors import UnsupportedDistribution
from hearth.store import new_budget, save_budget, with_distribution_method

console = Console()


def init_command(force: bool = False) -> None:
    """Initialize hearth configuration and an empty budget file."""
    config_path = get_config_path()
    config_exists = config_path.exists()
    budget_path = config_path.parent / "budget.toml"
    budget_exists = budget_path.exists()

    # Guard: refuse to overwrite without force flag
    if not force and (config_exists or budget_exists):
        console.print("[red]Initialization failed:[/red]", style="bold")
        if config_exists:
            console.print(f"  Config already exists: {config_path}")
        if budget_exists:
            console.print(f"  Budget file already exists: {budget_path}")
        console.print("\n[yellow]Use 'hearth init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
        console.print("[green]✓[/green] Config file created (permissions: 600)")

        console.print(f"[cyan]Creating budget file at {budget_path}...[/cyan]")
        save_budget(new_budget(), budget_path)
        console.print("[green]✓[/green] Budget file created")
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("\n[green]Initialization complete![/green]", style="bold")
    console.print(f"[dim]Config: {config_path}[/dim]")
    console.print(f"[dim]Budget: {budget_path}[/dim]")


def currency_command(code: str | None = None) -> None:
    """Show the configured currency, or set it when a code is given."""
    if code is None:
        current = get_currency_code()

        table = Table(title="Currencies")
        table.add_column("Code", style="cyan")
        table.add_column("Symbol", justify="center")
        table.add_column("Name", style="white")
        table.add_column("Decimals", justify="right", style="dim")

        for currency in CURRENCIES:
            marker = " [green]✓[/green]" if currency.code == current else ""
            table.add_row(f"{currency.code}{marker}", currency.symbol, currency.name, str(currency.fraction_digits))

        console.print(table)
        return

    try:
        saved = set_currency_code(code)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓ Currency set to {saved}[/green]")


def distribution_command(method: str, budget_file: str | None = None) -> None:
    """Change how household expenses are split between people."""
    budget, budget_path = load_budget_or_exit(budget_file)

    try:
        updated = with_distribution_method(budget, method)
    except UnsupportedDistribution as e:
        console.print(f"[red]{e}[/red]", style="bold")
        console.print("[dim]Choose 'even' or 'income-based'.[/dim]")
        sys.exit(1)

    if updated.settings == budget.settings:
        console.print(f"[dim]Distribution already set to {method}[/dim]")
        return

    try:
        save_budget(updated, budget_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print(f"[green]✓ Household expenses now split: {updated.settings.distribution_method.value}[/green]")
