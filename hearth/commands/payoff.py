"""Credit card payoff command."""

import sys

from rich.console import Console
from rich.table import Table

from hearth.config import get_currency_code
from hearth.currency import currency_fraction_digits, format_money
from hearth.domain.errors import InvalidInput
from hearth.domain.payoff import PayoffResult, compute_credit_card_payoff, compute_interest_only_minimum

console = Console()


def render_payoff(result: PayoffResult, code: str) -> None:
    """Render a payoff projection."""
    inputs = result.inputs

    console.print("\n[bold]Credit Card Payoff[/bold]\n")
    console.print(f"  Balance:           {format_money(inputs.balance, code):>14}")
    console.print(f"  APR:               {inputs.apr:>13}%")
    console.print(f"  Monthly payment:   {format_money(inputs.monthly_payment, code):>14}\n")

    if result.never_repaid:
        console.print("[red]Payment only covers interest, so the balance will never be repaid.[/red]", style="bold")
        console.print("[dim]Increase your monthly payment to start reducing the principal.[/dim]")
        return

    years, months = divmod(result.months, 12)
    duration = f"{years}y {months}m" if years else f"{months}m"
    console.print(f"  Months to payoff:  {result.months:>14}  [dim]({duration})[/dim]")
    console.print(f"  Total interest:    {format_money(result.total_interest, code):>14}\n")

    table = Table(title=f"First {len(result.schedule)} months")
    table.add_column("Month", justify="right", style="dim")
    table.add_column("Payment", justify="right")
    table.add_column("Interest", justify="right", style="red")
    table.add_column("Principal", justify="right", style="green")
    table.add_column("Remaining", justify="right", style="cyan")

    for row in result.schedule:
        table.add_row(
            str(row.month),
            format_money(row.payment, code),
            format_money(row.interest, code),
            format_money(row.principal, code),
            format_money(row.remaining, code),
        )

    console.print(table)


def payoff_command(balance: str, apr: str, payment: str | None = None) -> None:
    """Project how long a card balance takes to pay off."""
    code = get_currency_code()
    digits = currency_fraction_digits(code)

    try:
        minimum = compute_interest_only_minimum(balance, apr, digits)
        if payment is None and minimum <= 0:
            console.print("[red]The interest-only minimum is zero at this APR, so there is no default payment.[/red]")
            console.print("[dim]Pass --payment to choose a monthly payment.[/dim]")
            sys.exit(1)
        if payment is None:
            console.print(
                f"[yellow]No payment given; using the interest-only minimum of {format_money(minimum, code)}[/yellow]"
            )
            monthly_payment: str = str(minimum)
        else:
            monthly_payment = payment

        result = compute_credit_card_payoff(balance, apr, monthly_payment, digits)
    except InvalidInput as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    render_payoff(result, code)

    if not result.never_repaid:
        console.print(f"[dim]Interest-only minimum: {format_money(minimum, code)}[/dim]")
