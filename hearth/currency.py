"""Currency table and display formatting.

The calculation core only needs to know how many fraction digits a currency
has; symbols and names are for display.
"""

from dataclasses import dataclass
from decimal import Decimal

from hearth.domain.money import DEFAULT_FRACTION_DIGITS, round_money

DEFAULT_CURRENCY_CODE = "USD"


@dataclass(frozen=True)
class Currency:
    """Immutable currency description."""

    code: str
    symbol: str
    name: str
    fraction_digits: int = DEFAULT_FRACTION_DIGITS


CURRENCIES: tuple[Currency, ...] = (
    Currency("USD", "$", "US Dollar"),
    Currency("EUR", "€", "Euro"),
    Currency("GBP", "£", "British Pound"),
    Currency("JPY", "¥", "Japanese Yen", fraction_digits=0),
    Currency("CAD", "C$", "Canadian Dollar"),
    Currency("AUD", "A$", "Australian Dollar"),
    Currency("CHF", "CHF", "Swiss Franc"),
    Currency("CNY", "¥", "Chinese Yuan"),
    Currency("INR", "₹", "Indian Rupee"),
    Currency("BRL", "R$", "Brazilian Real"),
)


def get_currency(code: str) -> Currency | None:
    """Look up a currency by ISO code (case-insensitive)."""
    code = code.strip().upper()
    for currency in CURRENCIES:
        if currency.code == code:
            return currency
    return None


def currency_fraction_digits(code: str) -> int:
    """Get the number of fraction digits for a currency.

    Args:
        code: ISO currency code.

    Returns:
        Fraction digits, defaulting to 2 for unknown codes.
    """
    currency = get_currency(code)
    if currency is None:
        return DEFAULT_FRACTION_DIGITS
    return currency.fraction_digits


def format_money(amount: Decimal, code: str = DEFAULT_CURRENCY_CODE, include_sign: bool = False) -> str:
    """Format an amount for display.

    Args:
        amount: Amount in major units.
        code: ISO currency code.
        include_sign: Whether to prefix positive amounts with +.

    Returns:
        Formatted string (e.g., "$1,234.50", "-£12.00", "¥1,500").
    """
    currency = get_currency(code)
    symbol = currency.symbol if currency else f"{code.strip().upper()} "
    digits = currency_fraction_digits(code)

    rounded = round_money(amount, digits)
    formatted = f"{symbol}{abs(rounded):,.{digits}f}"

    if rounded < 0:
        return f"-{formatted}"
    if include_sign:
        return f"+{formatted}"
    return formatted
