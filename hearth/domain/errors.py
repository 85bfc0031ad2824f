"""Exceptions raised by the calculation core.

All of them are ValueErrors: they describe bad input handed to a pure
function, and are reported to the immediate caller. Degenerate but valid
states (nobody in the household, nobody earning, a payment that never clears
the balance) are results, not errors.
"""


class BudgetError(ValueError):
    """Base class for calculation input errors."""


class InvalidAmount(BudgetError):
    """A monetary amount is negative or not a finite number."""


class UnsupportedFrequency(BudgetError):
    """A recurrence cadence is not one of the known values."""


class UnsupportedDistribution(BudgetError):
    """A household distribution method is not one of the known values."""


class InvalidInput(BudgetError):
    """Calculator inputs are out of range (e.g. non-positive balance)."""
