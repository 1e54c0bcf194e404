from __future__ import annotations


class InvalidArgument(ValueError):
    """Caller passed a value the operation cannot work with (blank query, bad period)."""


class CalculationError(ArithmeticError):
    """A derived metric came out non-finite (strict mode only)."""
