#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

Exact decimal currency handling for the Household Budget Ledger.
All amounts are held as ``decimal.Decimal`` so repeated additions and
subtractions never drift.

Key Principles:
- Never use floating-point arithmetic for currency calculations
- Parse user-supplied strings strictly; reject anything ambiguous
- Keep full precision internally, round only for display
"""

from collections.abc import Iterable
from contextlib import AbstractContextManager
from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, Context, Decimal, Inexact, InvalidOperation, localcontext

DISPLAY_PLACES = Decimal("0.01")

# Wide enough that sums and differences of finite Decimals are never rounded
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN, traps=[InvalidOperation, Inexact])


def exact_arithmetic() -> AbstractContextManager[Context]:
    """
    Decimal context for currency arithmetic.

    The default context keeps 28 significant digits and silently rounds
    anything longer. Inside this context additions and subtractions keep
    every digit, and any inexact result raises instead of rounding.

    Example:
        with exact_arithmetic():
            total = a + b
    """
    return localcontext(EXACT_CONTEXT)


def parse_dollars(dollars_str: str) -> Decimal:
    """
    Parse a dollar string to an exact Decimal.

    Args:
        dollars_str: String like "$1,234.56", "1234.56" or "-12"

    Returns:
        Decimal amount with every digit of the input preserved

    Raises:
        ValueError: If the string is empty or not a number

    Examples:
        parse_dollars("$1,000.33") -> Decimal("1000.33")
        parse_dollars("-$12.5") -> Decimal("-12.5")
    """
    clean = dollars_str.replace("$", "").replace(",", "").strip()

    if not clean:
        raise ValueError(f"Empty currency amount: {dollars_str!r}")

    try:
        value = Decimal(clean)
    except InvalidOperation as e:
        raise ValueError(f"Invalid currency amount: {dollars_str!r}") from e

    if not value.is_finite():
        raise ValueError(f"Currency amount must be finite: {dollars_str!r}")

    return value


def to_decimal(value: Decimal | int | str) -> Decimal:
    """
    Convert a supported amount representation to Decimal.

    Floats are rejected: they cannot represent most cent values exactly.

    Raises:
        TypeError: For floats, booleans or unsupported types
        ValueError: For unparseable strings or non-finite decimals
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise TypeError(f"Currency amounts must be exact, got {type(value).__name__}: {value!r}")
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Currency amount must be finite: {value!r}")
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        return parse_dollars(value)
    raise TypeError(f"Unsupported currency amount type: {type(value).__name__}")


def format_dollars(amount: Decimal, symbol: str = "$") -> str:
    """
    Format a Decimal amount as a dollar string with thousands separators.

    Amounts with at most two decimal places are shown with exactly two; any
    extra precision is kept rather than rounded away.

    Example:
        format_dollars(Decimal("-1234.5")) -> "-$1,234.50"
    """
    is_negative = amount < 0
    magnitude = amount.copy_abs()

    exponent = magnitude.as_tuple().exponent
    if isinstance(exponent, int) and exponent >= -2:
        with exact_arithmetic():
            magnitude = magnitude.quantize(DISPLAY_PLACES)

    body = f"{magnitude:,f}"
    return f"-{symbol}{body}" if is_negative else f"{symbol}{body}"


def sum_amounts(amounts: Iterable[Decimal]) -> Decimal:
    """Sum Decimal amounts exactly, starting from Decimal zero."""
    with exact_arithmetic():
        return sum(amounts, Decimal(0))


def validate_sum_equals_total(amounts: Iterable[Decimal], total: Decimal) -> bool:
    """
    Validate that amounts sum exactly to the expected total.

    Args:
        amounts: Decimal amounts to add up
        total: Expected total

    Returns:
        True if the sum matches exactly
    """
    return sum_amounts(amounts) == total
