#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper around ``decimal.Decimal``.
Prevents floating-point errors and keeps the full precision of every input.
"""

from dataclasses import dataclass
from decimal import Decimal

from .currency import exact_arithmetic, format_dollars, to_decimal


@dataclass(frozen=True)
class Money:
    """
    Immutable, exact money value (USD).

    Supports both positive (income) and negative (expense/savings) amounts.
    Uses decimal arithmetic throughout, so merges never round.

    Examples:
        >>> income = Money.from_dollars("$1,000.33")
        >>> str(income)
        '$1,000.33'

        >>> expense = Money.from_dollars("-45.99")
        >>> str(income + expense)
        '$954.34'

        >>> expense.abs()
        Money(amount=Decimal('45.99'))
    """

    amount: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError(f"Money amount must be a Decimal, got {type(self.amount).__name__}")
        if not self.amount.is_finite():
            raise ValueError(f"Money amount must be finite: {self.amount!r}")

    @classmethod
    def zero(cls) -> "Money":
        """Create a zero amount."""
        return cls(amount=Decimal(0))

    @classmethod
    def of(cls, value: "Money | Decimal | int | str") -> "Money":
        """
        Create Money from any supported exact representation.

        Args:
            value: Money, Decimal, integer dollars, or a dollar string

        Returns:
            Money object (the same object if already Money)

        Raises:
            TypeError: If given a float or an unsupported type
            ValueError: If a string cannot be parsed
        """
        if isinstance(value, Money):
            return value
        return cls(amount=to_decimal(value))

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Args:
            dollars: String like "$12.34" or integer like 12

        Returns:
            Money object
        """
        return cls(amount=to_decimal(dollars))

    def to_decimal(self) -> Decimal:
        """Get the exact decimal value."""
        return self.amount

    def abs(self) -> "Money":
        """Return absolute value of Money."""
        return Money(amount=self.amount.copy_abs())

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects without rounding."""
        if not isinstance(other, Money):
            return NotImplemented
        with exact_arithmetic():
            return Money(amount=self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        """Subtract two Money objects without rounding."""
        if not isinstance(other, Money):
            return NotImplemented
        with exact_arithmetic():
            return Money(amount=self.amount - other.amount)

    def __neg__(self) -> "Money":
        return Money(amount=self.amount.copy_negate())

    def __eq__(self, other: object) -> bool:
        """Check numeric equality ($1000 == $1000.00)."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount == other.amount

    def __hash__(self) -> int:
        return hash(self.amount)

    def __lt__(self, other: "Money") -> bool:
        """Less than comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        """Less than or equal comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        """Greater than comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        """Greater than or equal comparison."""
        if not isinstance(other, Money):
            return NotImplemented
        return self.amount >= other.amount

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_dollars(self.amount)

    def __repr__(self) -> str:
        """Repr format."""
        return f"Money(amount={self.amount!r})"
