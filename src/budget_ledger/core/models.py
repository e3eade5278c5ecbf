#!/usr/bin/env python3
"""
Core Data Models for the Household Budget Ledger

Value types shared by the net position calculator and the transfer matcher.
Account identifiers are opaque: any hashable value (UUIDs, strings) works.
"""

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .money import Money

AccountId = Hashable


class LineItemKind(Enum):
    """Which budget collection a line item came from."""

    INCOME = "income"
    EXPENSE = "expense"
    SAVINGS = "savings"


@dataclass(frozen=True)
class LineItem:
    """
    A single income, expense or savings contribution to one account.

    kind records which budget collection the item came from. The net position
    calculator takes the sign from the collection an item is passed in.
    """

    account_id: AccountId
    amount: Money
    kind: LineItemKind

    def __post_init__(self) -> None:
        if self.account_id is None:
            raise ValueError("LineItem account_id cannot be None")
        if not isinstance(self.amount, Money):
            raise ValueError(f"LineItem amount must be Money, got {type(self.amount).__name__}")
        if not isinstance(self.kind, LineItemKind):
            raise ValueError(f"LineItem kind must be a LineItemKind, got {self.kind!r}")


@dataclass
class AccountNetPosition:
    """
    Net financial position of a bank account within one budget.

    A positive net_amount is a surplus (the account has extra money), a
    negative one is a deficit (the account needs money).
    """

    account_id: AccountId
    net_amount: Money

    def __post_init__(self) -> None:
        if self.account_id is None:
            raise ValueError("AccountNetPosition account_id cannot be None")

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "net_amount" and not isinstance(value, Money):
            raise ValueError(f"net_amount must be Money, got {type(value).__name__}")
        super().__setattr__(name, value)

    @property
    def is_surplus(self) -> bool:
        return self.net_amount.is_positive()

    @property
    def is_deficit(self) -> bool:
        return self.net_amount.is_negative()

    @property
    def is_balanced(self) -> bool:
        return self.net_amount.is_zero()


@dataclass(frozen=True)
class TransferPlan:
    """
    A planned money transfer between two bank accounts.

    Immutable once created; the amount is always strictly positive.
    """

    from_account_id: AccountId
    to_account_id: AccountId
    amount: Money

    def __post_init__(self) -> None:
        if self.from_account_id is None:
            raise ValueError("from_account_id cannot be None")
        if self.to_account_id is None:
            raise ValueError("to_account_id cannot be None")
        if not isinstance(self.amount, Money):
            raise ValueError(f"Transfer amount must be Money, got {type(self.amount).__name__}")
        if not self.amount.is_positive():
            raise ValueError(f"Transfer amount must be positive, got {self.amount}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "from_account_id": str(self.from_account_id),
            "to_account_id": str(self.to_account_id),
            "amount": str(self.amount.to_decimal()),
        }
