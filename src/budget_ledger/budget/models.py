#!/usr/bin/env python3
"""
Budget Snapshot Models

Type-safe models for one month's budget: the bank accounts it touches and its
income, expense and savings entries. A Budget is a fully materialized,
read-only snapshot handed to the transfer calculator.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any

from ..core.currency import sum_amounts
from ..core.models import AccountId, LineItem, LineItemKind
from ..core.money import Money


def _check_entry(entry: "BudgetIncome | BudgetExpense | BudgetSavings") -> None:
    if entry.bank_account_id is None:
        raise ValueError(f"{type(entry).__name__} {entry.id!r} has no bank_account_id")
    if not isinstance(entry.amount, Money):
        raise ValueError(f"{type(entry).__name__} {entry.id!r} amount must be Money")


class BudgetStatus(Enum):
    """Lifecycle state of a monthly budget."""

    UNLOCKED = "UNLOCKED"
    LOCKED = "LOCKED"


@dataclass(frozen=True)
class BankAccount:
    """A household bank account referenced by budget entries."""

    id: AccountId
    name: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BankAccount":
        return cls(
            id=data["id"],
            name=data["name"],
            description=data.get("description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class BudgetIncome:
    """Income expected to land in a bank account this month."""

    id: str
    bank_account_id: AccountId
    name: str
    amount: Money

    def __post_init__(self) -> None:
        _check_entry(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetIncome":
        return cls(
            id=data["id"],
            bank_account_id=data["bank_account_id"],
            name=data["name"],
            amount=Money.of(data["amount"]),
        )

    def to_line_item(self) -> LineItem:
        return LineItem(self.bank_account_id, self.amount, LineItemKind.INCOME)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bank_account_id": self.bank_account_id,
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
        }


@dataclass(frozen=True)
class BudgetExpense:
    """
    An expense paid from a bank account this month.

    Manual expenses are ones the household pays by hand (as opposed to
    automatic debits); they become PAYMENT items on the todo list.
    """

    id: str
    bank_account_id: AccountId
    name: str
    amount: Money
    recurring_expense_id: str | None = None
    deducted_at: date | None = None
    is_manual: bool = False

    def __post_init__(self) -> None:
        _check_entry(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetExpense":
        deducted_at = data.get("deducted_at")
        return cls(
            id=data["id"],
            bank_account_id=data["bank_account_id"],
            name=data["name"],
            amount=Money.of(data["amount"]),
            recurring_expense_id=data.get("recurring_expense_id"),
            deducted_at=date.fromisoformat(deducted_at) if deducted_at else None,
            is_manual=bool(data.get("is_manual", False)),
        )

    def to_line_item(self) -> LineItem:
        return LineItem(self.bank_account_id, self.amount, LineItemKind.EXPENSE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bank_account_id": self.bank_account_id,
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
            "recurring_expense_id": self.recurring_expense_id,
            "deducted_at": self.deducted_at.isoformat() if self.deducted_at else None,
            "is_manual": self.is_manual,
        }


@dataclass(frozen=True)
class BudgetSavings:
    """Money set aside into a bank account this month."""

    id: str
    bank_account_id: AccountId
    name: str
    amount: Money

    def __post_init__(self) -> None:
        _check_entry(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BudgetSavings":
        return cls(
            id=data["id"],
            bank_account_id=data["bank_account_id"],
            name=data["name"],
            amount=Money.of(data["amount"]),
        )

    def to_line_item(self) -> LineItem:
        return LineItem(self.bank_account_id, self.amount, LineItemKind.SAVINGS)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "bank_account_id": self.bank_account_id,
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
        }


@dataclass
class Budget:
    """
    Snapshot of one monthly budget with all of its entries.

    Note: account names are only needed for display; the transfer engine
    works purely on account ids.
    """

    id: str
    month: int
    year: int
    status: BudgetStatus = BudgetStatus.UNLOCKED
    accounts: list[BankAccount] = field(default_factory=list)
    income: list[BudgetIncome] = field(default_factory=list)
    expenses: list[BudgetExpense] = field(default_factory=list)
    savings: list[BudgetSavings] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Budget month must be 1-12, got {self.month}")

    @property
    def label(self) -> str:
        """Human readable period, e.g. '2025-01'."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def total_income(self) -> Money:
        return Money(sum_amounts(i.amount.to_decimal() for i in self.income))

    @property
    def total_expenses(self) -> Money:
        return Money(sum_amounts(e.amount.to_decimal() for e in self.expenses))

    @property
    def total_savings(self) -> Money:
        return Money(sum_amounts(s.amount.to_decimal() for s in self.savings))

    @property
    def balance(self) -> Money:
        """Income minus expenses minus savings across all accounts."""
        return self.total_income - self.total_expenses - self.total_savings

    def line_items(self) -> tuple[list[LineItem], list[LineItem], list[LineItem]]:
        """Return (income, expenses, savings) as LineItem lists."""
        return (
            [i.to_line_item() for i in self.income],
            [e.to_line_item() for e in self.expenses],
            [s.to_line_item() for s in self.savings],
        )

    def manual_expenses(self) -> list[BudgetExpense]:
        return [e for e in self.expenses if e.is_manual]

    def account_name(self, account_id: AccountId) -> str:
        """Look up an account's display name, falling back to its id."""
        for account in self.accounts:
            if account.id == account_id:
                return account.name
        return str(account_id)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Budget":
        """
        Create Budget from a snapshot dict.

        Args:
            data: Dictionary with id, month, year and entry collections

        Returns:
            Budget instance
        """
        return cls(
            id=data["id"],
            month=int(data["month"]),
            year=int(data["year"]),
            status=BudgetStatus(data.get("status", BudgetStatus.UNLOCKED.value)),
            accounts=[BankAccount.from_dict(a) for a in data.get("accounts", [])],
            income=[BudgetIncome.from_dict(i) for i in data.get("income", [])],
            expenses=[BudgetExpense.from_dict(e) for e in data.get("expenses", [])],
            savings=[BudgetSavings.from_dict(s) for s in data.get("savings", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "month": self.month,
            "year": self.year,
            "status": self.status.value,
            "accounts": [a.to_dict() for a in self.accounts],
            "income": [i.to_dict() for i in self.income],
            "expenses": [e.to_dict() for e in self.expenses],
            "savings": [s.to_dict() for s in self.savings],
        }
