"""
Synthetic budget snapshots and line item helpers.

All data is synthetic and does not describe a real household.
"""

from typing import Any

from budget_ledger.core.models import AccountNetPosition, LineItem, LineItemKind
from budget_ledger.core.money import Money

CHECKING = "acct-checking"
BILLS = "acct-bills"
SAVINGS = "acct-savings"


def income(account_id: str, amount: str) -> LineItem:
    return LineItem(account_id, Money.from_dollars(amount), LineItemKind.INCOME)


def expense(account_id: str, amount: str) -> LineItem:
    return LineItem(account_id, Money.from_dollars(amount), LineItemKind.EXPENSE)


def saving(account_id: str, amount: str) -> LineItem:
    return LineItem(account_id, Money.from_dollars(amount), LineItemKind.SAVINGS)


def position(account_id: str, amount: str) -> AccountNetPosition:
    return AccountNetPosition(account_id, Money.from_dollars(amount))


def sample_budget_dict() -> dict[str, Any]:
    """
    January budget across three accounts.

    Checking: +3000.00 salary, -200.00 groceries = +2800.00
    Bills:    -1500.00 rent, -100.50 electricity (manual) = -1600.50
    Savings:  -1199.50 emergency fund = -1199.50
    """
    return {
        "id": "budget-2025-01",
        "month": 1,
        "year": 2025,
        "status": "UNLOCKED",
        "accounts": [
            {"id": CHECKING, "name": "Checking"},
            {"id": BILLS, "name": "Bills"},
            {"id": SAVINGS, "name": "Savings", "description": "High-yield savings"},
        ],
        "income": [
            {"id": "inc-1", "bank_account_id": CHECKING, "name": "Salary", "amount": "3000.00"},
        ],
        "expenses": [
            {
                "id": "exp-1",
                "bank_account_id": CHECKING,
                "name": "Groceries",
                "amount": "200.00",
                "is_manual": False,
            },
            {
                "id": "exp-2",
                "bank_account_id": BILLS,
                "name": "Rent",
                "amount": "1500.00",
                "recurring_expense_id": "rec-rent",
                "deducted_at": "2025-01-01",
                "is_manual": False,
            },
            {
                "id": "exp-3",
                "bank_account_id": BILLS,
                "name": "Electricity",
                "amount": "100.50",
                "is_manual": True,
            },
        ],
        "savings": [
            {"id": "sav-1", "bank_account_id": SAVINGS, "name": "Emergency Fund", "amount": "1199.50"},
        ],
    }
