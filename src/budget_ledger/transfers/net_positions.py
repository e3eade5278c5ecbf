#!/usr/bin/env python3
"""
Net Position Calculator

Reduces a budget's income, expense and savings entries to one signed balance
per bank account: net = income - expenses - savings.
"""

from collections.abc import Iterable
from typing import Any

from ..core.models import AccountId, AccountNetPosition
from ..core.money import Money


def _account_and_amount(item: Any) -> tuple[AccountId, Money]:
    """
    Extract (account id, amount) from a line item.

    Works with core LineItem objects and with the budget snapshot models,
    which name the account field bank_account_id.

    Raises:
        ValueError: If the account id or amount is missing
    """
    account_id = getattr(item, "account_id", None)
    if account_id is None:
        account_id = getattr(item, "bank_account_id", None)
    if account_id is None:
        raise ValueError(f"Line item has no account id: {item!r}")

    amount = getattr(item, "amount", None)
    if not isinstance(amount, Money):
        raise ValueError(f"Line item for account {account_id} has no Money amount: {item!r}")

    return account_id, amount


def compute_net_positions(
    income: Iterable[Any],
    expenses: Iterable[Any],
    savings: Iterable[Any],
) -> list[AccountNetPosition]:
    """
    Calculate the net position of every account referenced by a budget.

    Income adds to an account's total; expenses and savings subtract from it.
    Every account that appears in any collection gets a position, including
    accounts whose entries cancel out to exactly zero.

    Args:
        income: Income line items
        expenses: Expense line items
        savings: Savings line items

    Returns:
        One AccountNetPosition per account, in first-seen order

    Raises:
        ValueError: If an item lacks an account id or a Money amount
    """
    totals: dict[AccountId, Money] = {}

    def accumulate(items: Iterable[Any], negate: bool) -> None:
        for item in items:
            account_id, amount = _account_and_amount(item)
            contribution = -amount if negate else amount
            if account_id in totals:
                totals[account_id] = totals[account_id] + contribution
            else:
                totals[account_id] = contribution

    accumulate(income, negate=False)
    accumulate(expenses, negate=True)
    accumulate(savings, negate=True)

    return [AccountNetPosition(account_id, net) for account_id, net in totals.items()]
