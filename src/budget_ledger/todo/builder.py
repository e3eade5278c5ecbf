#!/usr/bin/env python3
"""
Todo List Builder

Turns a budget's transfer plan and manual expenses into a todo list.
"""

import logging
from collections.abc import Sequence

from ..budget.models import Budget
from ..core.models import TransferPlan
from .models import TodoItem, TodoItemType, TodoList

logger = logging.getLogger(__name__)


def transfer_item_name(budget: Budget, transfer: TransferPlan) -> str:
    """Display name for a transfer, e.g. 'Transfer $400.00 from Salary to Bills'."""
    return (
        f"Transfer {transfer.amount} from {budget.account_name(transfer.from_account_id)} "
        f"to {budget.account_name(transfer.to_account_id)}"
    )


def build_todo_list(budget: Budget, transfers: Sequence[TransferPlan]) -> TodoList:
    """
    Build the todo list for a budget.

    Transfers come first, in the order they were calculated, followed by one
    payment item per manual expense. Every item starts out pending.

    Args:
        budget: Budget snapshot (for account names and manual expenses)
        transfers: Transfers from calculate_budget_transfers

    Returns:
        TodoList for the budget
    """
    items: list[TodoItem] = []

    for transfer in transfers:
        items.append(
            TodoItem(
                name=transfer_item_name(budget, transfer),
                type=TodoItemType.TRANSFER,
                amount=transfer.amount,
                from_account_id=transfer.from_account_id,
                to_account_id=transfer.to_account_id,
            )
        )

    for expense in budget.manual_expenses():
        items.append(
            TodoItem(
                name=f"Pay {expense.name}",
                type=TodoItemType.PAYMENT,
                amount=expense.amount,
                from_account_id=expense.bank_account_id,
            )
        )

    logger.debug(
        "Built todo list for budget %s: %d transfers, %d payments",
        budget.id,
        len(transfers),
        len(items) - len(transfers),
    )
    return TodoList(budget_id=budget.id, items=items)
