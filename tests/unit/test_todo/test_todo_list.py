#!/usr/bin/env python3
"""Tests for todo list models and the todo list builder."""

from datetime import datetime

import pytest

from budget_ledger.core.money import Money
from budget_ledger.todo import (
    TodoItem,
    TodoItemStatus,
    TodoItemType,
    TodoList,
    build_todo_list,
)
from budget_ledger.transfers import calculate_budget_transfers
from tests.fixtures.budget_samples import BILLS, CHECKING, SAVINGS


@pytest.mark.todo
class TestBuildTodoList:
    def test_sample_budget(self, budget):
        result = calculate_budget_transfers(budget)
        todo_list = build_todo_list(budget, result.transfers)

        assert todo_list.budget_id == budget.id
        assert [item.name for item in todo_list.items] == [
            "Transfer $1,600.50 from Checking to Bills",
            "Transfer $1,199.50 from Checking to Savings",
            "Pay Electricity",
        ]
        assert [item.type for item in todo_list.items] == [
            TodoItemType.TRANSFER,
            TodoItemType.TRANSFER,
            TodoItemType.PAYMENT,
        ]
        assert all(item.status == TodoItemStatus.PENDING for item in todo_list.items)

    def test_transfer_items_carry_accounts_and_amounts(self, budget):
        result = calculate_budget_transfers(budget)
        transfers = build_todo_list(budget, result.transfers).items_of_type(TodoItemType.TRANSFER)

        assert [(i.from_account_id, i.to_account_id, i.amount) for i in transfers] == [
            (CHECKING, BILLS, Money.from_dollars("1600.50")),
            (CHECKING, SAVINGS, Money.from_dollars("1199.50")),
        ]

    def test_payment_items_use_expense_account(self, budget):
        payments = build_todo_list(budget, []).items_of_type(TodoItemType.PAYMENT)

        assert len(payments) == 1
        assert payments[0].from_account_id == BILLS
        assert payments[0].to_account_id is None
        assert payments[0].amount == Money.from_dollars("100.50")

    def test_item_ids_are_unique(self, budget):
        result = calculate_budget_transfers(budget)
        items = build_todo_list(budget, result.transfers).items
        assert len({item.id for item in items}) == len(items)


@pytest.mark.todo
class TestTodoListModels:
    def make_list(self) -> TodoList:
        return TodoList(
            budget_id="b",
            items=[
                TodoItem("Transfer", TodoItemType.TRANSFER, Money.from_dollars("5"), "A", "B"),
                TodoItem("Pay rent", TodoItemType.PAYMENT, Money.from_dollars("7"), "A"),
            ],
        )

    def test_summary_counts(self):
        todo_list = self.make_list()
        assert todo_list.summary().to_dict() == {"total_items": 2, "pending_items": 2, "completed_items": 0}

        todo_list.items[0].complete()
        summary = todo_list.summary()
        assert (summary.pending_items, summary.completed_items) == (1, 1)

    def test_complete_and_reopen(self):
        item = self.make_list().items[1]
        when = datetime(2025, 1, 3, 9, 30)

        item.complete(when)
        assert item.is_completed
        assert item.completed_at == when

        item.reopen()
        assert item.status == TodoItemStatus.PENDING
        assert item.completed_at is None

    def test_find(self):
        todo_list = self.make_list()
        item = todo_list.items[1]
        assert todo_list.find(item.id) is item
        with pytest.raises(KeyError):
            todo_list.find("missing")

    def test_transfer_item_requires_destination(self):
        with pytest.raises(ValueError, match="to_account_id"):
            TodoItem("Transfer", TodoItemType.TRANSFER, Money.from_dollars("5"), "A")

    def test_to_dict(self):
        data = self.make_list().to_dict()
        assert data["budget_id"] == "b"
        assert data["summary"]["total_items"] == 2
        assert data["items"][0]["type"] == "TRANSFER"
        assert data["items"][0]["amount"] == "5"
        assert data["items"][1]["to_account_id"] is None
        assert data["items"][1]["completed_at"] is None
