#!/usr/bin/env python3
"""Tests for budget snapshot models."""

from datetime import date
from decimal import Decimal

import pytest

from budget_ledger.budget import Budget, BudgetExpense, BudgetIncome, BudgetStatus
from budget_ledger.core.models import LineItemKind
from budget_ledger.core.money import Money
from tests.fixtures.budget_samples import BILLS, CHECKING, SAVINGS


class TestBudgetFromDict:
    def test_sample_budget(self, budget: Budget):
        assert budget.id == "budget-2025-01"
        assert budget.label == "2025-01"
        assert budget.status == BudgetStatus.UNLOCKED
        assert [a.name for a in budget.accounts] == ["Checking", "Bills", "Savings"]
        assert budget.expenses[1].deducted_at == date(2025, 1, 1)
        assert budget.expenses[1].recurring_expense_id == "rec-rent"

    def test_totals(self, budget: Budget):
        assert budget.total_income == Money.from_dollars("3000.00")
        assert budget.total_expenses == Money.from_dollars("1800.50")
        assert budget.total_savings == Money.from_dollars("1199.50")
        assert budget.balance.is_zero()

    def test_amounts_accept_decimals_and_ints(self):
        income = BudgetIncome.from_dict(
            {"id": "i", "bank_account_id": "A", "name": "Gift", "amount": Decimal("12.345")}
        )
        assert income.amount.to_decimal() == Decimal("12.345")
        income = BudgetIncome.from_dict({"id": "i", "bank_account_id": "A", "name": "Gift", "amount": 50})
        assert income.amount == Money.from_dollars("50")

    def test_float_amount_is_rejected(self):
        with pytest.raises(TypeError):
            BudgetIncome.from_dict({"id": "i", "bank_account_id": "A", "name": "Gift", "amount": 12.5})

    @pytest.mark.parametrize("collection", ["income", "expenses", "savings"])
    def test_null_bank_account_is_rejected(self, budget_dict, collection):
        budget_dict[collection][0]["bank_account_id"] = None
        with pytest.raises(ValueError, match="bank_account_id"):
            Budget.from_dict(budget_dict)

    def test_invalid_month(self, budget_dict):
        budget_dict["month"] = 13
        with pytest.raises(ValueError, match="month"):
            Budget.from_dict(budget_dict)

    def test_round_trip_through_dict(self, budget: Budget):
        assert Budget.from_dict(budget.to_dict()) == budget


class TestBudgetHelpers:
    def test_line_items(self, budget: Budget):
        income, expenses, savings = budget.line_items()

        assert [(i.account_id, i.kind) for i in income] == [(CHECKING, LineItemKind.INCOME)]
        assert [e.account_id for e in expenses] == [CHECKING, BILLS, BILLS]
        assert all(e.kind == LineItemKind.EXPENSE for e in expenses)
        assert [(s.account_id, s.amount, s.kind) for s in savings] == [
            (SAVINGS, Money.from_dollars("1199.50"), LineItemKind.SAVINGS)
        ]

    def test_manual_expenses(self, budget: Budget):
        assert [e.name for e in budget.manual_expenses()] == ["Electricity"]

    def test_account_name_falls_back_to_id(self, budget: Budget):
        assert budget.account_name(CHECKING) == "Checking"
        assert budget.account_name("acct-unknown") == "acct-unknown"

    def test_expense_defaults(self):
        expense = BudgetExpense(id="e", bank_account_id="A", name="Rent", amount=Money.from_dollars("1"))
        assert expense.is_manual is False
        assert expense.deducted_at is None
