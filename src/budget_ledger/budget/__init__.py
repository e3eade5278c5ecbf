"""
Budget Snapshot Package

Models for a monthly budget and its entries, plus JSON loading.
"""

from .loader import BudgetLoadError, load_budget, save_budget
from .models import (
    BankAccount,
    Budget,
    BudgetExpense,
    BudgetIncome,
    BudgetSavings,
    BudgetStatus,
)

__all__ = [
    "BankAccount",
    "Budget",
    "BudgetExpense",
    "BudgetIncome",
    "BudgetLoadError",
    "BudgetSavings",
    "BudgetStatus",
    "load_budget",
    "save_budget",
]
