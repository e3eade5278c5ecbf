"""
Household Budget Ledger - Account Transfer Planning

Works out the transfers a household needs to make between its bank accounts
so that every account's income, expenses and savings for a month line up.

Key Features:
- Exact decimal money handling (no floating point anywhere)
- Net position per account: income - expenses - savings
- Greedy transfer matching with deterministic ordering
- Todo lists of transfers and manual payments
- JSON budget snapshots and a command-line interface

Domain Packages:
- core: Money, line item/position/transfer models, configuration
- budget: Budget snapshot models and loader
- transfers: Net position calculator and greedy transfer matcher
- todo: Action items generated from a budget's transfers
- cli: Command-line interface

Example Usage:
    from budget_ledger import compute_net_positions, compute_transfers
    from budget_ledger.budget import load_budget
    from budget_ledger.transfers import calculate_budget_transfers
"""

__version__ = "0.1.0"
__author__ = "Household Budget Ledger Developers"

from .core.config import Environment, get_config
from .core.models import AccountNetPosition, LineItem, LineItemKind, TransferPlan
from .core.money import Money
from .transfers import calculate_budget_transfers, compute_net_positions, compute_transfers

__all__ = [
    "AccountNetPosition",
    "Environment",
    "LineItem",
    "LineItemKind",
    "Money",
    "TransferPlan",
    "calculate_budget_transfers",
    "compute_net_positions",
    "compute_transfers",
    "get_config",
]
