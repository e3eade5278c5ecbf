"""
Transfer Balancing Package

Computes the inter-account transfers that reconcile a budget.

Two pure stages:
- compute_net_positions: income - expenses - savings per account
- compute_transfers: greedy largest-surplus/largest-deficit matching

calculate_budget_transfers runs both over a Budget snapshot and verifies
the result.
"""

from .calculator import (
    PositionSummary,
    TransferCalculationError,
    TransferResult,
    UnbalancedBudgetError,
    calculate_budget_transfers,
    calculate_transfers,
    summarize_positions,
    verify_transfers,
)
from .matcher import compute_transfers
from .net_positions import compute_net_positions

__all__ = [
    "PositionSummary",
    "TransferCalculationError",
    "TransferResult",
    "UnbalancedBudgetError",
    "calculate_budget_transfers",
    "calculate_transfers",
    "compute_net_positions",
    "compute_transfers",
    "summarize_positions",
    "verify_transfers",
]
