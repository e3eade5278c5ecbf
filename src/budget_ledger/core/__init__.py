"""
Core Utilities Package

Shared value types and utilities used by the transfer engine, budget
snapshots and the todo list.

This package provides:
- Exact decimal currency handling (Money)
- Line item, net position and transfer plan models
- Configuration management for environment-specific settings
- JSON helpers that keep decimal precision
"""

from .config import (
    Config,
    Environment,
    get_config,
    get_data_dir,
    get_transfer_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    format_dollars,
    parse_dollars,
    sum_amounts,
    to_decimal,
    validate_sum_equals_total,
)
from .models import (
    AccountId,
    AccountNetPosition,
    LineItem,
    LineItemKind,
    TransferPlan,
)
from .money import Money

__all__ = [
    "AccountId",
    "AccountNetPosition",
    # Configuration
    "Config",
    "Environment",
    "LineItem",
    "LineItemKind",
    "Money",
    "TransferPlan",
    # Currency utilities
    "format_dollars",
    "get_config",
    "get_data_dir",
    "get_transfer_config",
    "is_development",
    "is_production",
    "is_test",
    "parse_dollars",
    "reload_config",
    "sum_amounts",
    "to_decimal",
    "validate_sum_equals_total",
]
