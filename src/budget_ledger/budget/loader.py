#!/usr/bin/env python3
"""
Budget Snapshot Loader

Loads a budget snapshot (accounts plus income, expense and savings entries)
from a local JSON file.

Functions:
- load_budget: Load one budget as a domain model
- save_budget: Write a budget back out in the same format
"""

import logging
from decimal import InvalidOperation
from pathlib import Path

from ..core.json_utils import read_json, write_json
from .models import Budget

logger = logging.getLogger(__name__)


class BudgetLoadError(ValueError):
    """Raised when a budget snapshot file is malformed."""

    pass


def load_budget(path: str | Path) -> Budget:
    """
    Load a budget snapshot from JSON.

    Accepts either the budget object itself or a wrapper of the form
    ``{"budget": {...}}``.

    Args:
        path: Path to the snapshot file

    Returns:
        Budget domain model

    Raises:
        FileNotFoundError: If the file does not exist
        BudgetLoadError: If the file is not a valid budget snapshot
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Budget snapshot not found: {path}")

    try:
        data = read_json(path)
    except ValueError as e:
        raise BudgetLoadError(f"Invalid JSON in {path}: {e}") from e

    if isinstance(data, dict) and isinstance(data.get("budget"), dict):
        data = data["budget"]

    if not isinstance(data, dict):
        raise BudgetLoadError(f"Expected a JSON object in {path}, got {type(data).__name__}")

    try:
        budget = Budget.from_dict(data)
    except KeyError as e:
        raise BudgetLoadError(f"Missing field {e} in {path}") from e
    except (TypeError, ValueError, InvalidOperation) as e:
        raise BudgetLoadError(f"Invalid budget data in {path}: {e}") from e

    logger.debug(
        "Loaded budget %s (%s): %d income, %d expenses, %d savings",
        budget.id,
        budget.label,
        len(budget.income),
        len(budget.expenses),
        len(budget.savings),
    )
    return budget


def save_budget(budget: Budget, path: str | Path) -> None:
    """Write a budget snapshot to JSON."""
    write_json(path, budget.to_dict())
