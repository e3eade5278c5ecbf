#!/usr/bin/env python3
"""
Budget Transfer Calculator

Runs the net position calculator and the greedy matcher over a whole budget
snapshot and checks the result.

Key Features:
- One call per budget: positions, transfers and a balance summary
- Replay verification of a transfer list against its positions
- Unreconciled budgets log a warning, or raise in strict mode
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from ..budget.models import Budget
from ..core.config import get_transfer_config
from ..core.currency import sum_amounts
from ..core.models import AccountId, AccountNetPosition, TransferPlan
from ..core.money import Money
from .matcher import compute_transfers
from .net_positions import compute_net_positions

logger = logging.getLogger(__name__)


class TransferCalculationError(Exception):
    """Raised when transfer calculation fails validation"""

    pass


class UnbalancedBudgetError(TransferCalculationError):
    """Raised in strict mode when total surplus differs from total deficit"""

    pass


@dataclass(frozen=True)
class PositionSummary:
    """Aggregate view of a set of net positions."""

    total_surplus: Money
    total_deficit: Money  # magnitude, always >= 0
    surplus_accounts: int
    deficit_accounts: int

    @property
    def is_balanced(self) -> bool:
        return self.total_surplus == self.total_deficit

    @property
    def imbalance(self) -> Money:
        """Surplus minus deficit; positive means money is left over."""
        return self.total_surplus - self.total_deficit

    @property
    def max_transfers(self) -> int:
        """Upper bound on the number of transfers the matcher can emit."""
        if not self.surplus_accounts or not self.deficit_accounts:
            return 0
        return self.surplus_accounts + self.deficit_accounts - 1

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_surplus": str(self.total_surplus.to_decimal()),
            "total_deficit": str(self.total_deficit.to_decimal()),
            "surplus_accounts": self.surplus_accounts,
            "deficit_accounts": self.deficit_accounts,
            "is_balanced": self.is_balanced,
        }


@dataclass(frozen=True)
class TransferResult:
    """Positions, transfers and summary for one budget."""

    positions: list[AccountNetPosition]
    transfers: list[TransferPlan]
    summary: PositionSummary

    @property
    def total_transferred(self) -> Money:
        return Money(sum_amounts(t.amount.to_decimal() for t in self.transfers))


def _merge_by_account(positions: Iterable[AccountNetPosition]) -> dict[AccountId, Money]:
    """Combine the net amounts of repeated account ids."""
    merged: dict[AccountId, Money] = {}
    for position in positions:
        merged[position.account_id] = merged.get(position.account_id, Money.zero()) + position.net_amount
    return merged


def _sign(amount: Money) -> int:
    return int(amount.is_positive()) - int(amount.is_negative())


def summarize_positions(positions: Iterable[AccountNetPosition]) -> PositionSummary:
    """
    Summarize surplus and deficit totals.

    Args:
        positions: Net positions to summarize

    Returns:
        PositionSummary with totals and account counts
    """
    merged = _merge_by_account(positions)
    positives = [amount.to_decimal() for amount in merged.values() if amount.is_positive()]
    negatives = [amount.to_decimal() for amount in merged.values() if amount.is_negative()]

    return PositionSummary(
        total_surplus=Money(sum_amounts(positives)),
        total_deficit=Money(sum_amounts(negatives).copy_negate()),
        surplus_accounts=len(positives),
        deficit_accounts=len(negatives),
    )


def verify_transfers(
    positions: Sequence[AccountNetPosition], transfers: Sequence[TransferPlan]
) -> tuple[bool, str]:
    """
    Validate a transfer list by replaying it against the positions.

    Checks that every transfer is positive and between two different known
    accounts, that the count stays within the greedy bound, that no account
    is pushed past zero, and that a balanced set of positions ends at zero
    everywhere.

    Args:
        positions: Net positions the transfers were computed from
        transfers: Transfers in emission order

    Returns:
        Tuple of (is_valid, message)
    """
    summary = summarize_positions(positions)

    balances = _merge_by_account(positions)
    starting_signs = {account_id: _sign(amount) for account_id, amount in balances.items()}

    if len(transfers) > summary.max_transfers:
        return False, f"{len(transfers)} transfers exceeds bound of {summary.max_transfers}"

    for i, transfer in enumerate(transfers):
        if not transfer.amount.is_positive():
            return False, f"Transfer {i} amount is not positive: {transfer.amount}"
        if transfer.from_account_id == transfer.to_account_id:
            return False, f"Transfer {i} moves money from {transfer.from_account_id} to itself"
        for account_id in (transfer.from_account_id, transfer.to_account_id):
            if account_id not in balances:
                return False, f"Transfer {i} references unknown account {account_id}"

        balances[transfer.from_account_id] = balances[transfer.from_account_id] - transfer.amount
        balances[transfer.to_account_id] = balances[transfer.to_account_id] + transfer.amount

    for account_id, remaining in balances.items():
        sign = _sign(remaining)
        if sign and sign != starting_signs[account_id]:
            return False, f"Account {account_id} overshoots zero: {remaining}"

    total = sum_amounts(t.amount.to_decimal() for t in transfers)
    if summary.is_balanced:
        unsettled = [account_id for account_id, remaining in balances.items() if not remaining.is_zero()]
        if unsettled:
            return False, f"Accounts not settled after replay: {unsettled}"
        if total != summary.total_surplus.to_decimal():
            return False, f"Transferred {Money(total)} but total surplus is {summary.total_surplus}"

    return True, "Transfers are valid"


def calculate_transfers(
    income: Iterable[Any],
    expenses: Iterable[Any],
    savings: Iterable[Any],
    strict: bool | None = None,
) -> TransferResult:
    """
    Calculate net positions and transfers from raw line item collections.

    Args:
        income: Income line items
        expenses: Expense line items
        savings: Savings line items
        strict: Raise on an unbalanced budget. Defaults to
                config.transfers.strict_balance

    Returns:
        TransferResult with positions, transfers and summary

    Raises:
        UnbalancedBudgetError: In strict mode, if surplus and deficit differ
        TransferCalculationError: If the generated transfers fail verification
    """
    if strict is None:
        strict = get_transfer_config().strict_balance

    positions = compute_net_positions(income, expenses, savings)
    summary = summarize_positions(positions)

    if not summary.is_balanced:
        message = (
            f"Budget is not reconciled: surplus {summary.total_surplus} "
            f"vs deficit {summary.total_deficit} (difference {summary.imbalance})"
        )
        if strict:
            raise UnbalancedBudgetError(message)
        logger.warning(message)

    transfers = compute_transfers(positions)

    is_valid, message = verify_transfers(positions, transfers)
    if not is_valid:
        raise TransferCalculationError(message)

    return TransferResult(positions=positions, transfers=transfers, summary=summary)


def calculate_budget_transfers(budget: Budget, strict: bool | None = None) -> TransferResult:
    """
    Calculate the transfers that balance every account of a budget.

    Args:
        budget: Budget snapshot
        strict: Raise on an unbalanced budget instead of logging a warning

    Returns:
        TransferResult for the budget
    """
    logger.info("Calculating transfers for budget %s (%s)", budget.id, budget.label)
    income, expenses, savings = budget.line_items()
    result = calculate_transfers(income, expenses, savings, strict=strict)
    logger.info(
        "Budget %s needs %d transfers totaling %s",
        budget.id,
        len(result.transfers),
        result.total_transferred,
    )
    return result
