#!/usr/bin/env python3
"""
Greedy Transfer Matcher

Turns per-account net positions into the transfers that bring every account
back to zero. Repeatedly pairs the largest remaining surplus with the largest
remaining deficit and moves min(surplus, |deficit|) between them.

Every step fully discharges at least one account, so n accounts need at most
n - 1 transfers. This is a heuristic: it is not proven to find the global
minimum transfer count for every surplus/deficit topology.

Ordering is deterministic: descending absolute amount, ties broken by
str(account_id) ascending.
"""

import heapq
import logging
from collections.abc import Iterable
from decimal import Decimal

from ..core.models import AccountId, AccountNetPosition, TransferPlan
from ..core.money import Money

logger = logging.getLogger(__name__)

# (-magnitude, tie-break key, insertion sequence, working position)
_HeapEntry = tuple[Decimal, str, int, AccountNetPosition]


class _PositionQueue:
    """Largest-magnitude-first queue of working positions."""

    def __init__(self, positions: Iterable[AccountNetPosition]):
        self._heap: list[_HeapEntry] = []
        self._sequence = 0
        for position in positions:
            self.push(position)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, position: AccountNetPosition) -> None:
        magnitude = position.net_amount.abs().to_decimal()
        entry = (magnitude.copy_negate(), str(position.account_id), self._sequence, position)
        heapq.heappush(self._heap, entry)
        self._sequence += 1

    def pop(self) -> AccountNetPosition:
        return heapq.heappop(self._heap)[-1]


def _working_copies(positions: Iterable[AccountNetPosition]) -> list[AccountNetPosition]:
    """
    Copy positions so the caller's objects are never mutated.

    Repeated account ids are merged, which keeps the surplus and deficit sets
    disjoint.
    """
    merged: dict[AccountId, Money] = {}
    for position in positions:
        if position.account_id in merged:
            merged[position.account_id] = merged[position.account_id] + position.net_amount
        else:
            merged[position.account_id] = position.net_amount
    return [AccountNetPosition(account_id, net) for account_id, net in merged.items()]


def compute_transfers(positions: Iterable[AccountNetPosition]) -> list[TransferPlan]:
    """
    Calculate the transfers needed to balance all accounts.

    Accounts already at zero are ignored. If total surplus and total deficit
    differ, whatever is left over stays unmatched and is not represented in
    the result.

    Args:
        positions: Net position per account

    Returns:
        Transfers in the order they were generated; replaying them in order
        zeroes every account of a balanced budget
    """
    working = _working_copies(positions)
    surplus = _PositionQueue(p for p in working if p.is_surplus)
    deficit = _PositionQueue(p for p in working if p.is_deficit)

    logger.debug("Matching %d surplus against %d deficit accounts", len(surplus), len(deficit))

    transfers: list[TransferPlan] = []
    while surplus and deficit:
        source = surplus.pop()
        target = deficit.pop()

        amount = min(source.net_amount, target.net_amount.abs())
        transfers.append(TransferPlan(source.account_id, target.account_id, amount))
        logger.debug("Transfer %s from %s to %s", amount, source.account_id, target.account_id)

        source.net_amount = source.net_amount - amount
        target.net_amount = target.net_amount + amount

        # At least one side is now exactly zero and drops out
        if not source.is_balanced:
            surplus.push(source)
        if not target.is_balanced:
            deficit.push(target)

    if surplus or deficit:
        logger.debug(
            "%d surplus and %d deficit accounts left unmatched", len(surplus), len(deficit)
        )

    return transfers
