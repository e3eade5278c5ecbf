#!/usr/bin/env python3
"""
Todo List Models

A budget's todo list is the checklist a household works through at the start
of the month: transfers between accounts and manual payments.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from ..core.models import AccountId
from ..core.money import Money


class TodoItemType(Enum):
    """Kind of action a todo item asks for."""

    PAYMENT = "PAYMENT"  # manual expense payment
    TRANSFER = "TRANSFER"  # money movement between accounts


class TodoItemStatus(Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


@dataclass
class TodoItem:
    """
    A single action item.

    TRANSFER items have both accounts set; PAYMENT items only from_account_id.
    """

    name: str
    type: TodoItemType
    amount: Money
    from_account_id: AccountId
    to_account_id: AccountId | None = None
    status: TodoItemStatus = TodoItemStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=datetime.now)
    completed_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.type == TodoItemType.TRANSFER and self.to_account_id is None:
            raise ValueError(f"Transfer item {self.name!r} needs a to_account_id")

    @property
    def is_completed(self) -> bool:
        return self.status == TodoItemStatus.COMPLETED

    def complete(self, when: datetime | None = None) -> None:
        """Mark the item done."""
        self.status = TodoItemStatus.COMPLETED
        self.completed_at = when or datetime.now()

    def reopen(self) -> None:
        """Mark the item pending again."""
        self.status = TodoItemStatus.PENDING
        self.completed_at = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "status": self.status.value,
            "amount": str(self.amount.to_decimal()),
            "from_account_id": str(self.from_account_id),
            "to_account_id": str(self.to_account_id) if self.to_account_id is not None else None,
            "created_at": self.created_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
        }


@dataclass(frozen=True)
class TodoSummary:
    total_items: int
    pending_items: int
    completed_items: int

    def to_dict(self) -> dict[str, int]:
        return {
            "total_items": self.total_items,
            "pending_items": self.pending_items,
            "completed_items": self.completed_items,
        }


@dataclass
class TodoList:
    """All action items generated for one budget."""

    budget_id: str
    items: list[TodoItem] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def summary(self) -> TodoSummary:
        """Count total, pending and completed items."""
        completed = sum(1 for item in self.items if item.is_completed)
        return TodoSummary(
            total_items=len(self.items),
            pending_items=len(self.items) - completed,
            completed_items=completed,
        )

    def items_of_type(self, item_type: TodoItemType) -> list[TodoItem]:
        return [item for item in self.items if item.type == item_type]

    def find(self, item_id: str) -> TodoItem:
        """
        Get an item by id.

        Raises:
            KeyError: If no item has that id
        """
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "budget_id": self.budget_id,
            "created_at": self.created_at.isoformat(),
            "items": [item.to_dict() for item in self.items],
            "summary": self.summary().to_dict(),
        }
