"""
Todo List Package

Action items (transfers and manual payments) generated for a budget.
"""

from .builder import build_todo_list, transfer_item_name
from .models import TodoItem, TodoItemStatus, TodoItemType, TodoList, TodoSummary

__all__ = [
    "TodoItem",
    "TodoItemStatus",
    "TodoItemType",
    "TodoList",
    "TodoSummary",
    "build_todo_list",
    "transfer_item_name",
]
