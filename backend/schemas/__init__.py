"""Pydantic schemas for API responses."""

from .todos import (
    Cleared,
    Deleted,
    Todo,
    TodoPage,
    ValidationFailure,
)

__all__ = [
    "Cleared",
    "Deleted",
    "Todo",
    "TodoPage",
    "ValidationFailure",
]
