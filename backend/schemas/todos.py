"""Response models for the Todo API."""

from typing import Optional

from pydantic import BaseModel


class Todo(BaseModel):
    id: str
    text: str
    completed: bool
    category: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class TodoPage(BaseModel):
    items: list[Todo]
    total: int
    skip: int
    limit: int


class Deleted(BaseModel):
    deleted: str


class Cleared(BaseModel):
    deleted: int


class ValidationFailure(BaseModel):
    detail: str = "Validation failed"
    errors: list[str]
