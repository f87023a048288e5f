"""FastAPI dependencies for routes."""

from fastapi import HTTPException

import store


def require_todo(todo_id: str) -> dict:
    """Load todo by id or raise 404. Use as Depends(require_todo) with todo_id in path."""
    todo = store.get_todo(todo_id)
    if not todo:
        raise HTTPException(404, f"Todo '{todo_id}' not found")
    return todo
