"""
Todo Persistence Layer
Module facade over a RecordStore. Survives server restarts.
Structure on disk:
  data/
    todos.json   — JSON array of todo records, insertion order kept
"""

import logging
import threading
import uuid
from datetime import datetime
from typing import Optional

from config import get_settings
from repositories import RecordStore, StoreProtocol

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("text", "completed", "category")

_lock = threading.RLock()
_record_store: Optional[StoreProtocol] = None


# ── Backing store ──────────────────────────────────────────────────────

def get_record_store() -> StoreProtocol:
    """Build the default store from settings on first use."""
    global _record_store
    with _lock:
        if _record_store is None:
            settings = get_settings()
            _record_store = RecordStore(settings.TODO_DATA_DIR, settings.TODO_DATA_FILE)
            logger.info("Todo store at %s", _record_store.path)
        return _record_store


def reset_record_store() -> None:
    """Forget the default store so the next call re-reads settings."""
    global _record_store
    with _lock:
        _record_store = None


def _now() -> str:
    return datetime.utcnow().isoformat()


# ── Reads ──────────────────────────────────────────────────────────────

def list_todos(category: Optional[str] = None, completed: Optional[bool] = None) -> list[dict]:
    todos = get_record_store().load()
    if category is not None:
        todos = [t for t in todos if t.get("category") == category]
    if completed is not None:
        todos = [t for t in todos if t.get("completed") is completed]
    return todos


def get_todo(todo_id: str) -> Optional[dict]:
    for todo in get_record_store().load():
        if todo.get("id") == todo_id:
            return todo
    return None


# ── Mutations (load → mutate → save under the lock) ────────────────────

def create_todo(data: dict) -> dict:
    """Append a new todo. Caller validates `data` first."""
    now = _now()
    todo = {
        "id": uuid.uuid4().hex,
        "text": data["text"],
        "completed": data.get("completed", False),
        "category": data.get("category"),
        "created_at": now,
        "updated_at": now,
    }
    rs = get_record_store()
    with _lock:
        todos = rs.load()
        while any(t.get("id") == todo["id"] for t in todos):
            todo["id"] = uuid.uuid4().hex
        todos.append(todo)
        rs.save(todos)
    logger.info("Created todo %s", todo["id"])
    return todo


def update_todo(todo_id: str, changes: dict) -> Optional[dict]:
    """Apply text/completed/category from `changes`. None if id is unknown."""
    rs = get_record_store()
    with _lock:
        todos = rs.load()
        for todo in todos:
            if todo.get("id") == todo_id:
                break
        else:
            return None
        for key in UPDATABLE_FIELDS:
            if key in changes:
                todo[key] = changes[key]
        todo["updated_at"] = _now()
        rs.save(todos)
    logger.info("Updated todo %s", todo_id)
    return todo


def delete_todo(todo_id: str) -> bool:
    rs = get_record_store()
    with _lock:
        todos = rs.load()
        kept = [t for t in todos if t.get("id") != todo_id]
        if len(kept) == len(todos):
            return False
        rs.save(kept)
    logger.info("Deleted todo %s", todo_id)
    return True


def clear_todos() -> int:
    """Remove every todo. Returns how many were removed."""
    rs = get_record_store()
    with _lock:
        count = len(rs.load())
        rs.save([])
    logger.info("Cleared %d todos", count)
    return count
