"""Todo CRUD: list with paging and filters, get, create, replace, patch, delete."""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from api.deps import require_todo
from api.helpers import json_object, page, validation_failure
from schemas import Cleared, Deleted, Todo, TodoPage, ValidationFailure
from validation import validate, validate_partial

import store

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])

_VALIDATION_RESPONSES = {400: {"model": ValidationFailure}}


@router.get("", response_model=TodoPage)
async def list_todos(
    skip: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[int, Query(ge=1, le=200)] = 50,
    category: Optional[str] = None,
    completed: Optional[bool] = None,
):
    todos = store.list_todos(category=category, completed=completed)
    return page(todos, skip, limit)


@router.get("/{todo_id}", response_model=Todo)
async def get_todo(todo: Annotated[dict, Depends(require_todo)]):
    return todo


@router.post("", status_code=201, response_model=Todo, responses=_VALIDATION_RESPONSES)
async def create_todo(request: Request):
    body = await json_object(request)
    body.setdefault("completed", False)
    result = validate(body)
    if not result.valid:
        logger.info("Rejected new todo: %s", "; ".join(result.errors))
        return validation_failure(result)
    return store.create_todo(body)


@router.put("/{todo_id}", response_model=Todo, responses=_VALIDATION_RESPONSES)
async def replace_todo(
    request: Request,
    todo: Annotated[dict, Depends(require_todo)],
):
    body = await json_object(request)
    result = validate(body)
    if not result.valid:
        return validation_failure(result)
    changes = {
        "text": body["text"],
        "completed": body["completed"],
        "category": body.get("category"),
    }
    updated = store.update_todo(todo["id"], changes)
    if updated is None:
        raise HTTPException(404, f"Todo '{todo['id']}' not found")
    return updated


@router.patch("/{todo_id}", response_model=Todo, responses=_VALIDATION_RESPONSES)
async def patch_todo(
    request: Request,
    todo: Annotated[dict, Depends(require_todo)],
):
    body = await json_object(request)
    result = validate_partial(body)
    if not result.valid:
        return validation_failure(result)
    updated = store.update_todo(todo["id"], body)
    if updated is None:
        raise HTTPException(404, f"Todo '{todo['id']}' not found")
    return updated


@router.delete("/{todo_id}", response_model=Deleted)
async def delete_todo(todo: Annotated[dict, Depends(require_todo)]):
    if not store.delete_todo(todo["id"]):
        raise HTTPException(404, f"Todo '{todo['id']}' not found")
    return {"deleted": todo["id"]}


@router.delete("", response_model=Cleared)
async def clear_todos():
    return {"deleted": store.clear_todos()}
