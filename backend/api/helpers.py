"""Shared helpers for API routes (body parsing, validation replies, paging)."""

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from validation import ValidationResult


async def json_object(request: Request) -> dict:
    """Parse the request body, which must be a JSON object, or raise 400."""
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        raise HTTPException(400, "body must be a JSON object")
    return body


def validation_failure(result: ValidationResult) -> JSONResponse:
    return JSONResponse({"detail": "Validation failed", "errors": result.errors}, status_code=400)


def page(items: list, skip: int, limit: int) -> dict:
    """Slice `items`; total is counted before slicing."""
    return {
        "items": items[skip:skip + limit],
        "total": len(items),
        "skip": skip,
        "limit": limit,
    }
