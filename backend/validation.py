"""
Field rules for todo records.
Every rule is checked and all violations are reported, in a fixed order.
"""

from dataclasses import dataclass, field

MAX_TEXT_LENGTH = 200

TEXT_REQUIRED = "text is required"
TEXT_TOO_LONG = "text too long"
COMPLETED_NOT_BOOL = "completed must be boolean"
CATEGORY_NOT_STR = "category must be a string"


@dataclass
class ValidationResult:
    valid: bool
    errors: list = field(default_factory=list)


def _text_errors(text) -> list[str]:
    if not isinstance(text, str) or not text.strip():
        return [TEXT_REQUIRED]
    if len(text) > MAX_TEXT_LENGTH:
        return [TEXT_TOO_LONG]
    return []


def _completed_errors(completed) -> list[str]:
    # bool only; 1/0 and "yes" are rejected
    return [] if isinstance(completed, bool) else [COMPLETED_NOT_BOOL]


def _category_errors(category) -> list[str]:
    return [] if category is None or isinstance(category, str) else [CATEGORY_NOT_STR]


def validate(record: dict) -> ValidationResult:
    """Check a full record. Missing text or completed counts as a violation."""
    errors = []
    errors += _text_errors(record.get("text"))
    errors += _completed_errors(record.get("completed"))
    errors += _category_errors(record.get("category"))
    return ValidationResult(valid=not errors, errors=errors)


def validate_partial(changes: dict) -> ValidationResult:
    """Check only the keys present in a partial update."""
    errors = []
    if "text" in changes:
        errors += _text_errors(changes["text"])
    if "completed" in changes:
        errors += _completed_errors(changes["completed"])
    if "category" in changes:
        errors += _category_errors(changes["category"])
    return ValidationResult(valid=not errors, errors=errors)
