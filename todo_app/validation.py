"""Ordered field checks shared by request schemas and route dependencies.

Every check raises ``ValidationError`` on the first failure, so a request
yields exactly one error message: the one from the earliest failing check.
"""

import re
from typing import Any

from todo_app.errors import ValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

MIN_PASSWORD_LENGTH = 6
MAX_EMOJI_LENGTH = 32
MAX_PAGE_SIZE = 100
DEFAULT_PAGE_SIZE = 20


def require_text(value: Any, label: str, blank_message: str | None = None) -> str:
    """Presence, type and emptiness-after-trim, in that order. Returns the trimmed text."""
    if value is None:
        raise ValidationError(f"{label} is required")
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    text = value.strip()
    if not text:
        raise ValidationError(blank_message or f"{label} is required")
    return text


def optional_text(value: Any, label: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{label} must be a string")
    return value


def require_bool(value: Any, label: str) -> bool:
    # bool only; "true" or 1 are rejected rather than coerced
    if not isinstance(value, bool):
        raise ValidationError(f"{label} must be a boolean")
    return value


def require_id(value: Any, label: str) -> str:
    if not isinstance(value, str) or not UUID_PATTERN.match(value):
        raise ValidationError(f"Invalid {label}")
    return value.lower()


def require_email(value: Any) -> str:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
        raise ValidationError("Invalid email format")
    return value.strip().lower()


def require_password(value: Any) -> str:
    if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return value


def require_credentials(data: Any) -> None:
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body")
    if not data.get("email") or not data.get("password"):
        raise ValidationError("Email and password are required")


def parse_page(value: str | None) -> int:
    if value is None:
        return 1
    try:
        page = int(value, 10)
    except ValueError:
        raise ValidationError("page must be a positive integer")
    if page < 1:
        raise ValidationError("page must be a positive integer")
    return page


def parse_limit(value: str | None) -> int:
    if value is None:
        return DEFAULT_PAGE_SIZE
    try:
        limit = int(value, 10)
    except ValueError:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
    if not 1 <= limit <= MAX_PAGE_SIZE:
        raise ValidationError(f"limit must be between 1 and {MAX_PAGE_SIZE}")
    return limit
