"""Input validation rules guarding every operation.

Each rule returns the accepted value or raises ValidationError with a message
naming the field and the reason. Rules never touch the store, so callers run
them before any persistence work.
"""

import math
from typing import Any

from employee_api.constants.validation import (
    EMAIL_PATTERN,
    IMAGE_URL_PATTERN,
    ISO_DATE_PATTERN,
    OBJECT_ID_PATTERN,
)
from employee_api.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    """Check whether a raw input value counts as absent.

    None, empty strings and whitespace-only strings are blank.
    """
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_string(value: Any, message: str, strip: bool = True) -> str:
    """Require a non-empty string.

    Args:
        value: Raw input value
        message: Error message when the value is missing
        strip: Treat whitespace-only strings as missing

    Returns:
        The value unchanged

    Raises:
        ValidationError: If the value is absent, not a string or empty
    """
    if not isinstance(value, str):
        raise ValidationError(message)
    if not (value.strip() if strip else value):
        raise ValidationError(message)
    return value


def require_email(value: Any, message: str) -> str:
    """Require a string shaped like local@domain.tld."""
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        raise ValidationError(message, {"field": "email"})
    return value


def require_positive_number(value: Any, message: str) -> float:
    """Require a finite number greater than zero.

    Booleans are rejected even though Python treats them as integers.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(message, {"field": "salary"})
    if not math.isfinite(value) or value <= 0:
        raise ValidationError(message, {"field": "salary"})
    return value


def require_iso_date(value: Any, message: str) -> str:
    """Require YYYY-MM-DD text. Only the format is checked."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.fullmatch(value):
        raise ValidationError(message, {"field": "date_of_joining"})
    return value


def validate_image_url(value: Any, message: str) -> str | None:
    """Validate an optional http(s) image URL.

    Args:
        value: Raw URL or None
        message: Error message when the URL is malformed

    Returns:
        The URL, or None when no URL was given

    Raises:
        ValidationError: If a URL is given and is not an http(s) image URL
    """
    if value is None or value == "":
        return None
    if not isinstance(value, str) or not IMAGE_URL_PATTERN.fullmatch(value):
        raise ValidationError(message, {"field": "employee_photo"})
    return value


def require_object_id(value: Any, message: str) -> str:
    """Require a 24-character hexadecimal store identifier."""
    if not isinstance(value, str) or not OBJECT_ID_PATTERN.fullmatch(value):
        raise ValidationError(message, {"field": "id"})
    return value


def require_max_bytes(value: str, limit: int, message: str) -> str:
    """Require a string whose UTF-8 encoding fits in ``limit`` bytes."""
    if len(value.encode("utf-8")) > limit:
        raise ValidationError(message, {"limit": limit})
    return value
