"""Centralized validation constants for the employee API.

This module provides a single source of truth for the input patterns and
fixed messages used by the validation rules and services.
"""

import re
from typing import Final

# =============================================================================
# Input Patterns
# =============================================================================

# <non-space>+@<non-space>+.<non-space>+
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"\S+@\S+\.\S+")

# YYYY-MM-DD, format only (no calendar check)
ISO_DATE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)

# Store identifier (MongoDB ObjectId hex form)
OBJECT_ID_PATTERN: Final[re.Pattern[str]] = re.compile(r"[0-9a-fA-F]{24}")

IMAGE_EXTENSIONS: Final[tuple[str, ...]] = ("jpg", "jpeg", "png", "gif", "bmp", "webp", "svg")

IMAGE_URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"https?://[^\s$.?#].[^\s]*\.(?:" + "|".join(IMAGE_EXTENSIONS) + r")",
    re.IGNORECASE,
)

# =============================================================================
# Employee Constants
# =============================================================================

EMPLOYEE_REQUIRED_FIELDS: Final[tuple[str, ...]] = (
    "first_name",
    "last_name",
    "email",
    "gender",
    "designation",
    "salary",
    "date_of_joining",
    "department",
)

EMPLOYEE_UPDATABLE_FIELDS: Final[tuple[str, ...]] = (
    "first_name",
    "last_name",
    "designation",
    "salary",
    "department",
)

EMPLOYEE_DELETED_MESSAGE: Final[str] = "Employee successfully deleted"

# =============================================================================
# Password Constants
# =============================================================================

# bcrypt only hashes the first 72 bytes and refuses longer input
MAX_PASSWORD_BYTES: Final[int] = 72

# =============================================================================
# Collection Names
# =============================================================================

USERS_COLLECTION: Final[str] = "users"
EMPLOYEES_COLLECTION: Final[str] = "employees"
