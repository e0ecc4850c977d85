"""Domain-specific exceptions for the employee API.

These exceptions provide a clean separation between service-layer errors
and transport responses. Every error carries a stable ``code`` so callers
branch on the kind of failure instead of matching message text.
"""

from typing import Any, ClassVar


class EmployeeAPIError(Exception):
    """Base exception for all employee API errors."""

    code: ClassVar[str] = "INTERNAL_ERROR"

    def __init__(self, message: str = "An error occurred", details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(EmployeeAPIError):
    """Raised when input is missing or malformed."""

    code = "VALIDATION_ERROR"


class InvalidArgumentError(ValidationError):
    """Raised when a combination of arguments is not acceptable."""

    code = "INVALID_ARGUMENT"


# =============================================================================
# Resource Not Found Errors
# =============================================================================


class NotFoundError(EmployeeAPIError):
    """Base class for resource not found errors."""

    code = "NOT_FOUND"


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee cannot be found."""

    def __init__(self, employee_id: str | None = None) -> None:
        details = {"employee_id": employee_id} if employee_id else {}
        super().__init__("Employee not found", details)


class UserNotFoundError(NotFoundError):
    """Raised when a user cannot be found."""

    def __init__(self, identifier: str | None = None) -> None:
        details = {"identifier": identifier} if identifier else {}
        super().__init__("User not found", details)


# =============================================================================
# Conflict Errors
# =============================================================================


class ConflictError(EmployeeAPIError):
    """Base class for uniqueness conflicts."""

    code = "CONFLICT"


class EmployeeAlreadyExistsError(ConflictError):
    """Raised when trying to create an employee whose email is taken."""

    def __init__(self, email: str | None = None) -> None:
        details = {"email": email} if email else {}
        super().__init__("An employee with this email already exists", details)


class UserAlreadyExistsError(ConflictError):
    """Raised when the username or email of a new user is taken."""

    def __init__(self, username: str | None = None, email: str | None = None) -> None:
        details: dict[str, Any] = {}
        if username:
            details["username"] = username
        if email:
            details["email"] = email
        super().__init__("User already exists", details)


# =============================================================================
# Authentication Errors
# =============================================================================


class UnauthorizedError(EmployeeAPIError):
    """Raised when credentials or tokens are rejected."""

    code = "UNAUTHORIZED"


# =============================================================================
# Infrastructure Errors
# =============================================================================


class StoreError(EmployeeAPIError):
    """Raised when the document store fails for infrastructure reasons."""

    code = "STORE_ERROR"
