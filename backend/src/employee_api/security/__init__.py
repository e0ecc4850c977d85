"""Security package."""

from employee_api.security.auth import (
    TokenService,
    get_current_user_id,
    get_token_service,
)
from employee_api.security.password import PasswordService, get_password_service

__all__ = [
    "PasswordService",
    "TokenService",
    "get_current_user_id",
    "get_password_service",
    "get_token_service",
]
