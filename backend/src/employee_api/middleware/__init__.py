"""Middleware package."""

from employee_api.middleware.error_handler import (
    generic_exception_handler,
    http_exception_handler,
)

__all__ = [
    "generic_exception_handler",
    "http_exception_handler",
]
