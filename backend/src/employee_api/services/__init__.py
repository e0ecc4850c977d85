"""Services package."""

from employee_api.services.auth_service import AuthService
from employee_api.services.employee_service import EmployeeService

__all__ = [
    "AuthService",
    "EmployeeService",
]
