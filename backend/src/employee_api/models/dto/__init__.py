"""Data Transfer Objects package."""

from employee_api.models.dto.auth import AuthPayload
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate

__all__ = [
    "AuthPayload",
    "EmployeeCreate",
    "EmployeeUpdate",
]
