"""Domain models package."""

from employee_api.models.domain.employee import Employee
from employee_api.models.domain.user import User

__all__ = [
    "Employee",
    "User",
]
