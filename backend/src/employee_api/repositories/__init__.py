"""Repositories package."""

from employee_api.repositories.base import BaseRepository
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.repositories.user_repository import UserRepository

__all__ = [
    "BaseRepository",
    "EmployeeRepository",
    "UserRepository",
]
