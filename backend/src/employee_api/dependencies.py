"""Dependency injection factories for FastAPI.

Services are built per request around the shared database handle.
"""

from fastapi import Depends
from pymongo.asynchronous.database import AsyncDatabase

from employee_api.database import get_db
from employee_api.services.auth_service import AuthService
from employee_api.services.employee_service import EmployeeService


def get_auth_service(db: AsyncDatabase = Depends(get_db)) -> AuthService:
    """Get AuthService instance."""
    return AuthService(db)


def get_employee_service(db: AsyncDatabase = Depends(get_db)) -> EmployeeService:
    """Get EmployeeService instance."""
    return EmployeeService(db)
