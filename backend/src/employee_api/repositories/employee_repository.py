"""Employee repository."""

from typing import Any

from employee_api.constants.validation import EMPLOYEES_COLLECTION
from employee_api.exceptions import ConflictError, EmployeeAlreadyExistsError
from employee_api.models.domain.employee import Employee
from employee_api.repositories.base import BaseRepository


class EmployeeRepository(BaseRepository[Employee]):
    """Repository for employee records."""

    collection_name = EMPLOYEES_COLLECTION
    model = Employee

    def _duplicate_error(self, fields: dict[str, Any]) -> ConflictError:
        return EmployeeAlreadyExistsError(fields.get("email"))

    async def email_exists(self, email: str) -> bool:
        """Check if an employee with this email exists.

        Args:
            email: Email address, matched exactly

        Returns:
            True if taken
        """
        return await self.exists({"email": email})

    async def search(
        self,
        designation: str | None = None,
        department: str | None = None,
    ) -> list[Employee]:
        """Get employees matching every given filter.

        Args:
            designation: Exact designation, or None to ignore
            department: Exact department, or None to ignore

        Returns:
            Matching employees
        """
        filter: dict[str, Any] = {}
        if designation:
            filter["designation"] = designation
        if department:
            filter["department"] = department
        return await self.find(filter)
