"""Employee service for managing employee records."""

import logging

from pymongo.asynchronous.database import AsyncDatabase

from employee_api.constants.validation import (
    EMPLOYEE_DELETED_MESSAGE,
    EMPLOYEE_REQUIRED_FIELDS,
    EMPLOYEE_UPDATABLE_FIELDS,
)
from employee_api.exceptions import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    InvalidArgumentError,
    NotFoundError,
    ValidationError,
)
from employee_api.models.domain.employee import Employee
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.utils.validation import (
    is_blank,
    require_email,
    require_iso_date,
    require_object_id,
    require_positive_number,
    require_string,
    validate_image_url,
)

logger = logging.getLogger(__name__)

INVALID_ID_MESSAGE = "Invalid employee ID"


class EmployeeService:
    """Service for employee operations."""

    def __init__(self, db: AsyncDatabase) -> None:
        """Initialize service with database handle."""
        self.db = db
        self.employee_repo = EmployeeRepository(db)

    async def list_employees(self) -> list[Employee]:
        """List every employee.

        Returns:
            All employees; an empty store yields an empty list
        """
        return await self.employee_repo.find()

    async def get_employee(self, employee_id: str) -> Employee:
        """Get employee by ID.

        Args:
            employee_id: Employee identifier

        Returns:
            The employee

        Raises:
            ValidationError: If the ID is malformed
            EmployeeNotFoundError: If no employee has this ID
        """
        require_object_id(employee_id, INVALID_ID_MESSAGE)

        employee = await self.employee_repo.get_by_id(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    async def search_employees(
        self,
        designation: str | None = None,
        department: str | None = None,
    ) -> list[Employee]:
        """Search employees by designation and/or department.

        An empty result is reported as NotFoundError rather than an empty
        list, unlike list_employees.

        Args:
            designation: Exact designation to match
            department: Exact department to match

        Returns:
            Matching employees (never empty)

        Raises:
            InvalidArgumentError: If neither filter is given
            NotFoundError: If nothing matches
        """
        if not designation and not department:
            raise InvalidArgumentError("'designation' or 'department' must be provided.")

        employees = await self.employee_repo.search(designation=designation, department=department)
        if not employees:
            raise NotFoundError(
                "No employees found matching the given criteria.",
                {"designation": designation, "department": department},
            )
        return employees

    async def create_employee(self, data: EmployeeCreate) -> Employee:
        """Create an employee.

        Args:
            data: Employee creation data

        Returns:
            Created employee with generated ID and timestamps

        Raises:
            ValidationError: If a field is missing or malformed
            EmployeeAlreadyExistsError: If the email is taken
        """
        # A zero salary counts as missing, not as a non-positive number
        missing = [
            field
            for field in EMPLOYEE_REQUIRED_FIELDS
            if is_blank(getattr(data, field)) or (field == "salary" and data.salary == 0)
        ]
        if missing:
            raise ValidationError("All fields are required", {"missing": missing})

        require_email(data.email, "Invalid email format")
        require_positive_number(data.salary, "Salary must be a positive number")
        require_iso_date(
            data.date_of_joining,
            "Invalid date format for date_of_joining. Expected format: YYYY-MM-DD",
        )
        employee_photo = validate_image_url(data.employee_photo, "Invalid URL for employee photo")

        # Fast path only; the unique index on email is the real guarantee
        if await self.employee_repo.email_exists(data.email):
            raise EmployeeAlreadyExistsError(data.email)

        employee = await self.employee_repo.create(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            gender=data.gender,
            designation=data.designation,
            salary=data.salary,
            date_of_joining=data.date_of_joining,
            department=data.department,
            employee_photo=employee_photo,
        )
        logger.info(f"Created employee {employee.id}")
        return employee

    async def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Employee:
        """Update an employee.

        Only first_name, last_name, designation, salary and department are
        written; email, gender, date_of_joining and employee_photo never change.

        Args:
            employee_id: Employee identifier
            data: Employee update data

        Returns:
            Updated employee

        Raises:
            ValidationError: If the ID or a field is malformed
            EmployeeNotFoundError: If no employee has this ID
        """
        require_object_id(employee_id, INVALID_ID_MESSAGE)
        require_string(data.first_name, "First name is required")
        require_string(data.last_name, "Last name is required")
        require_string(data.designation, "Designation is required")
        require_positive_number(data.salary, "Salary must be a positive number")
        require_string(data.department, "Department is required")

        employee = await self.employee_repo.update(
            employee_id,
            **data.model_dump(include=set(EMPLOYEE_UPDATABLE_FIELDS)),
        )
        if employee is None:
            raise EmployeeNotFoundError(employee_id)

        logger.info(f"Updated employee {employee_id}")
        return employee

    async def delete_employee(self, employee_id: str) -> str:
        """Delete an employee permanently.

        Args:
            employee_id: Employee identifier

        Returns:
            Confirmation message

        Raises:
            ValidationError: If the ID is malformed
            EmployeeNotFoundError: If no employee has this ID
        """
        require_object_id(employee_id, INVALID_ID_MESSAGE)

        if not await self.employee_repo.delete(employee_id):
            raise EmployeeNotFoundError(employee_id)

        logger.info(f"Deleted employee {employee_id}")
        return EMPLOYEE_DELETED_MESSAGE
