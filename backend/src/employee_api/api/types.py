"""GraphQL output types."""

from datetime import datetime

import strawberry

from employee_api.models.domain.employee import Employee
from employee_api.models.domain.user import User
from employee_api.models.dto.auth import AuthPayload


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@strawberry.type(name="Employee")
class EmployeeType:
    """An employee record."""

    id: strawberry.ID
    first_name: str
    last_name: str
    email: str
    gender: str
    designation: str
    salary: float
    date_of_joining: str
    department: str
    employee_photo: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_domain(cls, employee: Employee) -> "EmployeeType":
        return cls(
            id=strawberry.ID(employee.id),
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
            gender=employee.gender,
            designation=employee.designation,
            salary=employee.salary,
            date_of_joining=employee.date_of_joining,
            department=employee.department,
            employee_photo=employee.employee_photo,
            created_at=_isoformat(employee.created_at),
            updated_at=_isoformat(employee.updated_at),
        )


@strawberry.type(name="User")
class UserType:
    """A user account. The password hash is never exposed."""

    id: strawberry.ID
    username: str
    email: str
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_domain(cls, user: User) -> "UserType":
        return cls(
            id=strawberry.ID(user.id),
            username=user.username,
            email=user.email,
            created_at=_isoformat(user.created_at),
            updated_at=_isoformat(user.updated_at),
        )


@strawberry.type(name="AuthPayload")
class AuthPayloadType:
    """Login result."""

    token: str
    user: UserType

    @classmethod
    def from_domain(cls, payload: AuthPayload) -> "AuthPayloadType":
        return cls(token=payload.token, user=UserType.from_domain(payload.user))
