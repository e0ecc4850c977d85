"""Employee DTOs."""

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """DTO for creating an employee.

    Fields are optional at this layer so the service can report missing
    values with its own messages.
    """

    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    email: str | None = Field(default=None, description="Employee email address, unique")
    gender: str | None = Field(default=None, description="Gender, free-form")
    designation: str | None = Field(default=None, description="Job designation")
    salary: float | None = Field(default=None, description="Salary, must be positive")
    date_of_joining: str | None = Field(default=None, description="Joining date as YYYY-MM-DD")
    department: str | None = Field(default=None, description="Department name")
    employee_photo: str | None = Field(default=None, description="Optional http(s) image URL")


class EmployeeUpdate(BaseModel):
    """DTO for updating an employee. Email and photo are not updatable."""

    first_name: str | None = Field(default=None, description="First name")
    last_name: str | None = Field(default=None, description="Last name")
    designation: str | None = Field(default=None, description="Job designation")
    salary: float | None = Field(default=None, description="Salary, must be positive")
    department: str | None = Field(default=None, description="Department name")
