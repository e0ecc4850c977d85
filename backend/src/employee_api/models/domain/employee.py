"""Employee domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class Employee(BaseModel):
    """Employee domain model."""

    id: str
    first_name: str
    last_name: str
    email: str
    gender: str
    designation: str
    salary: float
    date_of_joining: str
    department: str
    employee_photo: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "Employee":
        """Build an employee from a stored document."""
        data = {key: value for key, value in document.items() if key != "_id"}
        return cls(id=str(document["_id"]), **data)
