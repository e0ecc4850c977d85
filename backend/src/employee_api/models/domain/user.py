"""User domain model."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class User(BaseModel):
    """User domain model.

    The password hash is kept for credential checks only and is excluded
    from serialization.
    """

    id: str
    username: str
    email: str
    password_hash: str = Field(default="", exclude=True, repr=False)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        """Pydantic config."""

        from_attributes = True

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> "User":
        """Build a user from a stored document.

        Stored documents keep the hash under the ``password`` key.
        """
        return cls(
            id=str(document["_id"]),
            username=document["username"],
            email=document["email"],
            password_hash=document.get("password", ""),
            created_at=document.get("created_at"),
            updated_at=document.get("updated_at"),
        )
