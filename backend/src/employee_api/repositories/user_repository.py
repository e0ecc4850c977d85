"""User repository."""

from typing import Any

from employee_api.constants.validation import USERS_COLLECTION
from employee_api.exceptions import ConflictError, UserAlreadyExistsError
from employee_api.models.domain.user import User
from employee_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for user accounts."""

    collection_name = USERS_COLLECTION
    model = User

    def _duplicate_error(self, fields: dict[str, Any]) -> ConflictError:
        return UserAlreadyExistsError(fields.get("username"), fields.get("email"))

    async def get_by_username_or_email(self, username: str, email: str | None = None) -> User | None:
        """Get a user whose username or email matches.

        Args:
            username: Value compared against the username
            email: Value compared against the email (defaults to ``username``)

        Returns:
            User or None if not found
        """
        return await self.find_one(
            {"$or": [{"username": username}, {"email": email if email is not None else username}]}
        )

    async def create_user(self, username: str, email: str, password_hash: str) -> User:
        """Create a user. The hash is stored under ``password``."""
        return await self.create(username=username, email=email, password=password_hash)
