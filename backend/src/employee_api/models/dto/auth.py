"""Authentication DTOs."""

from pydantic import BaseModel

from employee_api.models.domain.user import User


class AuthPayload(BaseModel):
    """Login result: an access token and the authenticated user."""

    token: str
    user: User
