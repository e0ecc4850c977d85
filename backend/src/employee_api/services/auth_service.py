"""Authentication service."""

import logging

from pymongo.asynchronous.database import AsyncDatabase

from employee_api.constants.validation import MAX_PASSWORD_BYTES
from employee_api.exceptions import (
    UnauthorizedError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from employee_api.models.domain.user import User
from employee_api.models.dto.auth import AuthPayload
from employee_api.repositories.user_repository import UserRepository
from employee_api.security.auth import TokenService, get_token_service
from employee_api.security.password import PasswordService, get_password_service
from employee_api.utils.security_events import SecurityEventType, log_security_event
from employee_api.utils.validation import (
    is_blank,
    require_email,
    require_max_bytes,
    require_string,
)

logger = logging.getLogger(__name__)

PASSWORD_TOO_LONG_MESSAGE = f"Password cannot be longer than {MAX_PASSWORD_BYTES} bytes"


class AuthService:
    """Service for signup and login."""

    def __init__(
        self,
        db: AsyncDatabase,
        password_service: PasswordService | None = None,
        token_service: TokenService | None = None,
    ) -> None:
        """Initialize service with database handle and credential services."""
        self.db = db
        self.user_repo = UserRepository(db)
        self.password_service = password_service or get_password_service()
        self.token_service = token_service or get_token_service()

    async def signup(self, username: str | None, email: str | None, password: str | None) -> User:
        """Register a new user.

        Args:
            username: Unique username
            email: Unique email address
            password: Plain text password, stored only as a bcrypt hash

        Returns:
            Created user

        Raises:
            ValidationError: If a field is missing or malformed
            UserAlreadyExistsError: If the username or email is taken
        """
        require_string(username, "Username cannot be empty")
        require_email(email, "Please provide a valid email")
        require_string(password, "Password is required")
        require_max_bytes(password, MAX_PASSWORD_BYTES, PASSWORD_TOO_LONG_MESSAGE)

        # Fast path only; unique indexes on username and email are the real guarantee
        if await self.user_repo.get_by_username_or_email(username, email) is not None:
            raise UserAlreadyExistsError(username, email)

        password_hash = self.password_service.hash_password(password)
        user = await self.user_repo.create_user(username, email, password_hash)

        log_security_event(SecurityEventType.USER_CREATED, user_id=user.id, username=username)
        return user

    async def login(
        self,
        username: str | None,
        password: str | None,
        email: str | None = None,
    ) -> AuthPayload:
        """Authenticate with username (or email) and password.

        The identifier is matched against both the username and the email of
        stored users, so either may be supplied in ``username``. ``email`` is
        used as the identifier only when ``username`` is blank.

        Args:
            username: Username or email
            password: Plain text password
            email: Alternative identifier

        Returns:
            AuthPayload with a signed token and the user

        Raises:
            ValidationError: If the identifier or password is missing or too long
            UserNotFoundError: If no user matches the identifier
            UnauthorizedError: If the password is wrong
        """
        identifier = email if is_blank(username) and not is_blank(email) else username
        require_string(identifier, "Username is required")
        require_string(password, "Password is required")
        require_max_bytes(password, MAX_PASSWORD_BYTES, PASSWORD_TOO_LONG_MESSAGE)

        user = await self.user_repo.get_by_username_or_email(identifier)
        if user is None:
            log_security_event(
                SecurityEventType.LOGIN_FAILED,
                details={"reason": "unknown_user"},
                success=False,
            )
            raise UserNotFoundError(identifier)

        if not self.password_service.verify_password(password, user.password_hash):
            log_security_event(
                SecurityEventType.LOGIN_FAILED,
                user_id=user.id,
                details={"reason": "incorrect_password"},
                success=False,
            )
            raise UnauthorizedError("Incorrect password")

        token = self.token_service.create_access_token(user.id)
        log_security_event(SecurityEventType.LOGIN_SUCCESS, user_id=user.id)
        return AuthPayload(token=token, user=user)
