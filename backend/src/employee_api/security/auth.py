"""Token issuance and verification."""

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from employee_api.config import Settings, get_settings
from employee_api.exceptions import UnauthorizedError
from employee_api.utils.security_events import SecurityEventType, log_security_event


class TokenService:
    """Issues and verifies signed, time-limited access tokens.

    Tokens are self-contained: validity is the signature plus the expiry
    claim, there is no server-side session or revocation list.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(hours=1)) -> None:
        """Initialize service with the signing configuration."""
        self._secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(hours=settings.jwt_expiration_hours),
        )

    def create_access_token(self, subject_id: str) -> str:
        """Create a JWT access token.

        Args:
            subject_id: Identifier of the authenticated user

        Returns:
            JWT token string
        """
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + self.expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict[str, Any]:
        """Decode and verify a JWT token.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            UnauthorizedError: If the signature is invalid or the token expired
        """
        try:
            return jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise UnauthorizedError("Invalid or expired token") from e


@lru_cache
def get_token_service() -> TokenService:
    """Get the token service configured from settings."""
    return TokenService.from_settings(get_settings())


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(HTTPBearer(auto_error=False))] = None,
) -> str | None:
    """Resolve the optional bearer token to a user id.

    An invalid or expired token is logged and the request proceeds as
    anonymous.

    Args:
        credentials: HTTP Bearer credentials, if any were sent

    Returns:
        The token subject, or None for anonymous requests
    """
    if credentials is None:
        return None

    try:
        payload = get_token_service().decode_token(credentials.credentials)
    except UnauthorizedError:
        log_security_event(SecurityEventType.TOKEN_REJECTED, success=False)
        return None

    return payload.get("sub")
