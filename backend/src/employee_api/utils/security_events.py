"""Security event logging for authentication operations.

Events go to a dedicated ``security`` logger so they can be routed
separately from application logs.
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class SecurityEventType(str, Enum):
    """Types of security events that are logged."""

    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    USER_CREATED = "user_created"
    TOKEN_REJECTED = "token_rejected"


security_logger = logging.getLogger("security")


def log_security_event(
    event_type: SecurityEventType,
    user_id: str | None = None,
    username: str | None = None,
    details: dict[str, Any] | None = None,
    success: bool = True,
) -> None:
    """Log a security event.

    Args:
        event_type: The type of security event
        user_id: The ID of the user involved, when known
        username: The username or email the caller supplied
        details: Additional event-specific details
        success: Whether the operation succeeded
    """
    event_data: dict[str, Any] = {
        "event_type": event_type.value,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "success": success,
        "actor": {
            "user_id": user_id,
            "username": username,
        },
    }

    if details:
        event_data["details"] = details

    if success:
        security_logger.info(
            f"Security event: {event_type.value}",
            extra={"security_event": event_data},
        )
    else:
        security_logger.warning(
            f"Security event (failed): {event_type.value}",
            extra={"security_event": event_data},
        )
