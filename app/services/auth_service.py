"""
app/services/auth_service.py

Purpose: Mock authentication

- Accepts any non-empty phone number
- Issues the configured mock identity and token
- Gates the citizen services on token presence
"""

from typing import Any, Optional

from app.core.config import settings
from app.core.exceptions import ValidationError, UnauthenticatedError
from app.core.logging import get_logger, LogContext
from app.models.user import User
from utils.constants import ERROR_PHONE_REQUIRED, ERROR_NOT_AUTHENTICATED
from utils.validation_utils import is_present

logger = get_logger(__name__)


def login(phone: Optional[str]) -> User:
    """
    Signs a citizen in by phone number.

    Args:
        phone: Phone number from the login form

    Returns:
        User with the phone echoed as NRC

    Raises:
        ValidationError: If phone is missing or empty
    """
    if not is_present(phone):
        raise ValidationError(ERROR_PHONE_REQUIRED)

    with LogContext(nrc=phone):
        logger.info("Mock login accepted")
        return User(name=settings.MOCK_USER_NAME, nrc=phone, token=settings.MOCK_TOKEN)


def require_token(token: Any) -> Any:
    """
    Presence check only; the token's value and type are never verified.

    Raises:
        UnauthenticatedError: If token is missing or empty
    """
    if not is_present(token):
        raise UnauthenticatedError(ERROR_NOT_AUTHENTICATED)
    return token
