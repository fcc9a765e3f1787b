"""Credential checks and bearer token issuance."""

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

from identity.domain import logger
from identity.user.user import User
from shared.security import create_access_token

INVALID_CREDENTIALS = "Invalid email or password"


def authenticate(email: str, password: str) -> User:
    """Return the user owning these credentials.

    Raises ``ValidationError`` without saying which half was wrong.
    """
    user = current_domain.repository_for(User).find_by_email(email)
    if user is None or not user.check_password(password or ""):
        logger.info("authentication_failed", email=(email or "").lower())
        raise ValidationError({"credentials": [INVALID_CREDENTIALS]})
    return user


def issue_token(user: User) -> str:
    return create_access_token(str(user.id), user.email, user.role)
