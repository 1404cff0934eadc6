import logging
from typing import Optional

from impact_api.errors import BadRequest, Forbidden, Unauthorized
from impact_api.models.user import User

log = logging.getLogger(__name__)


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


def authenticate(*, email: Optional[str], password: Optional[str]) -> User:
    """
    Resolve credentials to an active user.

    Unknown email and wrong password produce the same error.
    """
    email = normalize_email(email)
    if not email or not password:
        raise BadRequest("Email and password required")

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        log.warning("Failed login attempt for %s", email)
        raise Unauthorized("Invalid credentials")

    if not user.is_active:
        raise Forbidden("User account disabled")

    return user
