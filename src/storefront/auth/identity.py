"""Identity verification.

Turns the raw bearer credential attached to a request into a confirmed
`Identity`. A bad credential and a credential naming a user that no longer
exists fail the same way, so callers cannot probe for accounts.
"""

from dataclasses import dataclass

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.auth.passwords import verify_password
from storefront.auth.tokens import create_access_token, decode_access_token
from storefront.errors import Unauthorized

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Identity:
    """A confirmed user, passed explicitly to every operation that needs one."""

    user_id: str
    email: str


@dataclass(frozen=True)
class AuthData:
    user_id: str
    token: str


def verify_identity(credential: str | None) -> Identity:
    if not credential:
        raise Unauthorized()

    user_id = decode_access_token(credential)
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        logger.info("Credential refers to an unknown user", user_id=user_id)
        raise Unauthorized() from None

    return Identity(user_id=str(user.id), email=user.email)


def login(email: str, password: str) -> AuthData:
    """Check credentials and issue a bearer token."""
    user = current_domain.repository_for(User).find_by_email((email or "").lower())
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Failed login attempt", email=email)
        raise Unauthorized("Invalid email or password")

    token = create_access_token(str(user.id), user.email)
    logger.info("User logged in", user_id=str(user.id))
    return AuthData(user_id=str(user.id), token=token)
