"""Bearer token issuance and decoding."""

from datetime import UTC, datetime, timedelta

import jwt

from storefront import settings
from storefront.errors import Unauthorized


def create_access_token(user_id: str, email: str, expires_delta: timedelta | None = None) -> str:
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(hours=settings.JWT_TTL_HOURS))
    payload = {"sub": str(user_id), "email": email, "iat": now, "exp": expire}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> str:
    """Return the user id carried by a valid token, or raise Unauthorized."""
    try:
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
    except jwt.PyJWTError:
        raise Unauthorized() from None

    user_id = payload.get("sub")
    if not user_id:
        raise Unauthorized()
    return user_id
