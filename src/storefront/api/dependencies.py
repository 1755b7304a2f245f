"""Request-scoped dependencies."""

from fastapi import Header

from storefront.auth.identity import Identity, verify_identity
from storefront.errors import Unauthorized
from storefront.utils.logging import add_context


async def current_identity(authorization: str | None = Header(default=None)) -> Identity:
    """Resolve the `Authorization: Bearer <token>` header into an Identity."""
    scheme, _, credential = (authorization or "").partition(" ")
    if scheme.lower() != "bearer" or not credential.strip():
        raise Unauthorized()
    identity = verify_identity(credential.strip())
    add_context(user_id=identity.user_id)
    return identity
