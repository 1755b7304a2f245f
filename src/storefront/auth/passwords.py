"""Password hashing and policy."""

from passlib.context import CryptContext

from storefront import settings
from storefront.errors import InvalidInput

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def check_password_policy(password: str | None, field: str = "password") -> None:
    """Raise InvalidInput if the password is too short."""
    if not password or len(password) < settings.PASSWORD_MIN_LENGTH:
        raise InvalidInput(
            {field: [f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long"]}
        )
