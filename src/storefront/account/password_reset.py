"""Password reset flow — request, token validation and password change.

The token value and its expiration are written together when the reset is
requested, then the reset mail is sent. Mail delivery is best-effort: the
token is already stored, and a user who receives nothing simply asks again.
"""

from datetime import timedelta

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront import settings
from storefront.account.user import User
from storefront.auth.passwords import check_password_policy, hash_password
from storefront.domain import storefront
from storefront.errors import NotFound, Unauthorized
from storefront.notifications.dispatch import send_password_reset

logger = structlog.get_logger(__name__)

RESET_CONFIRMATION = "A password reset token was sent to your email"
PASSWORD_CHANGED = "Password changed successfully"


@storefront.command(part_of="User")
class RequestPasswordReset:
    email = String(required=True, max_length=254)


@storefront.command(part_of="User")
class ValidateResetToken:
    token = String(required=True, max_length=128)


@storefront.command(part_of="User")
class ChangePassword:
    user_id = Identifier(required=True)
    password_hash = String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class PasswordResetHandler:
    @handle(RequestPasswordReset)
    def request_password_reset(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email.lower())
        if user is None:
            raise NotFound("No user with this email was found")

        token = user.issue_reset_token(timedelta(minutes=settings.RESET_TOKEN_TTL_MINUTES))
        repo.add(user)
        return {
            "user_id": str(user.id),
            "email": user.email,
            "token": token,
            "expires_at": user.reset_token_expiration,
        }

    @handle(ValidateResetToken)
    def validate_reset_token(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_reset_token(command.token)
        if user is None:
            raise Unauthorized()

        user.validate_reset_token(command.token)
        repo.add(user)
        return str(user.id)

    @handle(ChangePassword)
    def change_password(self, command):
        repo = current_domain.repository_for(User)
        try:
            user = repo.get(command.user_id)
        except ObjectNotFoundError:
            raise Unauthorized() from None

        user.change_password(command.password_hash)
        repo.add(user)
        logger.info("Password changed", user_id=str(user.id))


def reset_password(email: str) -> str:
    issued = current_domain.process(RequestPasswordReset(email=email), asynchronous=False)

    try:
        send_password_reset(
            email=issued["email"],
            token=issued["token"],
            expires_at=issued["expires_at"],
        )
    except Exception:
        logger.exception("Failed to send password reset mail", user_id=issued["user_id"])

    return RESET_CONFIRMATION


def validate_token(token: str) -> User:
    user_id = current_domain.process(ValidateResetToken(token=token), asynchronous=False)
    return current_domain.repository_for(User).get(user_id)


def change_password(user_id: str, new_password: str) -> str:
    # Unvalidated callers are rejected before the password policy is checked
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise Unauthorized() from None
    if not user.password_change_allowed():
        raise Unauthorized()

    check_password_policy(new_password, field="new_password")
    current_domain.process(
        ChangePassword(user_id=user_id, password_hash=hash_password(new_password)),
        asynchronous=False,
    )
    return PASSWORD_CHANGED
