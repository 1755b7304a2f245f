"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new user account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    name = String(required=True)
    email = String(required=True)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class PasswordResetRequested:
    """A reset token was issued to the user. The token value is never published."""

    __version__ = 1

    user_id = Identifier(required=True)
    expires_at = DateTime(required=True)


@storefront.event(part_of="User")
class ResetTokenValidated:
    """The user proved possession of a live reset token."""

    __version__ = 1

    user_id = Identifier(required=True)


@storefront.event(part_of="User")
class PasswordChanged:
    """The user's password was replaced and the reset token consumed."""

    __version__ = 1

    user_id = Identifier(required=True)
    changed_at = DateTime(required=True)
