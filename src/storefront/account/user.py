"""User aggregate — credentials, owned products and the password reset token.

Reset token lifecycle:
    no token → issued (value + expiration set together) → validated →
    consumed by a password change (value, expiration cleared, flag reset)

An expired token is rejected on validation and stays until it is
overwritten by a new request.
"""

import json
import secrets
from datetime import UTC, datetime, timedelta

from protean.fields import Boolean, DateTime, String, Text

from storefront.account.events import (
    PasswordChanged,
    PasswordResetRequested,
    ResetTokenValidated,
    UserRegistered,
)
from storefront.domain import storefront
from storefront.errors import Unauthorized


@storefront.aggregate(limit=-1)
class User:
    name = String(required=True, max_length=100)
    email = String(required=True, max_length=254, unique=True)
    password_hash = String(required=True, max_length=255)
    product_ids = Text()  # JSON array of product ids authored by this user
    reset_token = String(max_length=128)
    reset_token_expiration = DateTime()
    reset_validated = Boolean(default=False)
    registered_at = DateTime()

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, name, email, password_hash):
        now = datetime.now(UTC)
        user = cls(
            name=name,
            email=email,
            password_hash=password_hash,
            product_ids=json.dumps([]),
            registered_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=user.id,
                name=name,
                email=email,
                registered_at=now,
            )
        )
        return user

    # -------------------------------------------------------------------
    # Owned products
    # -------------------------------------------------------------------
    def owned_product_ids(self) -> list[str]:
        return json.loads(self.product_ids) if self.product_ids else []

    def own_product(self, product_id):
        ids = self.owned_product_ids()
        if str(product_id) not in ids:
            ids.append(str(product_id))
            self.product_ids = json.dumps(ids)

    def disown_product(self, product_id):
        ids = [pid for pid in self.owned_product_ids() if pid != str(product_id)]
        self.product_ids = json.dumps(ids)

    # -------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------
    def issue_reset_token(self, ttl: timedelta) -> str:
        """Issue a fresh single-use token, replacing any outstanding one."""
        now = datetime.now(UTC)
        self.reset_token = secrets.token_hex(32)
        self.reset_token_expiration = now + ttl
        self.reset_validated = False

        self.raise_(
            PasswordResetRequested(
                user_id=self.id,
                expires_at=self.reset_token_expiration,
            )
        )
        return self.reset_token

    def reset_token_expired(self, now: datetime | None = None) -> bool:
        if self.reset_token_expiration is None:
            return True
        now = now or datetime.now(UTC)
        expiration = self.reset_token_expiration
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=UTC)
        return expiration <= now

    def validate_reset_token(self, token):
        if not self.reset_token or not secrets.compare_digest(self.reset_token, token):
            raise Unauthorized()
        if self.reset_token_expired():
            raise Unauthorized()

        self.reset_validated = True
        self.raise_(ResetTokenValidated(user_id=self.id))

    def password_change_allowed(self) -> bool:
        """A validated reset token that has not expired yet."""
        return bool(self.reset_validated and self.reset_token) and not self.reset_token_expired()

    def change_password(self, password_hash):
        """Replace the password; only allowed while a validated reset token is unexpired."""
        if not self.password_change_allowed():
            raise Unauthorized()

        self.password_hash = password_hash
        self.reset_token = None
        self.reset_token_expiration = None
        self.reset_validated = False

        self.raise_(
            PasswordChanged(
                user_id=self.id,
                changed_at=datetime.now(UTC),
            )
        )
