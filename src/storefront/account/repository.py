"""Custom queries for the User aggregate."""

from storefront.account.user import User
from storefront.domain import storefront


@storefront.repository(part_of=User)
class UserRepository:
    def find_by_email(self, email: str) -> User | None:
        results = self._dao.query.filter(email=email).all().items
        return results[0] if results else None

    def find_by_reset_token(self, token: str) -> User | None:
        if not token:
            return None
        results = self._dao.query.filter(reset_token=token).all().items
        return results[0] if results else None
