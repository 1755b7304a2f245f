"""Custom queries for the Cart aggregate."""

from storefront.cart.cart import Cart
from storefront.domain import storefront


@storefront.repository(part_of=Cart)
class CartRepository:
    def for_user(self, user_id) -> Cart:
        """Return the user's cart, or a new unsaved one if none exists yet."""
        results = self._dao.query.filter(user_id=str(user_id)).all().items
        if results:
            return results[0]
        return Cart.create(user_id=str(user_id))
