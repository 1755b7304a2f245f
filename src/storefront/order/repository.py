"""Custom queries for the Order aggregate."""

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.repository(part_of=Order)
class OrderRepository:
    def for_user(self, user_id) -> list[Order]:
        """Orders placed by `user_id`, newest first."""
        return self._dao.query.filter(user_id=str(user_id)).order_by("-created_at").all().items
