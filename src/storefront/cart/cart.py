"""Cart aggregate — the products a user has selected but not yet bought.

The whole cart is the unit of consistency: every operation loads it,
mutates it in memory and writes it back. Two concurrent writes by the same
user are not ordered beyond the last one winning.

Rules:
    - at most one line per product; adding again increments the quantity
    - quantities are positive integers
    - a user cannot put a product they created into their own cart
"""

from datetime import UTC, datetime

from protean.fields import DateTime, HasMany, Identifier, Integer

from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from storefront.domain import storefront
from storefront.errors import InvalidOperation, NotFound


@storefront.entity(part_of="Cart", limit=-1)
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate(limit=-1)
class Cart:
    user_id = Identifier(required=True, unique=True)
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, user_id):
        now = datetime.now(UTC)
        return cls(user_id=user_id, created_at=now, updated_at=now)

    def _find_item(self, product_id):
        return next((i for i in self.items if str(i.product_id) == str(product_id)), None)

    def quantity_of(self, product_id) -> int:
        item = self._find_item(product_id)
        return item.quantity if item else 0

    def add_product(self, product):
        """Add one unit of `product`, rejecting the owner's own listings."""
        if product.is_created_by(self.user_id):
            raise InvalidOperation("You cannot add your own product to your cart")

        now = datetime.now(UTC)
        existing = self._find_item(product.id)
        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            self.add_items(CartItem(product_id=str(product.id), quantity=1, added_at=now))
            quantity = 1

        self.updated_at = now
        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product.id),
                quantity=quantity,
            )
        )

    def remove_product(self, product_id):
        """Drop the whole line for `product_id`."""
        item = self._find_item(product_id)
        if item is None:
            raise NotFound("Product is not in the cart")

        self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartItemRemoved(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                product_id=str(product_id),
            )
        )

    def clear(self):
        removed = len(self.items)
        for item in list(self.items):
            self.remove_items(item)

        self.updated_at = datetime.now(UTC)
        self.raise_(
            CartCleared(
                cart_id=str(self.id),
                user_id=str(self.user_id),
                items_removed=removed,
            )
        )
