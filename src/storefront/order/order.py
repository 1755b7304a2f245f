"""Order aggregate — the immutable receipt of a completed checkout.

An Order copies everything it needs (buyer email, product name, price,
description, image, quantity) at checkout time. Later edits or deletion of
the products do not change it, and nothing in the system updates or
deletes an order once placed.
"""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, HasMany, Identifier, Integer, String, Text

from storefront.domain import storefront
from storefront.order.events import OrderPlaced


@storefront.entity(part_of="Order", limit=-1)
class OrderLine:
    product_id = Identifier(required=True)
    name = String(required=True, max_length=255)
    description = Text()
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=500)
    quantity = Integer(required=True, min_value=1)


@storefront.aggregate(limit=-1)
class Order:
    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    lines = HasMany(OrderLine)
    total_price = Float(required=True, min_value=0.0)
    currency = String(max_length=3, default="usd")
    payment_intent_id = String(required=True, max_length=255)
    created_at = DateTime()

    @classmethod
    def place(cls, user_id, email, line_items, total_price, payment_intent_id, currency="usd"):
        """Record a checkout. `line_items` is a list of dicts as produced by LineItem.to_dict()."""
        now = datetime.now(UTC)
        order = cls(
            user_id=user_id,
            email=email,
            total_price=total_price,
            currency=currency,
            payment_intent_id=payment_intent_id,
            created_at=now,
        )
        for item in line_items:
            order.add_lines(
                OrderLine(
                    product_id=item["product_id"],
                    name=item["name"],
                    description=item.get("description"),
                    price=item["price"],
                    image_url=item.get("image_url"),
                    quantity=item["quantity"],
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=order.id,
                user_id=user_id,
                total_price=total_price,
                currency=currency,
                item_count=sum(item["quantity"] for item in line_items),
                payment_intent_id=payment_intent_id,
                placed_at=now,
            )
        )
        return order
