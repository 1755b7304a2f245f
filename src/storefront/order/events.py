"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Order")
class OrderPlaced:
    """A checkout completed and its receipt was recorded."""

    __version__ = 1

    order_id = Identifier(required=True)
    user_id = Identifier(required=True)
    total_price = Float(required=True)
    currency = String(required=True)
    item_count = Integer(required=True)
    payment_intent_id = String(required=True)
    placed_at = DateTime(required=True)
