"""Order placement — command and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.order.order import Order


@storefront.command(part_of="Order")
class PlaceOrder:
    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    items = Text(required=True)  # JSON: list of line item dicts
    total_price = Float(required=True)
    currency = String(max_length=3, default="usd")
    payment_intent_id = String(required=True, max_length=255)


@storefront.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(
            user_id=command.user_id,
            email=command.email,
            line_items=items_data,
            total_price=command.total_price,
            payment_intent_id=command.payment_intent_id,
            currency=command.currency or "usd",
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
