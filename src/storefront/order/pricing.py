"""Checkout pricing — turns resolved cart lines into priced line items.

Pure computation over already-loaded data: no repositories, no gateways.
"""

from dataclasses import dataclass

from storefront.errors import InvalidOperation


@dataclass(frozen=True)
class LineItem:
    """A priced, quantified snapshot of one product at checkout time."""

    product_id: str
    name: str
    description: str
    price: float
    image_url: str | None
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict:
        return {
            "product_id": self.product_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "image_url": self.image_url,
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class CheckoutSummary:
    line_items: list[LineItem]
    total: float


def compute_checkout(lines) -> CheckoutSummary:
    """Price `lines` (objects with `.product` and `.quantity`).

    Raises InvalidOperation when there is nothing to buy.
    """
    if not lines:
        raise InvalidOperation("Cannot check out an empty cart")

    line_items = [
        LineItem(
            product_id=str(line.product.id),
            name=line.product.name,
            description=line.product.description,
            price=line.product.price,
            image_url=line.product.image_url,
            quantity=line.quantity,
        )
        for line in lines
    ]
    total = sum(item.subtotal for item in line_items)
    return CheckoutSummary(line_items=line_items, total=total)
