"""Cart read model — cart lines joined against live catalogue data."""

from dataclasses import dataclass

import structlog
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.catalogue.product import Product

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CartLine:
    product: Product
    quantity: int


def get_cart(user_id: str) -> list[CartLine]:
    """Return the user's cart lines with current product data.

    Lines whose product has since been deleted are left out.
    """
    cart = current_domain.repository_for(Cart).for_user(user_id)
    products = current_domain.repository_for(Product).find_many(item.product_id for item in cart.items)

    lines = []
    for item in cart.items:
        product = products.get(str(item.product_id))
        if product is None:
            logger.warning(
                "Cart references a missing product",
                user_id=str(user_id),
                product_id=str(item.product_id),
            )
            continue
        lines.append(CartLine(product=product, quantity=item.quantity))
    return lines
