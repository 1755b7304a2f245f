"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class ProductCreated:
    """A user listed a new product."""

    __version__ = 1

    product_id = Identifier(required=True)
    creator_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    created_at = DateTime(required=True)


@storefront.event(part_of="Product")
class ProductUpdated:
    """A product's name, description, price or image changed."""

    __version__ = 1

    product_id = Identifier(required=True)
    name = String(required=True)
    price = Float(required=True)
    image_url = String()
    updated_at = DateTime(required=True)

