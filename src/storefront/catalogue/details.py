"""Product update — command and handler. Only the creator may update."""

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.catalogue.product import Product
from storefront.domain import storefront


@storefront.command(part_of="Product")
class UpdateProduct:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    name = String(max_length=255)
    description = Text()
    price = Float()
    image_url = String(max_length=500)


@storefront.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        product.ensure_owner(command.user_id)

        product.update_details(
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
        )
        repo.add(product)
        return str(product.id)
