"""Product creation — command and handler."""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import Unauthorized

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class CreateProduct:
    user_id = Identifier(required=True)
    name = String(max_length=255)
    description = Text()
    price = Float()
    image_url = String(max_length=500)


@storefront.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        user_repo = current_domain.repository_for(User)
        try:
            user = user_repo.get(command.user_id)
        except ObjectNotFoundError:
            raise Unauthorized() from None

        product = Product.create(
            creator_id=str(user.id),
            name=command.name,
            description=command.description,
            price=command.price,
            image_url=command.image_url,
        )
        current_domain.repository_for(Product).add(product)

        user.own_product(product.id)
        user_repo.add(user)

        logger.info("Product created", product_id=str(product.id), user_id=str(user.id))
        return str(product.id)
