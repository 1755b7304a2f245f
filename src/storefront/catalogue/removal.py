"""Product deletion — command, handler and entry point.

The product record and the creator's reference to it go in one unit of
work. The stored image is removed afterwards on a best-effort basis: a
storage failure is logged and never fails the deletion.
"""

import structlog
from protean import handle
from protean.exceptions import ObjectNotFoundError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.account.user import User
from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.storage import discard_image

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Product")
class DeleteProduct:
    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.command_handler(part_of=Product)
class DeleteProductHandler:
    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get_product(command.product_id)
        product.ensure_owner(command.user_id)

        image_url = product.image_url
        repo.remove(product)

        user_repo = current_domain.repository_for(User)
        try:
            creator = user_repo.get(product.creator_id)
        except ObjectNotFoundError:
            logger.warning("Creator of deleted product not found", product_id=str(product.id))
        else:
            creator.disown_product(product.id)
            user_repo.add(creator)

        logger.info("Product deleted", product_id=str(product.id))
        return image_url


def delete_product(user_id: str, product_id: str) -> bool:
    image_url = current_domain.process(
        DeleteProduct(user_id=user_id, product_id=product_id),
        asynchronous=False,
    )
    discard_image(image_url)
    return True
