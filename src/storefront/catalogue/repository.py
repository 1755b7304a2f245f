"""Custom queries for the Product aggregate."""

from protean.exceptions import ObjectNotFoundError

from storefront.catalogue.product import Product
from storefront.domain import storefront
from storefront.errors import NotFound


@storefront.repository(part_of=Product)
class ProductRepository:
    def get_product(self, product_id) -> Product:
        """Load a product or raise NotFound."""
        try:
            return self.get(product_id)
        except ObjectNotFoundError:
            raise NotFound("Product not found") from None

    def find_many(self, product_ids) -> dict[str, Product]:
        """Return the products that still exist, keyed by id."""
        found = {}
        for product_id in product_ids:
            try:
                found[str(product_id)] = self.get(product_id)
            except ObjectNotFoundError:
                continue
        return found

    def list_all(self) -> list[Product]:
        return self._dao.query.order_by("-created_at").all().items

    def remove(self, product: Product) -> None:
        self._dao.delete(product)
