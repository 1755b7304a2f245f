"""Product aggregate — a listing owned by exactly one user."""

from datetime import UTC, datetime

from protean.fields import DateTime, Float, Identifier, String, Text

from storefront.catalogue.events import ProductCreated, ProductUpdated
from storefront.domain import storefront
from storefront.errors import InvalidInput, Unauthorized

NAME_MIN_LENGTH = 3
DESCRIPTION_MIN_LENGTH = 5


def validate_details(name, description, price) -> None:
    """Collect every field problem and raise them together."""
    errors = {}
    if not name or len(name.strip()) < NAME_MIN_LENGTH:
        errors["name"] = [f"Name must be at least {NAME_MIN_LENGTH} characters long"]
    if not description or len(description.strip()) < DESCRIPTION_MIN_LENGTH:
        errors["description"] = [f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters long"]
    if price is None or price < 0:
        errors["price"] = ["Price must be a non-negative number"]
    if errors:
        raise InvalidInput(errors)


@storefront.aggregate(limit=-1)
class Product:
    name = String(required=True, max_length=255)
    description = Text(required=True)
    price = Float(required=True, min_value=0.0)
    image_url = String(max_length=500)
    creator_id = Identifier(required=True)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls, creator_id, name, description, price, image_url=None):
        validate_details(name, description, price)

        now = datetime.now(UTC)
        product = cls(
            creator_id=creator_id,
            name=name.strip(),
            description=description.strip(),
            price=price,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductCreated(
                product_id=product.id,
                creator_id=creator_id,
                name=product.name,
                price=price,
                created_at=now,
            )
        )
        return product

    def is_created_by(self, user_id) -> bool:
        return str(self.creator_id) == str(user_id)

    def ensure_owner(self, user_id):
        if not self.is_created_by(user_id):
            raise Unauthorized("Cannot manage other users products")

    def update_details(self, name, description, price, image_url=None):
        """Replace the listing details. `image_url` of None keeps the current image."""
        validate_details(name, description, price)

        self.name = name.strip()
        self.description = description.strip()
        self.price = price
        if image_url is not None:
            self.image_url = image_url
        self.updated_at = datetime.now(UTC)

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                name=self.name,
                price=self.price,
                image_url=self.image_url,
                updated_at=self.updated_at,
            )
        )

