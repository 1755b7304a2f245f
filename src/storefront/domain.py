"""Storefront domain — user accounts, catalogue, shopping cart and checkout.

A single Protean domain holds every aggregate (User, Product, Cart, Order)
so that checkout can read the cart, the catalogue and the buyer in one
request and commit each step synchronously.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging

# Configure logging for the application
configure_logging()

# Domain Composition Root
storefront = Domain(name="storefront")
