from storefront.api.errors import register_exception_handlers
from storefront.api.routes import (
    account_router,
    auth_router,
    cart_router,
    order_router,
    product_router,
    upload_router,
)

__all__ = [
    "account_router",
    "auth_router",
    "cart_router",
    "order_router",
    "product_router",
    "register_exception_handlers",
    "upload_router",
]
