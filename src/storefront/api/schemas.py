"""Pydantic request/response schemas for the storefront API.

These are external contracts — separate from internal Protean commands.
"""

from datetime import datetime

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared
# ---------------------------------------------------------------------------
class MessageResponse(BaseModel):
    message: str


class SuccessResponse(BaseModel):
    success: bool = True


# ---------------------------------------------------------------------------
# Accounts and authentication
# ---------------------------------------------------------------------------
class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {"examples": [{"name": "Jane Doe", "email": "jane@example.com", "password": "secret1"}]}
    }

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    email: str
    password: str


class AuthDataResponse(BaseModel):
    user_id: str
    token: str


class ResetPasswordRequest(BaseModel):
    email: str


class ValidateTokenRequest(BaseModel):
    token: str


class ChangePasswordRequest(BaseModel):
    user_id: str
    new_password: str = Field(..., max_length=128)


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class ProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Walnut desk",
                    "description": "Solid walnut writing desk",
                    "price": 349.0,
                    "image_url": None,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    description: str
    price: float
    image_url: str | None = Field(None, max_length=500)


class ProductResponse(BaseModel):
    product_id: str
    name: str
    description: str
    price: float
    image_url: str | None = None
    creator_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(BaseModel):
    products: list[ProductResponse]


class UserResponse(BaseModel):
    user_id: str
    name: str
    email: str
    products: list[ProductResponse]


class UploadResponse(BaseModel):
    url: str


# ---------------------------------------------------------------------------
# Cart and checkout
# ---------------------------------------------------------------------------
class AddToCartRequest(BaseModel):
    product_id: str


class CartItemResponse(BaseModel):
    product: ProductResponse
    quantity: int = Field(ge=1)


class CartResponse(BaseModel):
    items: list[CartItemResponse]


class CheckoutResponse(BaseModel):
    order_id: str
    client_secret: str


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class OrderLineResponse(BaseModel):
    product_id: str
    name: str
    description: str | None = None
    price: float
    image_url: str | None = None
    quantity: int


class OrderResponse(BaseModel):
    order_id: str
    user_id: str
    email: str
    lines: list[OrderLineResponse]
    total_price: float
    currency: str
    payment_intent_id: str
    created_at: datetime | None = None


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
