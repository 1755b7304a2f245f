"""FastAPI routes for the storefront — accounts, catalogue, cart and orders.

Every route except registration, login, password reset requests and the
catalogue reads depends on `current_identity`, and the confirmed identity
is passed on explicitly to the operation it calls.

Password hashing and calls out to the payment, mail and blob services run
in the threadpool so they do not stall the event loop.
"""

from fastapi import APIRouter, Depends, File, UploadFile
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from starlette.concurrency import run_in_threadpool

from storefront.account.password_reset import change_password, reset_password, validate_token
from storefront.account.registration import register_user
from storefront.account.user import User
from storefront.api.dependencies import current_identity
from storefront.api.schemas import (
    AddToCartRequest,
    AuthDataResponse,
    CartItemResponse,
    CartResponse,
    ChangePasswordRequest,
    CheckoutResponse,
    LoginRequest,
    MessageResponse,
    OrderLineResponse,
    OrderListResponse,
    OrderResponse,
    ProductListResponse,
    ProductRequest,
    ProductResponse,
    RegisterUserRequest,
    ResetPasswordRequest,
    SuccessResponse,
    UploadResponse,
    UserResponse,
    ValidateTokenRequest,
)
from storefront.auth.identity import Identity, login
from storefront.cart.items import AddToCart, ClearCart, RemoveFromCart
from storefront.cart.view import get_cart
from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.details import UpdateProduct
from storefront.catalogue.product import Product
from storefront.catalogue.removal import delete_product
from storefront.errors import NotFound, Unauthorized
from storefront.order.checkout import checkout
from storefront.order.order import Order
from storefront.storage import store_image


# ---------------------------------------------------------------------------
# Response builders
# ---------------------------------------------------------------------------
def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        product_id=str(product.id),
        name=product.name,
        description=product.description,
        price=product.price,
        image_url=product.image_url,
        creator_id=str(product.creator_id),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


def _user_response(user: User) -> UserResponse:
    products = current_domain.repository_for(Product).find_many(user.owned_product_ids())
    return UserResponse(
        user_id=str(user.id),
        name=user.name,
        email=user.email,
        products=[_product_response(product) for product in products.values()],
    )


def _cart_response(user_id: str) -> CartResponse:
    return CartResponse(
        items=[
            CartItemResponse(product=_product_response(line.product), quantity=line.quantity)
            for line in get_cart(user_id)
        ]
    )


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse(
        order_id=str(order.id),
        user_id=str(order.user_id),
        email=order.email,
        lines=[
            OrderLineResponse(
                product_id=str(line.product_id),
                name=line.name,
                description=line.description,
                price=line.price,
                image_url=line.image_url,
                quantity=line.quantity,
            )
            for line in order.lines
        ],
        total_price=order.total_price,
        currency=order.currency,
        payment_intent_id=order.payment_intent_id,
        created_at=order.created_at,
    )


# ---------------------------------------------------------------------------
# Account Router
# ---------------------------------------------------------------------------
account_router = APIRouter(prefix="/users", tags=["users"])


@account_router.post("", status_code=201, response_model=UserResponse)
async def create_new_user(body: RegisterUserRequest) -> UserResponse:
    user_id = await run_in_threadpool(register_user, name=body.name, email=body.email, password=body.password)
    return _user_response(current_domain.repository_for(User).get(user_id))


@account_router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, identity: Identity = Depends(current_identity)) -> UserResponse:
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise NotFound("User not found") from None
    return _user_response(user)


# ---------------------------------------------------------------------------
# Auth Router
# ---------------------------------------------------------------------------
auth_router = APIRouter(prefix="/auth", tags=["auth"])


@auth_router.post("/login", response_model=AuthDataResponse)
async def login_user(body: LoginRequest) -> AuthDataResponse:
    auth = await run_in_threadpool(login, body.email, body.password)
    return AuthDataResponse(user_id=auth.user_id, token=auth.token)


@auth_router.post("/reset-password", response_model=MessageResponse)
async def request_password_reset(body: ResetPasswordRequest) -> MessageResponse:
    message = await run_in_threadpool(reset_password, body.email)
    return MessageResponse(message=message)


@auth_router.post("/validate-token", response_model=UserResponse)
async def validate_reset_token(
    body: ValidateTokenRequest, identity: Identity = Depends(current_identity)
) -> UserResponse:
    return _user_response(validate_token(body.token))


@auth_router.post("/change-password", response_model=MessageResponse)
async def change_user_password(
    body: ChangePasswordRequest, identity: Identity = Depends(current_identity)
) -> MessageResponse:
    if identity.user_id != body.user_id:
        raise Unauthorized()
    message = await run_in_threadpool(change_password, body.user_id, body.new_password)
    return MessageResponse(message=message)


# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/products", tags=["products"])


@product_router.get("", response_model=ProductListResponse)
async def get_products() -> ProductListResponse:
    products = current_domain.repository_for(Product).list_all()
    return ProductListResponse(products=[_product_response(product) for product in products])


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(current_domain.repository_for(Product).get_product(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse)
async def create_new_product(body: ProductRequest, identity: Identity = Depends(current_identity)) -> ProductResponse:
    command = CreateProduct(
        user_id=identity.user_id,
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
    )
    product_id = current_domain.process(command, asynchronous=False)
    return _product_response(current_domain.repository_for(Product).get_product(product_id))


@product_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: str, body: ProductRequest, identity: Identity = Depends(current_identity)
) -> ProductResponse:
    command = UpdateProduct(
        user_id=identity.user_id,
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=body.price,
        image_url=body.image_url,
    )
    current_domain.process(command, asynchronous=False)
    return _product_response(current_domain.repository_for(Product).get_product(product_id))


@product_router.delete("/{product_id}", response_model=SuccessResponse)
async def remove_product(product_id: str, identity: Identity = Depends(current_identity)) -> SuccessResponse:
    removed = await run_in_threadpool(delete_product, identity.user_id, product_id)
    return SuccessResponse(success=removed)


# ---------------------------------------------------------------------------
# Upload Router
# ---------------------------------------------------------------------------
upload_router = APIRouter(tags=["uploads"])


@upload_router.post("/upload", status_code=201, response_model=UploadResponse)
async def upload_image(
    file: UploadFile = File(...), identity: Identity = Depends(current_identity)
) -> UploadResponse:
    content = await file.read()
    url = await run_in_threadpool(store_image, file.filename, content, file.content_type)
    return UploadResponse(url=url)


# ---------------------------------------------------------------------------
# Cart Router
# ---------------------------------------------------------------------------
cart_router = APIRouter(prefix="/cart", tags=["cart"])


@cart_router.get("", response_model=CartResponse)
async def get_user_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    return _cart_response(identity.user_id)


@cart_router.post("/items", response_model=CartResponse)
async def add_to_cart(body: AddToCartRequest, identity: Identity = Depends(current_identity)) -> CartResponse:
    command = AddToCart(user_id=identity.user_id, product_id=body.product_id)
    current_domain.process(command, asynchronous=False)
    return _cart_response(identity.user_id)


@cart_router.delete("/items/{product_id}", response_model=SuccessResponse)
async def remove_from_cart(product_id: str, identity: Identity = Depends(current_identity)) -> SuccessResponse:
    command = RemoveFromCart(user_id=identity.user_id, product_id=product_id)
    current_domain.process(command, asynchronous=False)
    return SuccessResponse()


@cart_router.delete("", response_model=CartResponse)
async def clear_cart(identity: Identity = Depends(current_identity)) -> CartResponse:
    current_domain.process(ClearCart(user_id=identity.user_id), asynchronous=False)
    return _cart_response(identity.user_id)


@cart_router.post("/checkout", status_code=201, response_model=CheckoutResponse)
async def checkout_cart(identity: Identity = Depends(current_identity)) -> CheckoutResponse:
    """Price the cart, open a payment session and record the order."""
    result = await run_in_threadpool(checkout, identity.user_id)
    return CheckoutResponse(order_id=result.order_id, client_secret=result.client_secret)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.get("", response_model=OrderListResponse)
async def get_orders(identity: Identity = Depends(current_identity)) -> OrderListResponse:
    orders = current_domain.repository_for(Order).for_user(identity.user_id)
    return OrderListResponse(orders=[_order_response(order) for order in orders])
