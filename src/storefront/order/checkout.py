"""Checkout — turns the user's cart into a paid-for order.

Sequence:
    1. Price the cart (fails on an empty cart; nothing else happens)
    2. Open a payment session with the gateway (failure leaves the cart as is)
    3. Persist the Order — the commit point; the purchase is final from here
    4. Send the receipt (best-effort)
    5. Clear the cart (best-effort)

An order is never written without a payment session, and the cart is
never cleared before the order is stored. Failures after step 3 are
logged and swallowed so the client still receives its order id.
"""

import json
from dataclasses import dataclass

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront import settings
from storefront.account.user import User
from storefront.cart.items import ClearCart
from storefront.cart.view import get_cart
from storefront.errors import GatewayError, Unauthorized
from storefront.notifications.dispatch import send_receipt
from storefront.order.placement import PlaceOrder
from storefront.order.pricing import compute_checkout
from storefront.payments import get_gateway

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str
    client_secret: str


def _open_payment_session(user_id, summary):
    line_items = [item.to_dict() for item in summary.line_items]
    try:
        result = get_gateway().create_payment_session(
            amount=summary.total,
            currency=settings.CURRENCY,
            line_items=line_items,
            metadata={"user_id": user_id},
        )
    except Exception as exc:
        logger.error("Payment gateway call failed", user_id=user_id, error=str(exc))
        raise GatewayError() from exc

    if not result.success:
        logger.warning("Payment session declined", user_id=user_id, reason=result.failure_reason)
        raise GatewayError(result.failure_reason or GatewayError.default_message)
    return result


def checkout(user_id: str) -> CheckoutResult:
    try:
        user = current_domain.repository_for(User).get(user_id)
    except ObjectNotFoundError:
        raise Unauthorized() from None

    summary = compute_checkout(get_cart(user_id))
    session = _open_payment_session(user_id, summary)

    line_items = [item.to_dict() for item in summary.line_items]
    try:
        order_id = current_domain.process(
            PlaceOrder(
                user_id=user_id,
                email=user.email,
                items=json.dumps(line_items),
                total_price=summary.total,
                currency=settings.CURRENCY,
                payment_intent_id=session.session_id,
            ),
            asynchronous=False,
        )
    except Exception:
        # No compensation is attempted: the session is left for manual reconciliation
        logger.error(
            "Order not recorded after payment session was opened",
            user_id=user_id,
            payment_session_id=session.session_id,
        )
        raise

    logger.info(
        "Order placed",
        order_id=order_id,
        user_id=user_id,
        total_price=summary.total,
        payment_session_id=session.session_id,
    )

    try:
        send_receipt(user.email, summary.total, line_items)
    except Exception:
        logger.exception("Receipt could not be sent", order_id=order_id, user_id=user_id)

    try:
        current_domain.process(ClearCart(user_id=user_id), asynchronous=False)
    except Exception:
        logger.exception("Cart could not be cleared after checkout", order_id=order_id, user_id=user_id)

    return CheckoutResult(order_id=order_id, client_secret=session.client_secret)
