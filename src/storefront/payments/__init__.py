"""Payment gateway selection.

PAYMENT_GATEWAY=stripe talks to Stripe; anything else uses the in-process
fake. Tests install their own gateway with set_gateway().
"""

from storefront import settings
from storefront.payments.port import PaymentGateway

_gateway: PaymentGateway | None = None


def _build_gateway() -> PaymentGateway:
    if settings.PAYMENT_GATEWAY == "stripe":
        from storefront.payments.stripe_adapter import StripeGateway

        return StripeGateway(settings.STRIPE_API_KEY)

    from storefront.payments.fake_adapter import FakeGateway

    return FakeGateway()


def get_gateway() -> PaymentGateway:
    global _gateway
    if _gateway is None:
        _gateway = _build_gateway()
    return _gateway


def set_gateway(gateway: PaymentGateway) -> None:
    global _gateway
    _gateway = gateway


def reset_gateway() -> None:
    global _gateway
    _gateway = None
