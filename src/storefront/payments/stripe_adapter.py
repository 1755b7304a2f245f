"""Stripe payment gateway adapter.

Creates a PaymentIntent with the stripe-python SDK. The client finishes the
payment with the returned client secret.
"""

import stripe
import structlog

from storefront.payments.port import PaymentGateway, PaymentSessionResult

logger = structlog.get_logger(__name__)


def to_minor_units(amount: float) -> int:
    return int(round(amount * 100))


class StripeGateway(PaymentGateway):
    """Production Stripe gateway adapter."""

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def create_payment_session(
        self,
        amount: float,
        currency: str,
        line_items: list[dict],
        metadata: dict | None = None,
    ) -> PaymentSessionResult:
        intent_metadata = {key: str(value) for key, value in (metadata or {}).items()}
        intent_metadata["item_count"] = str(sum(item["quantity"] for item in line_items))

        try:
            intent = stripe.PaymentIntent.create(
                amount=to_minor_units(amount),
                currency=currency.lower(),
                metadata=intent_metadata,
                automatic_payment_methods={"enabled": True},
                api_key=self.api_key,
            )
        except stripe.APIConnectionError:
            # Transport failure, not a decline
            raise
        except stripe.StripeError as exc:
            reason = exc.user_message or str(exc)
            logger.warning("Stripe rejected payment intent", status=exc.http_status, code=exc.code, reason=reason)
            return PaymentSessionResult.declined(reason)

        return PaymentSessionResult(
            success=True,
            session_id=intent.id,
            client_secret=intent.client_secret,
            gateway_status=intent.status,
        )
