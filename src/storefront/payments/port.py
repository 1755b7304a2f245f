"""Payment gateway port.

Checkout only needs one capability from a payment processor: open a
session for an amount and get back something the client can use to pay.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class PaymentSessionResult:
    success: bool
    session_id: str | None = None
    client_secret: str | None = None
    gateway_status: str | None = None
    failure_reason: str | None = None

    @classmethod
    def declined(cls, reason: str) -> "PaymentSessionResult":
        return cls(success=False, gateway_status="failed", failure_reason=reason)


class PaymentGateway(ABC):
    @abstractmethod
    def create_payment_session(
        self,
        amount: float,
        currency: str,
        line_items: list[dict],
        metadata: dict | None = None,
    ) -> PaymentSessionResult:
        """Open a payment session the client completes with `client_secret`.

        `amount` is in major currency units. Implementations report a decline
        through the result and raise only for transport problems.
        """
