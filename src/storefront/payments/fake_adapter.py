"""In-process payment gateway for development and tests.

Approves every session unless told to decline, and keeps a log of the
requests it received.
"""

from dataclasses import dataclass, field
from uuid import uuid4

from storefront.payments.port import PaymentGateway, PaymentSessionResult


@dataclass(frozen=True)
class SessionRequest:
    amount: float
    currency: str
    line_items: list[dict]
    metadata: dict = field(default_factory=dict)


class FakeGateway(PaymentGateway):
    def __init__(self) -> None:
        self.requests: list[SessionRequest] = []
        self.decline_reason: str | None = None

    def decline(self, reason: str = "Card declined") -> None:
        self.decline_reason = reason

    def approve(self) -> None:
        self.decline_reason = None

    def create_payment_session(self, amount, currency, line_items, metadata=None) -> PaymentSessionResult:
        self.requests.append(SessionRequest(amount, currency, list(line_items), dict(metadata or {})))

        if self.decline_reason:
            return PaymentSessionResult.declined(self.decline_reason)

        session_id = f"pi_fake_{uuid4().hex[:16]}"
        return PaymentSessionResult(
            success=True,
            session_id=session_id,
            client_secret=f"{session_id}_secret_{uuid4().hex[:12]}",
            gateway_status="requires_payment_method",
        )
