"""In-memory mailer: keeps every accepted message in an outbox."""

from uuid import uuid4

from storefront.notifications.port import DeliveryResult, Mailer, MailMessage


class FakeMailer(Mailer):
    def __init__(self) -> None:
        self.outbox: list[MailMessage] = []
        self.rejection: str | None = None

    def reject_with(self, reason: str = "Email delivery failed") -> None:
        """Make every following delivery fail with `reason`."""
        self.rejection = reason

    def accept(self) -> None:
        self.rejection = None

    def deliver(self, message: MailMessage) -> DeliveryResult:
        if self.rejection:
            return DeliveryResult(delivered=False, error=self.rejection)

        self.outbox.append(message)
        return DeliveryResult(delivered=True, message_id=f"email-{uuid4().hex[:12]}")
