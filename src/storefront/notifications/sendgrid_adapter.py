"""SendGrid mailer built on the sendgrid SDK."""

from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail

from storefront.notifications.port import DeliveryResult, Mailer, MailMessage


class SendGridMailer(Mailer):
    def __init__(self, api_key: str, from_email: str, from_name: str) -> None:
        self.client = SendGridAPIClient(api_key)
        self.sender = From(from_email, from_name)

    def _mail(self, message: MailMessage) -> Mail:
        return Mail(
            from_email=self.sender,
            to_emails=message.to,
            subject=message.subject,
            plain_text_content=message.text,
            html_content=message.html,
        )

    def deliver(self, message: MailMessage) -> DeliveryResult:
        try:
            response = self.client.send(self._mail(message))
        except HTTPError as exc:
            body = exc.body.decode("utf-8", "replace") if isinstance(exc.body, bytes) else str(exc.body)
            return DeliveryResult(delivered=False, error=f"SendGrid returned HTTP {exc.status_code}: {body[:200]}")
        return DeliveryResult(delivered=True, message_id=response.headers.get("X-Message-Id"))
