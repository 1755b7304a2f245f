"""Transactional mail dispatch for receipts and password resets."""

import structlog

from storefront.notifications import get_mailer
from storefront.notifications.port import MailMessage
from storefront.notifications.templates.password_reset import PasswordResetTemplate
from storefront.notifications.templates.receipt import ReceiptTemplate

logger = structlog.get_logger(__name__)


class DeliveryError(Exception):
    """The mail service rejected a message."""


def _deliver(to: str, content: dict) -> str | None:
    message = MailMessage(
        to=to,
        subject=content["subject"],
        text=content["body"],
        html=content.get("html_body"),
    )
    result = get_mailer().deliver(message)
    if not result.delivered:
        raise DeliveryError(result.error or "Unknown dispatch error")

    logger.info("Email sent", subject=message.subject, message_id=result.message_id)
    return result.message_id


def send_receipt(email: str, total_price: float, lines: list[dict]) -> str | None:
    content = ReceiptTemplate.render({"total_price": total_price, "lines": lines})
    return _deliver(email, content)


def send_password_reset(email: str, token: str, expires_at) -> str | None:
    content = PasswordResetTemplate.render({"token": token, "expires_at": expires_at})
    return _deliver(email, content)
