"""Mailer selection.

EMAIL_ADAPTER=sendgrid sends through SendGrid; anything else keeps mail in
an in-memory outbox. Tests install their own mailer with set_mailer().
"""

from storefront import settings
from storefront.notifications.port import Mailer

_mailer: Mailer | None = None


def _build_mailer() -> Mailer:
    if settings.EMAIL_ADAPTER == "sendgrid":
        from storefront.notifications.sendgrid_adapter import SendGridMailer

        return SendGridMailer(
            api_key=settings.SENDGRID_KEY,
            from_email=settings.MAIL_FROM,
            from_name=settings.MAIL_FROM_NAME,
        )

    from storefront.notifications.fake_email import FakeMailer

    return FakeMailer()


def get_mailer() -> Mailer:
    global _mailer
    if _mailer is None:
        _mailer = _build_mailer()
    return _mailer


def set_mailer(mailer: Mailer) -> None:
    global _mailer
    _mailer = mailer


def reset_mailer() -> None:
    global _mailer
    _mailer = None
