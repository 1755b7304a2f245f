"""Mailer port: what the storefront needs from a transactional email service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class MailMessage:
    to: str
    subject: str
    text: str
    html: str | None = None


@dataclass(frozen=True)
class DeliveryResult:
    delivered: bool
    message_id: str | None = None
    error: str | None = None


class Mailer(ABC):
    @abstractmethod
    def deliver(self, message: MailMessage) -> DeliveryResult:
        """Hand `message` to the mail service.

        A rejected message is reported in the result; transport problems raise.
        """
