"""Error taxonomy surfaced to API clients.

Every failure that reaches a client is one of these classes. Each carries
a human-readable message, a numeric code for client branching and a
(possibly empty) list of field-level errors.
"""


class ShopError(Exception):
    code = 500
    default_message = "An error occurred"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def errors(self) -> list[dict]:
        return []

    def to_dict(self) -> dict:
        return {"message": self.message, "code": self.code, "errors": self.errors}


class Unauthorized(ShopError):
    """Missing or invalid identity, ownership mismatch, invalid reset token."""

    code = 401
    default_message = "Not authorized"


class NotFound(ShopError):
    code = 404
    default_message = "Not found"


class InvalidInput(ShopError):
    """Validation failure carrying per-field messages.

    `messages` maps a field name to a list of messages, the same shape
    Protean's `ValidationError` uses.
    """

    code = 422
    default_message = "Invalid input"

    def __init__(self, messages: dict[str, list[str]], message: str | None = None) -> None:
        self.messages = messages
        super().__init__(message)

    @property
    def errors(self) -> list[dict]:
        return [{"field": field, "message": text} for field, texts in self.messages.items() for text in texts]


class InvalidOperation(ShopError):
    """A well-formed request that the current business state does not allow."""

    code = 409
    default_message = "Operation not allowed"


class GatewayError(ShopError):
    code = 502
    default_message = "Payment processor failure"


class Internal(ShopError):
    code = 500
