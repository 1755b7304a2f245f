"""Password reset template — carries the reset token and its expiry."""


class PasswordResetTemplate:
    @staticmethod
    def render(context: dict) -> dict:
        token = context["token"]
        expires_at = context.get("expires_at")
        expiry = expires_at.strftime("%Y-%m-%d %H:%M %Z") if expires_at else "N/A"
        return {
            "subject": "Password Reset",
            "body": (
                "Password Reset\n\n"
                "Hello,\n\n"
                "We have received a request to reset your password. "
                "Please use the following reset token to proceed:\n\n"
                f"{token}\n\n"
                f"Token Expiration: {expiry}\n\n"
                "If you did not request a password reset, please disregard this email.\n\n"
                "Thank you!"
            ),
            "html_body": (
                "<h1>Password Reset</h1>"
                "<p>Hello,</p>"
                "<p>We have received a request to reset your password. "
                "Please use the following reset token to proceed:</p>"
                f"<p><strong>{token}</strong></p>"
                f"<p>Token Expiration: {expiry}</p>"
                "<p>If you did not request a password reset, please disregard this email.</p>"
                "<p>Thank you!</p>"
            ),
        }
