"""Runtime settings read from the environment."""

import os

JWT_SECRET = os.getenv("JWT_SECRET", "storefront-development-secret-change-me")
JWT_ALGORITHM = "HS256"
JWT_TTL_HOURS = int(os.getenv("JWT_TTL_HOURS", "10"))

RESET_TOKEN_TTL_MINUTES = int(os.getenv("RESET_TOKEN_TTL_MINUTES", "15"))
PASSWORD_MIN_LENGTH = int(os.getenv("PASSWORD_MIN_LENGTH", "6"))

CURRENCY = os.getenv("CURRENCY", "usd")

PAYMENT_GATEWAY = os.getenv("PAYMENT_GATEWAY", "fake")
STRIPE_API_KEY = os.getenv("STRIPE_API_KEY", "")

EMAIL_ADAPTER = os.getenv("EMAIL_ADAPTER", "fake")
SENDGRID_KEY = os.getenv("SENDGRID_KEY", "")
MAIL_FROM = os.getenv("MAIL_FROM", "shop.mailbot@example.com")
MAIL_FROM_NAME = os.getenv("MAIL_FROM_NAME", "Shop")

BLOB_STORAGE = os.getenv("BLOB_STORAGE", "memory")
BLOB_DIR = os.getenv("BLOB_DIR", "uploads")
BLOB_BASE_URL = os.getenv("BLOB_BASE_URL", "/uploads")
