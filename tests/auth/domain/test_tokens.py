"""Tests for bearer token issuance and decoding."""

from datetime import timedelta

import jwt
import pytest

from storefront import settings
from storefront.auth.tokens import create_access_token, decode_access_token
from storefront.errors import Unauthorized


class TestAccessTokens:
    def test_round_trip_returns_user_id(self):
        token = create_access_token("user-1", "jane@example.com")
        assert decode_access_token(token) == "user-1"

    def test_token_carries_email(self):
        token = create_access_token("user-1", "jane@example.com")
        payload = jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])
        assert payload["email"] == "jane@example.com"

    def test_expired_token_is_rejected(self):
        token = create_access_token("user-1", "jane@example.com", expires_delta=timedelta(seconds=-1))
        with pytest.raises(Unauthorized):
            decode_access_token(token)

    def test_token_signed_with_other_key_is_rejected(self):
        token = jwt.encode({"sub": "user-1"}, "some-other-secret", algorithm="HS256")
        with pytest.raises(Unauthorized):
            decode_access_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(Unauthorized):
            decode_access_token("not-a-jwt")

    def test_token_without_subject_is_rejected(self):
        token = jwt.encode({"email": "jane@example.com"}, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)
        with pytest.raises(Unauthorized):
            decode_access_token(token)
