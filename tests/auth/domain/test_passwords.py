"""Tests for password hashing and the password policy."""

import pytest

from storefront.auth.passwords import check_password_policy, hash_password, verify_password
from storefront.errors import InvalidInput


class TestHashing:
    def test_hash_is_not_the_plain_password(self):
        hashed = hash_password("secret1")
        assert hashed != "secret1"
        assert hashed.startswith("$pbkdf2-sha256$")

    def test_verify_matches_only_the_original(self):
        hashed = hash_password("secret1")
        assert verify_password("secret1", hashed) is True
        assert verify_password("secret2", hashed) is False


class TestPolicy:
    def test_six_characters_is_enough(self):
        check_password_policy("secret")

    def test_short_password_is_rejected(self):
        with pytest.raises(InvalidInput) as exc:
            check_password_policy("abc")
        assert exc.value.errors[0]["field"] == "password"

    def test_missing_password_is_rejected(self):
        with pytest.raises(InvalidInput):
            check_password_policy(None)

    def test_field_name_is_configurable(self):
        with pytest.raises(InvalidInput) as exc:
            check_password_policy("abc", field="new_password")
        assert "new_password" in exc.value.messages
