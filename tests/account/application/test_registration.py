"""Application tests for user registration."""

import pytest
from protean.utils.globals import current_domain

from storefront.account.registration import register_user
from storefront.account.user import User
from storefront.auth.passwords import verify_password
from storefront.cart.cart import Cart
from storefront.errors import InvalidInput


class TestRegisterUser:
    def test_register_persists_user_with_hashed_password(self):
        user_id = register_user(name="Jane Doe", email="a@x.com", password="secret1")

        user = current_domain.repository_for(User).get(user_id)
        assert user.name == "Jane Doe"
        assert user.email == "a@x.com"
        assert user.password_hash != "secret1"
        assert verify_password("secret1", user.password_hash)

    def test_register_creates_an_empty_cart(self):
        user_id = register_user(name="Jane Doe", email="a@x.com", password="secret1")

        cart = current_domain.repository_for(Cart).for_user(user_id)
        assert str(cart.user_id) == user_id
        assert len(cart.items) == 0
        assert current_domain.repository_for(Cart).get(cart.id) is not None

    def test_email_is_stored_lowercase(self):
        user_id = register_user(name="Jane Doe", email="Jane@Example.COM", password="secret1")
        assert current_domain.repository_for(User).get(user_id).email == "jane@example.com"

    def test_duplicate_email_is_rejected(self):
        register_user(name="Jane Doe", email="a@x.com", password="secret1")

        with pytest.raises(InvalidInput) as exc:
            register_user(name="Other Jane", email="a@x.com", password="secret2")
        assert "email" in exc.value.messages

    def test_invalid_fields_are_reported_together(self):
        with pytest.raises(InvalidInput) as exc:
            register_user(name="  ", email="not-an-email", password="abc")
        assert set(exc.value.messages) == {"name", "email", "password"}

    def test_writes_to_event_store(self):
        user_id = register_user(name="Jane Doe", email="a@x.com", password="secret1")

        messages = current_domain.event_store.store.read("storefront::user")
        registered = [
            m
            for m in messages
            if m.metadata.headers.type == "Storefront.UserRegistered.v1" and m.data.get("user_id") == user_id
        ]
        assert len(registered) >= 1
