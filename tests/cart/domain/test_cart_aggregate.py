"""Tests for Cart aggregate behaviour."""

import pytest

from storefront.cart.cart import Cart
from storefront.cart.events import CartCleared, CartItemAdded, CartItemRemoved
from storefront.catalogue.product import Product
from storefront.errors import InvalidOperation, NotFound


def _make_product(creator_id="seller-1", **overrides):
    defaults = {
        "creator_id": creator_id,
        "name": "Walnut desk",
        "description": "Solid walnut writing desk",
        "price": 349.0,
    }
    defaults.update(overrides)
    return Product.create(**defaults)


@pytest.fixture
def cart():
    return Cart.create(user_id="buyer-1")


class TestCartCreation:
    def test_new_cart_is_empty(self, cart):
        assert str(cart.user_id) == "buyer-1"
        assert len(cart.items) == 0
        assert cart.created_at is not None


class TestAddProduct:
    def test_first_add_creates_line_with_quantity_one(self, cart):
        product = _make_product()
        cart.add_product(product)

        assert len(cart.items) == 1
        assert cart.quantity_of(product.id) == 1

    def test_adding_same_product_twice_increments_quantity(self, cart):
        product = _make_product()
        cart.add_product(product)
        cart.add_product(product)

        assert len(cart.items) == 1
        assert cart.quantity_of(product.id) == 2

    def test_distinct_products_get_their_own_lines(self, cart):
        cart.add_product(_make_product(name="Desk"))
        cart.add_product(_make_product(name="Lamp"))
        assert len(cart.items) == 2

    def test_own_product_is_rejected(self, cart):
        product = _make_product(creator_id="buyer-1")

        with pytest.raises(InvalidOperation) as exc:
            cart.add_product(product)

        assert exc.value.message == "You cannot add your own product to your cart"
        assert len(cart.items) == 0
        assert cart._events == []

    def test_own_product_rejected_when_other_lines_exist(self, cart):
        other = _make_product()
        cart.add_product(other)

        with pytest.raises(InvalidOperation):
            cart.add_product(_make_product(creator_id="buyer-1"))

        assert len(cart.items) == 1
        assert cart.quantity_of(other.id) == 1

    def test_add_raises_event_with_new_quantity(self, cart):
        product = _make_product()
        cart.add_product(product)
        cart.add_product(product)

        events = [e for e in cart._events if isinstance(e, CartItemAdded)]
        assert [e.quantity for e in events] == [1, 2]
        assert events[-1].product_id == str(product.id)


class TestRemoveProduct:
    def test_remove_drops_the_whole_line(self, cart):
        product = _make_product()
        cart.add_product(product)
        cart.add_product(product)

        cart.remove_product(product.id)

        assert len(cart.items) == 0
        assert cart.quantity_of(product.id) == 0
        assert isinstance(cart._events[-1], CartItemRemoved)

    def test_remove_absent_product_fails(self, cart):
        product = _make_product()
        cart.add_product(product)

        with pytest.raises(NotFound):
            cart.remove_product("not-in-cart")

        assert cart.quantity_of(product.id) == 1


class TestClear:
    def test_clear_removes_every_line(self, cart):
        cart.add_product(_make_product(name="Desk"))
        cart.add_product(_make_product(name="Lamp"))

        cart.clear()

        assert len(cart.items) == 0
        event = cart._events[-1]
        assert isinstance(event, CartCleared)
        assert event.items_removed == 2

    def test_clear_on_empty_cart_is_allowed(self, cart):
        cart.clear()
        assert len(cart.items) == 0
