"""Application tests for checkout."""

from unittest.mock import patch

import pytest
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.cart.items import AddToCart
from storefront.catalogue.creation import CreateProduct
from storefront.catalogue.details import UpdateProduct
from storefront.catalogue.removal import delete_product
from storefront.errors import GatewayError, InvalidOperation
from storefront.order.checkout import checkout
from storefront.order.order import Order


def _create_product(user_id, name, price):
    command = CreateProduct(user_id=user_id, name=name, description=f"{name} for sale", price=price)
    return current_domain.process(command, asynchronous=False)


def _add(user_id, product_id, times=1):
    for _ in range(times):
        current_domain.process(AddToCart(user_id=user_id, product_id=product_id), asynchronous=False)


def _orders(user_id):
    return current_domain.repository_for(Order).for_user(user_id)


def _cart(user_id):
    return current_domain.repository_for(Cart).for_user(user_id)


@pytest.fixture
def filled_cart(seller, buyer):
    desk = _create_product(seller, "Desk", 10.0)
    lamp = _create_product(seller, "Lamp", 5.0)
    _add(buyer, desk, times=2)
    _add(buyer, lamp)
    return {"desk": desk, "lamp": lamp}


class TestSuccessfulCheckout:
    def test_total_and_order_snapshot(self, buyer, filled_cart, fake_gateway, fake_mailer):
        result = checkout(buyer)

        order = current_domain.repository_for(Order).get(result.order_id)
        assert order.total_price == 25.0
        assert order.email == "buyer@example.com"

        lines = {str(line.product_id): line for line in order.lines}
        assert set(lines) == {filled_cart["desk"], filled_cart["lamp"]}
        assert lines[filled_cart["desk"]].quantity == 2
        assert lines[filled_cart["desk"]].price == 10.0
        assert lines[filled_cart["lamp"]].quantity == 1
        assert lines[filled_cart["lamp"]].name == "Lamp"

    def test_gateway_receives_total_and_line_items(self, buyer, filled_cart, fake_gateway, fake_mailer):
        result = checkout(buyer)

        assert len(fake_gateway.requests) == 1
        call = fake_gateway.requests[0]
        assert call.amount == 25.0
        assert call.currency == "usd"
        assert len(call.line_items) == 2

        order = current_domain.repository_for(Order).get(result.order_id)
        assert order.payment_intent_id.startswith("pi_fake_")
        assert result.client_secret.startswith(order.payment_intent_id)

    def test_cart_is_emptied_after_order_is_stored(self, buyer, filled_cart, fake_gateway, fake_mailer):
        checkout(buyer)

        assert len(_orders(buyer)) == 1
        assert len(_cart(buyer).items) == 0

    def test_receipt_is_mailed(self, buyer, filled_cart, fake_gateway, fake_mailer):
        checkout(buyer)

        assert len(fake_mailer.outbox) == 1
        mail = fake_mailer.outbox[0]
        assert mail.to == "buyer@example.com"
        assert mail.subject == "Purchase receipt"
        assert "$25.00" in mail.text

    def test_receipt_failure_does_not_fail_checkout(self, buyer, filled_cart, fake_gateway, fake_mailer):
        fake_mailer.reject_with()

        result = checkout(buyer)

        assert result.order_id
        assert len(_orders(buyer)) == 1
        assert len(_cart(buyer).items) == 0

    def test_later_product_edits_do_not_change_order(self, seller, buyer, filled_cart, fake_gateway, fake_mailer):
        result = checkout(buyer)
        current_domain.process(
            UpdateProduct(
                user_id=seller,
                product_id=filled_cart["desk"],
                name="Standing desk",
                description="Height adjustable desk",
                price=99.0,
            ),
            asynchronous=False,
        )

        order = current_domain.repository_for(Order).get(result.order_id)
        desk = next(line for line in order.lines if str(line.product_id) == filled_cart["desk"])
        assert desk.name == "Desk"
        assert desk.price == 10.0
        assert order.total_price == 25.0

    def test_cart_clear_failure_still_returns_order(self, buyer, filled_cart, fake_gateway, fake_mailer):
        with patch.object(Cart, "clear", side_effect=RuntimeError("cart store unavailable")):
            result = checkout(buyer)

        assert result.order_id
        assert [str(order.id) for order in _orders(buyer)] == [result.order_id]
        assert _cart(buyer).quantity_of(filled_cart["desk"]) == 2

    def test_later_product_deletion_does_not_change_order(self, seller, buyer, filled_cart, fake_gateway, fake_mailer):
        result = checkout(buyer)
        delete_product(seller, filled_cart["lamp"])

        order = current_domain.repository_for(Order).get(result.order_id)
        assert {line.name for line in order.lines} == {"Desk", "Lamp"}


class TestFailedCheckout:
    def test_empty_cart_makes_no_gateway_call(self, buyer, fake_gateway):
        with pytest.raises(InvalidOperation):
            checkout(buyer)

        assert fake_gateway.requests == []
        assert _orders(buyer) == []

    def test_gateway_failure_leaves_no_order_and_keeps_cart(self, buyer, filled_cart, fake_gateway, fake_mailer):
        fake_gateway.decline("Card declined")

        with pytest.raises(GatewayError) as exc:
            checkout(buyer)

        assert exc.value.message == "Card declined"
        assert _orders(buyer) == []
        cart = _cart(buyer)
        assert cart.quantity_of(filled_cart["desk"]) == 2
        assert cart.quantity_of(filled_cart["lamp"]) == 1
        assert fake_mailer.outbox == []

    def test_gateway_exception_is_a_gateway_error(self, buyer, filled_cart, fake_gateway):
        def _boom(**kwargs):
            raise ConnectionError("processor unreachable")

        fake_gateway.create_payment_session = _boom

        with pytest.raises(GatewayError) as exc:
            checkout(buyer)

        assert exc.value.message == "Payment processor failure"
        assert _orders(buyer) == []
        assert len(_cart(buyer).items) == 2


    def test_order_write_failure_leaves_no_order_and_keeps_cart(self, buyer, filled_cart, fake_gateway, fake_mailer):
        with patch.object(Order, "place", side_effect=RuntimeError("order store unavailable")):
            with pytest.raises(RuntimeError):
                checkout(buyer)

        assert len(fake_gateway.requests) == 1
        assert _orders(buyer) == []
        cart = _cart(buyer)
        assert cart.quantity_of(filled_cart["desk"]) == 2
        assert cart.quantity_of(filled_cart["lamp"]) == 1
        assert fake_mailer.outbox == []


class TestOrderHistory:
    def test_orders_listed_newest_first(self, seller, buyer, fake_gateway, fake_mailer):
        desk = _create_product(seller, "Desk", 10.0)
        _add(buyer, desk)
        first = checkout(buyer).order_id
        _add(buyer, desk)
        second = checkout(buyer).order_id

        assert [str(order.id) for order in _orders(buyer)] == [second, first]
