"""Tests for checkout pricing."""

from dataclasses import dataclass

import pytest

from storefront.catalogue.product import Product
from storefront.errors import InvalidOperation
from storefront.order.pricing import compute_checkout


@dataclass
class _Line:
    product: Product
    quantity: int


def _product(name, price):
    return Product.create(creator_id="seller-1", name=name, description=f"{name} for sale", price=price)


class TestComputeCheckout:
    def test_total_is_sum_of_price_times_quantity(self):
        summary = compute_checkout([_Line(_product("Desk", 10.0), 2), _Line(_product("Lamp", 5.0), 1)])
        assert summary.total == 25.0

    def test_line_items_snapshot_product_data(self):
        desk = _product("Desk", 10.0)
        summary = compute_checkout([_Line(desk, 2)])

        item = summary.line_items[0]
        assert item.product_id == str(desk.id)
        assert item.name == "Desk"
        assert item.description == "Desk for sale"
        assert item.price == 10.0
        assert item.quantity == 2
        assert item.subtotal == 20.0

    def test_line_items_keep_cart_order(self):
        lines = [_Line(_product("Desk", 10.0), 1), _Line(_product("Lamp", 5.0), 1)]
        summary = compute_checkout(lines)
        assert [item.name for item in summary.line_items] == ["Desk", "Lamp"]

    def test_empty_cart_cannot_be_checked_out(self):
        with pytest.raises(InvalidOperation) as exc:
            compute_checkout([])
        assert exc.value.message == "Cannot check out an empty cart"

    def test_to_dict_carries_every_snapshot_field(self):
        summary = compute_checkout([_Line(_product("Desk", 10.0), 3)])
        assert set(summary.line_items[0].to_dict()) == {
            "product_id",
            "name",
            "description",
            "price",
            "image_url",
            "quantity",
        }
