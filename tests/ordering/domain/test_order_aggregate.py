"""Tests for the Order aggregate and its OrderItem entity."""

from datetime import UTC, datetime
from decimal import Decimal

import pytest
from ordering.order.events import OrderPlaced
from ordering.order.order import Order, OrderItem, OrderStatus
from protean.exceptions import ValidationError

PLACED_AT = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


def _place(**overrides):
    defaults = {
        "order_number": "ORD-1767268800000",
        "customer": {
            "name": "Ada Lovelace",
            "email": "ada@example.com",
            "address": "12 Analytical Row",
            "city": "London",
            "zip": "N1 9GU",
            "country": "UK",
        },
        "payment_method": "card",
        "subtotal": "72.00",
        "shipping": "0.00",
        "total": "72.00",
        "items_data": [
            {
                "product_id": "p1",
                "product_name": "Ceramic Coffee Mug",
                "product_image": "/img/mug.png",
                "price": "24.00",
                "quantity": 3,
            }
        ],
        "placed_at": PLACED_AT,
    }
    defaults.update(overrides)
    return Order.place(**defaults)


class TestOrderPlacement:
    def test_copies_customer_fields(self):
        order = _place()
        assert order.customer_name == "Ada Lovelace"
        assert order.customer_email == "ada@example.com"
        assert order.customer_city == "London"
        assert order.customer_zip == "N1 9GU"

    def test_status_defaults_to_pending(self):
        assert _place().status == OrderStatus.PENDING.value

    def test_explicit_status(self):
        assert _place(status="processing").status == "processing"

    def test_created_at_is_the_placement_time(self):
        assert _place().created_at == PLACED_AT

    def test_items_are_snapshotted(self):
        order = _place()
        assert len(order.items) == 1
        item = order.items[0]
        assert isinstance(item, OrderItem)
        assert item.product_name == "Ceramic Coffee Mug"
        assert item.price == "24.00"
        assert item.line_total == Decimal("72.00")

    def test_money_is_normalized_to_cents(self):
        order = _place(subtotal=Decimal("72"), shipping=0, total="72.0")
        assert (order.subtotal, order.shipping, order.total) == ("72.00", "0.00", "72.00")
        assert order.total_amount == Decimal("72.00")

    def test_item_count_sums_quantities(self):
        order = _place(
            subtotal="82.00",
            total="82.00",
            items_data=[
                {"product_id": "p1", "product_name": "Mug", "product_image": "/m.png", "price": "24.00", "quantity": 3},
                {"product_id": "p2", "product_name": "Tin", "product_image": "/t.png", "price": "5.00", "quantity": 2},
            ],
        )
        assert order.item_count == 5


class TestOrderInvariants:
    def test_total_must_equal_subtotal_plus_shipping(self):
        with pytest.raises(ValidationError) as exc:
            _place(total="70.00")
        assert "total" in exc.value.messages

    def test_payment_method_must_be_known(self):
        with pytest.raises(ValidationError) as exc:
            _place(payment_method="bogus")
        assert "payment_method" in exc.value.messages

    def test_item_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            _place(
                items_data=[
                    {"product_id": "p1", "product_name": "Mug", "product_image": "/m.png", "price": "24.00", "quantity": 0}
                ]
            )


class TestOrderPlacedEvent:
    def test_placement_raises_order_placed(self):
        order = _place()
        assert len(order._events) == 1
        event = order._events[0]
        assert isinstance(event, OrderPlaced)
        assert event.order_id == str(order.id)
        assert event.order_number == "ORD-1767268800000"
        assert event.total == "72.00"
        assert event.item_count == 3
        assert event.placed_at == PLACED_AT

    def test_version(self):
        assert OrderPlaced.__version__ == "v1"
