"""Application tests for invoice lookups."""

import pytest
from ordering.order.creation import place_order
from ordering.order.lookup import get_order_by_number, items_for_order
from protean.exceptions import ObjectNotFoundError


def _payload(order_number=None):
    payload = {
        "customerName": "Grace Hopper",
        "customerEmail": "grace@example.com",
        "customerAddress": "1 Harbor Way",
        "customerCity": "Arlington",
        "customerZip": "22201",
        "customerCountry": "US",
        "paymentMethod": "cod",
        "subtotal": "43.00",
        "shipping": "10.00",
        "total": "53.00",
        "items": [
            {
                "productId": "p2",
                "productName": "Ceramic Coffee Mug",
                "productImage": "/img/mug.png",
                "price": "19.00",
                "quantity": 1,
            },
            {
                "productId": "p9",
                "productName": "Wire Desk Organizer",
                "productImage": "/img/organizer.png",
                "price": "12.00",
                "quantity": 2,
            },
        ],
    }
    if order_number:
        payload["orderNumber"] = order_number
    return payload


class TestGetOrderByNumber:
    def test_round_trip(self):
        placed = place_order(_payload())
        order = get_order_by_number(placed.order_number)
        assert order.id == placed.id
        assert order.customer_email == "grace@example.com"
        assert sorted(item.product_id for item in order.items) == ["p2", "p9"]

    def test_is_idempotent(self):
        placed = place_order(_payload("ORD-7"))
        first = get_order_by_number("ORD-7")
        second = get_order_by_number("ORD-7")
        assert first.id == second.id == placed.id
        assert first.total == second.total

    def test_unknown_number_raises_not_found(self):
        with pytest.raises(ObjectNotFoundError):
            get_order_by_number("ORD-does-not-exist")

    def test_match_is_exact(self):
        place_order(_payload("ORD-100"))
        with pytest.raises(ObjectNotFoundError):
            get_order_by_number("ORD-10")


class TestItemsForOrder:
    def test_lists_items_of_an_order(self):
        placed = place_order(_payload())
        items = items_for_order(placed.id)
        assert sorted((item.product_id, item.quantity) for item in items) == [("p2", 1), ("p9", 2)]

    def test_unknown_order_has_no_items(self):
        assert items_for_order("no-such-order") == []
