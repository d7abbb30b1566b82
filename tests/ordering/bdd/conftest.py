"""Shared BDD fixtures and step definitions for the Ordering domain."""

from decimal import Decimal

import pytest
from ordering.cart.storage.memory_adapter import MemoryStorage
from ordering.cart.store import CartStore
from pytest_bdd import given, parsers, then, when


@pytest.fixture()
def cart_storage():
    return MemoryStorage()


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given("an empty cart", target_fixture="cart_store")
def _(cart_storage):
    return CartStore(cart_storage)


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('I add {quantity:d} of "{product_id}" priced {price}'))
def _(cart_store, quantity, product_id, price):
    cart_store.add_item(product_id, f"Product {product_id}", f"/img/{product_id}.png", Decimal(price), quantity)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the cart count is {count:d}"))
def _(cart_store, count):
    assert cart_store.count() == count


@then(parsers.cfparse("the cart total is {amount}"))
def _(cart_store, amount):
    assert cart_store.total() == Decimal(amount)


@then("the cart is empty")
def _(cart_store):
    assert cart_store.is_empty()
