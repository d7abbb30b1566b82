"""Checkout pricing — shipping rule and order summary derived from a cart.

Orders at or above the free-shipping threshold ship free; anything below
pays a flat rate. Both amounts come from the environment
(FREE_SHIPPING_THRESHOLD, FLAT_SHIPPING_RATE) and default to 50.00 / 10.00.
"""

import os
from dataclasses import dataclass
from decimal import Decimal

from ordering.cart.reducer import Cart, cart_total
from ordering.shared.money import ZERO, to_money

DEFAULT_FREE_SHIPPING_THRESHOLD = Decimal("50.00")
DEFAULT_FLAT_SHIPPING_RATE = Decimal("10.00")


@dataclass(frozen=True)
class ShippingPolicy:
    free_shipping_threshold: Decimal = DEFAULT_FREE_SHIPPING_THRESHOLD
    flat_rate: Decimal = DEFAULT_FLAT_SHIPPING_RATE

    @classmethod
    def from_env(cls) -> "ShippingPolicy":
        return cls(
            free_shipping_threshold=to_money(
                os.environ.get("FREE_SHIPPING_THRESHOLD", DEFAULT_FREE_SHIPPING_THRESHOLD)
            ),
            flat_rate=to_money(os.environ.get("FLAT_SHIPPING_RATE", DEFAULT_FLAT_SHIPPING_RATE)),
        )

    def shipping_for(self, subtotal) -> Decimal:
        if to_money(subtotal) >= self.free_shipping_threshold:
            return ZERO
        return to_money(self.flat_rate)

    def remaining_for_free_shipping(self, subtotal) -> Decimal:
        return max(to_money(self.free_shipping_threshold) - to_money(subtotal), ZERO)


@dataclass(frozen=True)
class CheckoutSummary:
    """Amounts shown on the cart and checkout pages."""

    subtotal: Decimal
    shipping: Decimal
    total: Decimal
    remaining_for_free_shipping: Decimal

    @property
    def ships_free(self) -> bool:
        return self.shipping == 0


def shipping_for(subtotal, policy: ShippingPolicy | None = None) -> Decimal:
    """Shipping charge for a cart subtotal."""
    return (policy or ShippingPolicy.from_env()).shipping_for(subtotal)


def summarize(cart: Cart, policy: ShippingPolicy | None = None) -> CheckoutSummary:
    """Subtotal, shipping and final total for a cart."""
    policy = policy or ShippingPolicy.from_env()
    subtotal = to_money(cart_total(cart))
    shipping = policy.shipping_for(subtotal)
    return CheckoutSummary(
        subtotal=subtotal,
        shipping=shipping,
        total=subtotal + shipping,
        remaining_for_free_shipping=policy.remaining_for_free_shipping(subtotal),
    )
