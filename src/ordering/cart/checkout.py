"""Checkout — turn the cart and the checkout form into a placed order.

1. Compose the order-creation request (cart snapshot + form fields)
2. Hand it to the order placement operation
3. Clear the cart, only once the order exists
"""

from dataclasses import dataclass

import structlog
from protean.exceptions import ValidationError

from ordering.cart.pricing import ShippingPolicy, summarize
from ordering.cart.reducer import Cart

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutForm:
    """Shipping and payment details entered on the checkout page."""

    name: str
    email: str
    address: str
    city: str
    zip: str
    country: str
    payment_method: str = "card"


def compose_order_request(cart: Cart, form: CheckoutForm, policy: ShippingPolicy | None = None, order_number=None):
    """Build the order-creation payload for ``cart`` and ``form``."""
    summary = summarize(cart, policy)
    payload = {
        "customerName": form.name,
        "customerEmail": form.email,
        "customerAddress": form.address,
        "customerCity": form.city,
        "customerZip": form.zip,
        "customerCountry": form.country,
        "paymentMethod": form.payment_method,
        "subtotal": str(summary.subtotal),
        "shipping": str(summary.shipping),
        "total": str(summary.total),
        "status": "processing",
        "items": [
            {
                "productId": line.product_id,
                "productName": line.product_name,
                "productImage": line.product_image,
                "price": str(line.price),
                "quantity": line.quantity,
            }
            for line in cart
        ],
    }
    if order_number:
        payload["orderNumber"] = order_number
    return payload


def checkout(store, form: CheckoutForm, place_order=None, policy: ShippingPolicy | None = None) -> str:
    """Place an order for the store's cart and return its order number.

    ``place_order`` takes the request payload and returns the created order;
    it defaults to the ordering domain's ``place_order``. The cart is left
    untouched when placement fails.
    """
    if store.is_empty():
        raise ValidationError({"cart": ["Cannot check out an empty cart"]})

    if place_order is None:
        from ordering.order.creation import place_order

    order = place_order(compose_order_request(store.lines, form, policy))
    store.clear()

    logger.info("checkout_completed", order_number=order.order_number, degraded_cart=store.degraded)
    return order.order_number
