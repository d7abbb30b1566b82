"""Order aggregate — an immutable snapshot of a cart taken at checkout.

An Order records who is buying, where it ships, how it is paid and what it
costs, together with one OrderItem per cart line. Prices, names and images
are copied from the cart so the invoice never changes when the catalogue
does. Nothing mutates an Order after it is placed.

Money is held as decimal strings quantized to cents (``"24.00"``); use the
``*_amount`` properties for arithmetic.
"""

from datetime import UTC, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from ordering.domain import ordering
from ordering.order.events import OrderPlaced
from ordering.shared.money import format_money


class PaymentMethod(Enum):
    CARD = "card"
    PAYPAL = "paypal"
    COD = "cod"


class OrderStatus(Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"


@ordering.entity(part_of="Order")
class OrderItem:
    """A purchased product line, copied from the cart at checkout."""

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    product_image = String(required=True, max_length=500)
    price = String(required=True, max_length=20)
    quantity = Integer(required=True, min_value=1)

    @property
    def price_amount(self) -> Decimal:
        return Decimal(self.price)

    @property
    def line_total(self) -> Decimal:
        return self.price_amount * self.quantity


@ordering.aggregate
class Order:
    order_number = String(required=True, max_length=50, unique=True)
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_address = String(required=True, max_length=500)
    customer_city = String(required=True, max_length=100)
    customer_zip = String(required=True, max_length=20)
    customer_country = String(required=True, max_length=100)
    payment_method = String(required=True, choices=PaymentMethod)
    subtotal = String(required=True, max_length=20)
    shipping = String(required=True, max_length=20)
    total = String(required=True, max_length=20)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    created_at = DateTime()
    items = HasMany(OrderItem)

    @invariant.post
    def total_must_equal_subtotal_plus_shipping(self):
        try:
            subtotal, shipping, total = (Decimal(v) for v in (self.subtotal, self.shipping, self.total))
        except (InvalidOperation, TypeError):
            raise ValidationError({"total": ["Order amounts must be decimal numbers"]}) from None

        if total != subtotal + shipping:
            raise ValidationError(
                {"total": [f"Total {self.total} must equal subtotal {self.subtotal} + shipping {self.shipping}"]}
            )

    @property
    def subtotal_amount(self) -> Decimal:
        return Decimal(self.subtotal)

    @property
    def shipping_amount(self) -> Decimal:
        return Decimal(self.shipping)

    @property
    def total_amount(self) -> Decimal:
        return Decimal(self.total)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        order_number,
        customer,
        payment_method,
        subtotal,
        shipping,
        total,
        items_data,
        status=None,
        placed_at=None,
    ):
        """Snapshot a checkout into a new Order.

        Args:
            customer: dict with name, email, address, city, zip, country.
            items_data: list of dicts with product_id, product_name,
                product_image, price, quantity.
        """
        now = placed_at or datetime.now(UTC)

        order = cls(
            order_number=order_number,
            customer_name=customer["name"],
            customer_email=customer["email"],
            customer_address=customer["address"],
            customer_city=customer["city"],
            customer_zip=customer["zip"],
            customer_country=customer["country"],
            payment_method=payment_method,
            subtotal=format_money(subtotal),
            shipping=format_money(shipping),
            total=format_money(total),
            status=status or OrderStatus.PENDING.value,
            created_at=now,
        )
        for item in items_data:
            order.add_items(
                OrderItem(
                    product_id=str(item["product_id"]),
                    product_name=item["product_name"],
                    product_image=item["product_image"],
                    price=format_money(item["price"]),
                    quantity=int(item["quantity"]),
                )
            )

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_number=order.order_number,
                customer_email=order.customer_email,
                payment_method=order.payment_method,
                total=order.total,
                item_count=order.item_count,
                placed_at=now,
            )
        )
        return order
