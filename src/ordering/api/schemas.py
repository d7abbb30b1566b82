"""Pydantic response schemas for the Ordering API.

These are external contracts (anti-corruption layer) — separate from the
internal Protean aggregates. Field names go out in camelCase, money as
decimal strings.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderItemResponse(_CamelModel):
    id: str
    order_id: str
    product_id: str
    product_name: str
    product_image: str
    price: str
    quantity: int

    @classmethod
    def from_item(cls, item, order_id) -> "OrderItemResponse":
        return cls(
            id=str(item.id),
            order_id=str(order_id),
            product_id=str(item.product_id),
            product_name=item.product_name,
            product_image=item.product_image,
            price=item.price,
            quantity=item.quantity,
        )


class OrderResponse(_CamelModel):
    id: str
    order_number: str
    customer_name: str
    customer_email: str
    customer_address: str
    customer_city: str
    customer_zip: str
    customer_country: str
    payment_method: str
    subtotal: str
    shipping: str
    total: str
    status: str
    created_at: datetime | None = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "id": "6f1c2f1e-0d1c-4a51-9a51-1f2f6f7c9b10",
                    "orderNumber": "ORD-1767225600000",
                    "customerName": "Ada Lovelace",
                    "customerEmail": "ada@example.com",
                    "customerAddress": "12 Analytical Row",
                    "customerCity": "London",
                    "customerZip": "N1 9GU",
                    "customerCountry": "UK",
                    "paymentMethod": "card",
                    "subtotal": "72.00",
                    "shipping": "0.00",
                    "total": "72.00",
                    "status": "processing",
                    "createdAt": "2026-01-01T00:00:00Z",
                }
            ]
        },
    )

    @classmethod
    def _fields_from(cls, order) -> dict:
        return {
            "id": str(order.id),
            "order_number": order.order_number,
            "customer_name": order.customer_name,
            "customer_email": order.customer_email,
            "customer_address": order.customer_address,
            "customer_city": order.customer_city,
            "customer_zip": order.customer_zip,
            "customer_country": order.customer_country,
            "payment_method": order.payment_method,
            "subtotal": order.subtotal,
            "shipping": order.shipping,
            "total": order.total,
            "status": order.status,
            "created_at": order.created_at,
        }

    @classmethod
    def from_order(cls, order) -> "OrderResponse":
        return cls(**cls._fields_from(order))


class OrderDetailResponse(OrderResponse):
    """An order with its items — what the invoice page renders."""

    items: list[OrderItemResponse]

    @classmethod
    def from_order(cls, order) -> "OrderDetailResponse":
        return cls(
            **cls._fields_from(order),
            items=[OrderItemResponse.from_item(item, order.id) for item in order.items],
        )
