"""Order creation — command, handler and the placement entry point."""

import json

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from ordering.domain import logger, ordering
from ordering.order.contract import OrderRequest, validate_order_request
from ordering.order.numbering import get_number_generator
from ordering.order.order import Order
from ordering.shared.money import format_money


@ordering.command(part_of="Order")
class CreateOrder:
    order_number = String(max_length=50)
    customer_name = String(required=True, max_length=255)
    customer_email = String(required=True, max_length=254)
    customer_address = String(required=True, max_length=500)
    customer_city = String(required=True, max_length=100)
    customer_zip = String(required=True, max_length=20)
    customer_country = String(required=True, max_length=100)
    payment_method = String(required=True, max_length=20)
    subtotal = String(required=True, max_length=20)
    shipping = String(required=True, max_length=20)
    total = String(required=True, max_length=20)
    status = String(max_length=20)
    items = Text(required=True)  # JSON: list of item dicts


@ordering.command_handler(part_of=Order)
class CreateOrderHandler:
    @handle(CreateOrder)
    def create_order(self, command):
        repo = current_domain.repository_for(Order)
        generator = get_number_generator()

        if command.order_number:
            if repo.order_number_taken(command.order_number):
                raise ValidationError({"order_number": [f"Order number {command.order_number} is already in use"]})
            order_number = command.order_number
        else:
            order_number = generator.next_number()
            while repo.order_number_taken(order_number):
                order_number = generator.next_number()

        items_data = json.loads(command.items) if isinstance(command.items, str) else command.items

        order = Order.place(
            order_number=order_number,
            customer={
                "name": command.customer_name,
                "email": command.customer_email,
                "address": command.customer_address,
                "city": command.customer_city,
                "zip": command.customer_zip,
                "country": command.customer_country,
            },
            payment_method=command.payment_method,
            subtotal=command.subtotal,
            shipping=command.shipping,
            total=command.total,
            items_data=items_data,
            status=command.status,
            placed_at=generator.clock(),
        )
        repo.add(order)

        logger.info(
            "order_placed",
            order_id=str(order.id),
            order_number=order.order_number,
            total=order.total,
            item_count=order.item_count,
        )
        return str(order.id)


def _command_from(request: OrderRequest) -> CreateOrder:
    return CreateOrder(
        order_number=request.order_number,
        customer_name=request.customer_name,
        customer_email=request.customer_email,
        customer_address=request.customer_address,
        customer_city=request.customer_city,
        customer_zip=request.customer_zip,
        customer_country=request.customer_country,
        payment_method=request.payment_method.value,
        subtotal=format_money(request.subtotal),
        shipping=format_money(request.shipping),
        total=format_money(request.total),
        status=request.status.value if request.status else None,
        items=json.dumps(
            [
                {
                    "product_id": item.product_id,
                    "product_name": item.product_name,
                    "product_image": item.product_image,
                    "price": format_money(item.price),
                    "quantity": item.quantity,
                }
                for item in request.items
            ]
        ),
    )


def place_order(payload) -> Order:
    """Validate an order-creation payload, persist the Order and return it.

    Raises ``ValidationError`` listing every violated field; nothing is
    written in that case.
    """
    request = validate_order_request(payload)
    order_id = current_domain.process(_command_from(request), asynchronous=False)
    return current_domain.repository_for(Order).get(order_id)
