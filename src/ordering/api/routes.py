"""FastAPI routes for the Ordering domain — order placement and invoices."""

from fastapi import APIRouter, Request
from protean.exceptions import ValidationError

from ordering.api.schemas import OrderDetailResponse, OrderItemResponse, OrderResponse
from ordering.order.creation import place_order
from ordering.order.lookup import get_order_by_number, items_for_order

order_router = APIRouter(prefix="/api/orders", tags=["orders"])


async def _json_body(request: Request):
    try:
        return await request.json()
    except ValueError:
        raise ValidationError({"payload": ["Request body must be a JSON object"]}) from None


@order_router.post("", status_code=201, response_model=OrderResponse)
async def create_order(request: Request) -> OrderResponse:
    """Place an order from the checkout payload (camelCase fields)."""
    order = place_order(await _json_body(request))
    return OrderResponse.from_order(order)


@order_router.get("/{order_number}", response_model=OrderDetailResponse)
async def get_order(order_number: str) -> OrderDetailResponse:
    return OrderDetailResponse.from_order(get_order_by_number(order_number))


@order_router.get("/{order_id}/items", response_model=list[OrderItemResponse])
async def get_order_items(order_id: str) -> list[OrderItemResponse]:
    return [OrderItemResponse.from_item(item, order_id) for item in items_for_order(order_id)]
