"""Invoice lookups — resolve an order number (or id) to the placed order."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.domain import logger
from ordering.order.order import Order, OrderItem


def get_order_by_number(order_number: str) -> Order:
    """Return the Order with ``order_number`` together with all its items.

    Raises ``ObjectNotFoundError`` when no order carries that number.
    """
    repo = current_domain.repository_for(Order)
    order = repo.find_by_order_number(order_number)
    if order is None:
        logger.info("order_lookup_miss", order_number=order_number)
        raise ObjectNotFoundError({"_entity": f"Order with number `{order_number}` does not exist"})
    return repo.get(order.id)


def items_for_order(order_id: str) -> list[OrderItem]:
    """Items of the order with ``order_id``; empty when there is no such order."""
    try:
        order = current_domain.repository_for(Order).get(order_id)
    except ObjectNotFoundError:
        return []
    return list(order.items)
