"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A checkout was snapshotted into a new order."""

    __version__ = "v1"

    order_id = Identifier(required=True)
    order_number = String(required=True)
    customer_email = String(required=True)
    payment_method = String(required=True)
    total = String(required=True)  # decimal string
    item_count = Integer(required=True)
    placed_at = DateTime(required=True)
