"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    """Standard CRUD plus lookup by the human-facing order number."""

    def find_by_order_number(self, order_number: str) -> Order | None:
        """Return the Order with ``order_number``, or None when there is none."""
        results = self._dao.query.filter(order_number=order_number).all().items
        return results[0] if results else None

    def order_number_taken(self, order_number: str) -> bool:
        return self.find_by_order_number(order_number) is not None
