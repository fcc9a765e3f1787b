"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order

_PAGE = 100


@ordering.repository(part_of=Order)
class OrderRepository:
    def for_customer(self, customer_id: str) -> list[Order]:
        """All orders placed by a customer, newest first."""
        orders = []
        offset = 0
        while True:
            results = (
                self._dao.query.filter(customer_id=str(customer_id))
                .order_by("-created_at")
                .offset(offset)
                .limit(_PAGE)
                .all()
            )
            orders.extend(results.items)
            offset += _PAGE
            if offset >= results.total:
                return orders
