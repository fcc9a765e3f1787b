"""Domain events for the Order aggregate."""

from protean.fields import DateTime, Float, Identifier, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderPlaced:
    """A customer submitted an order and its lines were priced from the catalogue."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    payment_method = String(required=True)
    items_price = Float(required=True)
    tax_price = Float(required=True)
    shipping_price = Float(required=True)
    total_price = Float(required=True)
    placed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderPaid:
    """Payment for the order was recorded."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    amount = Float(required=True)
    payment_reference = String()
    paid_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderFulfilled:
    """The order was handed over to the customer."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    fulfilled_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """The order was cancelled; its reserved stock goes back to the catalogue."""

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    reason = String()
    items = Text(required=True)  # JSON: list of {product_id, quantity}
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
