"""Order placement: command and handler.

The command carries lines that were already priced from the catalogue;
see ``ordering.checkout.placement`` for the service that prices them.
"""

import json

from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class PlaceOrder:
    order_id = Identifier()
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of item dicts
    shipping_address = Text(required=True)  # JSON: address dict
    payment_method = String(required=True, max_length=50)
    items_price = Float(required=True)
    tax_price = Float(required=True)
    shipping_price = Float(required=True)
    total_price = Float(required=True)
    order_notes = Text()


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        order = Order.place(
            customer_id=command.customer_id,
            items_data=json.loads(command.items),
            shipping_address=json.loads(command.shipping_address),
            payment_method=command.payment_method,
            pricing={
                "items_price": command.items_price,
                "tax_price": command.tax_price,
                "shipping_price": command.shipping_price,
                "total_price": command.total_price,
            },
            order_notes=command.order_notes,
            order_id=command.order_id,
        )
        current_domain.repository_for(Order).add(order)
        return str(order.id)
