"""Order aggregate: an immutable, priced-at-submission record of a purchase.

State Machine:
    CREATED -> PAID -> FULFILLED
    CANCELLED (from CREATED or PAID)
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    DateTime,
    Float,
    HasMany,
    Identifier,
    Integer,
    String,
    Text,
    ValueObject,
)

from ordering.domain import ordering
from ordering.order.events import OrderCancelled, OrderFulfilled, OrderPaid, OrderPlaced


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    CREATED = "created"
    PAID = "paid"
    FULFILLED = "fulfilled"
    CANCELLED = "cancelled"


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    PAYPAL = "paypal"
    CASH_ON_DELIVERY = "cash_on_delivery"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.CREATED: {OrderStatus.PAID, OrderStatus.CANCELLED},
    OrderStatus.PAID: {OrderStatus.FULFILLED, OrderStatus.CANCELLED},
    OrderStatus.FULFILLED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@ordering.value_object(part_of="Order")
class ShippingAddress:
    """Where the order ships, captured at checkout.

    Later changes to the user's profile address never touch it.
    """

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    state = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)
    country = String(required=True, max_length=100)


@ordering.value_object(part_of="Order")
class OrderPricing:
    """Financial summary locked at submission."""

    items_price = Float(default=0.0)
    tax_price = Float(default=0.0)
    shipping_price = Float(default=0.0)
    total_price = Float(default=0.0)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderItem:
    """A priced order line. Name, image and unit price are snapshots from the catalogue."""

    product_id = Identifier(required=True)
    name = String(required=True, max_length=200)
    image = String(max_length=500)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self):
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.CREATED.value,
    )
    items = HasMany(OrderItem)
    shipping_address = ValueObject(ShippingAddress, required=True)
    payment_method = String(choices=PaymentMethod, required=True)
    pricing = ValueObject(OrderPricing)
    order_notes = Text()
    payment_reference = String(max_length=255)
    cancellation_reason = String(max_length=500)
    paid_at = DateTime()
    fulfilled_at = DateTime()
    cancelled_at = DateTime()
    created_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def order_must_have_items(self):
        if not self.items:
            raise ValidationError({"items": ["An order must have at least one item"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(
        cls,
        customer_id,
        items_data,
        shipping_address,
        payment_method,
        pricing,
        order_notes=None,
        order_id=None,
    ):
        """Create a new order from already-priced lines.

        Args:
            customer_id: The user placing the order.
            items_data: List of dicts with product_id, name, image, quantity, unit_price.
            shipping_address: Dict with street, city, state, zip_code, country.
            payment_method: One of ``PaymentMethod`` values.
            pricing: Dict with items_price, tax_price, shipping_price, total_price.
            order_id: Optional pre-allocated identity.
        """
        now = datetime.now(UTC)

        attributes = dict(
            customer_id=str(customer_id),
            items=[OrderItem(**item) for item in items_data],
            shipping_address=ShippingAddress(**shipping_address),
            payment_method=payment_method,
            pricing=OrderPricing(**pricing),
            order_notes=order_notes,
            created_at=now,
            updated_at=now,
        )
        if order_id:
            attributes["id"] = order_id
        order = cls(**attributes)

        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                customer_id=str(customer_id),
                items=json.dumps(items_data),
                payment_method=payment_method,
                items_price=order.pricing.items_price,
                tax_price=order.pricing.tax_price,
                shipping_price=order.pricing.shipping_price,
                total_price=order.pricing.total_price,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # State transition helper
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        """Validate that the current state allows transition to target."""
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise ValidationError({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def reserved_quantities(self):
        """Quantities per product held by this order."""
        quantities = {}
        for item in self.items:
            quantities[str(item.product_id)] = quantities.get(str(item.product_id), 0) + item.quantity
        return quantities

    def is_owned_by(self, user_id):
        return str(self.customer_id) == str(user_id)

    # -------------------------------------------------------------------
    # Order lifecycle transitions
    # -------------------------------------------------------------------
    def mark_paid(self, payment_reference=None):
        self._assert_can_transition(OrderStatus.PAID)
        now = datetime.now(UTC)
        self.status = OrderStatus.PAID.value
        self.payment_reference = payment_reference
        self.paid_at = now
        self.updated_at = now

        self.raise_(
            OrderPaid(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                amount=self.pricing.total_price,
                payment_reference=payment_reference,
                paid_at=now,
            )
        )

    def fulfil(self):
        self._assert_can_transition(OrderStatus.FULFILLED)
        now = datetime.now(UTC)
        self.status = OrderStatus.FULFILLED.value
        self.fulfilled_at = now
        self.updated_at = now

        self.raise_(
            OrderFulfilled(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                fulfilled_at=now,
            )
        )

    def cancel(self, reason=None):
        previous_status = self.status
        self._assert_can_transition(OrderStatus.CANCELLED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.cancellation_reason = reason
        self.cancelled_at = now
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                reason=reason,
                items=json.dumps(
                    [
                        {"product_id": product_id, "quantity": quantity}
                        for product_id, quantity in self.reserved_quantities().items()
                    ]
                ),
                previous_status=previous_status,
                cancelled_at=now,
            )
        )
