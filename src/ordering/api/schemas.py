"""Pydantic request/response schemas for the Ordering API.

Keys are camelCase on the wire; identities are sent as ``_id``.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------
class OrderItemIn(CamelModel):
    product: str
    quantity: int


class ShippingAddressIn(CamelModel):
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)


class PlaceOrderRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "orderItems": [{"product": "prod-001", "quantity": 2}],
                    "shippingAddress": {
                        "street": "123 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "zipCode": "62701",
                        "country": "USA",
                    },
                    "paymentMethod": "credit_card",
                    "orderNotes": "Leave at the front door",
                }
            ]
        },
    )

    order_items: list[OrderItemIn] = Field(default_factory=list)
    shipping_address: ShippingAddressIn = Field(default_factory=ShippingAddressIn)
    payment_method: str | None = None
    order_notes: str | None = None


class PayOrderRequest(CamelModel):
    payment_reference: str | None = Field(None, max_length=255)


class CancelOrderRequest(CamelModel):
    reason: str | None = Field(None, max_length=500)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------
class OrderItemOut(CamelModel):
    product: str
    name: str
    image: str | None = None
    quantity: int
    price: float


class ShippingAddressOut(CamelModel):
    street: str
    city: str
    state: str
    zip_code: str
    country: str


class OrderResponse(CamelModel):
    id: str = Field(..., alias="_id")
    user: str
    order_items: list[OrderItemOut]
    shipping_address: ShippingAddressOut
    payment_method: str
    items_price: float
    tax_price: float
    shipping_price: float
    total_price: float
    order_notes: str | None = None
    status: str
    is_paid: bool
    paid_at: datetime | None = None
    payment_reference: str | None = None
    is_fulfilled: bool
    fulfilled_at: datetime | None = None
    cancelled_at: datetime | None = None
    cancellation_reason: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_order(cls, order) -> OrderResponse:
        address = order.shipping_address
        return cls(
            id=str(order.id),
            user=str(order.customer_id),
            order_items=[
                OrderItemOut(
                    product=str(item.product_id),
                    name=item.name,
                    image=item.image,
                    quantity=item.quantity,
                    price=item.unit_price,
                )
                for item in order.items
            ],
            shipping_address=ShippingAddressOut(
                street=address.street,
                city=address.city,
                state=address.state,
                zip_code=address.zip_code,
                country=address.country,
            ),
            payment_method=order.payment_method,
            items_price=order.pricing.items_price,
            tax_price=order.pricing.tax_price,
            shipping_price=order.pricing.shipping_price,
            total_price=order.pricing.total_price,
            order_notes=order.order_notes,
            status=order.status,
            is_paid=order.paid_at is not None,
            paid_at=order.paid_at,
            payment_reference=order.payment_reference,
            is_fulfilled=order.fulfilled_at is not None,
            fulfilled_at=order.fulfilled_at,
            cancelled_at=order.cancelled_at,
            cancellation_reason=order.cancellation_reason,
            created_at=order.created_at,
        )
