"""Tests for events raised by the Product aggregate."""

import json

from catalogue.product.events import (
    ProductCreated,
    ProductDeactivated,
    ProductUpdated,
    StockReleased,
    StockReserved,
)
from catalogue.product.product import Product


def _product():
    product = Product.create(
        name="Casual Cotton T-Shirt",
        description="Soft cotton tee",
        price=19.99,
        category="Clothing",
        stock=10,
    )
    return product


class TestProductEvents:
    def test_create_raises_product_created(self):
        product = _product()
        assert len(product._events) == 1
        event = product._events[0]
        assert isinstance(event, ProductCreated)
        assert event.product_id == product.id
        assert event.category == "Clothing"
        assert event.stock == 10

    def test_update_raises_product_updated_with_changed_fields(self):
        product = _product()
        product._events.clear()
        product.update(price=17.99, tags=["sale"])
        event = product._events[0]
        assert isinstance(event, ProductUpdated)
        assert json.loads(event.changed_fields) == ["price", "tags"]
        assert event.price == 17.99

    def test_deactivate_raises_product_deactivated(self):
        product = _product()
        product._events.clear()
        product.deactivate()
        assert isinstance(product._events[0], ProductDeactivated)

    def test_stock_events_carry_remaining_stock(self):
        product = _product()
        product._events.clear()
        product.reserve_stock(4, order_reference="order-1")
        product.release_stock(1, order_reference="order-1")

        reserved, released = product._events
        assert isinstance(reserved, StockReserved)
        assert reserved.remaining_stock == 6
        assert reserved.order_reference == "order-1"
        assert isinstance(released, StockReleased)
        assert released.remaining_stock == 7
