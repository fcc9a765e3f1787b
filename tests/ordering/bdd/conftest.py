"""Shared BDD fixtures and step definitions for the Ordering domain."""

import pytest
from ordering.order.order import Order
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("a placed order", target_fixture="order")
def placed_order():
    order = Order.place(
        customer_id="cust-bdd",
        items_data=[{"product_id": "prod-001", "name": "Headphones", "quantity": 2, "unit_price": 25.0}],
        shipping_address={
            "street": "123 Main St",
            "city": "Springfield",
            "state": "IL",
            "zip_code": "62701",
            "country": "USA",
        },
        payment_method="credit_card",
        pricing={"items_price": 50.0, "tax_price": 4.0, "shipping_price": 10.0, "total_price": 64.0},
    )
    order._events.clear()
    return order


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status
