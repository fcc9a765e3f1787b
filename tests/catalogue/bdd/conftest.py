"""Shared BDD fixtures and step definitions for the Catalogue domain."""

import pytest
from catalogue.product.events import (
    ProductCreated,
    ProductDeactivated,
    ProductUpdated,
    StockReleased,
    StockReserved,
)
from catalogue.product.product import Product
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_PRODUCT_EVENT_CLASSES = {
    "ProductCreated": ProductCreated,
    "ProductUpdated": ProductUpdated,
    "ProductDeactivated": ProductDeactivated,
    "StockReserved": StockReserved,
    "StockReleased": StockReleased,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse("an active product with {stock:d} units in stock"), target_fixture="product")
def active_product(stock):
    product = Product.create(
        name="Ergonomic Office Chair",
        description="Adjustable office chair with lumbar support",
        price=199.99,
        category="Home & Garden",
        stock=stock,
    )
    product._events.clear()
    return product


@given("the product has been deactivated", target_fixture="product")
def deactivated_product(product):
    product.deactivate()
    product._events.clear()
    return product


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the product has {stock:d} units in stock"))
def product_stock_is(product, stock):
    assert product.stock == stock


@then(parsers.cfparse("a {event_type} product event is raised"))
def product_event_raised(product, event_type):
    event_cls = _PRODUCT_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in product._events
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in product._events]}"


@then("no product event is raised")
def no_product_event_raised(product):
    assert product._events == []
