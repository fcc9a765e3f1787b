"""Shared BDD fixtures and step definitions for the storefront cart."""

import pytest
from pytest_bdd import given, parsers, then


@pytest.fixture()
def catalog_products():
    return {}


@given(parsers.cfparse('a product "{name}" priced {price:f} with {stock:d} in stock'))
def catalog_product(catalog_products, make_product, name, price, stock):
    product_id = name.lower().replace(" ", "-")
    catalog_products[name] = make_product(product_id, name, price=price, stock=stock)


@then(parsers.cfparse("the cart holds {count:d} items"))
def cart_holds(cart, count):
    assert cart.total_items() == count


@then(parsers.cfparse("the cart total is {total:f}"))
def cart_total_is(cart, total):
    assert cart.summary().total == total
