"""Fixtures for the storefront client tests.

Nothing here talks to a server: catalog lookups come from ``FakeCatalog``
and HTTP calls go to a ``RecordingSession`` with canned responses.
"""

import json

import pytest
from shared.pricing import PricingPolicy
from storefront.auth import AuthSession
from storefront.cart import CartEngine
from storefront.catalog import CatalogClient, Product
from storefront.config import StorefrontSettings
from storefront.errors import NotFoundError
from storefront.http import ApiClient
from storefront.storage import MemoryStore


class FakeCatalog:
    """Stands in for ``CatalogClient.get_product``."""

    def __init__(self, products=None, failures=None):
        self.products = {product.id: product for product in products or []}
        self.failures = dict(failures or {})
        self.lookups = []

    def get_product(self, product_id):
        self.lookups.append(product_id)
        if product_id in self.failures:
            raise self.failures[product_id]
        if product_id not in self.products:
            raise NotFoundError(f"Product {product_id} not found")
        return self.products[product_id]


class FakeResponse:
    def __init__(self, status_code=200, body=None, content=None):
        self.status_code = status_code
        self._body = body
        if content is not None:
            self.content = content
        else:
            self.content = b"" if body is None else json.dumps(body).encode()

    def json(self):
        return json.loads(self.content)


class RecordingSession:
    """Records every request and answers from a queue of canned responses."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.requests = []

    def queue(self, status_code=200, body=None, content=None):
        self.responses.append(FakeResponse(status_code, body, content))

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            raise AssertionError(f"Unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _product(product_id="p1", name="Headphones", price=25.0, stock=5, is_active=True):
    return Product(id=product_id, name=name, price=price, stock=stock, is_active=is_active)


@pytest.fixture()
def make_product():
    """Build a catalogue product; defaults to five Headphones at 25.00."""
    return _product


@pytest.fixture()
def make_catalog():
    return FakeCatalog


@pytest.fixture()
def store():
    return MemoryStore()


@pytest.fixture()
def cart(store):
    return CartEngine(store, pricing=PricingPolicy())


@pytest.fixture()
def session():
    return RecordingSession()


@pytest.fixture()
def api(session):
    return ApiClient(StorefrontSettings(api_url="http://shop.test"), session=session)


@pytest.fixture()
def auth(api, store, cart):
    return AuthSession(api, store, cart)


@pytest.fixture()
def catalog_client(api):
    return CatalogClient(api)
