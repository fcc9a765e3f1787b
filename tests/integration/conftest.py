"""Fixtures for cross-context tests against the full application.

The storefront client talks to the FastAPI app through ``TestClient``,
so every request goes through the same middleware and routers as in
production, with all three domains in one process.
"""

import os
from types import SimpleNamespace

import pytest


@pytest.fixture(scope="session")
def _domains(request):
    """Import the application, which initializes every domain."""
    os.environ["PROTEAN_ENV"] = request.config.option.env

    from manage import _domains

    import app  # noqa: F401

    return _domains()


@pytest.fixture(scope="session", autouse=True)
def setup_databases(_domains):
    from shared.db import drop_db, setup_db

    for domain in _domains.values():
        setup_db(domain)

    yield

    for domain in _domains.values():
        drop_db(domain)


@pytest.fixture(autouse=True)
def seeded(_domains):
    """Sample users and products; data is wiped before each test."""
    from manage import seed
    from ordering.products import reset_catalogue

    reset_catalogue()
    user_ids, product_ids = seed()
    return {"user_ids": user_ids, "product_ids": product_ids}


@pytest.fixture()
def http_client(_domains):
    from app import app
    from fastapi.testclient import TestClient

    return TestClient(app)


@pytest.fixture()
def storefront(http_client, tmp_path):
    """A storefront client wired to the in-process app, with state in a file."""
    from storefront.auth import AuthSession
    from storefront.cart import CartEngine
    from storefront.catalog import CatalogClient
    from storefront.checkout import CheckoutFlow
    from storefront.config import StorefrontSettings
    from storefront.http import ApiClient
    from storefront.storage import JsonFileStore

    settings = StorefrontSettings(api_url="http://testserver")
    api = ApiClient(settings, session=http_client)
    store = JsonFileStore(tmp_path / "storefront.json")
    cart = CartEngine(store, pricing=settings.pricing)
    auth = AuthSession(api, store, cart)
    catalog = CatalogClient(api)

    return SimpleNamespace(
        api=api,
        store=store,
        cart=cart,
        auth=auth,
        catalog=catalog,
        checkout=CheckoutFlow(cart, auth, catalog),
    )
