import pytest
from ordering.products import reset_catalogue, set_catalogue
from ordering.products.fake_adapter import FakeCatalogue
from ordering.products.port import CatalogueProduct
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture()
def fake_catalogue():
    """In-memory catalogue with three products, installed as the active catalogue."""
    catalogue = FakeCatalogue(
        [
            CatalogueProduct(product_id="prod-headphones", name="Headphones", price=25.0, stock=5, is_active=True),
            CatalogueProduct(product_id="prod-cable", name="USB Cable", price=10.0, stock=2, is_active=True),
            CatalogueProduct(product_id="prod-retired", name="Old Radio", price=40.0, stock=9, is_active=False),
        ]
    )
    set_catalogue(catalogue)
    yield catalogue
    reset_catalogue()


@pytest.fixture()
def shipping_address():
    return {
        "street": "123 Main St",
        "city": "Springfield",
        "state": "IL",
        "zip_code": "62701",
        "country": "USA",
    }
