"""Tests for the read-only catalogue client."""

import pytest
from storefront.catalog import Product
from storefront.errors import NotFoundError, TransportError


def _product_body(product_id="p1", name="Headphones", category="Electronics", price=25.0, stock=5):
    return {
        "_id": product_id,
        "name": name,
        "price": price,
        "stock": stock,
        "category": category,
        "isActive": True,
        "images": [{"url": f"https://img.test/{product_id}.jpg", "alt": name}],
    }


def _page(*products, total=None):
    return {
        "products": list(products),
        "currentPage": 1,
        "totalPages": 1,
        "total": total if total is not None else len(products),
        "hasNextPage": False,
        "hasPrevPage": False,
    }


class TestListProducts:
    def test_filters_are_sent_as_query_parameters(self, catalog_client, session):
        session.queue(body=_page(_product_body()))

        listing = catalog_client.list_products(category="Electronics", min_price=10, sort_by="price-asc")

        assert session.requests[0]["params"] == {
            "category": "Electronics",
            "minPrice": 10,
            "sortBy": "price-asc",
            "page": 1,
            "limit": 12,
        }
        assert listing.total == 1
        assert listing.products[0].image == "https://img.test/p1.jpg"

    def test_malformed_listing_is_a_transport_error(self, catalog_client, session):
        session.queue(body={"items": []})
        with pytest.raises(TransportError):
            catalog_client.list_products()


class TestGetProduct:
    def test_missing_product(self, catalog_client, session):
        session.queue(status_code=404, body={"error": "Product not found"})
        with pytest.raises(NotFoundError):
            catalog_client.get_product("gone")

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "No id", "price": 1.0},
            {"_id": "p1", "name": "Bad price", "price": "free"},
            ["not", "a", "product"],
        ],
    )
    def test_malformed_body_is_a_transport_error(self, catalog_client, session, body):
        session.queue(body=body)
        with pytest.raises(TransportError):
            catalog_client.get_product("p1")

    def test_malformed_body_keeps_the_cart_line(self, catalog_client, session, cart, make_product):
        cart.add_item(make_product(), quantity=2)
        session.queue(body={"_id": "p1", "name": "Headphones"})

        result = cart.validate(catalog_client)

        assert result.changed is False
        assert cart.item_quantity("p1") == 2


class TestRelated:
    def test_same_category_without_the_product_itself(self, catalog_client, session):
        current = _product_body("p1")
        others = [_product_body(f"p{n}", f"Gadget {n}") for n in range(2, 6)]
        session.queue(body=_page(current, *others))

        related = catalog_client.related(Product.from_json(current))

        assert [product.id for product in related] == ["p2", "p3", "p4", "p5"]
        assert session.requests[0]["params"]["category"] == "Electronics"
        assert session.requests[0]["params"]["limit"] == 5

    def test_product_without_category_has_no_related(self, catalog_client, session):
        assert catalog_client.related(Product.from_json(_product_body(category=None))) == []
        assert session.requests == []
