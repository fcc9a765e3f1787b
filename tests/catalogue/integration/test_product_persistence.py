"""Integration tests for product aggregate persistence round-trip."""

import json

from catalogue.product.creation import CreateProduct
from catalogue.product.details import UpdateProduct
from catalogue.product.product import Product
from catalogue.product.stock import ReserveStock
from protean.utils.globals import current_domain


def _create_product(**overrides):
    defaults = {
        "name": "Building Blocks Set",
        "description": "Educational building set",
        "price": 34.99,
        "category": "Toys",
        "stock": 60,
    }
    defaults.update(overrides)
    command = CreateProduct(**defaults)
    return current_domain.process(command, asynchronous=False)


class TestProductPersistence:
    def test_create_and_retrieve(self):
        product_id = _create_product(brand="PlayTime")
        product = current_domain.repository_for(Product).get(product_id)

        assert product.name == "Building Blocks Set"
        assert product.brand == "PlayTime"
        assert product.price == 34.99
        assert product.is_active is True

    def test_images_keep_display_order(self):
        product_id = _create_product(
            images=json.dumps(
                [
                    {"url": "https://example.com/a.jpg", "alt": "A"},
                    {"url": "https://example.com/b.jpg", "alt": "B"},
                    {"url": "https://example.com/c.jpg", "alt": "C"},
                ]
            )
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert [image.alt for image in product.ordered_images()] == ["A", "B", "C"]

    def test_replacing_images_persists(self):
        product_id = _create_product(images=json.dumps([{"url": "https://example.com/a.jpg"}]))
        current_domain.process(
            UpdateProduct(product_id=product_id, images=json.dumps([{"url": "https://example.com/z.jpg"}])),
            asynchronous=False,
        )

        product = current_domain.repository_for(Product).get(product_id)
        assert len(product.images) == 1
        assert product.primary_image_url() == "https://example.com/z.jpg"

    def test_stock_changes_persist(self):
        product_id = _create_product(stock=5)
        current_domain.process(ReserveStock(product_id=product_id, quantity=2), asynchronous=False)
        current_domain.process(ReserveStock(product_id=product_id, quantity=3), asynchronous=False)

        product = current_domain.repository_for(Product).get(product_id)
        assert product.stock == 0

    def test_specifications_round_trip(self):
        product_id = _create_product(specifications=json.dumps({"Pieces": "500", "Age": "6+"}))

        product = current_domain.repository_for(Product).get(product_id)
        assert product.specification_map() == {"Pieces": "500", "Age": "6+"}
