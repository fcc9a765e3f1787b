"""Product creation: command and handler."""

import json

from protean import handle
from protean.fields import Boolean, Float, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


def _load_json(value, default):
    return json.loads(value) if value else default


@catalogue.command(part_of="Product")
class CreateProduct:
    name: String(required=True, max_length=200)
    description: Text(required=True)
    price: Float(required=True)
    original_price: Float()
    category: String(required=True, max_length=100)
    brand: String(max_length=100)
    images: Text()  # JSON list of {"url": ..., "alt": ...}
    stock: Integer(default=0)
    specifications: Text()  # JSON object
    tags: Text()  # JSON list
    weight: Float()
    is_featured: Boolean(default=False)


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            category=command.category,
            brand=command.brand,
            images=_load_json(command.images, []),
            stock=command.stock,
            specifications=_load_json(command.specifications, {}),
            tags=_load_json(command.tags, []),
            weight=command.weight,
            is_featured=command.is_featured,
        )
        current_domain.repository_for(Product).add(product)
        return str(product.id)
