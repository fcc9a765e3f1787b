"""Product updates by administrators: command and handler."""

import json

from protean import handle
from protean.fields import Boolean, Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class UpdateProduct:
    """Partial update. Fields left unset keep their current value."""

    product_id: Identifier(required=True)
    name: String(max_length=200)
    description: Text()
    price: Float()
    original_price: Float()
    category: String(max_length=100)
    brand: String(max_length=100)
    images: Text()  # JSON list replaces all images
    stock: Integer()
    specifications: Text()
    tags: Text()
    weight: Float()
    is_active: Boolean()
    is_featured: Boolean()


@catalogue.command_handler(part_of=Product)
class UpdateProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)

        product.update(
            name=command.name,
            description=command.description,
            price=command.price,
            original_price=command.original_price,
            category=command.category,
            brand=command.brand,
            images=json.loads(command.images) if command.images else None,
            stock=command.stock,
            specifications=json.loads(command.specifications) if command.specifications else None,
            tags=json.loads(command.tags) if command.tags else None,
            weight=command.weight,
            is_active=command.is_active,
            is_featured=command.is_featured,
        )
        repo.add(product)
