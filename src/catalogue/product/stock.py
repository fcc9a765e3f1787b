"""Stock reservation for order placement: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class ReserveStock:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    order_reference: String(max_length=100)


@catalogue.command(part_of="Product")
class ReleaseStock:
    product_id: Identifier(required=True)
    quantity: Integer(required=True, min_value=1)
    order_reference: String(max_length=100)


@catalogue.command_handler(part_of=Product)
class ManageStockHandler:
    @handle(ReserveStock)
    def reserve_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.reserve_stock(command.quantity, order_reference=command.order_reference)
        repo.add(product)
        return product.stock

    @handle(ReleaseStock)
    def release_stock(self, command):
        repo = current_domain.repository_for(Product)
        product = repo.get(command.product_id)
        product.release_stock(command.quantity, order_reference=command.order_reference)
        repo.add(product)
        return product.stock
