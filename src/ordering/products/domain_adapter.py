"""Catalogue adapter backed by the catalogue Protean domain in the same process."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from catalogue.domain import catalogue
from catalogue.product.product import Product
from catalogue.product.stock import ReleaseStock, ReserveStock
from ordering.products.port import CatalogueProduct, ProductCatalogue


class CatalogueDomainAdapter(ProductCatalogue):
    """Runs each call inside the catalogue domain's own context and unit of work."""

    def get_product(self, product_id: str) -> CatalogueProduct | None:
        with catalogue.domain_context():
            try:
                product = current_domain.repository_for(Product).get(product_id)
            except ObjectNotFoundError:
                return None

            return CatalogueProduct(
                product_id=str(product.id),
                name=product.name,
                price=product.price,
                stock=product.stock,
                is_active=product.is_active,
                image=product.primary_image_url(),
            )

    def reserve_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        with catalogue.domain_context():
            return current_domain.process(
                ReserveStock(product_id=product_id, quantity=quantity, order_reference=order_reference),
                asynchronous=False,
            )

    def release_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        with catalogue.domain_context():
            return current_domain.process(
                ReleaseStock(product_id=product_id, quantity=quantity, order_reference=order_reference),
                asynchronous=False,
            )
