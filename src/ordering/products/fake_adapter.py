"""In-memory product catalogue for development and testing."""

from dataclasses import replace

from protean.exceptions import ObjectNotFoundError, ValidationError

from ordering.products.port import CatalogueProduct, ProductCatalogue


class FakeCatalogue(ProductCatalogue):
    """Holds products in a dict and records every call."""

    def __init__(self, products: list[CatalogueProduct] | None = None) -> None:
        self.products: dict[str, CatalogueProduct] = {p.product_id: p for p in products or []}
        self.calls: list[dict] = []

    def add(self, product: CatalogueProduct) -> None:
        self.products[product.product_id] = product

    def get_product(self, product_id: str) -> CatalogueProduct | None:
        self.calls.append({"method": "get_product", "product_id": product_id})
        return self.products.get(product_id)

    def _require(self, product_id: str) -> CatalogueProduct:
        product = self.products.get(product_id)
        if product is None:
            raise ObjectNotFoundError(f"Product with id {product_id} does not exist")
        return product

    def reserve_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        self.calls.append(
            {
                "method": "reserve_stock",
                "product_id": product_id,
                "quantity": quantity,
                "order_reference": order_reference,
            }
        )
        product = self._require(product_id)
        if not product.is_active:
            raise ValidationError({"product": [f"{product.name} is no longer available"]})
        if quantity > product.stock:
            raise ValidationError(
                {"stock": [f"Insufficient stock for {product.name}: requested {quantity}, available {product.stock}"]}
            )

        self.products[product_id] = replace(product, stock=product.stock - quantity)
        return product.stock - quantity

    def release_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        self.calls.append(
            {
                "method": "release_stock",
                "product_id": product_id,
                "quantity": quantity,
                "order_reference": order_reference,
            }
        )
        product = self._require(product_id)
        self.products[product_id] = replace(product, stock=product.stock + quantity)
        return product.stock + quantity
