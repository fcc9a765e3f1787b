"""Product catalogue port (abstract interface).

Ordering never reads the catalogue's repositories directly. Placement and
cancellation go through this contract, so tests can run the ordering
context against ``FakeCatalogue`` and the application wires in
``CatalogueDomainAdapter``.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogueProduct:
    """What ordering needs to know about a product at placement time."""

    product_id: str
    name: str
    price: float
    stock: int
    is_active: bool
    image: str | None = None


class ProductCatalogue(ABC):
    """Abstract product catalogue interface."""

    @abstractmethod
    def get_product(self, product_id: str) -> CatalogueProduct | None:
        """Return the live product, or ``None`` when it does not exist."""
        ...

    @abstractmethod
    def reserve_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        """Decrement stock, returning what remains.

        Raises ``ValidationError`` when the product is inactive or short.
        """
        ...

    @abstractmethod
    def release_stock(self, product_id: str, quantity: int, order_reference: str | None = None) -> int:
        """Return previously reserved units to stock."""
        ...
