"""Read-only client for the product catalogue."""

from dataclasses import dataclass, field

from storefront.errors import TransportError
from storefront.http import ApiClient


@dataclass(frozen=True)
class Product:
    """A product as the storefront sees it."""

    id: str
    name: str
    price: float
    stock: int
    is_active: bool = True
    image: str | None = None
    category: str | None = None
    brand: str | None = None
    description: str | None = None
    original_price: float | None = None
    rating: float = 0.0
    is_featured: bool = False

    @classmethod
    def from_json(cls, data: dict) -> "Product":
        images = data.get("images") or []
        return cls(
            id=data["_id"],
            name=data["name"],
            price=float(data["price"]),
            stock=int(data.get("stock", 0)),
            is_active=bool(data.get("isActive", True)),
            image=images[0]["url"] if images else None,
            category=data.get("category"),
            brand=data.get("brand"),
            description=data.get("description"),
            original_price=data.get("originalPrice"),
            rating=float(data.get("rating") or 0.0),
            is_featured=bool(data.get("isFeatured", False)),
        )


@dataclass(frozen=True)
class ProductListing:
    products: list[Product] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 0
    total: int = 0
    has_next_page: bool = False
    has_prev_page: bool = False


def _decode(body, decoder):
    """Apply ``decoder`` to a 2xx body, treating a malformed body like a broken response."""
    try:
        return decoder(body)
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as exc:
        raise TransportError(f"Unexpected catalogue response: {exc!r}") from exc


def _listing(body) -> ProductListing:
    return ProductListing(
        products=[Product.from_json(item) for item in body["products"]],
        current_page=body["currentPage"],
        total_pages=body["totalPages"],
        total=body["total"],
        has_next_page=body["hasNextPage"],
        has_prev_page=body["hasPrevPage"],
    )


class CatalogClient:
    def __init__(self, api: ApiClient):
        self.api = api

    def list_products(
        self,
        search=None,
        category=None,
        min_price=None,
        max_price=None,
        sort_by=None,
        page=1,
        limit=None,
    ) -> ProductListing:
        params = {
            "search": search,
            "category": category,
            "minPrice": min_price,
            "maxPrice": max_price,
            "sortBy": sort_by,
            "page": page,
            "limit": limit or self.api.settings.page_size,
        }
        body = self.api.get("/products", params={k: v for k, v in params.items() if v is not None})
        return _decode(body, _listing)

    def get_product(self, product_id: str) -> Product:
        """Fetch one product, active or not.

        Raises ``NotFoundError`` when it is gone and ``TransportError`` when
        the body is not a product.
        """
        return _decode(self.api.get(f"/products/{product_id}"), Product.from_json)

    def featured(self) -> list[Product]:
        return _decode(self.api.get("/products/featured"), lambda body: [Product.from_json(item) for item in body])

    def categories(self) -> list[str]:
        return list(self.api.get("/products/categories"))

    def related(self, product: Product, limit: int = 4) -> list[Product]:
        """Other active products in the same category, at most ``limit`` of them."""
        if not product.category:
            return []
        listing = self.list_products(category=product.category, limit=limit + 1)
        return [other for other in listing.products if other.id != product.id][:limit]
