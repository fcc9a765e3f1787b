"""Client-held shopping cart.

The cart is a list of lines persisted under one key of a ``KeyValueStore``
and rewritten wholesale on every mutation. Every operation re-reads the
store first, so two engines over the same store never work from stale
state for long.
"""

from dataclasses import dataclass, field

import structlog

from shared.pricing import PricingPolicy
from storefront.config import CART_KEY
from storefront.errors import NotFoundError, StorefrontError
from storefront.storage import KeyValueStore

logger = structlog.get_logger(__name__)


@dataclass
class CartLine:
    """A product snapshot plus the quantity the shopper wants.

    ``stock`` is the ceiling seen when the line was added or last validated.
    """

    product_id: str
    name: str
    price: float
    quantity: int
    image: str | None = None
    stock: int | None = None

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    def to_json(self) -> dict:
        return {
            "_id": self.product_id,
            "name": self.name,
            "price": self.price,
            "image": self.image,
            "stock": self.stock,
            "quantity": self.quantity,
        }

    @classmethod
    def from_json(cls, data: dict) -> "CartLine":
        return cls(
            product_id=str(data["_id"]),
            name=data.get("name", ""),
            price=float(data.get("price", 0.0)),
            quantity=int(data.get("quantity", 1)),
            image=data.get("image"),
            stock=data.get("stock"),
        )


@dataclass
class Cart:
    lines: list[CartLine] = field(default_factory=list)

    def find(self, product_id: str) -> CartLine | None:
        return next((line for line in self.lines if line.product_id == product_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.lines


@dataclass(frozen=True)
class CartSummary:
    """Cart totals rounded to cents for display."""

    lines: int
    total_items: int
    subtotal: float
    tax: float
    shipping: float
    total: float


@dataclass
class CartValidation:
    cart: Cart
    warnings: list[str] = field(default_factory=list)
    changed: bool = False


class CartEngine:
    def __init__(self, store: KeyValueStore, pricing: PricingPolicy | None = None, key: str = CART_KEY):
        self.store = store
        self.pricing = pricing or PricingPolicy()
        self.key = key

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> Cart:
        raw_lines = self.store.read_json(self.key, default=[])
        if not isinstance(raw_lines, list):
            logger.warning("cart_state_discarded", key=self.key)
            return Cart()

        lines = []
        for raw in raw_lines:
            try:
                line = CartLine.from_json(raw)
            except (KeyError, TypeError, ValueError):
                logger.warning("cart_line_discarded", line=raw)
                continue
            if line.quantity > 0:
                lines.append(line)
        return Cart(lines=lines)

    def _save(self, cart: Cart) -> Cart:
        self.store.write_json(self.key, [line.to_json() for line in cart.lines])
        return cart

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add_item(self, product, quantity: int = 1) -> Cart:
        """Add ``quantity`` of ``product``, merging with an existing line.

        ``product`` is any object with ``id``, ``name``, ``price``, ``image``
        and ``stock`` attributes, e.g. ``storefront.catalog.Product``. Stock
        is not checked here; ``validate`` reconciles before checkout. A
        quantity below 1 adds nothing and leaves an existing line as it is.
        """
        cart = self.load()
        if quantity < 1:
            return cart

        line = cart.find(str(product.id))
        if line is not None:
            line.quantity += quantity
        else:
            cart.lines.append(
                CartLine(
                    product_id=str(product.id),
                    name=product.name,
                    price=float(product.price),
                    quantity=quantity,
                    image=getattr(product, "image", None),
                    stock=getattr(product, "stock", None),
                )
            )
        return self._save(cart)

    def remove_item(self, product_id: str) -> Cart:
        cart = self.load()
        line = cart.find(product_id)
        if line is None:
            return cart
        cart.lines.remove(line)
        return self._save(cart)

    def update_quantity(self, product_id: str, quantity: int) -> Cart:
        """Set a line's quantity verbatim; zero or less removes the line."""
        if quantity <= 0:
            return self.remove_item(product_id)

        cart = self.load()
        line = cart.find(product_id)
        if line is None:
            return cart
        line.quantity = quantity
        return self._save(cart)

    def clear(self) -> Cart:
        return self._save(Cart())

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def subtotal(self) -> float:
        return sum(line.line_total for line in self.load().lines)

    def tax(self) -> float:
        return self.pricing.tax(self.subtotal())

    def shipping(self) -> float:
        return self.pricing.shipping(self.subtotal())

    def total(self) -> float:
        subtotal = self.subtotal()
        return subtotal + self.pricing.tax(subtotal) + self.pricing.shipping(subtotal)

    def total_items(self) -> int:
        return sum(line.quantity for line in self.load().lines)

    def is_in_cart(self, product_id: str) -> bool:
        return self.load().find(product_id) is not None

    def item_quantity(self, product_id: str) -> int:
        line = self.load().find(product_id)
        return line.quantity if line else 0

    def summary(self) -> CartSummary:
        cart = self.load()
        quote = self.pricing.quote(sum(line.line_total for line in cart.lines))
        return CartSummary(
            lines=len(cart.lines),
            total_items=sum(line.quantity for line in cart.lines),
            subtotal=quote.items_price,
            tax=quote.tax_price,
            shipping=quote.shipping_price,
            total=quote.total_price,
        )

    # ------------------------------------------------------------------
    # Reconciliation
    # ------------------------------------------------------------------
    def validate(self, catalog) -> CartValidation:
        """Reconcile every line with the live catalogue.

        Missing, inactive and sold-out products are dropped; quantities above
        stock are clamped; changed prices are adopted. Each adjustment adds a
        warning. Lines whose lookup fails for any other reason are kept as
        they are.

        Lookups run against a snapshot, but the adjustments are applied to
        the cart as it is after the last lookup, so lines added or changed
        meanwhile are not overwritten. A line added during the lookups is
        left for the next validation. The cart is written back only when
        something changed.
        """
        looked_up = {}
        for line in self.load().lines:
            try:
                looked_up[line.product_id] = catalog.get_product(line.product_id)
            except NotFoundError:
                looked_up[line.product_id] = None
            except StorefrontError as exc:
                logger.warning("cart_line_not_validated", product_id=line.product_id, error=str(exc))

        cart = self.load()
        kept = []
        warnings = []
        changed = False

        for line in cart.lines:
            if line.product_id not in looked_up:
                kept.append(line)
                continue

            product = looked_up[line.product_id]
            if product is None or not product.is_active or product.stock <= 0:
                warnings.append(f"{line.name} is no longer available and was removed from your cart")
                changed = True
                continue

            if line.quantity > product.stock:
                warnings.append(
                    f"Only {product.stock} of {line.name} in stock; "
                    f"quantity reduced from {line.quantity} to {product.stock}"
                )
                line.quantity = product.stock
                changed = True

            if line.price != product.price:
                warnings.append(f"Price of {line.name} changed from {line.price:.2f} to {product.price:.2f}")
                line.price = product.price
                changed = True

            if line.stock != product.stock:
                line.stock = product.stock
                changed = True

            kept.append(line)

        cart.lines = kept
        if changed:
            self._save(cart)
            logger.info("cart_reconciled", warnings=warnings, lines=len(kept))

        return CartValidation(cart=cart, warnings=warnings, changed=changed)
