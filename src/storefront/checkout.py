"""Order submission from the client cart."""

from dataclasses import dataclass, field

import structlog

from storefront.auth import AuthSession
from storefront.cart import CartEngine
from storefront.catalog import CatalogClient
from storefront.errors import AuthorizationError, CheckoutValidationError

logger = structlog.get_logger(__name__)

PAYMENT_METHODS = ("credit_card", "paypal", "cash_on_delivery")
ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


@dataclass(frozen=True)
class ShippingAddress:
    street: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    country: str = ""

    def missing_fields(self) -> list[str]:
        return [name for name in ADDRESS_FIELDS if not (getattr(self, name) or "").strip()]

    def to_json(self) -> dict:
        return {
            "street": self.street.strip(),
            "city": self.city.strip(),
            "state": self.state.strip(),
            "zipCode": self.zip_code.strip(),
            "country": self.country.strip(),
        }


@dataclass(frozen=True)
class PlacedOrder:
    order_id: str
    status: str
    items_price: float
    tax_price: float
    shipping_price: float
    total_price: float
    warnings: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict, warnings=None) -> "PlacedOrder":
        return cls(
            order_id=data["_id"],
            status=data["status"],
            items_price=data["itemsPrice"],
            tax_price=data["taxPrice"],
            shipping_price=data["shippingPrice"],
            total_price=data["totalPrice"],
            warnings=list(warnings or []),
        )


class CheckoutFlow:
    def __init__(self, cart: CartEngine, auth: AuthSession, catalog: CatalogClient):
        self.cart = cart
        self.auth = auth
        self.catalog = catalog

    def check(self, address: ShippingAddress, payment_method: str | None) -> dict[str, list[str]]:
        """Collect every precondition failure without touching the network."""
        errors = {}
        if not self.auth.is_authenticated():
            errors["auth"] = ["Please log in to place an order"]
        if self.cart.load().is_empty:
            errors["cart"] = ["Your cart is empty"]
        for name in address.missing_fields():
            errors[name] = [f"{name.replace('_', ' ').capitalize()} is required"]
        if payment_method not in PAYMENT_METHODS:
            errors["payment_method"] = ["Please select a payment method"]
        return errors

    def place_order(self, address: ShippingAddress, payment_method: str, order_notes: str | None = None) -> PlacedOrder:
        """Reconcile the cart, submit it, and clear it once the order exists.

        Any failure leaves the cart as it is. A 401 also ends the session.
        """
        errors = self.check(address, payment_method)
        if errors:
            raise CheckoutValidationError(errors)

        validation = self.cart.validate(self.catalog)
        if validation.cart.is_empty:
            raise CheckoutValidationError({"cart": validation.warnings or ["Your cart is empty"]})

        payload = {
            "orderItems": [{"product": line.product_id, "quantity": line.quantity} for line in validation.cart.lines],
            "shippingAddress": address.to_json(),
            "paymentMethod": payment_method,
            "orderNotes": order_notes,
        }

        user = self.auth.require_auth()
        try:
            body = self.auth.api.post("/orders", json=payload, token=user.token)
        except AuthorizationError:
            logger.info("checkout_unauthorized", user_id=user.id)
            self.auth.logout(clear_cart=False)
            raise

        order = PlacedOrder.from_json(body, warnings=validation.warnings)
        self.cart.clear()
        logger.info("order_submitted", order_id=order.order_id, total_price=order.total_price)
        return order
