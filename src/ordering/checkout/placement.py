"""Order placement across the ordering and catalogue contexts.

Prices every line from the live catalogue, reserves stock, then persists
the order. A failure after some reservations succeeded releases them
before the error propagates. This is compensation, not a transaction.
"""

import json
from collections import OrderedDict
from uuid import uuid4

import structlog
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain

from ordering.order.cancellation import CancelOrder
from ordering.order.order import Order, PaymentMethod
from ordering.order.placement import PlaceOrder
from ordering.products import get_catalogue
from ordering.products.port import ProductCatalogue
from shared.pricing import PricingPolicy

logger = structlog.get_logger(__name__)

_ADDRESS_FIELDS = ("street", "city", "state", "zip_code", "country")


def merge_lines(items):
    """Collapse duplicate product ids into one line, keeping first-seen order.

    ``items`` is a sequence of dicts with ``product_id`` and ``quantity``.
    """
    if not items:
        raise ValidationError({"items": ["No order items"]})

    merged = OrderedDict()
    for item in items:
        product_id = str(item.get("product_id") or "").strip()
        quantity = item.get("quantity")
        if not product_id:
            raise ValidationError({"items": ["Every order item needs a product"]})
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 1:
            raise ValidationError({"quantity": [f"Quantity for product {product_id} must be a positive integer"]})
        merged[product_id] = merged.get(product_id, 0) + quantity
    return merged


def _check_address(shipping_address):
    errors = {}
    for field in _ADDRESS_FIELDS:
        value = (shipping_address or {}).get(field)
        if not value or not str(value).strip():
            errors[field] = [f"{field} is required"]
    if errors:
        raise ValidationError(errors)


def _check_payment_method(payment_method):
    if payment_method not in {method.value for method in PaymentMethod}:
        raise ValidationError({"payment_method": [f"Unsupported payment method: {payment_method!r}"]})


class OrderPlacementService:
    """Turns a customer's submitted lines into a persisted, priced order.

    Must run inside the ordering domain context, and outside any ordering
    unit of work, because catalogue calls open their own.
    """

    def __init__(self, catalogue: ProductCatalogue | None = None, pricing: PricingPolicy | None = None):
        self.catalogue = catalogue or get_catalogue()
        self.pricing = pricing or PricingPolicy()

    def place(self, customer_id, items, shipping_address, payment_method, order_notes=None) -> Order:
        lines = merge_lines(items)
        _check_address(shipping_address)
        _check_payment_method(payment_method)

        order_id = str(uuid4())
        priced = self._price(lines)

        reserved = []
        try:
            for line in priced:
                self.catalogue.reserve_stock(line["product_id"], line["quantity"], order_reference=order_id)
                reserved.append(line)

            subtotal = sum(line["unit_price"] * line["quantity"] for line in priced)
            quote = self.pricing.quote(subtotal)

            current_domain.process(
                PlaceOrder(
                    order_id=order_id,
                    customer_id=str(customer_id),
                    items=json.dumps(priced),
                    shipping_address=json.dumps({field: shipping_address[field] for field in _ADDRESS_FIELDS}),
                    payment_method=payment_method,
                    items_price=quote.items_price,
                    tax_price=quote.tax_price,
                    shipping_price=quote.shipping_price,
                    total_price=quote.total_price,
                    order_notes=order_notes,
                ),
                asynchronous=False,
            )
        except Exception:
            self._release(reserved, order_id)
            raise

        logger.info(
            "order_placed",
            order_id=order_id,
            customer_id=str(customer_id),
            lines=len(priced),
            total_price=quote.total_price,
        )
        return current_domain.repository_for(Order).get(order_id)

    def cancel(self, order_id, reason=None) -> Order:
        """Cancel an order and put its quantities back into stock."""
        quantities = current_domain.process(CancelOrder(order_id=order_id, reason=reason), asynchronous=False)
        self._release(
            [{"product_id": product_id, "quantity": quantity} for product_id, quantity in quantities.items()],
            order_id,
        )
        logger.info("order_cancelled", order_id=order_id, reason=reason)
        return current_domain.repository_for(Order).get(order_id)

    def _price(self, lines):
        """Snapshot name, image and price of each line from the live catalogue."""
        priced = []
        for product_id, quantity in lines.items():
            product = self.catalogue.get_product(product_id)
            if product is None:
                raise ObjectNotFoundError(f"Product {product_id} not found")
            if not product.is_active:
                raise ValidationError({"product": [f"{product.name} is no longer available"]})
            if quantity > product.stock:
                message = f"Insufficient stock for {product.name}: requested {quantity}, available {product.stock}"
                raise ValidationError({"stock": [message]})

            priced.append(
                {
                    "product_id": product.product_id,
                    "name": product.name,
                    "image": product.image,
                    "quantity": quantity,
                    "unit_price": product.price,
                }
            )
        return priced

    def _release(self, lines, order_id):
        for line in lines:
            try:
                self.catalogue.release_stock(line["product_id"], line["quantity"], order_reference=order_id)
            except (ObjectNotFoundError, ValidationError) as exc:
                logger.error(
                    "stock_release_failed",
                    order_id=order_id,
                    product_id=line["product_id"],
                    quantity=line["quantity"],
                    error=str(exc),
                )
