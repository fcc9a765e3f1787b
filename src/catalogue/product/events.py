"""Domain events for the Product aggregate."""

from protean.fields import Boolean, DateTime, Float, Identifier, Integer, String, Text

from catalogue.domain import catalogue


@catalogue.event(part_of="Product")
class ProductCreated:
    """A new product was added to the catalogue."""

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String(required=True)
    price: Float(required=True)
    stock: Integer(required=True)
    created_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class ProductUpdated:
    """One or more product attributes were changed by an administrator."""

    product_id: Identifier(required=True)
    changed_fields: Text()  # JSON list of field names
    price: Float(required=True)
    stock: Integer(required=True)
    is_active: Boolean(required=True)


@catalogue.event(part_of="Product")
class ProductDeactivated:
    """A product was withdrawn from sale. It stays readable by id."""

    product_id: Identifier(required=True)
    deactivated_at: DateTime(required=True)


@catalogue.event(part_of="Product")
class StockReserved:
    """Units were taken out of stock for an order being placed."""

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    remaining_stock: Integer(required=True)
    order_reference: String()


@catalogue.event(part_of="Product")
class StockReleased:
    """Previously reserved units were returned to stock."""

    product_id: Identifier(required=True)
    quantity: Integer(required=True)
    remaining_stock: Integer(required=True)
    order_reference: String()
