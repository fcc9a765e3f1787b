"""BDD tests for stock reservation and release."""

from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/stock_reservation.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse("{quantity:d} units are reserved"))
def reserve_units(product, quantity, error):
    try:
        product.reserve_stock(quantity, order_reference="order-bdd")
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse("{quantity:d} units are released"))
def release_units(product, quantity, error):
    try:
        product.release_stock(quantity, order_reference="order-bdd")
    except ValidationError as exc:
        error["exc"] = exc
