"""BDD tests for the order lifecycle."""

from protean.exceptions import ValidationError
from pytest_bdd import given, scenarios, when

scenarios("features/order_lifecycle.feature")


def _attempt(action, error):
    try:
        action()
    except ValidationError as exc:
        error["exc"] = exc


@given("the order has been paid")
def order_paid(order):
    order.mark_paid(payment_reference="txn-bdd")


@given("the order has been fulfilled")
def order_fulfilled(order):
    order.fulfil()


@given("the order has been cancelled")
def order_cancelled(order):
    order.cancel()


@when("the order is paid")
def pay_order(order, error):
    _attempt(order.mark_paid, error)


@when("the order is fulfilled")
def fulfil_order(order, error):
    _attempt(order.fulfil, error)


@when("the order is cancelled")
def cancel_order(order, error):
    _attempt(order.cancel, error)
