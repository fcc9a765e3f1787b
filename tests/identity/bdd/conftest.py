"""Shared BDD fixtures and step definitions for the Identity domain."""

import pytest
from identity.user.registration import RegisterUser
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given(parsers.cfparse('a registered user "{email}" with password "{password}"'), target_fixture="user_id")
def registered_user(email, password):
    command = RegisterUser(name="John Doe", email=email, password=password)
    return current_domain.process(command, asynchronous=False)


@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse('the error mentions "{field}"'))
def error_mentions(error, field):
    assert field in error["exc"].messages
