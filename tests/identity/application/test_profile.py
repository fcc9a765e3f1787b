"""Application tests for profile management."""

import json

import pytest
from identity.user.profile import UpdateProfile
from identity.user.registration import RegisterUser
from identity.user.user import User
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.utils.globals import current_domain


def _register(email="john@example.com"):
    command = RegisterUser(name="John Doe", email=email, password="password123")
    return current_domain.process(command, asynchronous=False)


def _get(user_id):
    return current_domain.repository_for(User).get(user_id)


class TestUpdateProfileHandler:
    def test_update_name(self):
        user_id = _register()
        current_domain.process(UpdateProfile(user_id=user_id, name="Johnny"), asynchronous=False)
        assert _get(user_id).name == "Johnny"

    def test_update_address(self):
        user_id = _register()
        address = {"street": "123 Main St", "city": "Springfield", "state": "IL", "zip_code": "62701"}
        current_domain.process(UpdateProfile(user_id=user_id, address=json.dumps(address)), asynchronous=False)

        user = _get(user_id)
        assert user.address.street == "123 Main St"
        assert user.address.zip_code == "62701"
        assert user.address.country is None

    def test_change_email(self):
        user_id = _register()
        current_domain.process(UpdateProfile(user_id=user_id, email="New@Example.com"), asynchronous=False)
        assert _get(user_id).email == "new@example.com"

    def test_email_taken_by_another_user(self):
        user_id = _register()
        _register(email="jane@example.com")

        with pytest.raises(ValidationError) as exc:
            current_domain.process(UpdateProfile(user_id=user_id, email="jane@example.com"), asynchronous=False)
        assert exc.value.messages["email"] == ["Email is already in use"]

    def test_keeping_own_email_is_allowed(self):
        user_id = _register()
        current_domain.process(
            UpdateProfile(user_id=user_id, email="john@example.com", name="John"),
            asynchronous=False,
        )
        assert _get(user_id).name == "John"

    def test_change_password(self):
        user_id = _register()
        current_domain.process(UpdateProfile(user_id=user_id, password="s3cret-pass"), asynchronous=False)
        assert _get(user_id).check_password("s3cret-pass") is True

    def test_unknown_user(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(UpdateProfile(user_id="missing", name="X"), asynchronous=False)
