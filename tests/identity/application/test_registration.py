"""Application tests for user registration."""

import pytest
from identity.user.registration import RegisterUser
from identity.user.user import User
from protean.exceptions import ValidationError
from protean.utils.globals import current_domain


def _register(**overrides):
    defaults = {"name": "John Doe", "email": "john@example.com", "password": "password123"}
    defaults.update(overrides)
    return current_domain.process(RegisterUser(**defaults), asynchronous=False)


class TestRegisterUserHandler:
    def test_register_user(self):
        user_id = _register()
        user = current_domain.repository_for(User).get(user_id)
        assert user.name == "John Doe"
        assert user.email == "john@example.com"
        assert user.role == "user"

    def test_register_admin(self):
        user_id = _register(email="admin@example.com", role="admin")
        assert current_domain.repository_for(User).get(user_id).is_admin is True

    def test_duplicate_email_rejected(self):
        _register()
        with pytest.raises(ValidationError) as exc:
            _register(name="Someone Else")
        assert exc.value.messages["email"] == ["User already exists"]

    def test_duplicate_email_differing_in_case_rejected(self):
        _register()
        with pytest.raises(ValidationError):
            _register(email="JOHN@EXAMPLE.COM")

    def test_find_by_email_is_case_insensitive(self):
        user_id = _register()
        user = current_domain.repository_for(User).find_by_email(" John@Example.com ")
        assert user.id == user_id

    def test_find_by_unknown_email(self):
        assert current_domain.repository_for(User).find_by_email("nobody@example.com") is None
