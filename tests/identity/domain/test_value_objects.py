"""Tests for the EmailAddress and PhoneNumber value objects."""

import pytest
from identity.shared.email import EmailAddress
from identity.shared.phone import PhoneNumber
from protean.exceptions import ValidationError


class TestEmailAddress:
    @pytest.mark.parametrize(
        "email",
        ["john@example.com", "first.last@sub.example.org", "user+tag@example.co.uk"],
    )
    def test_valid_addresses(self, email):
        assert EmailAddress(address=email).address == email

    @pytest.mark.parametrize(
        "email",
        [
            "plainaddress",
            "two@@example.com",
            "@example.com",
            "john@",
            "john@localhost",
            "john..doe@example.com",
            "john doe@example.com",
            "john@-example.com",
            "john;doe@example.com",
        ],
    )
    def test_invalid_addresses(self, email):
        with pytest.raises(ValidationError):
            EmailAddress(address=email)

    def test_normalize(self):
        assert EmailAddress.normalize("  Admin@Example.COM ") == "admin@example.com"


class TestPhoneNumber:
    @pytest.mark.parametrize("number", ["+1-555-0123", "(555) 123 4567", "5551234567"])
    def test_valid_numbers(self, number):
        assert PhoneNumber(number=number).number == number

    @pytest.mark.parametrize("number", ["call me", "+-()", "555-CALL"])
    def test_invalid_numbers(self, number):
        with pytest.raises(ValidationError):
            PhoneNumber(number=number)
