"""Tests for password hashing and bearer tokens."""

from datetime import timedelta

import pytest
from fastapi import HTTPException
from shared.security import (
    create_access_token,
    decode_token,
    hash_password,
    require_admin,
    require_user,
    verify_password,
)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = hash_password("password123")
        assert hashed != "password123"
        assert verify_password("password123", hashed) is True
        assert verify_password("password124", hashed) is False

    def test_missing_hash_never_verifies(self):
        assert verify_password("anything", "") is False


class TestTokens:
    def test_round_trip(self):
        principal = decode_token(create_access_token("user-1", "john@example.com", "user"))
        assert principal.user_id == "user-1"
        assert principal.email == "john@example.com"
        assert principal.is_admin is False

    def test_expired_token(self):
        token = create_access_token("user-1", "john@example.com", "user", expires_delta=timedelta(seconds=-1))
        with pytest.raises(HTTPException) as exc:
            decode_token(token)
        assert exc.value.status_code == 401

    def test_tampered_token(self):
        token = create_access_token("user-1", "john@example.com", "user")
        with pytest.raises(HTTPException):
            decode_token(token[:-2] + ("A" if token[-2] != "A" else "B") + token[-1])


class TestDependencies:
    def test_require_user_needs_bearer_header(self):
        with pytest.raises(HTTPException) as exc:
            require_user(authorization=None)
        assert exc.value.status_code == 401

        with pytest.raises(HTTPException):
            require_user(authorization="Basic abc")

    def test_require_user(self):
        token = create_access_token("user-1", "john@example.com", "user")
        assert require_user(authorization=f"Bearer {token}").user_id == "user-1"

    def test_require_admin(self):
        user = decode_token(create_access_token("user-1", "john@example.com", "user"))
        admin = decode_token(create_access_token("admin-1", "admin@example.com", "admin"))

        with pytest.raises(HTTPException) as exc:
            require_admin(principal=user)
        assert exc.value.status_code == 403
        assert require_admin(principal=admin) is admin
