"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---


class AddressIn(CamelModel):
    street: str | None = Field(None, max_length=255)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=100)
    zip_code: str | None = Field(None, max_length=20)
    country: str | None = Field(None, max_length=100)


class RegisterRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "John Doe", "email": "john@example.com", "password": "password123"}]
        }
    }

    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class LoginRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"email": "john@example.com", "password": "password123"}]}}

    email: str = Field(..., max_length=254)
    password: str = Field(..., max_length=128)


class UpdateProfileRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "John Q. Doe",
                    "phone": "+1-555-0123",
                    "address": {
                        "street": "123 Main St",
                        "city": "Springfield",
                        "state": "IL",
                        "zipCode": "62701",
                        "country": "USA",
                    },
                }
            ]
        },
    )

    name: str | None = Field(None, min_length=1, max_length=100)
    email: str | None = Field(None, max_length=254)
    password: str | None = Field(None, max_length=128)
    phone: str | None = Field(None, max_length=20)
    address: AddressIn | None = None


# --- Response Schemas ---


class AuthResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    email: str
    role: str
    token: str


class AddressOut(CamelModel):
    street: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = None
    country: str | None = None


class ProfileResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    email: str
    role: str
    phone: str | None = None
    address: AddressOut | None = None
    created_at: datetime | None = None
    token: str | None = None

    @classmethod
    def from_user(cls, user, token=None) -> ProfileResponse:
        address = None
        if user.address is not None:
            address = AddressOut(
                street=user.address.street,
                city=user.address.city,
                state=user.address.state,
                zip_code=user.address.zip_code,
                country=user.address.country,
            )
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role,
            phone=user.phone,
            address=address,
            created_at=user.created_at,
            token=token,
        )
