"""Pydantic request/response schemas for the Catalogue API.

The wire format uses camelCase keys and ``_id`` for identities.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Request Schemas ---


class ProductImageIn(CamelModel):
    url: str = Field(..., max_length=500)
    alt: str | None = Field(None, max_length=255)


class CreateProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "name": "Wireless Bluetooth Headphones",
                    "description": "Premium wireless headphones with active noise cancellation.",
                    "price": 99.99,
                    "originalPrice": 149.99,
                    "category": "Electronics",
                    "brand": "AudioTech",
                    "images": [{"url": "https://example.com/headphones.jpg", "alt": "Headphones"}],
                    "stock": 50,
                    "specifications": {"Battery Life": "30 hours", "Connectivity": "Bluetooth 5.0"},
                    "tags": ["wireless", "bluetooth", "audio"],
                    "isFeatured": True,
                }
            ]
        },
    )

    name: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    original_price: float | None = Field(None, ge=0)
    category: str = Field(..., min_length=1, max_length=100)
    brand: str | None = Field(None, max_length=100)
    images: list[ProductImageIn] = Field(default_factory=list)
    stock: int = Field(0, ge=0)
    specifications: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    weight: float | None = Field(None, ge=0)
    is_featured: bool = False


class UpdateProductRequest(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"examples": [{"price": 89.99, "stock": 40}]},
    )

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    price: float | None = Field(None, ge=0)
    original_price: float | None = Field(None, ge=0)
    category: str | None = Field(None, min_length=1, max_length=100)
    brand: str | None = Field(None, max_length=100)
    images: list[ProductImageIn] | None = None
    stock: int | None = Field(None, ge=0)
    specifications: dict[str, str] | None = None
    tags: list[str] | None = None
    weight: float | None = Field(None, ge=0)
    is_active: bool | None = None
    is_featured: bool | None = None


# --- Response Schemas ---


class ProductImageOut(CamelModel):
    url: str
    alt: str | None = None


class ProductResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    description: str
    price: float
    original_price: float | None = None
    category: str
    brand: str | None = None
    images: list[ProductImageOut] = Field(default_factory=list)
    stock: int
    specifications: dict[str, str] = Field(default_factory=dict)
    tags: list[str] = Field(default_factory=list)
    weight: float | None = None
    rating: float = 0.0
    num_reviews: int = 0
    is_active: bool
    is_featured: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_product(cls, product) -> ProductResponse:
        return cls(
            id=str(product.id),
            name=product.name,
            description=product.description,
            price=product.price,
            original_price=product.original_price,
            category=product.category,
            brand=product.brand,
            images=[ProductImageOut(url=image.url, alt=image.alt) for image in product.ordered_images()],
            stock=product.stock,
            specifications=product.specification_map(),
            tags=product.tag_list(),
            weight=product.weight,
            rating=product.rating or 0.0,
            num_reviews=product.num_reviews or 0,
            is_active=product.is_active,
            is_featured=product.is_featured,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )


class ProductPageResponse(CamelModel):
    products: list[ProductResponse]
    current_page: int
    total_pages: int
    total: int
    has_next_page: bool
    has_prev_page: bool


class MessageResponse(BaseModel):
    message: str
