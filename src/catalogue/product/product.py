"""Product aggregate root with the ProductImage entity."""

import json
from datetime import datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import (
    Boolean,
    DateTime,
    Float,
    HasMany,
    Integer,
    String,
    Text,
)

from catalogue.domain import catalogue


def _dump_specifications(specifications):
    if specifications is None:
        return "{}"
    if isinstance(specifications, str):
        return specifications
    return json.dumps({str(k): str(v) for k, v in dict(specifications).items()})


def _dump_tags(tags):
    if tags is None:
        return "[]"
    if isinstance(tags, str):
        return tags
    # Tags behave as a set; keep first-seen order for stable output
    unique = list(dict.fromkeys(str(t).strip() for t in tags if str(t).strip()))
    return json.dumps(unique)


@catalogue.entity(part_of="Product")
class ProductImage:
    """An image shown for a product, in display order."""

    url: String(required=True, max_length=500)
    alt: String(max_length=255)
    display_order: Integer(default=0)


@catalogue.aggregate
class Product:
    """Product aggregate root.

    Inactive products are hidden from listings and search but stay readable
    by id so historical orders can still reference them.
    """

    name: String(required=True, max_length=200)
    description: Text(required=True)
    price: Float(required=True, min_value=0.0)
    original_price: Float(min_value=0.0)
    category: String(required=True, max_length=100)
    brand: String(max_length=100)
    images: HasMany(ProductImage)
    stock: Integer(default=0, min_value=0)
    specifications: Text(default="{}")  # JSON object of string -> string
    tags: Text(default="[]")  # JSON array of strings
    weight: Float(min_value=0.0)
    rating: Float(default=0.0, min_value=0.0, max_value=5.0)
    num_reviews: Integer(default=0, min_value=0)
    is_active: Boolean(default=True)
    is_featured: Boolean(default=False)
    created_at: DateTime(default=datetime.now)
    updated_at: DateTime(default=datetime.now)

    @invariant.post
    def specifications_must_be_a_mapping(self):
        if not self.specifications:
            return

        try:
            specifications = json.loads(self.specifications)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"specifications": ["Specifications must be valid JSON"]}) from None

        if not isinstance(specifications, dict):
            raise ValidationError({"specifications": ["Specifications must be a JSON object"]})

    @invariant.post
    def tags_must_be_a_list(self):
        if not self.tags:
            return

        try:
            tags = json.loads(self.tags)
        except (json.JSONDecodeError, TypeError):
            raise ValidationError({"tags": ["Tags must be valid JSON"]}) from None

        if not isinstance(tags, list):
            raise ValidationError({"tags": ["Tags must be a JSON array"]})

    @classmethod
    def create(
        cls,
        name,
        description,
        price,
        category,
        brand=None,
        original_price=None,
        images=None,
        stock=0,
        specifications=None,
        tags=None,
        weight=None,
        is_featured=False,
    ):
        from catalogue.product.events import ProductCreated

        now = datetime.now()
        product = cls(
            name=name,
            description=description,
            price=price,
            original_price=original_price,
            category=category,
            brand=brand,
            stock=stock if stock is not None else 0,
            specifications=_dump_specifications(specifications),
            tags=_dump_tags(tags),
            weight=weight,
            is_featured=bool(is_featured),
            created_at=now,
            updated_at=now,
        )
        if images:
            product._replace_images(images)

        product.raise_(
            ProductCreated(
                product_id=product.id,
                name=name,
                category=category,
                price=price,
                stock=product.stock,
                created_at=now,
            )
        )
        return product

    # -------------------------------------------------------------------
    # Read helpers
    # -------------------------------------------------------------------
    def ordered_images(self):
        return sorted(self.images, key=lambda image: image.display_order or 0)

    def primary_image_url(self):
        images = self.ordered_images()
        return images[0].url if images else None

    def specification_map(self):
        return json.loads(self.specifications) if self.specifications else {}

    def tag_list(self):
        return json.loads(self.tags) if self.tags else []

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def _replace_images(self, images):
        """Replace all images with ``images``: a list of dicts with url and optional alt."""
        for image in list(self.images):
            self.remove_images(image)

        for position, image in enumerate(images):
            self.add_images(
                ProductImage(
                    url=image["url"],
                    alt=image.get("alt"),
                    display_order=position,
                )
            )

    def update(
        self,
        name=None,
        description=None,
        price=None,
        original_price=None,
        category=None,
        brand=None,
        images=None,
        stock=None,
        specifications=None,
        tags=None,
        weight=None,
        is_active=None,
        is_featured=None,
    ):
        """Apply a partial update; ``None`` leaves a field unchanged."""
        from catalogue.product.events import ProductUpdated

        scalar_changes = {
            "name": name,
            "description": description,
            "price": price,
            "original_price": original_price,
            "category": category,
            "brand": brand,
            "stock": stock,
            "weight": weight,
            "is_active": is_active,
            "is_featured": is_featured,
        }
        changed = [field for field, value in scalar_changes.items() if value is not None]
        for field in changed:
            setattr(self, field, scalar_changes[field])

        if specifications is not None:
            self.specifications = _dump_specifications(specifications)
            changed.append("specifications")
        if tags is not None:
            self.tags = _dump_tags(tags)
            changed.append("tags")
        if images is not None:
            self._replace_images(images)
            changed.append("images")

        self.updated_at = datetime.now()

        self.raise_(
            ProductUpdated(
                product_id=self.id,
                changed_fields=json.dumps(changed),
                price=self.price,
                stock=self.stock,
                is_active=self.is_active,
            )
        )

    def deactivate(self):
        from catalogue.product.events import ProductDeactivated

        if not self.is_active:
            raise ValidationError({"is_active": ["Product is already inactive"]})

        self.is_active = False
        now = datetime.now()
        self.updated_at = now

        self.raise_(
            ProductDeactivated(
                product_id=self.id,
                deactivated_at=now,
            )
        )

    def reserve_stock(self, quantity, order_reference=None):
        """Take ``quantity`` units out of stock for an order being placed."""
        from catalogue.product.events import StockReserved

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})
        if not self.is_active:
            raise ValidationError({"product": [f"{self.name} is no longer available"]})
        if quantity > self.stock:
            raise ValidationError(
                {"stock": [f"Insufficient stock for {self.name}: requested {quantity}, available {self.stock}"]}
            )

        self.stock -= quantity
        self.updated_at = datetime.now()

        self.raise_(
            StockReserved(
                product_id=self.id,
                quantity=quantity,
                remaining_stock=self.stock,
                order_reference=order_reference,
            )
        )

    def release_stock(self, quantity, order_reference=None):
        """Put ``quantity`` units back, e.g. when an order is cancelled."""
        from catalogue.product.events import StockReleased

        if quantity < 1:
            raise ValidationError({"quantity": ["Quantity must be at least 1"]})

        self.stock += quantity
        self.updated_at = datetime.now()

        self.raise_(
            StockReleased(
                product_id=self.id,
                quantity=quantity,
                remaining_stock=self.stock,
                order_reference=order_reference,
            )
        )
