"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(EmailAddress VO, PhoneNumber VO, password length) and use the camelCase
keys expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["Electronics", "Clothing", "Books", "Home & Garden", "Sports", "Beauty", "Toys"]
PAYMENT_METHODS = ["credit_card", "paypal", "cash_on_delivery"]
SORT_KEYS = ["price-asc", "price-desc", "name", "newest", "rating"]

# ---------- Identity ----------


def valid_email() -> str:
    """Generate emails that pass EmailAddress VO validation.

    Rules: exactly one @, no spaces/tabs, valid domain with dot,
    no leading/trailing dots, no consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def valid_phone() -> str:
    """Generate phones matching PhoneNumber VO regex: ^\\+?[\\d\\s\\-()]+$"""
    area = random.randint(200, 999)
    prefix = random.randint(200, 999)
    line = random.randint(1000, 9999)
    return f"+1-{area}-{prefix}-{line}"


def registration_data() -> dict:
    """RegisterRequest payload; the password is long enough for the 6-char minimum."""
    return {
        "name": fake.name()[:100],
        "email": valid_email(),
        "password": fake.password(length=12),
    }


def profile_update() -> dict:
    return {
        "phone": valid_phone(),
        "address": shipping_address(),
    }


# ---------- Catalogue ----------


def product_data() -> dict:
    """Generate CreateProductRequest payload."""
    word = fake.word().capitalize()
    price = round(random.uniform(5.0, 500.0), 2)
    return {
        "name": f"{word} {fake.word()} {uuid.uuid4().hex[:4]}"[:200],
        "description": fake.paragraph(nb_sentences=3),
        "price": price,
        "originalPrice": round(price * random.uniform(1.1, 1.5), 2) if random.random() < 0.3 else None,
        "category": random.choice(CATEGORIES),
        "brand": fake.company()[:100],
        "images": [{"url": f"https://picsum.photos/seed/{uuid.uuid4().hex[:8]}/600/600", "alt": word}],
        "stock": random.randint(20, 500),
        "specifications": {"Material": fake.word(), "Origin": fake.country()[:50]},
        "tags": fake.words(nb=3),
        "isFeatured": random.random() < 0.1,
    }


def product_update() -> dict:
    return {
        "price": round(random.uniform(5.0, 500.0), 2),
        "stock": random.randint(20, 500),
    }


def search_params() -> dict:
    """Query string for GET /products with a random mix of filters."""
    params = {"page": random.randint(1, 3), "limit": random.choice([6, 12, 24])}
    if random.random() < 0.5:
        params["category"] = random.choice(CATEGORIES + ["all"])
    if random.random() < 0.3:
        params["search"] = fake.word()
    if random.random() < 0.3:
        params["minPrice"] = random.choice([0, 10, 50])
        params["maxPrice"] = random.choice([100, 250, 1000])
    params["sortBy"] = random.choice(SORT_KEYS)
    return params


# ---------- Ordering ----------


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "state": fake.state_abbr(),
        "zipCode": fake.zipcode()[:20],
        "country": "USA",
    }


def order_data(products: list[dict], max_lines: int = 3) -> dict:
    """PlaceOrderRequest payload for 1..max_lines of the given in-stock products."""
    in_stock = [p for p in products if p.get("stock", 0) > 0]
    chosen = random.sample(in_stock, k=min(len(in_stock), random.randint(1, max_lines)))
    return {
        "orderItems": [{"product": p["_id"], "quantity": random.randint(1, 2)} for p in chosen],
        "shippingAddress": shipping_address(),
        "paymentMethod": random.choice(PAYMENT_METHODS),
        "orderNotes": fake.sentence() if random.random() < 0.2 else None,
    }
