"""Shopfront management CLI.

Creates and drops database schemas for all domains, and seeds sample data.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Reset data and load sample users and products
"""

import argparse
import json
import sys

from shared.db import drop_db, reset_data, setup_db

DOMAIN_NAMES = ["identity", "catalogue", "ordering"]

SAMPLE_USERS = [
    {"name": "John Doe", "email": "john@example.com", "password": "password123", "role": "user"},
    {"name": "Admin User", "email": "admin@example.com", "password": "admin123", "role": "admin"},
]

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Bluetooth Headphones",
        "description": "Wireless over-ear headphones with noise cancellation and a 30-hour battery.",
        "price": 99.99,
        "original_price": 149.99,
        "category": "Electronics",
        "brand": "AudioTech",
        "stock": 50,
        "is_featured": True,
        "specifications": {"Battery Life": "30 hours", "Connectivity": "Bluetooth 5.0"},
        "tags": ["wireless", "bluetooth", "noise-cancellation"],
    },
    {
        "name": "Smartphone - Latest Model",
        "description": "Flagship phone with 128GB storage, a triple camera and fast charging.",
        "price": 699.99,
        "original_price": 799.99,
        "category": "Electronics",
        "brand": "TechCorp",
        "stock": 25,
        "is_featured": True,
        "specifications": {"Storage": "128GB", "Camera": "Triple lens"},
        "tags": ["smartphone", "mobile", "camera"],
    },
    {
        "name": "Casual Cotton T-Shirt",
        "description": "Soft everyday t-shirt in 100% cotton.",
        "price": 19.99,
        "category": "Clothing",
        "brand": "FashionWear",
        "stock": 100,
        "tags": ["cotton", "casual", "comfortable"],
    },
    {
        "name": "Programming Book - JavaScript Guide",
        "description": "A practical guide to modern JavaScript for web developers.",
        "price": 29.99,
        "category": "Books",
        "brand": "TechBooks",
        "stock": 30,
        "tags": ["javascript", "programming", "web-development"],
    },
    {
        "name": "Ergonomic Office Chair",
        "description": "Adjustable office chair with lumbar support.",
        "price": 199.99,
        "original_price": 299.99,
        "category": "Home & Garden",
        "brand": "ComfortSeating",
        "stock": 15,
        "is_featured": True,
        "tags": ["office", "ergonomic", "comfortable"],
    },
    {
        "name": "Fitness Tracker Watch",
        "description": "Tracks heart rate, sleep and workouts.",
        "price": 79.99,
        "category": "Sports",
        "brand": "FitTech",
        "stock": 40,
        "tags": ["fitness", "health", "wearable"],
    },
    {
        "name": "Skincare Set - Anti-Aging",
        "description": "Cleanser, serum and moisturiser set.",
        "price": 89.99,
        "category": "Beauty",
        "brand": "GlowSkin",
        "stock": 20,
        "tags": ["skincare", "anti-aging", "beauty"],
    },
    {
        "name": "Building Blocks Set",
        "description": "Educational building set for kids aged 6 and up.",
        "price": 34.99,
        "category": "Toys",
        "brand": "PlayTime",
        "stock": 60,
        "tags": ["educational", "kids", "building"],
    },
]


def _domains():
    from catalogue.domain import catalogue
    from identity.domain import identity
    from ordering.domain import ordering

    return {"identity": identity, "catalogue": catalogue, "ordering": ordering}


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    all_domains = _domains()
    for name in domains or DOMAIN_NAMES:
        domain = all_domains[name]
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    all_domains = _domains()
    for name in domains or DOMAIN_NAMES:
        domain = all_domains[name]
        print(f"Initializing {name} domain...")
        domain.init()
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")

    print("Done.")


def seed(users=SAMPLE_USERS, products=SAMPLE_PRODUCTS):
    """Clear users, products and orders, then load the sample data.

    Expects every domain to be initialized already.
    Returns the new user ids and product ids.
    """
    from catalogue.product.creation import CreateProduct
    from identity.user.registration import RegisterUser

    all_domains = _domains()
    for name in DOMAIN_NAMES:
        reset_data(all_domains[name])

    user_ids = []
    with all_domains["identity"].domain_context():
        for user in users:
            user_ids.append(all_domains["identity"].process(RegisterUser(**user), asynchronous=False))
    print(f"Seeded {len(user_ids)} users.")

    product_ids = []
    with all_domains["catalogue"].domain_context():
        for product in products:
            command = CreateProduct(
                **{
                    **product,
                    "specifications": json.dumps(product.get("specifications", {})),
                    "tags": json.dumps(product.get("tags", [])),
                    "images": json.dumps(product.get("images", [])),
                }
            )
            product_ids.append(all_domains["catalogue"].process(command, asynchronous=False))
    print(f"Seeded {len(product_ids)} products.")

    return user_ids, product_ids


def main():
    parser = argparse.ArgumentParser(description="Shopfront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed", help="Reset data and load sample users and products")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed":
        for domain in _domains().values():
            domain.init()
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
