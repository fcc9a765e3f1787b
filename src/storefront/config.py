"""Storefront client settings."""

import os
from dataclasses import dataclass, field

from shared.pricing import PricingPolicy

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PAGE_SIZE = 12

CART_KEY = "ecommerce_cart"
USER_KEY = "ecommerce_user"


@dataclass(frozen=True)
class StorefrontSettings:
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE
    pricing: PricingPolicy = field(default_factory=PricingPolicy)
    cart_key: str = CART_KEY
    user_key: str = USER_KEY

    @classmethod
    def from_env(cls) -> "StorefrontSettings":
        """Read overrides from ``STOREFRONT_API_URL`` and ``STOREFRONT_TIMEOUT``."""
        return cls(
            api_url=os.getenv("STOREFRONT_API_URL", DEFAULT_API_URL).rstrip("/"),
            timeout=float(os.getenv("STOREFRONT_TIMEOUT", str(DEFAULT_TIMEOUT))),
        )
