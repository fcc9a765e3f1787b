"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state; nothing is shared across users.
State tracks IDs and tokens returned by earlier steps so follow-up
requests can reference them.
"""

from dataclasses import dataclass, field


@dataclass
class ShopperState:
    """Tracks one simulated shopper from registration to order."""

    user_id: str | None = None
    email: str | None = None
    password: str | None = None
    token: str | None = None
    products: list[dict] = field(default_factory=list)
    order_id: str | None = None

    @property
    def auth_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}


@dataclass
class AdminState:
    """Tracks a simulated administrator maintaining the catalogue."""

    token: str | None = None
    product_id: str | None = None

    @property
    def auth_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.token}"} if self.token else {}
