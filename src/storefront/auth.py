"""Client-side login state.

The logged-in user and their bearer token live together under one store
key. An explicit logout removes both and empties the cart; a token the
server rejects only ends the session, so the cart survives a re-login.
"""

from dataclasses import dataclass

import structlog

from storefront.cart import CartEngine
from storefront.config import USER_KEY
from storefront.errors import AuthorizationError
from storefront.http import ApiClient
from storefront.storage import KeyValueStore

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SessionUser:
    id: str
    name: str
    email: str
    role: str
    token: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def to_json(self) -> dict:
        return {"_id": self.id, "name": self.name, "email": self.email, "role": self.role, "token": self.token}

    @classmethod
    def from_json(cls, data: dict) -> "SessionUser":
        return cls(
            id=data["_id"],
            name=data["name"],
            email=data["email"],
            role=data.get("role", "user"),
            token=data["token"],
        )


class AuthSession:
    def __init__(self, api: ApiClient, store: KeyValueStore, cart: CartEngine, key: str = USER_KEY):
        self.api = api
        self.store = store
        self.cart = cart
        self.key = key

    def _remember(self, body: dict) -> SessionUser:
        user = SessionUser.from_json(body)
        self.store.write_json(self.key, user.to_json())
        return user

    def login(self, email: str, password: str) -> SessionUser:
        user = self._remember(self.api.post("/users/login", json={"email": email, "password": password}))
        logger.info("logged_in", user_id=user.id)
        return user

    def register(self, name: str, email: str, password: str) -> SessionUser:
        body = self.api.post("/users/register", json={"name": name, "email": email, "password": password})
        user = self._remember(body)
        logger.info("registered", user_id=user.id)
        return user

    def logout(self, clear_cart: bool = True) -> None:
        self.store.delete(self.key)
        if clear_cart:
            self.cart.clear()

    def current_user(self) -> SessionUser | None:
        data = self.store.read_json(self.key)
        if not isinstance(data, dict):
            return None
        try:
            return SessionUser.from_json(data)
        except KeyError:
            logger.warning("session_discarded", key=self.key)
            return None

    def token(self) -> str | None:
        user = self.current_user()
        return user.token if user else None

    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def require_auth(self) -> SessionUser:
        user = self.current_user()
        if user is None:
            raise AuthorizationError("Please log in to continue")
        return user

    def _authorized(self, method, path, json=None):
        """Call the API with the session's token; a rejected token ends the session but keeps the cart."""
        user = self.require_auth()
        try:
            return self.api.request(method, path, json=json, token=user.token)
        except AuthorizationError:
            logger.info("session_expired", user_id=user.id)
            self.logout(clear_cart=False)
            raise

    def profile(self) -> dict:
        return self._authorized("GET", "/users/profile")

    def update_profile(self, **changes) -> dict:
        """Send profile changes (camelCase keys) and keep the refreshed token."""
        body = self._authorized("PUT", "/users/profile", json=changes)
        if body.get("token"):
            self._remember(body)
        return body
