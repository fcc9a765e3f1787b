"""JSON-over-HTTP client for the Shopfront API.

Works with a ``requests.Session`` or anything exposing the same
``request(method, url, ...)`` call, such as FastAPI's ``TestClient``.
"""

import requests
import structlog

from storefront.config import StorefrontSettings
from storefront.errors import AuthorizationError, NotFoundError, RequestRejected, TransportError

logger = structlog.get_logger(__name__)


def error_message(body, default: str) -> str:
    """Pull a human-readable message out of an error response body."""
    if not isinstance(body, dict):
        return default

    for key in ("error", "detail", "message"):
        value = body.get(key)
        if not value:
            continue
        if isinstance(value, str):
            return value
        if isinstance(value, dict):
            return "; ".join(
                f"{field}: {', '.join(map(str, messages)) if isinstance(messages, list) else messages}"
                for field, messages in value.items()
            )
        if isinstance(value, list):
            return "; ".join(item.get("msg", str(item)) if isinstance(item, dict) else str(item) for item in value)
    return default


class ApiClient:
    def __init__(self, settings: StorefrontSettings | None = None, session=None):
        self.settings = settings or StorefrontSettings()
        self.session = session if session is not None else requests.Session()

    def request(self, method: str, path: str, json=None, params=None, token: str | None = None):
        """Send a request and return the decoded JSON body.

        Raises ``AuthorizationError`` on 401, ``NotFoundError`` on 404,
        ``RequestRejected`` on any other error status, and
        ``TransportError`` when no usable response arrived.
        """
        url = f"{self.settings.api_url}{path}"
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self.session.request(
                method,
                url,
                json=json,
                params=params,
                headers=headers,
                timeout=self.settings.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("api_request_failed", method=method, path=path, error=str(exc))
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json() if response.content else None
        except ValueError as exc:
            raise TransportError(f"{method} {path} returned invalid JSON") from exc

        if response.status_code < 400:
            return body

        message = error_message(body, default=f"Request failed with status {response.status_code}")
        logger.info("api_request_rejected", method=method, path=path, status_code=response.status_code)
        if response.status_code == 401:
            raise AuthorizationError(message)
        if response.status_code == 404:
            raise NotFoundError(message)
        raise RequestRejected(response.status_code, message)

    def get(self, path, params=None, token=None):
        return self.request("GET", path, params=params, token=token)

    def post(self, path, json=None, token=None):
        return self.request("POST", path, json=json, token=token)

    def put(self, path, json=None, token=None):
        return self.request("PUT", path, json=json, token=token)

    def delete(self, path, token=None):
        return self.request("DELETE", path, token=token)
