"""Errors raised by the storefront client."""


class StorefrontError(Exception):
    """Base class for every storefront client error."""


class CheckoutValidationError(StorefrontError):
    """Checkout input was rejected before anything was sent.

    ``errors`` maps a field name to its messages.
    """

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("; ".join(f"{field}: {', '.join(messages)}" for field, messages in errors.items()))


class NotFoundError(StorefrontError):
    """The server has no such resource (HTTP 404)."""


class AuthorizationError(StorefrontError):
    """The caller is not logged in, or the server refused the credential."""


class TransportError(StorefrontError):
    """The request never got a response: connection refused, timeout, bad JSON."""


class RequestRejected(StorefrontError):
    """The server answered with an error status other than 401 or 404."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")
