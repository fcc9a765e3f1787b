"""Identity bounded context: user accounts, credentials and profiles."""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

# Composition root
identity = Domain(name="identity")
