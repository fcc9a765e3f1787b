"""Ordering bounded context: order placement and the order lifecycle.

Orders are priced from the live catalogue at submission and never
re-priced afterwards.
"""

import structlog
from protean.domain import Domain

from shared.logging import configure_logging

configure_logging()

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
