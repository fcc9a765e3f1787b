"""Catalogue bounded context: products, catalogue queries and stock.

Admin mutations and stock reservations arrive as commands; shoppers read
through ``ProductRepository``.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

catalogue = Domain(name="catalogue")
