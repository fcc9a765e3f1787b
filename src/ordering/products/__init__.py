"""Product catalogue factory.

Provides get_catalogue() / set_catalogue() to swap implementations:
- CatalogueDomainAdapter when the catalogue runs in the same process (default)
- FakeCatalogue for testing
"""

from ordering.products.port import ProductCatalogue

_current_catalogue: ProductCatalogue | None = None


def get_catalogue() -> ProductCatalogue:
    """Return the current product catalogue. Defaults to the in-process catalogue domain."""
    global _current_catalogue
    if _current_catalogue is None:
        from ordering.products.domain_adapter import CatalogueDomainAdapter

        _current_catalogue = CatalogueDomainAdapter()
    return _current_catalogue


def set_catalogue(catalogue: ProductCatalogue) -> None:
    """Override the active product catalogue (useful for tests)."""
    global _current_catalogue
    _current_catalogue = catalogue


def reset_catalogue() -> None:
    """Reset to default catalogue."""
    global _current_catalogue
    _current_catalogue = None
