"""Tests for reconciling the cart with the live catalogue."""

from storefront.cart import CartEngine
from storefront.errors import TransportError


class TestCartValidation:
    def test_unchanged_cart_is_not_rewritten(self, cart, store, make_product, make_catalog):
        cart.add_item(make_product(), quantity=2)
        before = store.get("ecommerce_cart")

        result = cart.validate(make_catalog([make_product()]))

        assert result.changed is False
        assert result.warnings == []
        assert store.get("ecommerce_cart") == before

    def test_quantity_is_clamped_to_stock(self, cart, make_product, make_catalog):
        cart.add_item(make_product(stock=10), quantity=5)

        result = cart.validate(make_catalog([make_product(stock=3)]))

        assert result.changed is True
        assert cart.item_quantity("p1") == 3
        assert len(result.warnings) == 1
        assert "quantity reduced from 5 to 3" in result.warnings[0]

    def test_validation_is_idempotent(self, cart, make_product, make_catalog):
        cart.add_item(make_product(stock=10), quantity=5)
        catalog = make_catalog([make_product(stock=3)])

        cart.validate(catalog)
        second = cart.validate(catalog)

        assert second.changed is False
        assert second.warnings == []
        assert cart.item_quantity("p1") == 3

    def test_missing_product_is_removed(self, cart, make_product, make_catalog):
        cart.add_item(make_product())
        cart.add_item(make_product("p2", "Cable", 10.0))

        result = cart.validate(make_catalog([make_product("p2", "Cable", 10.0)]))

        assert [line.product_id for line in result.cart.lines] == ["p2"]
        assert "Headphones is no longer available" in result.warnings[0]
        assert not cart.is_in_cart("p1")

    def test_inactive_product_is_removed(self, cart, make_product, make_catalog):
        cart.add_item(make_product())
        result = cart.validate(make_catalog([make_product(is_active=False)]))
        assert result.cart.is_empty

    def test_sold_out_product_is_removed(self, cart, make_product, make_catalog):
        cart.add_item(make_product())
        result = cart.validate(make_catalog([make_product(stock=0)]))
        assert result.cart.is_empty
        assert len(result.warnings) == 1

    def test_price_change_is_adopted_with_a_warning(self, cart, make_product, make_catalog):
        cart.add_item(make_product(price=25.0))

        result = cart.validate(make_catalog([make_product(price=22.5)]))

        assert cart.load().find("p1").price == 22.5
        assert result.warnings == ["Price of Headphones changed from 25.00 to 22.50"]

    def test_stock_refresh_is_silent(self, cart, make_product, make_catalog):
        cart.add_item(make_product(stock=5))

        result = cart.validate(make_catalog([make_product(stock=8)]))

        assert result.changed is True
        assert result.warnings == []
        assert cart.load().find("p1").stock == 8

    def test_lookup_failure_keeps_the_line(self, cart, make_product, make_catalog):
        cart.add_item(make_product(), quantity=2)
        catalog = make_catalog(failures={"p1": TransportError("connection refused")})

        result = cart.validate(catalog)

        assert result.changed is False
        assert cart.item_quantity("p1") == 2


class TestConcurrentWrites:
    """Another engine on the same store writes while lookups are in flight."""

    @staticmethod
    def _catalog_with_side_effect(catalog, side_effect):
        class WritingCatalog:
            lookups = catalog.lookups

            def get_product(self, product_id):
                side_effect()
                return catalog.get_product(product_id)

        return WritingCatalog()

    def test_line_added_during_lookups_survives(self, cart, store, make_product, make_catalog):
        cart.add_item(make_product(stock=10), quantity=5)
        other = CartEngine(store)
        catalog = self._catalog_with_side_effect(
            make_catalog([make_product(stock=3)]),
            lambda: other.add_item(make_product("p2", "Cable", price=10.0, stock=3)),
        )

        result = cart.validate(catalog)

        assert cart.item_quantity("p1") == 3
        assert cart.is_in_cart("p2")
        assert [line.product_id for line in result.cart.lines] == ["p1", "p2"]

    def test_adjustments_apply_to_the_latest_quantity(self, cart, store, make_product, make_catalog):
        cart.add_item(make_product(stock=10), quantity=2)
        other = CartEngine(store)
        catalog = self._catalog_with_side_effect(
            make_catalog([make_product(stock=3)]),
            lambda: other.update_quantity("p1", 4),
        )

        result = cart.validate(catalog)

        assert cart.item_quantity("p1") == 3
        assert result.warnings == ["Only 3 of Headphones in stock; quantity reduced from 4 to 3"]
