"""Order pricing rules shared by the storefront client and the ordering context.

The client uses the policy to display cart totals; the server uses the same
policy to price an order at submission, so both sides agree on tax and
shipping for the same subtotal.
"""

from dataclasses import dataclass

DEFAULT_TAX_RATE = 0.08
DEFAULT_FREE_SHIPPING_THRESHOLD = 100.0
DEFAULT_SHIPPING_COST = 10.0


def round_money(amount: float) -> float:
    """Round a currency amount to cents."""
    return round(amount + 0.0, 2)


@dataclass(frozen=True)
class PriceQuote:
    """Priced totals for a given subtotal, rounded to cents."""

    items_price: float
    tax_price: float
    shipping_price: float
    total_price: float


@dataclass(frozen=True)
class PricingPolicy:
    tax_rate: float = DEFAULT_TAX_RATE
    free_shipping_threshold: float = DEFAULT_FREE_SHIPPING_THRESHOLD
    shipping_cost: float = DEFAULT_SHIPPING_COST

    def tax(self, subtotal: float) -> float:
        return subtotal * self.tax_rate

    def shipping(self, subtotal: float) -> float:
        return 0.0 if subtotal >= self.free_shipping_threshold else float(self.shipping_cost)

    def quote(self, subtotal: float) -> PriceQuote:
        """Price a subtotal. The total is the sum of the rounded components."""
        items_price = round_money(subtotal)
        tax_price = round_money(self.tax(subtotal))
        shipping_price = round_money(self.shipping(subtotal))
        return PriceQuote(
            items_price=items_price,
            tax_price=tax_price,
            shipping_price=shipping_price,
            total_price=round_money(items_price + tax_price + shipping_price),
        )
