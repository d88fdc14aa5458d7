"""Open/Closed: discount strategies behind one abstraction.

New discounts are added by subclassing :class:`Discount` and registering
the class (directly or from a plugin). Nothing here changes when that
happens.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import TYPE_CHECKING

from solidex.domain.contracts import ensure_satisfies
from solidex.domain.registry import VariantRegistry

if TYPE_CHECKING:
    from solidex.domain.products import Product


class Discount(ABC):
    """Maps a price to a discounted price. Stateless."""

    @abstractmethod
    def apply(self, price: Decimal) -> Decimal:
        """Return the discounted price."""
        ...


class RegularDiscount(Discount):
    """10% off."""

    def apply(self, price: Decimal) -> Decimal:
        return price * Decimal("0.9")


class PremiumDiscount(Discount):
    """20% off."""

    def apply(self, price: Decimal) -> Decimal:
        return price * Decimal("0.8")


def apply_discount(product: Product, discount: Discount) -> Decimal:
    """Price of *product* after *discount*."""
    return ensure_satisfies(discount, Discount).apply(product.price)


DISCOUNT_REGISTRY: VariantRegistry[Discount] = VariantRegistry(Discount)
DISCOUNT_REGISTRY.register("regular", RegularDiscount, builtin=True)
DISCOUNT_REGISTRY.register("premium", PremiumDiscount, builtin=True)
