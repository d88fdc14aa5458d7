"""Tests for the open/closed discount example."""

from __future__ import annotations

from decimal import Decimal

import pytest

from solidex.domain.contracts import ContractViolation
from solidex.domain.discounts import (
    DISCOUNT_REGISTRY,
    Discount,
    PremiumDiscount,
    RegularDiscount,
    apply_discount,
)
from solidex.domain.products import Product

LAPTOP = Product(name="Laptop", price=Decimal("999.99"))


class TestBuiltinDiscounts:
    def test_regular_is_ten_percent_off(self) -> None:
        assert RegularDiscount().apply(Decimal("999.99")) == Decimal("899.991")

    def test_premium_is_twenty_percent_off(self) -> None:
        assert PremiumDiscount().apply(Decimal("999.99")) == Decimal("799.992")

    def test_discount_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Discount()  # type: ignore[abstract]

    def test_registry_holds_builtins_in_order(self) -> None:
        assert DISCOUNT_REGISTRY.names()[:2] == ["regular", "premium"]
        assert DISCOUNT_REGISTRY.is_builtin("regular")
        assert DISCOUNT_REGISTRY.is_builtin("premium")


@pytest.mark.parametrize("name", ["regular", "premium"])
def test_every_variant_returns_a_decimal(name: str) -> None:
    result = DISCOUNT_REGISTRY.get(name)().apply(Decimal("10"))
    assert isinstance(result, Decimal)
    assert Decimal("0") <= result <= Decimal("10")


class TestApplyDiscount:
    def test_uses_product_price(self) -> None:
        assert apply_discount(LAPTOP, RegularDiscount()) == Decimal("899.991")
        assert apply_discount(LAPTOP, PremiumDiscount()) == Decimal("799.992")

    def test_new_variant_by_addition_only(self) -> None:
        class ClearanceDiscount(Discount):
            def apply(self, price: Decimal) -> Decimal:
                return price * Decimal("0.5")

        assert apply_discount(LAPTOP, ClearanceDiscount()) == Decimal("499.995")

    def test_rejects_object_without_apply(self) -> None:
        with pytest.raises(ContractViolation):
            apply_discount(LAPTOP, object())  # type: ignore[arg-type]

    def test_rejects_class_instead_of_instance(self) -> None:
        with pytest.raises(ContractViolation, match="expected an instance"):
            apply_discount(LAPTOP, RegularDiscount)  # type: ignore[arg-type]
