"""Single Responsibility: a product holds data, a printer formats it.

Neither class knows about the other's job. Changing how products are
displayed touches only :class:`ProductPrinter`.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class Product(BaseModel):
    """Immutable product record."""

    model_config = {"frozen": True}

    name: str
    price: Decimal


class ProductPrinter:
    """Renders a :class:`Product` as one line of text."""

    def __init__(self, currency: str = "€") -> None:
        self.currency = currency

    def print_product(self, product: Product) -> str:
        return f"Product: {product.name}, Price: {product.price}{self.currency}"
