"""Principle enum shared by the showcase, config and CLI layers."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum


class Principle(StrEnum):
    """The five SOLID principles, in canonical order."""

    SRP = "srp"
    OCP = "ocp"
    LSP = "lsp"
    ISP = "isp"
    DIP = "dip"

    @property
    def ordinal(self) -> int:
        """1-based position used to number output lines."""
        return list(Principle).index(self) + 1

    @property
    def label(self) -> str:
        return self.value.upper()

    @property
    def full_name(self) -> str:
        return PRINCIPLE_TITLES[self]


PRINCIPLE_TITLES: dict[Principle, str] = {
    Principle.SRP: "Single Responsibility",
    Principle.OCP: "Open/Closed",
    Principle.LSP: "Liskov Substitution",
    Principle.ISP: "Interface Segregation",
    Principle.DIP: "Dependency Inversion",
}


def canonical_order(principles: Iterable[Principle]) -> list[Principle]:
    """Deduplicate *principles* and sort them into SRP..DIP order."""
    wanted = set(principles)
    return [p for p in Principle if p in wanted]
