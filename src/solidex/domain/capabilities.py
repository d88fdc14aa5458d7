"""Interface Segregation: one small interface per capability.

A fish swims. It is not made to implement ``walk`` or ``fly`` just
because a duck can.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Walkable(ABC):
    @abstractmethod
    def walk(self) -> str: ...


class Swimmable(ABC):
    @abstractmethod
    def swim(self) -> str: ...


class Flyable(ABC):
    @abstractmethod
    def fly(self) -> str: ...


CAPABILITIES: dict[str, type] = {
    "walk": Walkable,
    "swim": Swimmable,
    "fly": Flyable,
}


class Duck(Walkable, Swimmable, Flyable):
    def walk(self) -> str:
        return "The duck walks"

    def swim(self) -> str:
        return "The duck swims"

    def fly(self) -> str:
        return "The duck flies"


class Fish(Swimmable):
    def swim(self) -> str:
        return "The fish swims"


def capabilities_of(entity: object) -> list[str]:
    """Names of the capability interfaces *entity* declares, in ``CAPABILITIES`` order."""
    return [name for name, iface in CAPABILITIES.items() if isinstance(entity, iface)]
