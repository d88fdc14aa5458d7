"""Liskov Substitution: every vehicle works wherever a Vehicle is expected.

Both operations are abstract, so each vehicle states its own engine
behaviour instead of inheriting one it may not have. A bicycle still
answers ``start_engine()`` with a string; it never raises.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from solidex.domain.contracts import ensure_satisfies


class Vehicle(ABC):
    """Anything with a top speed and an engine status."""

    @abstractmethod
    def max_speed(self) -> int:
        """Top speed in km/h."""
        ...

    @abstractmethod
    def start_engine(self) -> str:
        """Human-readable engine status."""
        ...


@dataclass(frozen=True)
class Car(Vehicle):
    top_speed: int = 200

    def max_speed(self) -> int:
        return self.top_speed

    def start_engine(self) -> str:
        return "Engine started"


@dataclass(frozen=True)
class Bicycle(Vehicle):
    top_speed: int = 30

    def max_speed(self) -> int:
        return self.top_speed

    def start_engine(self) -> str:
        return "The bicycle has no engine"


def describe_vehicle(vehicle: Vehicle, unit: str = "km/h") -> str:
    """Engine status and top speed of any :class:`Vehicle`."""
    ensure_satisfies(vehicle, Vehicle)
    return f"{vehicle.start_engine()}, Max speed: {vehicle.max_speed()}{unit}"
