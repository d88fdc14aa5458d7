"""Wiring-time contract checks for capability abstractions.

An abstraction is an ``abc.ABC`` whose operations are abstract methods.
Anything handed to a consumer, or registered as a variant, must provide
every one of those operations; registered variants must also subclass it.
The check runs when things are wired together so a bad variant fails
before any operation is called.
"""

from __future__ import annotations

import inspect
from typing import Any, TypeVar

T = TypeVar("T")


class ContractViolation(TypeError):
    """An object or class does not satisfy an abstraction's declared operations.

    Attributes:
        abstraction: The abstraction that was required.
        missing: Operation names that are absent or not callable.
    """

    def __init__(
        self,
        abstraction: type,
        missing: list[str],
        subject: str,
        *,
        reason: str | None = None,
    ) -> None:
        self.abstraction = abstraction
        self.missing = missing
        if reason is not None:
            detail = reason
        elif missing:
            detail = f"missing operation(s): {', '.join(missing)}"
        else:
            detail = "class is abstract"
        super().__init__(f"{subject} does not satisfy {abstraction.__name__}: {detail}")


def declared_operations(abstraction: type) -> list[str]:
    """Return the sorted names of the operations *abstraction* declares."""
    return sorted(getattr(abstraction, "__abstractmethods__", ()))


def _missing_operations(target: Any, abstraction: type) -> list[str]:
    return [
        name for name in declared_operations(abstraction) if not callable(getattr(target, name, None))
    ]


def ensure_satisfies(obj: T, abstraction: type) -> T:
    """Return *obj* unchanged if it provides every operation of *abstraction*.

    Structural: a duck-typed object that does not subclass the abstraction
    still passes as long as each declared operation is callable on it.
    A class is not accepted where an instance is expected.

    Raises:
        ContractViolation: If *obj* is a class or any declared operation
            is missing.
    """
    if inspect.isclass(obj):
        raise ContractViolation(
            abstraction,
            [],
            obj.__name__,
            reason="expected an instance, got the class itself",
        )
    missing = _missing_operations(obj, abstraction)
    if missing:
        raise ContractViolation(abstraction, missing, type(obj).__name__)
    return obj


def ensure_variant_class(
    cls: type,
    abstraction: type,
    *,
    init_kwargs: tuple[str, ...] = (),
) -> type:
    """Validate that *cls* can be instantiated as a variant of *abstraction*.

    Variant classes are built by the driver the way the abstraction is
    built, so they must subclass it and accept *init_kwargs* as keyword
    arguments.

    Raises:
        TypeError: If *cls* is not a class.
        ContractViolation: If *cls* does not subclass *abstraction*, is
            still abstract, or cannot be called with *init_kwargs*.
    """
    if not inspect.isclass(cls):
        msg = f"Variant for {abstraction.__name__} must be a class, got {cls!r}"
        raise TypeError(msg)
    if not issubclass(cls, abstraction):
        raise ContractViolation(
            abstraction,
            _missing_operations(cls, abstraction),
            cls.__name__,
            reason=f"must subclass {abstraction.__name__}",
        )
    missing = _missing_operations(cls, abstraction)
    if missing or inspect.isabstract(cls):
        raise ContractViolation(abstraction, missing, cls.__name__)
    try:
        signature = inspect.signature(cls)
    except (TypeError, ValueError):
        return cls
    try:
        signature.bind(**dict.fromkeys(init_kwargs))
    except TypeError:
        accepted = ", ".join(init_kwargs) or "no arguments"
        raise ContractViolation(
            abstraction,
            [],
            cls.__name__,
            reason=f"constructor must accept ({accepted})",
        ) from None
    return cls
