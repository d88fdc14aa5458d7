"""Named variant registries.

Each registry is bound to one abstraction. Built-in variants are
registered at import time and their names are reserved; plugins add more
through :meth:`VariantRegistry.register`. Iteration order is registration
order, so built-ins always come first in the showcase output.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Generic, TypeVar

from solidex.domain.contracts import ensure_variant_class

logger = logging.getLogger(__name__)

T = TypeVar("T")


class VariantRegistry(Generic[T]):
    """Ordered mapping of variant name to variant class for one abstraction."""

    def __init__(self, abstraction: type[T], *, init_kwargs: tuple[str, ...] = ()) -> None:
        self.abstraction = abstraction
        self.init_kwargs = init_kwargs
        self._variants: dict[str, type[T]] = {}
        self._builtin: set[str] = set()

    def register(self, name: str, cls: type[T], *, builtin: bool = False) -> None:
        """Register *cls* under *name*.

        Raises:
            ValueError: Empty name, reserved built-in name, or a different
                class already registered under *name*.
            TypeError: *name* is not a string, or *cls* is not a class.
            ContractViolation: *cls* does not subclass or implement the
                abstraction, or its constructor rejects ``init_kwargs``.
        """
        if not isinstance(name, str):
            msg = f"{self.abstraction.__name__} variant name must be a string, got {name!r}"
            raise TypeError(msg)
        normalized = name.strip()
        if not normalized:
            msg = f"{self.abstraction.__name__} variant name must not be empty"
            raise ValueError(msg)

        if normalized in self._builtin and not builtin:
            msg = f"{self.abstraction.__name__} variant {normalized!r} is built in"
            raise ValueError(msg)

        ensure_variant_class(cls, self.abstraction, init_kwargs=self.init_kwargs)

        existing = self._variants.get(normalized)
        if existing is not None and existing is not cls:
            msg = f"{self.abstraction.__name__} variant {normalized!r} is already registered"
            raise ValueError(msg)

        self._variants[normalized] = cls
        if builtin:
            self._builtin.add(normalized)
        logger.debug("Registered %s variant: %s", self.abstraction.__name__, normalized)

    def unregister(self, name: str) -> None:
        """Remove a plugin-provided variant. Built-ins cannot be removed."""
        if name in self._builtin:
            msg = f"{self.abstraction.__name__} variant {name!r} is built in"
            raise ValueError(msg)
        self._variants.pop(name, None)

    def get(self, name: str) -> type[T]:
        try:
            return self._variants[name]
        except KeyError:
            msg = f"No {self.abstraction.__name__} variant registered as {name!r}"
            raise KeyError(msg) from None

    def names(self) -> list[str]:
        return list(self._variants)

    def is_builtin(self, name: str) -> bool:
        return name in self._builtin

    def items(self) -> list[tuple[str, type[T]]]:
        return list(self._variants.items())

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._variants))

    def __len__(self) -> int:
        return len(self._variants)
