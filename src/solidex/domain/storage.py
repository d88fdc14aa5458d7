"""Dependency Inversion: a logger that depends on a storage abstraction.

:class:`MessageLogger` is handed a :class:`Storage` and never learns
which one. The storages here stand in for persistence and only emit a
line of text through their ``echo`` callable.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime
from typing import ClassVar

import click

from solidex.domain.contracts import ensure_satisfies
from solidex.domain.registry import VariantRegistry

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

Echo = Callable[[str], None]


class Storage(ABC):
    """Write-only sink.

    Variants receive the ``echo`` callable that performs the emission;
    it defaults to :func:`click.echo`. A variant with its own ``__init__``
    must still accept ``echo`` and pass it on, and each ``write`` emits
    exactly one line through it.
    """

    destination: ClassVar[str] = "storage"

    def __init__(self, echo: Echo | None = None) -> None:
        self._echo: Echo = echo or click.echo

    @abstractmethod
    def write(self, data: str) -> None:
        """Persist *data*. Returns nothing."""
        ...


class FileStorage(Storage):
    destination = "file"

    def write(self, data: str) -> None:
        self._echo(f"Saving to file: {data}")


class DatabaseStorage(Storage):
    destination = "database"

    def write(self, data: str) -> None:
        self._echo(f"Saving to database: {data}")


class MessageLogger:
    """Timestamps messages and writes them to an injected storage.

    Args:
        storage: Any object implementing :class:`Storage`.
        clock: Source of the current time.
        timestamp_format: ``strftime`` format for the prefix.

    Raises:
        ContractViolation: If *storage* lacks ``write``.
    """

    def __init__(
        self,
        storage: Storage,
        *,
        clock: Callable[[], datetime] = datetime.now,
        timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
    ) -> None:
        self._storage = ensure_satisfies(storage, Storage)
        self._clock = clock
        self._timestamp_format = timestamp_format

    def log(self, message: str) -> None:
        stamp = self._clock().strftime(self._timestamp_format)
        logger.debug("Writing log entry via %s", type(self._storage).__name__)
        self._storage.write(f"{stamp}: {message}")


STORAGE_REGISTRY: VariantRegistry[Storage] = VariantRegistry(Storage, init_kwargs=("echo",))
STORAGE_REGISTRY.register("file", FileStorage, builtin=True)
STORAGE_REGISTRY.register("database", DatabaseStorage, builtin=True)
