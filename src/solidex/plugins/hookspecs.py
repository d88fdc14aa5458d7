"""Pluggy hook specifications for solidex.

Two setup-time hooks contribute variants to the domain registries; one
event hook fires after each principle section of the showcase.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from solidex.domain.discounts import Discount
    from solidex.domain.storage import Storage

PROJECT_NAME = "solidex"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class SolidexHookSpec:
    """Hook specifications for the solidex plugin system."""

    @hookspec
    def register_discounts(self) -> dict[str, type[Discount]] | None:
        """Return name -> Discount class mappings to add to the OCP example."""

    @hookspec
    def register_storages(self) -> dict[str, type[Storage]] | None:
        """Return name -> Storage class mappings to add to the DIP example.

        Classes must accept an ``echo`` keyword argument, as
        :class:`~solidex.domain.storage.Storage` does.
        """

    @hookspec
    def post_showcase(self, principle: str, lines: list[str]) -> None:
        """Called after the lines for one principle have been produced."""
