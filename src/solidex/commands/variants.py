"""Command: list abstractions and their registered variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from solidex.commands._base import SolidexCommand
from solidex.domain.types import Principle

if TYPE_CHECKING:
    from solidex.commands._context import AppContext


@click.command(
    cls=SolidexCommand,
    examples="""\
  solidex variants
  solidex variants --principle ocp
  solidex --json variants""",
)
@click.option(
    "--principle",
    type=click.Choice([p.value for p in Principle], case_sensitive=False),
    default=None,
    help="Only show variants for one principle.",
)
@click.pass_obj
def variants(app: AppContext, principle: str | None) -> None:
    """List every abstraction with its variants and operations."""
    from solidex.services.showcase import ShowcaseService

    selected = Principle(principle.lower()) if principle else None
    app.emit(ShowcaseService(app.settings, plugins=app.plugins).list_variants(selected))
