"""Command: run the SOLID examples."""

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
  solidex run
  solidex run ocp dip
  solidex --json run lsp
  solidex -q run""",
)
@click.argument(
    "principles",
    nargs=-1,
    type=click.Choice([p.value for p in Principle], case_sensitive=False),
)
@click.pass_obj
def run(app: AppContext, principles: tuple[str, ...]) -> None:
    """Print the examples for PRINCIPLES (default: all five, in order)."""
    from solidex.services.showcase import ShowcaseService

    selected = [Principle(p.lower()) for p in principles] or None
    app.emit(ShowcaseService(app.settings, plugins=app.plugins).run(selected))
