"""Subcommand modules for solidex.

register_commands() imports each command lazily so ``solidex --help``
stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from solidex.commands.run import run
    from solidex.commands.variants import variants

    cli.add_command(run)
    cli.add_command(variants)
