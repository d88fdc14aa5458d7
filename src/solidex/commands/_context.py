"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Owns logging setup, lazy plugin loading, and
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from solidex.config.logging import configure_logging
from solidex.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from solidex.config.settings import SolidexSettings
    from solidex.plugins.manager import PluginManager
    from solidex.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Plugins load on first access to :attr:`plugins`, so ``--help`` and
    ``--version`` never import plugin code.
    """

    def __init__(self, settings: SolidexSettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def plugins(self) -> PluginManager | None:
        """Loaded plugin manager, or None when plugins are disabled."""
        if not self.settings.plugins_enabled:
            return None
        if self._plugins is None:
            from solidex.plugins.manager import PluginManager

            self._plugins = PluginManager()
            names = self._plugins.discover_and_load(local_dir=self.settings.local_plugin_dir)
            logger.debug("Loaded plugins: %s", ", ".join(names) or "(none)")
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode,
          where they are already part of the payload.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def close(self) -> None:
        """Drop plugin-provided variants from the shared registries."""
        if self._plugins is not None:
            self._plugins.release_variants()
            self._plugins = None
