"""Root CLI group for solidex with global flags and command registration."""

from __future__ import annotations

import click

from solidex import __version__
from solidex.commands import register_commands
from solidex.commands._base import SolidexGroup
from solidex.commands._context import AppContext
from solidex.config.settings import SolidexSettings


@click.group(
    cls=SolidexGroup,
    invoke_without_command=True,
    examples="""\
  solidex run
  solidex run srp ocp
  solidex variants
  solidex -c ./solidex.toml --json run""",
)
@click.version_option(version=__version__, prog_name="solidex")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--no-plugins", is_flag=True, help="Skip plugin discovery.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    no_plugins: bool,
) -> None:
    """solidex: the five SOLID principles as runnable examples."""
    settings = SolidexSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
        no_plugins=no_plugins,
    )
    ctx.obj = AppContext(settings)
    ctx.call_on_close(ctx.obj.close)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
