"""Allow ``python -m solidex``."""

from solidex.cli import cli

if __name__ == "__main__":
    cli()
