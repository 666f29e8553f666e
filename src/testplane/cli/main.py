"""testplane CLI - testplane command."""

import click

from testplane import __version__
from testplane.cli.discover import discover_command
from testplane.cli.run import run_command
from testplane.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="testplane")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """testplane - Discover and run Django tests with live status."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    configure_logging(level="DEBUG" if verbose else "INFO")


cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
