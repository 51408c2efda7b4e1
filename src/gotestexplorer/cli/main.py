"""gotest-explorer CLI - gtx command."""

import click

from gotestexplorer import __version__
from gotestexplorer.cli.discover import discover_command
from gotestexplorer.cli.run import run_command


@click.group()
@click.version_option(version=__version__, prog_name="gtx")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """gotest-explorer - discover and run Go tests as a suite/test tree."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
