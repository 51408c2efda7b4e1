"""gtx run command - run suites and tests by ID."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console

from gotestexplorer.cli.utils import load_workspace_config
from gotestexplorer.testing.adapter import GoTestAdapter
from gotestexplorer.testing.models import RunStateEvent, TestEvent, TestSuiteEvent

_STATE_STYLES = {
    "passed": "[green]PASS[/green]",
    "failed": "[red]FAIL[/red]",
}


@click.command()
@click.argument("test_ids", nargs=-1, required=True)
@click.option(
    "--root",
    "path",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Workspace root (default: current directory)",
)
@click.option("--json", "as_json", is_flag=True, help="Print every test-state event as a JSON line")
@click.pass_context
def run_command(ctx: click.Context, test_ids: tuple[str, ...], path: Path, as_json: bool) -> None:
    """Discover tests, then run TEST_IDS (suite or test IDs from `gtx discover`).

    Exits with status 1 when any test failed.
    """
    workspace_root = path.resolve()
    config = load_workspace_config(ctx, workspace_root)
    console = Console()
    failed: list[str] = []

    def on_state(event: RunStateEvent) -> None:
        if isinstance(event, TestEvent) and event.state == "failed":
            failed.append(event.test)
        if as_json:
            click.echo(json.dumps(event.to_dict()))
        elif isinstance(event, TestEvent) and event.state in _STATE_STYLES:
            console.print(f"{_STATE_STYLES[event.state]} {event.test}")
        elif isinstance(event, TestSuiteEvent) and event.state == "running":
            console.print(f"[bold]{event.suite}[/bold]")

    adapter = GoTestAdapter(workspace_root, config)
    adapter.test_states.event(on_state)

    async def load_and_run() -> None:
        await adapter.load()
        await adapter.run(list(test_ids))

    try:
        asyncio.run(load_and_run())
    finally:
        adapter.dispose()

    if failed:
        ctx.exit(1)
