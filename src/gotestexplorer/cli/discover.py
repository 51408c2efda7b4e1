"""gtx discover command - print the suite/test tree."""

import asyncio
import json
from pathlib import Path

import click
from rich.console import Console
from rich.tree import Tree

from gotestexplorer.cli.utils import load_workspace_config
from gotestexplorer.testing.adapter import GoTestAdapter
from gotestexplorer.testing.models import TestSuiteInfo


def render_tree(suite: TestSuiteInfo, tree: Tree | None = None) -> Tree:
    """Render a suite and its descendants as a rich Tree."""
    if tree is None:
        tree = Tree(f"[bold]{suite.label}[/bold]")
    for child in suite.children:
        if isinstance(child, TestSuiteInfo):
            branch = tree.add(f"[bold cyan]{child.label}[/bold cyan]")
            render_tree(child, branch)
        else:
            description = f" [dim]{child.description}[/dim]" if child.description else ""
            tree.add(f"{child.label}{description} [dim]({child.id})[/dim]")
    return tree


@click.command()
@click.argument(
    "path", default=".", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option("--json", "as_json", is_flag=True, help="Output the tree as JSON")
@click.pass_context
def discover_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """Discover Go tests and print the suite/test tree.

    PATH is the workspace root (default: current directory).
    """
    workspace_root = path.resolve()
    config = load_workspace_config(ctx, workspace_root)

    adapter = GoTestAdapter(workspace_root, config)
    try:
        suite = asyncio.run(adapter.load())
    finally:
        adapter.dispose()

    if as_json:
        click.echo(json.dumps(suite.to_dict(), indent=2))
    else:
        Console().print(render_tree(suite))
