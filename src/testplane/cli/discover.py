"""testplane discover command - show the discovered test tree."""

import asyncio
import json
from pathlib import Path

import click

from testplane.cli.utils import load_context
from testplane.core.progress import get_console, pluralize, status
from testplane.testing.render import render_tree


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def discover_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """Discover Django tests.

    PATH is the project root or a directory inside it (default: current directory).
    """
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    context = load_context(path, verbose=verbose)
    result = asyncio.run(context.discovery.discover())
    tree = result.tree

    if as_json:
        click.echo(
            json.dumps(
                {
                    "root": str(context.root),
                    "files": result.file_count,
                    "tests": [
                        {
                            "path": node.dotted_path,
                            "name": node.name,
                            "type": node.type,
                            "file": node.location.path if node.location else None,
                            "line": node.location.start_line if node.location else None,
                        }
                        for node in tree.walk()
                    ],
                    "skipped": [e.to_dict() for e in result.errors],
                    "hint": result.hint,
                },
                indent=2,
            )
        )
        return

    if result.hint:
        status(result.hint, style="warning")
        return

    console = get_console()
    console.print(render_tree(tree, context.store, title=str(context.root)))
    leaves = len(tree.leaves())
    status(
        f"{pluralize(leaves, 'test')} in {pluralize(result.file_count, 'file')}",
        style="success",
    )
    for error in result.errors:
        status(f"Skipped {error.details.get('path')}: {error.details.get('reason')}", style="warning")
