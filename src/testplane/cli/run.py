"""testplane run command - run tests with a live status tree."""

import asyncio
import contextlib
import signal
from pathlib import Path

import click
from rich.live import Live
from rich.tree import Tree

from testplane.cli.utils import CliContext, load_context
from testplane.core.progress import get_console, status, suppress_console_logs
from testplane.testing.discovery import find_related_test_file, locate_test
from testplane.testing.models import RunOutcome, TestNode
from testplane.testing.ops import TestOps
from testplane.testing.refresh import RefreshThrottle
from testplane.testing.render import duration_report, render_tree, status_line

# Exit status for a run interrupted by the user
EXIT_CANCELLED = 130


def _resolve_at(context: CliContext, at: str) -> str:
    """``FILE:LINE`` (1-based line) -> dotted path of the test under it."""
    file_part, _, line_part = at.rpartition(":")
    if not file_part or not line_part.isdigit():
        raise click.BadParameter("expected FILE:LINE", param_hint="--at")
    source = Path(file_part).resolve()
    try:
        rel_path = source.relative_to(context.root).as_posix()
        text = source.read_text(encoding="utf-8", errors="replace")
    except (ValueError, OSError) as e:
        raise click.BadParameter(str(e), param_hint="--at") from e

    located = locate_test(text, rel_path, int(line_part) - 1, context.discovery.rules)
    if located is None:
        raise click.ClickException(f"No test found at {at}")
    return located.dotted_path


def _resolve_related(context: CliContext, source: Path) -> str:
    """Source module -> dotted path of its test module."""
    test_file = find_related_test_file(source.resolve(), context.root, context.discovery.rules)
    if test_file is None:
        raise click.ClickException(f"No related test file found for {source}")
    parsed = context.discovery.parsed_file(test_file)
    if parsed is None:
        raise click.ClickException(f"{test_file} contains no discovered tests")
    return parsed.dotted_path


async def _run(context: CliContext, dotted_path: str | None, at: str | None, related: Path | None) -> RunOutcome:
    result = await context.discovery.discover()
    if result.hint:
        status(result.hint, style="warning")

    if at:
        dotted_path = _resolve_at(context, at)
    elif related:
        dotted_path = _resolve_related(context, related)

    tree = context.discovery.tree
    node: TestNode | None = None
    if dotted_path:
        node = tree.find(dotted_path)
        if node is None:
            raise click.ClickException(f"Unknown test path: {dotted_path}")

    console = get_console()

    def render() -> Tree:
        return render_tree(tree, context.store, root=node, title=node.dotted_path if node else "All Tests")

    live = Live(render(), console=console, auto_refresh=False)

    def refresh() -> None:
        live.update(render(), refresh=True)

    throttle = RefreshThrottle(refresh, context.config.runner.refresh_interval_ms / 1000)
    ops = TestOps(context.root, context.discovery, context.store, context.config, refresh=throttle)

    loop = asyncio.get_running_loop()
    pending: set[asyncio.Task[bool]] = set()

    def on_interrupt() -> None:
        task = loop.create_task(ops.cancel())
        pending.add(task)
        task.add_done_callback(pending.discard)

    # Signal handlers are unavailable on Windows event loops
    with contextlib.suppress(NotImplementedError):
        loop.add_signal_handler(signal.SIGINT, on_interrupt)
    try:
        with suppress_console_logs(), live:
            outcome = await ops.run(node)
            throttle.flush()
        if pending:
            await asyncio.gather(*pending)
    finally:
        ops.close()
        with contextlib.suppress(NotImplementedError):
            loop.remove_signal_handler(signal.SIGINT)

    for line in duration_report(ops.duration_report(outcome.target)):
        console.print(line, highlight=False)
    return outcome


@click.command()
@click.argument("dotted_path", required=False)
@click.option(
    "--root",
    "root",
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project root or a directory inside it",
)
@click.option("--failfast", is_flag=True, help="Stop on the first failure")
@click.option("--profile", help="Argument profile to use (overrides configuration)")
@click.option("--at", "at", metavar="FILE:LINE", help="Run the test enclosing a source line")
@click.option(
    "--related",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Run the test module related to a source module",
)
@click.pass_context
def run_command(
    ctx: click.Context,
    dotted_path: str | None,
    root: Path,
    failfast: bool,
    profile: str | None,
    at: str | None,
    related: Path | None,
) -> None:
    """Run Django tests.

    DOTTED_PATH selects a folder, module, class or method
    (e.g. billing.tests.test_invoice.InvoiceTests). Omit it to run everything.
    """
    if sum(bool(x) for x in (dotted_path, at, related)) > 1:
        raise click.UsageError("DOTTED_PATH, --at and --related are mutually exclusive")

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    context = load_context(root, verbose=verbose)
    runner = context.config.runner
    if profile:
        if profile not in runner.profiles:
            raise click.BadParameter(
                f"unknown profile {profile!r} (available: {', '.join(runner.profiles)})",
                param_hint="--profile",
            )
        runner.active_profile = profile
    if failfast and "--failfast" not in runner.test_arguments:
        runner.test_arguments.append("--failfast")

    outcome = asyncio.run(_run(context, dotted_path, at, related))

    if outcome.hint:
        status(outcome.hint, style="info")
    if outcome.error and outcome.status == "failed":
        status(outcome.error.message, style="error")
    if outcome.status == "completed" and outcome.exit_code and not outcome.failed:
        # Runner failed before reporting any test (import error, bad settings)
        get_console().print(outcome.output, highlight=False, markup=False)

    get_console().print(status_line(outcome.counts))

    if outcome.status == "cancelled":
        ctx.exit(EXIT_CANCELLED)
    if outcome.status == "failed" or outcome.failed or outcome.exit_code:
        ctx.exit(1)
