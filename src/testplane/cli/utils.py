"""CLI utilities."""

from dataclasses import dataclass
from pathlib import Path

import click

from testplane.config import TestplaneConfig, load_config
from testplane.core.errors import ConfigError
from testplane.core.logging import configure_logging
from testplane.testing.discovery import DiscoveryRules, TestDiscovery
from testplane.testing.store import StatusStore


def find_project_root(start_path: Path | None = None) -> Path:
    """Find the Django project root from the given path.

    Walks up the directory tree looking for manage.py. Falls back to the
    start path itself, so discovery also works outside a Django project.
    """
    if start_path is None:
        start_path = Path.cwd()

    start = start_path.resolve()
    current = start
    while current != current.parent:
        if (current / "manage.py").exists():
            return current
        current = current.parent
    return start


@dataclass
class CliContext:
    root: Path
    config: TestplaneConfig
    store: StatusStore
    discovery: TestDiscovery


def load_context(path: Path, *, verbose: bool = False) -> CliContext:
    """Load configuration and wire discovery to a fresh status store.

    Raises:
        click.ClickException: Configuration is invalid.
    """
    root = find_project_root(path)
    try:
        config = load_config(root)
    except ConfigError as e:
        raise click.ClickException(f"{e.message} ({e.error_name})") from e

    if config.logging.outputs and not verbose:
        configure_logging(config=config.logging)

    store = StatusStore()
    discovery = TestDiscovery(root, DiscoveryRules.from_config(config.discovery), store)
    return CliContext(root=root, config=config, store=store, discovery=discovery)
