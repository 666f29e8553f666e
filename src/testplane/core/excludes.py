"""Directories never searched for test files.

Tier 0 (HARDCODED_DIRS): VCS internals and testplane's own data directory.
Tier 1 (DEFAULT_PRUNABLE_DIRS): virtualenvs, dependency and build caches.
Users can add names through ``discovery.exclude_dirs``; the hardcoded tier
always applies.
"""

from __future__ import annotations

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        # VCS internals
        ".git",
        ".svn",
        ".hg",
        ".bzr",
        # testplane data
        ".testplane",
    )
)

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # JavaScript (Django projects often ship a frontend)
        "node_modules",
        "bower_components",
        # Python ecosystem
        "venv",
        ".venv",
        ".virtualenv",
        "virtualenv",
        "env",
        ".env",
        "__pycache__",
        ".pytest_cache",
        ".mypy_cache",
        ".ruff_cache",
        ".tox",
        ".nox",
        ".eggs",
        "site-packages",
        ".hypothesis",
        "htmlcov",
        # Build outputs
        "dist",
        "build",
        # Editors
        ".idea",
        ".vscode",
    )
)

PRUNABLE_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def is_prunable_dir(dirname: str, extra: frozenset[str] | set[str] = frozenset()) -> bool:
    """Check if a directory name should never be descended into."""
    return dirname in PRUNABLE_DIRS or dirname in extra
