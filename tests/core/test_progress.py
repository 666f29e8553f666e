"""Tests for terminal feedback helpers and directory excludes."""

import pytest

from testplane.core.excludes import HARDCODED_DIRS, is_prunable_dir
from testplane.core.progress import is_console_suppressed, pluralize, suppress_console_logs


class TestPluralize:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 tests"), (1, "1 test"), (2, "2 tests")],
    )
    def test_regular(self, count: int, expected: str) -> None:
        assert pluralize(count, "test") == expected

    def test_irregular(self) -> None:
        assert pluralize(3, "class", "classes") == "3 classes"


class TestSuppressConsoleLogs:
    def test_active_only_inside_block(self) -> None:
        assert not is_console_suppressed()

        with suppress_console_logs():
            assert is_console_suppressed()

        assert not is_console_suppressed()

    def test_reset_after_exception(self) -> None:
        with pytest.raises(RuntimeError), suppress_console_logs():
            raise RuntimeError("boom")

        assert not is_console_suppressed()


class TestPrunableDirs:
    """Directories never searched for test files."""

    @pytest.mark.parametrize("name", [".git", ".testplane", "node_modules", ".venv", "__pycache__"])
    def test_builtin(self, name: str) -> None:
        assert is_prunable_dir(name)

    def test_regular_dirs_searched(self) -> None:
        assert not is_prunable_dir("billing")
        assert not is_prunable_dir("tests")

    def test_extra_names(self) -> None:
        assert is_prunable_dir("legacy", {"legacy"})

    def test_hardcoded_always_included(self) -> None:
        assert all(is_prunable_dir(name, frozenset()) for name in HARDCODED_DIRS)
