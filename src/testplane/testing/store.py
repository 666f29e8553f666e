"""Status Store: dotted path -> execution state.

One store is constructed by the hosting process and handed to discovery, the
result parser, run orchestration and the aggregator. It survives tree
rebuilds; entries for paths that disappeared from the tree are kept and
simply never displayed.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable

import structlog

from testplane.testing.models import StatusEntry, TestDiff, TestStatus

logger = structlog.get_logger()

Listener = Callable[[str | None], None]


class StatusStore:
    """Keyed status/duration/failure/diff storage with change notification."""

    def __init__(self) -> None:
        self._entries: dict[str, StatusEntry] = {}
        self._listeners: list[Listener] = []

    # -------------------------------------------------------------------------
    # Upserts
    # -------------------------------------------------------------------------

    def register(self, path: str) -> None:
        """Add ``path`` as unknown. Existing state is preserved."""
        if path not in self._entries:
            self._entries[path] = StatusEntry()

    def set_status(self, path: str, status: TestStatus) -> None:
        self._entry(path).status = status
        self._notify(path)

    def set_duration(self, path: str, duration_ms: float) -> None:
        self._entry(path).duration_ms = duration_ms
        self._notify(path)

    def set_failure_detail(self, path: str, detail: str) -> None:
        self._entry(path).failure_detail = detail
        self._notify(path)

    def set_diff(self, path: str, diff: TestDiff) -> None:
        self._entry(path).diff = diff
        self._notify(path)

    def reset(self, path: str, status: TestStatus = "pending") -> None:
        """Start a fresh attempt: set the status and drop duration, detail and diff."""
        self._entries[path] = StatusEntry(status=status)
        self._notify(path)

    def clear(self) -> None:
        """Drop all history."""
        self._entries.clear()
        self._notify(None)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def get_entry(self, path: str) -> StatusEntry | None:
        return self._entries.get(path)

    def get_status(self, path: str) -> TestStatus | None:
        entry = self._entries.get(path)
        return entry.status if entry else None

    def get_duration(self, path: str) -> float | None:
        entry = self._entries.get(path)
        return entry.duration_ms if entry else None

    def get_failure_detail(self, path: str) -> str | None:
        entry = self._entries.get(path)
        return entry.failure_detail if entry else None

    def get_diff(self, path: str) -> TestDiff | None:
        entry = self._entries.get(path)
        return entry.diff if entry else None

    def all_keys(self) -> list[str]:
        return list(self._entries)

    def failed_paths(self) -> list[str]:
        return [path for path, entry in self._entries.items() if entry.status == "failed"]

    def durations(self) -> list[tuple[str, float]]:
        """(path, ms) pairs, slowest first."""
        timed = [
            (path, entry.duration_ms)
            for path, entry in self._entries.items()
            if entry.duration_ms is not None
        ]
        return sorted(timed, key=lambda item: (-item[1], item[0]))

    def counts(self, paths: list[str] | None = None) -> dict[str, int]:
        keys = self._entries if paths is None else paths
        return dict(Counter(self.get_status(p) or "unknown" for p in keys))

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    # -------------------------------------------------------------------------
    # Notification
    # -------------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(path)`` after every mutation (``None`` on clear).

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _entry(self, path: str) -> StatusEntry:
        entry = self._entries.get(path)
        if entry is None:
            entry = self._entries[path] = StatusEntry()
        return entry

    def _notify(self, path: str | None) -> None:
        for listener in list(self._listeners):
            try:
                listener(path)
            except Exception:
                logger.exception("status_listener_failed", path=path)
