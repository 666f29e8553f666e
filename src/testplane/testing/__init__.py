"""Test discovery, status tracking and run orchestration."""

from testplane.testing.aggregate import aggregate_counts, aggregate_status
from testplane.testing.discovery import DiscoveryRules, TestDiscovery
from testplane.testing.models import (
    RunOutcome,
    RunTarget,
    StatusEntry,
    TestDiff,
    TestNode,
    TestStatus,
    TestTree,
)
from testplane.testing.ops import TestOps
from testplane.testing.parsers import StreamingResultParser
from testplane.testing.store import StatusStore

__all__ = [
    "DiscoveryRules",
    "RunOutcome",
    "RunTarget",
    "StatusEntry",
    "StatusStore",
    "StreamingResultParser",
    "TestDiff",
    "TestDiscovery",
    "TestNode",
    "TestOps",
    "TestStatus",
    "TestTree",
    "aggregate_counts",
    "aggregate_status",
]
