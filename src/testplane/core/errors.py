"""testplane error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Discovery
- 7xxx: Test run
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Discovery (3xxx)
    DISCOVERY_FILE_UNREADABLE = 3001

    # Test run (7xxx)
    RUN_SPAWN_FAILED = 7001
    RUN_NO_TESTS = 7002


@dataclass(frozen=True, slots=True)
class TestplaneError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'RUN_SPAWN_FAILED')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON responses."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestplaneError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class DiscoveryError(TestplaneError):
    """Errors raised while reading candidate test files."""

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "DiscoveryError":
        return cls(
            code=ErrorCode.DISCOVERY_FILE_UNREADABLE,
            message=f"Cannot read test file {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class RunError(TestplaneError):
    """Errors surfaced to the caller of a test run."""

    @classmethod
    def spawn_failed(cls, command: list[str], reason: str) -> "RunError":
        return cls(
            code=ErrorCode.RUN_SPAWN_FAILED,
            message=f"Failed to start test process: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def no_tests(cls, label: str) -> "RunError":
        return cls(
            code=ErrorCode.RUN_NO_TESTS,
            message=f"No tests to run for {label}",
            details={"label": label},
        )
