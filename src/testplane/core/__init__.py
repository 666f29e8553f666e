"""Core module exports."""

from testplane.core.errors import (
    ConfigError,
    DiscoveryError,
    ErrorCode,
    RunError,
    TestplaneError,
)
from testplane.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from testplane.core.progress import status, suppress_console_logs

__all__ = [
    # Errors
    "TestplaneError",
    "ConfigError",
    "DiscoveryError",
    "ErrorCode",
    "RunError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "status",
    "suppress_console_logs",
]
