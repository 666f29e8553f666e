"""Config module exports."""

from testplane.config.loader import load_config
from testplane.config.models import (
    DiscoveryConfig,
    LoggingConfig,
    RunnerConfig,
    TestplaneConfig,
)

__all__ = [
    "load_config",
    "TestplaneConfig",
    "DiscoveryConfig",
    "RunnerConfig",
    "LoggingConfig",
]
