"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TESTPLANE__SECTION__KEY)
3. Repo YAML (.testplane/config.yaml)
4. Global YAML (~/.config/testplane/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TESTPLANE__<SECTION>__<KEY>=<VALUE>

Examples:
    TESTPLANE__LOGGING__LEVEL=DEBUG
    TESTPLANE__RUNNER__PYTHON_PATH=/opt/venv/bin/python
    TESTPLANE__DISCOVERY__METHOD_PREFIX=check_
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from testplane.config.constants import (
    CANCEL_GRACE_SEC_DEFAULT,
    REFRESH_INTERVAL_MS_DEFAULT,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        TESTPLANE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every ignored output line.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiscoveryConfig(BaseModel):
    """Test discovery configuration.

    Env vars:
        TESTPLANE__DISCOVERY__METHOD_PREFIX: Prefix of test method names
        TESTPLANE__DISCOVERY__CLASS_PREFIX: Prefix of test class names
    """

    file_patterns: list[str] = Field(
        default_factory=lambda: ["**/tests/**.py", "**/test/**.py", "**/test.py", "**/tests.py"],
        description="Glob patterns (relative to the project root) of candidate test files. "
        "'*' also matches '/', and a leading '**/' matches the root itself.",
    )
    method_prefix: str = Field(
        default="test_",
        description="Methods whose name starts with this prefix are tests.",
    )
    class_prefix: str = Field(
        default="Test",
        description="Classes whose name (or a base name) starts with this prefix are tests.",
    )
    base_classes: list[str] = Field(
        default_factory=list,
        description="Extra base class names that mark a class as a test class, "
        "added to the built-in Django/unittest set.",
    )
    exclude_dirs: list[str] = Field(
        default_factory=list,
        description="Extra directory names never searched, added to the built-in set.",
    )

    @field_validator("method_prefix", "class_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        if not v or not v.replace("_", "a").isalnum():
            raise ValueError(f"Prefix must be a non-empty identifier fragment, got {v!r}")
        return v


class RunnerConfig(BaseModel):
    """Backing test runner configuration.

    Env vars:
        TESTPLANE__RUNNER__PYTHON_PATH: Python interpreter (venv auto-detected if default)
        TESTPLANE__RUNNER__MANAGE_PY_PATH: Path to manage.py
        TESTPLANE__RUNNER__ACTIVE_PROFILE: Name of the argument profile to use
    """

    python_path: str = Field(
        default="python3",
        description="Python interpreter. When left at python/python3, a .venv or venv "
        "in the project root is used if present.",
    )
    manage_py_path: str = Field(
        default="manage.py",
        description="manage.py location. Supports ${workspaceFolder}; relative paths "
        "resolve against the project root.",
    )
    command_template: str = Field(
        default="${pythonPath} ${managePyPath} test ${testPath} ${testArguments}",
        description="Space-separated command template.",
    )
    test_arguments: list[str] = Field(
        default_factory=list,
        description="Extra arguments appended after the active profile's arguments.",
    )
    profiles: dict[str, list[str]] = Field(
        default_factory=lambda: {
            "Default": [],
            "Fast": ["--failfast"],
            "Keep DB": ["--keepdb"],
        },
        description="Named argument sets.",
    )
    active_profile: str = Field(default="Default")
    environment_variables: dict[str, str] = Field(
        default_factory=dict,
        description="Variables added to the process environment of the test run.",
    )
    cancel_grace_sec: float = Field(
        default=CANCEL_GRACE_SEC_DEFAULT,
        description="Delay before a second interrupt is sent on cancellation.",
    )
    refresh_interval_ms: int = Field(
        default=REFRESH_INTERVAL_MS_DEFAULT,
        description="Minimum spacing of live view refreshes. Lower values redraw more often.",
    )

    @field_validator("refresh_interval_ms")
    @classmethod
    def validate_refresh_interval(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"refresh_interval_ms must be >= 0, got {v}")
        return v

    def profile_arguments(self) -> list[str]:
        """Arguments of the active profile followed by the extra arguments."""
        return [*self.profiles.get(self.active_profile, []), *self.test_arguments]


class TestplaneConfig(BaseModel):
    """Root configuration for testplane.

    All settings can be configured via:
    1. Environment variables: TESTPLANE__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
    runner: RunnerConfig = Field(default_factory=RunnerConfig)
