"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (GOTESTEXPLORER__SECTION__KEY)
3. Repo YAML (.gotestexplorer/config.yaml)
4. Global YAML (~/.config/gotestexplorer/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    GOTESTEXPLORER__<SECTION>__<KEY>=<VALUE>

Examples:
    GOTESTEXPLORER__LOGGING__LEVEL=DEBUG
    GOTESTEXPLORER__GO__BUILD_TAGS=integration
    GOTESTEXPLORER__GO__COVER_ON_SINGLE_TEST=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from gotestexplorer.core.durations import parse_go_duration

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

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
        GOTESTEXPLORER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every go test command line.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class GoConfig(BaseModel):
    """Go toolchain settings used to build `go test` invocations.

    Env vars:
        GOTESTEXPLORER__GO__EXECUTABLE: go binary (default: go)
        GOTESTEXPLORER__GO__BUILD_TAGS: Comma separated build tags
        GOTESTEXPLORER__GO__TEST_TIMEOUT: Value passed to -timeout
        GOTESTEXPLORER__GO__COVER_ON_SINGLE_TEST: Collect a cover profile per test
    """

    executable: str = Field(
        default="go",
        description="Go binary used to run tests. Resolved via PATH when not absolute.",
    )
    test_flags: list[str] = Field(
        default_factory=list,
        description="Flags passed to `go test`. When empty, build_flags are used instead.",
    )
    build_flags: list[str] = Field(
        default_factory=list,
        description="Build flags, used for tests when test_flags is empty.",
    )
    build_tags: str = Field(
        default="",
        description="Build tags appended as -tags unless the flags already carry one.",
    )
    test_timeout: str = Field(
        default="30s",
        description="Go duration passed to -timeout. The subprocess is killed shortly after.",
    )
    cover_on_single_test: bool = Field(
        default=False,
        description="Write a -coverprofile for every test run.",
    )
    env: dict[str, str] = Field(
        default_factory=dict,
        description="Extra environment variables for the go test subprocess.",
    )

    @field_validator("test_timeout")
    @classmethod
    def validate_test_timeout(cls, v: str) -> str:
        if parse_go_duration(v) is None:
            raise ValueError(f"Not a Go duration: {v}")
        return v


class DiscoveryConfig(BaseModel):
    """Test discovery configuration.

    Env vars:
        GOTESTEXPLORER__DISCOVERY__TEST_FILE_SUFFIX: Suffix of scanned files
    """

    test_file_suffix: str = Field(
        default="_test.go",
        description="Only files ending with this suffix are scanned for tests.",
    )


class GoTestExplorerConfig(BaseModel):
    """Root configuration for gotest-explorer.

    All settings can be configured via:
    1. Environment variables: GOTESTEXPLORER__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    go: GoConfig = Field(default_factory=GoConfig)
    discovery: DiscoveryConfig = Field(default_factory=DiscoveryConfig)
