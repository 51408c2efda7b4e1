"""Core module exports."""

from gotestexplorer.core.errors import (
    ConfigError,
    ErrorCode,
    GoTestExplorerError,
    GrammarUnavailableError,
    UnsupportedOperationError,
)
from gotestexplorer.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "GoTestExplorerError",
    "GrammarUnavailableError",
    "UnsupportedOperationError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
