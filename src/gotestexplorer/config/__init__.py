"""Config module exports."""

from gotestexplorer.config.loader import load_config
from gotestexplorer.config.models import (
    DiscoveryConfig,
    GoConfig,
    GoTestExplorerConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "GoTestExplorerConfig",
    "GoConfig",
    "DiscoveryConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
