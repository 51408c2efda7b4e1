"""CLI utilities."""

from pathlib import Path

import click

from gotestexplorer.config.loader import load_config
from gotestexplorer.config.models import GoTestExplorerConfig
from gotestexplorer.core.errors import ConfigError
from gotestexplorer.core.logging import configure_logging


def load_workspace_config(ctx: click.Context, workspace_root: Path) -> GoTestExplorerConfig:
    """Load workspace config and apply its logging section.

    ``-v`` on the group forces DEBUG regardless of the configured level.

    Raises:
        click.ClickException: If the configuration is invalid
    """
    try:
        config = load_config(workspace_root)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    logging_config = config.logging
    if ctx.obj and ctx.obj.get("verbose"):
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
    return config
