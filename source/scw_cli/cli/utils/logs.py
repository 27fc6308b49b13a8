# ABOUTME: Logging setup for the Scaleway CLI
# ABOUTME: Routes library log records to stderr through rich

"""Logging configuration for CLI commands."""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

DEBUG_ENV_VAR = "SCW_DEBUG"


def debug_enabled() -> bool:
    return os.getenv(DEBUG_ENV_VAR, "").lower() in ("1", "true", "yes")


def setup_logging(level: int | None = None) -> None:
    """Send ``scw_cli`` log records to stderr.

    Args:
        level: Log level. Defaults to DEBUG when $SCW_DEBUG is set, WARNING otherwise.
    """
    if level is None:
        level = logging.DEBUG if debug_enabled() else logging.WARNING

    logger = logging.getLogger("scw_cli")
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_time=False, show_path=False)
        logger.addHandler(handler)
