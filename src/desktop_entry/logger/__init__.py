"""Logging utilities for desktop-entry.

Architecture (after setup_logging()):
    Module logger -> "desktop_entry" root -> QueueHandler -> Queue
        -> QueueListener thread -> console (+ optional rotating file)

Before setup_logging() the root only holds a NullHandler and records
propagate to the host application's logging configuration.

Usage:
    >>> from desktop_entry.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Created desktop entry: %s", path)

Environment Variables:
    DESKTOP_ENTRY_LOG_LEVEL: console level override
    DESKTOP_ENTRY_LOG_DIR: directory for desktop-entry.log

Rules:
    1. Always use: logger = get_logger(__name__)
    2. Never call logging.basicConfig()
    3. Never attach handlers to child loggers
    4. Use %-formatting in log calls, never f-strings
"""

from pathlib import Path

from desktop_entry.logger.config import (
    update_logger_from_config as _update_config,
)
from desktop_entry.logger.formatters import (
    ColoredConsoleFormatter,
    HybridConsoleFormatter,
)
from desktop_entry.logger.handlers import ConfigurationError
from desktop_entry.logger.logger import (
    clear_logger_state,
    flush_all_handlers,
    get_logger,
    setup_logging,
)
from desktop_entry.logger.state import get_state

__all__ = [
    "ColoredConsoleFormatter",
    "ConfigurationError",
    "HybridConsoleFormatter",
    "clear_logger_state",
    "flush_all_handlers",
    "get_logger",
    "setup_logging",
    "update_logger_from_config",
]


def update_logger_from_config(config_dir: Path | None = None) -> None:
    """Apply settings file log levels to the running handlers.

    Args:
        config_dir: Optional settings directory override

    """
    _update_config(get_state(), config_dir)
