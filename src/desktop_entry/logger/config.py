"""Configuration loading and updating for logging system.

Bootstrap settings come from environment variables only; settings file
values are applied afterwards with update_logger_from_config(), which
imports the config package lazily to avoid a circular import.
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from desktop_entry.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    ENV_LOG_DIR,
    ENV_LOG_LEVEL,
    LOG_FILE_NAME,
)
from desktop_entry.exceptions import InvalidConfigurationError
from desktop_entry.logger.handlers import setup_root_logger

if TYPE_CHECKING:
    from desktop_entry.logger.state import _LoggerState


def load_log_settings() -> tuple[str, str, Path | None]:
    """Load bootstrap console level, file level and log file path.

    Environment Variable Override:
        DESKTOP_ENTRY_LOG_LEVEL: console level (DEBUG, INFO, WARNING, ...)
        DESKTOP_ENTRY_LOG_DIR: enables file logging to
            $DESKTOP_ENTRY_LOG_DIR/desktop-entry.log

    Returns:
        Tuple of (console_level, file_level, log_path). log_path is None
        when file logging is not requested, which is the default since the
        package usually runs inside a host application.

    """
    console_level = os.getenv(ENV_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL).upper()

    env_log_dir = os.getenv(ENV_LOG_DIR)
    log_path = (
        Path(env_log_dir).expanduser() / LOG_FILE_NAME if env_log_dir else None
    )

    return console_level, DEFAULT_LOG_LEVEL, log_path


def update_logger_from_config(
    state: "_LoggerState", config_dir: Path | None = None
) -> None:
    """Apply settings file log levels and log file to the handlers.

    Handler levels are updated in place. When the settings name a log file
    and no file handler is running yet, the listener is rebuilt with one.
    A missing settings file leaves the bootstrap configuration in place.

    Args:
        state: Logger state object (from logger.state module)
        config_dir: Optional settings directory override

    """
    try:
        from desktop_entry.config import SettingsManager  # noqa: PLC0415

        settings = SettingsManager(config_dir).load()
    except InvalidConfigurationError:
        # Keep bootstrap levels when settings are unusable
        return

    if state.queue_listener is None:
        return

    has_file_handler = any(
        isinstance(handler, RotatingFileHandler)
        for handler in state.queue_listener.handlers
    )
    if settings.log_file is not None and not has_file_handler:
        with state.lock:
            previous = state.queue_listener
            setup_root_logger(
                state,
                settings.console_log_level,
                settings.log_level,
                settings.log_file,
            )
            # Drains records queued before the switch
            previous.stop()
        return

    console_level = getattr(
        logging, settings.console_log_level, logging.WARNING
    )
    file_level = getattr(logging, settings.log_level, logging.INFO)

    for handler in state.queue_listener.handlers:
        if isinstance(handler, RotatingFileHandler):
            handler.setLevel(file_level)
        elif isinstance(handler, logging.StreamHandler):
            handler.setLevel(console_level)
