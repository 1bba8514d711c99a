"""Handlers behind the desktop_entry root logger.

The root logger only owns a QueueHandler. The real handlers (stderr console
and, when a log file is configured, a rotating file) hang off a
QueueListener thread so the host application never blocks on log IO.
"""

import logging
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path

from desktop_entry.constants import (
    LOG_BACKUP_COUNT,
    LOG_CONSOLE_DATE_FORMAT,
    LOG_CONSOLE_FORMAT,
    LOG_FILE_DATE_FORMAT,
    LOG_FILE_FORMAT,
    LOG_ROTATION_THRESHOLD_BYTES,
    LOGGER_ROOT_NAME,
)
from desktop_entry.exceptions import DesktopEntryError
from desktop_entry.logger.formatters import HybridConsoleFormatter


class ConfigurationError(DesktopEntryError):
    """Raised when a log handler cannot be set up."""

    error_prefix = "Logging setup failed"


def _level(name: str, fallback: int) -> int:
    return getattr(logging, name.upper(), fallback)


def build_console_handler(level: str) -> logging.StreamHandler:
    """Return the stderr handler.

    stdout is left to the host application and to CLI --json output.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level(level, logging.WARNING))
    handler.setFormatter(
        HybridConsoleFormatter(LOG_CONSOLE_FORMAT, LOG_CONSOLE_DATE_FORMAT)
    )
    return handler


def build_file_handler(log_file: Path, level: str) -> RotatingFileHandler:
    """Return a size-rotated file handler, creating the log directory.

    Raises:
        ConfigurationError: If the directory or file cannot be opened

    """
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=LOG_ROTATION_THRESHOLD_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError as e:
        msg = f"cannot open log file: {e}"
        raise ConfigurationError(msg, target=str(log_file)) from e

    handler.setLevel(_level(level, logging.INFO))
    handler.setFormatter(
        logging.Formatter(LOG_FILE_FORMAT, LOG_FILE_DATE_FORMAT)
    )
    return handler


def setup_root_logger(
    state,
    console_level: str,
    file_level: str,
    log_file: Path | None,
) -> None:
    """(Re)build the queue pipeline of the desktop_entry root logger.

    Args:
        state: Shared logger state (see logger.state)
        console_level: Level name for stderr output
        file_level: Level name for the log file
        log_file: Log file path, None keeps file logging off

    Raises:
        ConfigurationError: If the file handler cannot be created

    """
    handlers: list[logging.Handler] = [build_console_handler(console_level)]
    if log_file is not None:
        handlers.append(build_file_handler(log_file, file_level))

    root = logging.getLogger(LOGGER_ROOT_NAME)
    # Levels are enforced per handler by the listener
    root.setLevel(logging.DEBUG)
    root.propagate = False
    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    state.log_queue = queue.Queue(-1)
    root.addHandler(QueueHandler(state.log_queue))

    state.queue_listener = QueueListener(
        state.log_queue, *handlers, respect_handler_level=True
    )
    state.queue_listener.start()
    state.root_initialized = True
