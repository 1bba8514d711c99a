"""Public logging API: setup_logging, get_logger and test helpers.

Importing the package only attaches a NullHandler to the "desktop_entry"
root, so a host application keeps receiving records through propagation.
The queue pipeline is built by an explicit setup_logging() call.
"""

import atexit
import contextlib
import logging
import time
from pathlib import Path

from desktop_entry.constants import LOGGER_ROOT_NAME
from desktop_entry.logger.config import load_log_settings
from desktop_entry.logger.handlers import setup_root_logger
from desktop_entry.logger.state import get_state

# Upper bound for draining the queue before flushing handlers
_DRAIN_TIMEOUT_SECONDS = 5.0


def flush_all_handlers() -> None:
    """Wait for queued records to be handled, then flush every handler."""
    state = get_state()
    listener, log_queue = state.queue_listener, state.log_queue
    if listener is None or log_queue is None:
        return

    deadline = time.monotonic() + _DRAIN_TIMEOUT_SECONDS
    while not log_queue.empty() and time.monotonic() < deadline:
        time.sleep(0.01)
    # The listener may still be emitting the last dequeued record
    time.sleep(0.1)

    for handler in listener.handlers:
        with contextlib.suppress(OSError, ValueError):
            handler.flush()


def _stop_listener() -> None:
    state = get_state()
    if state.queue_listener is None:
        return
    flush_all_handlers()
    state.queue_listener.stop()
    state.queue_listener = None


atexit.register(_stop_listener)


def _install_null_handler() -> None:
    root = logging.getLogger(LOGGER_ROOT_NAME)
    root.setLevel(logging.NOTSET)
    root.propagate = True
    if not root.handlers:
        root.addHandler(logging.NullHandler())


_install_null_handler()


def setup_logging(
    name: str = LOGGER_ROOT_NAME,
    console_level: str | None = None,
    file_level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Build the root pipeline once and return the named logger.

    Called by the console entry point. Explicit arguments win over the
    environment bootstrap values of load_log_settings(). Later calls only
    look the logger up.

    Raises:
        ConfigurationError: If the log file cannot be opened

    """
    state = get_state()
    with state.lock:
        if not state.root_initialized:
            env_console, env_file, env_path = load_log_settings()
            setup_root_logger(
                state,
                console_level or env_console,
                file_level or env_file,
                log_file or env_path,
            )
    return logging.getLogger(name)


def get_logger(name: str = LOGGER_ROOT_NAME) -> logging.Logger:
    """Get a package logger, e.g. ``get_logger(__name__)``.

    No handlers are configured here. Until setup_logging() runs, records
    propagate to whatever the host application set up.
    """
    return logging.getLogger(name)


def clear_logger_state() -> None:
    """Tear the pipeline down and return to the import-time state.

    Used by tests that change logging environment variables.
    """
    state = get_state()
    with state.lock:
        _stop_listener()
        state.log_queue = None
        state.root_initialized = False

        prefix = LOGGER_ROOT_NAME
        for logger_name in list(logging.Logger.manager.loggerDict):
            if logger_name == prefix or logger_name.startswith(f"{prefix}."):
                package_logger = logging.getLogger(logger_name)
                for handler in list(package_logger.handlers):
                    package_logger.removeHandler(handler)
                    handler.close()

        _install_null_handler()
