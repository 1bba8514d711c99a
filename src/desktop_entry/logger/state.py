"""Process-wide state of the logging pipeline."""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """What setup_root_logger() built, guarded by ``lock``.

    Attributes:
        lock: Serializes pipeline setup and teardown
        root_initialized: The desktop_entry root logger has its QueueHandler
        queue_listener: Thread feeding records to the real handlers
        log_queue: Queue between the QueueHandler and the listener

    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the shared logger state."""
    return _state
