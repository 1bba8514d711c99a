"""Console formatters.

INFO records are user-facing progress ("Created desktop entry: ...") and are
printed as bare messages. Everything else keeps time, logger name and a
coloured level so warnings stand out in a host application's terminal.
"""

import logging

from desktop_entry.constants import LOG_COLORS


class ColoredConsoleFormatter(logging.Formatter):
    """Structured formatter that wraps the level name in ANSI colours."""

    def format(self, record: logging.LogRecord) -> str:
        color = LOG_COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Other handlers share the record, so restore the plain name
        plain = record.levelname
        record.levelname = f"{color}{plain}{LOG_COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = plain


class HybridConsoleFormatter(logging.Formatter):
    """Bare message for INFO, coloured structured line for other levels.

    Example Output:
        Created desktop entry: /home/me/.local/share/applications/myapp...
        12:30:45 - desktop_entry.reconciler - WARNING - Could not restart ...
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
    ) -> None:
        super().__init__(fmt, datefmt)
        self._structured = ColoredConsoleFormatter(fmt, datefmt)

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return self._structured.format(record)
