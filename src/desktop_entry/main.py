"""Main CLI entry point for desktop-entry."""

import sys

from desktop_entry.cli import CLIRunner
from desktop_entry.exceptions import DesktopEntryError
from desktop_entry.logger import ConfigurationError, get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application.

    Builds the logging pipeline, then exits with the command's status, or 1
    when a desktop-entry error or an unexpected exception stops it.
    """
    try:
        setup_logging()
    except ConfigurationError as e:
        # No handler is running yet
        print(e, file=sys.stderr)
        sys.exit(1)

    try:
        status = CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)
    except DesktopEntryError as e:
        logger.error("%s", e)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)

    sys.exit(status)


if __name__ == "__main__":
    main()
