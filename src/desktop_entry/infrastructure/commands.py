"""External command execution.

Two collaborators live here:
- BestEffortCommandRunner: runs the desktop/mime database refresh tools and
  discards their outcome
- ProcessRelauncher: re-executes the current program and exits the parent

Both sit behind small protocols so the reconciler can be tested without
spawning processes or terminating the test run.
"""

import os
import shutil
import subprocess
import sys
from typing import Protocol

from desktop_entry.identity import ProcessIdentity
from desktop_entry.logger import get_logger

logger = get_logger(__name__)


class CommandRunner(Protocol):
    """Runs an external command whose outcome is advisory."""

    def run(self, args: list[str]) -> bool:
        """Run the command, returning True when it exited successfully."""
        ...


class Relauncher(Protocol):
    """Replaces the running program with a fresh instance."""

    def relaunch(self, identity: ProcessIdentity) -> None:
        """Re-execute the program described by identity."""
        ...


class BestEffortCommandRunner:
    """Run commands and ignore failure.

    A missing binary, a spawn error or a non-zero exit status are logged at
    debug level and reported as False, never raised.
    """

    def run(self, args: list[str]) -> bool:
        if not shutil.which(args[0]):
            logger.debug("Command not available, skipping: %s", args[0])
            return False

        try:
            result = subprocess.run(  # noqa: S603
                args,
                check=False,
                capture_output=True,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.debug("Could not run %s: %s", args[0], e)
            return False

        if result.returncode != 0:
            logger.debug(
                "%s exited with status %d", args[0], result.returncode
            )
            return False

        logger.debug("Ran %s", " ".join(args))
        return True


class ProcessRelauncher:
    """Re-run the current program with its original arguments, then exit.

    The child inherits stdin, stdout and stderr. The parent blocks until the
    child finishes and then exits with status 0. If the child cannot be
    spawned, the failure is logged and the parent keeps running.
    """

    def relaunch(self, identity: ProcessIdentity) -> None:
        command = self.build_command(identity.argv())
        logger.info("Desktop entry changed, restarting %s", command[0])

        try:
            subprocess.run(command, check=False)  # noqa: S603
        except OSError as e:
            logger.warning("Could not restart %s: %s", command[0], e)
            return

        sys.exit(0)

    @staticmethod
    def build_command(argv: list[str]) -> list[str]:
        """Return the command line used to start the new instance.

        Scripts that are not directly executable are started through the
        current interpreter.
        """
        program = argv[0]
        if os.path.isfile(program) and not os.access(program, os.X_OK):
            return [sys.executable, *argv]
        return list(argv)
