"""Process identity providers.

The builder and the reconciler never read ``sys.argv`` or the interpreter
state directly. They ask a :class:`ProcessIdentity` for the absolute
executable path, the invocation argument vector and the operating system
name, so tests and the CLI can substitute fixed values.
"""

import os
import platform
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from desktop_entry.constants import ENV_APPIMAGE
from desktop_entry.exceptions import PathResolutionError
from desktop_entry.logger import get_logger

logger = get_logger(__name__)


def resolve_executable(path: str) -> str:
    """Return the absolute, symlink-free path of an existing executable.

    Raises:
        PathResolutionError: If the path does not exist or cannot be
            resolved

    """
    try:
        resolved = Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        logger.debug("Cannot resolve executable %s: %s", path, e)
        msg = f"cannot resolve executable path: {e}"
        raise PathResolutionError(msg, target=path) from e
    return str(resolved)


class ProcessIdentity(Protocol):
    """Provides the identity of the process owning the desktop entry."""

    def executable(self) -> str:
        """Return the absolute path of the running executable."""
        ...

    def argv(self) -> list[str]:
        """Return the invocation argument vector (argv[0] first)."""
        ...

    def system(self) -> str:
        """Return the lower-case operating system name (e.g. 'linux')."""
        ...


class CurrentProcess:
    """Identity of the live Python process.

    Resolution order for the executable:
        1. ``$APPIMAGE`` when running from a mounted AppImage
        2. ``sys.executable`` for frozen (PyInstaller-style) binaries
        3. argv[0], looked up on PATH when it carries no directory part
    """

    def executable(self) -> str:
        appimage = os.environ.get(ENV_APPIMAGE)
        if appimage:
            return resolve_executable(appimage)

        if getattr(sys, "frozen", False):
            return resolve_executable(sys.executable)

        argv0 = self._argv0()
        if os.sep not in argv0:
            found = shutil.which(argv0)
            if found:
                argv0 = found
        return resolve_executable(argv0)

    def argv(self) -> list[str]:
        if not sys.argv or not sys.argv[0]:
            msg = "process argument vector is empty"
            raise PathResolutionError(msg)
        return list(sys.argv)

    def system(self) -> str:
        return platform.system().lower()

    def _argv0(self) -> str:
        argv0 = self.argv()[0]
        # python -c / interactive sessions have no program file
        if argv0 in ("-c", "-m"):
            msg = "process was not started from a program file"
            raise PathResolutionError(msg, target=argv0)
        return argv0


@dataclass(frozen=True)
class StaticIdentity:
    """Fixed identity, used by the CLI and by tests.

    Attributes:
        executable_path: Absolute executable path for the Exec= line
        arguments: Argument vector, argv[0] drives StartupWMClass=
        system_name: Operating system name checked against the allow-list

    """

    executable_path: str
    arguments: tuple[str, ...]
    system_name: str = "linux"

    def executable(self) -> str:
        if not self.executable_path:
            msg = "no executable path configured"
            raise PathResolutionError(msg)
        return self.executable_path

    def argv(self) -> list[str]:
        if not self.arguments or not self.arguments[0]:
            msg = "no invocation arguments configured"
            raise PathResolutionError(msg)
        return list(self.arguments)

    def system(self) -> str:
        return self.system_name
