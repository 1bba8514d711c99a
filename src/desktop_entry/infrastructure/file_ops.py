"""File operations used by the reconciler.

Thin wrappers over pathlib that create directories and new files with the
configured permission mode (subject to the umask) and distinguish "not
found" from every other OSError, so callers can treat a missing file as a
normal state and propagate anything else.
"""

import os
from pathlib import Path

from desktop_entry.logger import get_logger

logger = get_logger(__name__)


class FileOperations:
    """File system operations with a fixed permission mode."""

    def __init__(self, perm: int) -> None:
        """Initialize file operations.

        Args:
            perm: Mode applied to created directories and written files

        """
        self.perm = perm

    def exists(self, path: Path) -> bool:
        """Check whether something exists at path.

        Returns:
            False only when the path does not exist

        Raises:
            OSError: For any stat failure other than "not found"

        """
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        return True

    def ensure_directory(self, path: Path) -> bool:
        """Create a directory tree if it is absent.

        Returns:
            True if the directory was created

        Raises:
            OSError: If creation fails for a reason other than existence

        """
        if self.exists(path):
            return False

        missing = [path]
        for parent in path.parents:
            if self.exists(parent):
                break
            missing.append(parent)

        # Every created level gets the mode, outermost first
        for directory in reversed(missing):
            logger.debug("Creating directory: %s", directory)
            try:
                directory.mkdir(mode=self.perm)
            except FileExistsError:
                if not directory.is_dir():
                    raise
        return True

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Write data to path, truncating it.

        A new file is created with the permission mode (subject to the
        umask); an existing file keeps its mode.
        """
        logger.debug("Writing %d bytes: %s", len(data), path)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, self.perm)
        with os.fdopen(fd, "wb") as f:
            f.write(data)

    def write_text(self, path: Path, content: str) -> None:
        """Write UTF-8 text to path, truncating it."""
        self.write_bytes(path, content.encode("utf-8"))

    def write_if_absent(self, path: Path, data: bytes) -> bool:
        """Write data only when nothing exists at path yet.

        Returns:
            True if the file was written

        """
        if self.exists(path):
            logger.debug("Keeping existing file: %s", path)
            return False
        self.write_bytes(path, data)
        return True

    def read_text(self, path: Path) -> str:
        """Read UTF-8 text, replacing undecodable bytes."""
        return path.read_text(encoding="utf-8", errors="replace")
