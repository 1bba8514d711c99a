"""Filesystem and process collaborators used by the reconciler."""

from desktop_entry.infrastructure.commands import (
    BestEffortCommandRunner,
    CommandRunner,
    ProcessRelauncher,
    Relauncher,
)
from desktop_entry.infrastructure.file_ops import FileOperations

__all__ = [
    "BestEffortCommandRunner",
    "CommandRunner",
    "FileOperations",
    "ProcessRelauncher",
    "Relauncher",
]
