"""Domain types for desktop entry generation.

This module contains the configuration and result types shared by the
builder, the reconciler and the CLI. None of them perform IO.
"""

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from desktop_entry.constants import (
    DEFAULT_ARCH,
    DEFAULT_PERM,
    DEFAULT_SUPPORTED_OSS,
    DESKTOP_FILE_EXTENSION,
    DESKTOP_FILE_TYPE,
    DESKTOP_ICON_EXTENSION,
    DESKTOP_USER_APPLICATIONS_SUBPATH,
    DESKTOP_USER_ICONS_SUBPATH,
)


def default_apps_path() -> Path:
    """Return ~/.local/share/applications."""
    return Path.home().joinpath(*DESKTOP_USER_APPLICATIONS_SUBPATH)


def default_icons_path() -> Path:
    """Return ~/.icons."""
    return Path.home().joinpath(*DESKTOP_USER_ICONS_SUBPATH)


@dataclass(frozen=True)
class MimeType:
    """Custom mime type to register with shared-mime-info.

    Attributes:
        type: Mime type string, e.g. "application/x-myapp"
        path: Directory holding the ``packages/`` folder
            (usually ~/.local/share/mime)
        comment: Human readable description
        generic_icon: Generic icon name
        patterns: Glob patterns, rendered in order

    """

    type: str = ""
    path: Path | None = None
    comment: str = ""
    generic_icon: str = ""
    patterns: tuple[str, ...] = ()

    @property
    def is_requested(self) -> bool:
        """Both a type and a target directory are needed to register."""
        return bool(self.type) and bool(self.path)


@dataclass(frozen=True)
class EntryConfig:
    """Application metadata and policy for a desktop entry.

    Build it with :func:`desktop_entry.new` to get the documented defaults,
    then derive variations with :meth:`with_options`.
    """

    name: str
    version: str
    icon: bytes
    type: str = DESKTOP_FILE_TYPE
    categories: str = ""
    comment: str = ""
    # Informational only, never written to the entry
    arch: str = DEFAULT_ARCH
    apps_path: Path = field(default_factory=default_apps_path)
    icons_path: Path = field(default_factory=default_icons_path)
    perm: int = DEFAULT_PERM
    oss: tuple[str, ...] = DEFAULT_SUPPORTED_OSS
    update_if_changed: bool = True
    rerun_if_changed: bool = True
    mime_type: MimeType = field(default_factory=MimeType)

    @property
    def id(self) -> str:
        """On-disk base name shared by the entry and the icon."""
        return self.name.lower()

    @property
    def entry_path(self) -> Path:
        """Path of the .desktop file."""
        return Path(self.apps_path) / f"{self.id}{DESKTOP_FILE_EXTENSION}"

    @property
    def icon_path(self) -> Path:
        """Path of the icon file."""
        return Path(self.icons_path) / f"{self.id}{DESKTOP_ICON_EXTENSION}"

    def with_options(self, **changes: Any) -> "EntryConfig":  # noqa: ANN401
        """Return a copy with the given fields replaced."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class ReconcileResult:
    """Outcome of a reconcile run.

    Attributes:
        skipped: The environment gate short-circuited the run
        changed: The .desktop file was written
        icon_created: The icon file was written
        mime_created: The mime package file was written
        entry_path: Path of the .desktop file (None when skipped)
        icon_path: Path of the icon file (None when skipped)
        mime_path: Path of the mime package (None when not requested)

    """

    skipped: bool = False
    changed: bool = False
    icon_created: bool = False
    mime_created: bool = False
    entry_path: Path | None = None
    icon_path: Path | None = None
    mime_path: Path | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "skipped": self.skipped,
            "changed": self.changed,
            "icon_created": self.icon_created,
            "mime_created": self.mime_created,
            "entry_path": str(self.entry_path) if self.entry_path else None,
            "icon_path": str(self.icon_path) if self.icon_path else None,
            "mime_path": str(self.mime_path) if self.mime_path else None,
        }


@dataclass(frozen=True)
class EntryStatus:
    """Read-only view of an on-disk entry compared to fresh content."""

    entry_path: Path
    exists: bool
    stale: bool
    exec_line: str
    startup_class_line: str
    existing_exec_line: str | None = None
    existing_startup_class_line: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "entry_path": str(self.entry_path),
            "exists": self.exists,
            "stale": self.stale,
            "exec_line": self.exec_line,
            "startup_class_line": self.startup_class_line,
            "existing_exec_line": self.existing_exec_line,
            "existing_startup_class_line": self.existing_startup_class_line,
        }
