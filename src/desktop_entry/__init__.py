"""Top-level package for desktop-entry.

Generate and maintain a freedesktop .desktop launcher, its icon and an
optional mime type registration for the running application.

Example:
    >>> import desktop_entry
    >>> config = desktop_entry.new("MyApp", "1.2.0", icon_bytes,
    ...                            categories="Utility;", comment="My app")
    >>> desktop_entry.create(config)

The first call writes ~/.local/share/applications/myapp.desktop and
~/.icons/myapp.png; later calls only rewrite the entry when the executable
path or invocation name changed, then restart the application.
"""

from importlib import metadata
from typing import Any

from desktop_entry.exceptions import (
    DesktopEntryError,
    FilesystemError,
    InvalidConfigurationError,
    InvalidMimeTypeError,
    PathResolutionError,
    ResolutionError,
)
from desktop_entry.identity import CurrentProcess, StaticIdentity
from desktop_entry.reconciler import Reconciler, create
from desktop_entry.types import (
    EntryConfig,
    EntryStatus,
    MimeType,
    ReconcileResult,
)

try:
    __version__ = metadata.version("desktop-entry")
except metadata.PackageNotFoundError:
    # Fallback for development environments where package isn't installed
    __version__ = "dev"

__all__ = [
    "CurrentProcess",
    "DesktopEntryError",
    "EntryConfig",
    "EntryStatus",
    "FilesystemError",
    "InvalidConfigurationError",
    "InvalidMimeTypeError",
    "MimeType",
    "PathResolutionError",
    "ReconcileResult",
    "Reconciler",
    "ResolutionError",
    "StaticIdentity",
    "create",
    "new",
]


def new(
    name: str,
    version: str,
    icon: bytes,
    **options: Any,  # noqa: ANN401
) -> EntryConfig:
    """Create an EntryConfig with the default options.

    Defaults: type "Application", arch "x86_64", perm 0o755, apps path
    ~/.local/share/applications, icons path ~/.icons, oss ("linux",),
    update_if_changed and rerun_if_changed enabled.

    Args:
        name: Application name, lower-cased for the file names
        version: Application version
        icon: PNG icon data
        **options: Any other EntryConfig field

    Returns:
        EntryConfig

    Raises:
        InvalidConfigurationError: If name or version is empty

    """
    if not name:
        msg = "application name is required"
        raise InvalidConfigurationError(msg)
    if not version:
        msg = "application version is required"
        raise InvalidConfigurationError(msg, target=name)
    return EntryConfig(name=name, version=version, icon=icon, **options)
