"""Exception classes for desktop-entry operations."""


class DesktopEntryError(Exception):
    """Base exception for desktop-entry operations."""

    error_prefix: str = "Desktop entry operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or value the failure relates to.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class PathResolutionError(DesktopEntryError):
    """Raised when the running executable or argv[0] cannot be resolved."""

    error_prefix = "Path resolution failed"


# Shorter public name
ResolutionError = PathResolutionError


class FilesystemError(DesktopEntryError):
    """Raised when a directory or file operation fails.

    The ``stage`` names the reconciler step that failed: paths-creation,
    icon-creation, entry-creation or mime-creation.
    """

    def __init__(
        self, message: str, stage: str, target: str | None = None
    ) -> None:
        """Initialize error with the failing stage.

        Args:
            message: Error message describing the failure.
            stage: Reconciler stage in which the failure happened.
            target: Optional path the failure relates to.

        """
        super().__init__(message, target)
        self.stage = stage

    @property
    def error_prefix(self) -> str:  # type: ignore[override]
        """Prefix the message with the failing stage."""
        return f"Filesystem error during {self.stage}"


class InvalidConfigurationError(DesktopEntryError):
    """Raised when configuration values are malformed."""

    error_prefix = "Invalid configuration"


class InvalidMimeTypeError(InvalidConfigurationError):
    """Raised when a mime type is missing the '/' separator."""

    error_prefix = "Invalid mime type"
