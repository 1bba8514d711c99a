"""Centralized constants module for desktop-entry.

This module serves as the single source of truth for all shared constants
across the desktop-entry codebase. Constants are organized by logical
categories and use typing.Final annotations to ensure immutability.

Usage:
    from desktop_entry.constants import DESKTOP_SECTION_HEADER
"""

from typing import Final

# =============================================================================
# Configuration Constants
# =============================================================================

# Configuration directory and file names
CONFIG_FILE_NAME: Final[str] = "settings.conf"

# Application-specific subdirectory under the config directory
DEFAULT_CONFIG_SUBDIR: Final[str] = "desktop-entry"

# Environment variables
ENV_CONFIG_DIR: Final[str] = "DESKTOP_ENTRY_CONFIG_DIR"
ENV_LOG_DIR: Final[str] = "DESKTOP_ENTRY_LOG_DIR"
ENV_LOG_LEVEL: Final[str] = "DESKTOP_ENTRY_LOG_LEVEL"
ENV_XDG_CONFIG_HOME: Final[str] = "XDG_CONFIG_HOME"
ENV_APPIMAGE: Final[str] = "APPIMAGE"

# Configuration defaults
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"
DEFAULT_BACKUP_COUNT: Final[int] = 3

# Date/time formats used in config headers
ISO_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Config section and key names
SECTION_DEFAULT: Final[str] = "DEFAULT"
SECTION_ENTRY: Final[str] = "entry"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"
KEY_LOG_FILE: Final[str] = "log_file"

KEY_APPS_PATH: Final[str] = "apps_path"
KEY_ICONS_PATH: Final[str] = "icons_path"
KEY_PERM: Final[str] = "perm"
KEY_OSS: Final[str] = "oss"
KEY_UPDATE_IF_CHANGED: Final[str] = "update_if_changed"
KEY_RERUN_IF_CHANGED: Final[str] = "rerun_if_changed"

# Keys accepted in the [entry] section
ENTRY_KEYS: Final[tuple[str, ...]] = (
    KEY_APPS_PATH,
    KEY_ICONS_PATH,
    KEY_PERM,
    KEY_OSS,
    KEY_UPDATE_IF_CHANGED,
    KEY_RERUN_IF_CHANGED,
)

# =============================================================================
# Logging Constants
# =============================================================================

# Root logger name, every module logger is a child of it
LOGGER_ROOT_NAME: Final[str] = "desktop_entry"

LOG_FILE_NAME: Final[str] = "desktop-entry.log"

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

LOG_BACKUP_COUNT: Final[int] = DEFAULT_BACKUP_COUNT

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}

# =============================================================================
# Desktop (.desktop) file related constants
# =============================================================================

# User-specific applications subpath under the home directory
DESKTOP_USER_APPLICATIONS_SUBPATH: Final[tuple[str, ...]] = (
    ".local",
    "share",
    "applications",
)

# User-specific icons subpath under the home directory
DESKTOP_USER_ICONS_SUBPATH: Final[tuple[str, ...]] = (".icons",)

DESKTOP_SECTION_HEADER: Final[str] = "[Desktop Entry]"
DESKTOP_FILE_TYPE: Final[str] = "Application"
DESKTOP_FILE_EXTENSION: Final[str] = ".desktop"
DESKTOP_ICON_EXTENSION: Final[str] = ".png"

DEFAULT_ARCH: Final[str] = "x86_64"
DEFAULT_PERM: Final[int] = 0o755
DEFAULT_SUPPORTED_OSS: Final[tuple[str, ...]] = ("linux",)

# Exec line template, the %F placeholder forwards file arguments
DESKTOP_EXEC_TEMPLATE: Final[str] = "Exec=sh -c '{path} %F'"
DESKTOP_STARTUP_CLASS_PREFIX: Final[str] = "StartupWMClass="

# Fingerprint patterns extracted from an existing entry
DESKTOP_EXEC_PATTERN: Final[str] = r"Exec=sh -c '.*'"
DESKTOP_STARTUP_CLASS_PATTERN: Final[str] = r"StartupWMClass=.*"

# =============================================================================
# Shared MIME info constants
# =============================================================================

MIME_XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="utf-8"?>'
MIME_INFO_NAMESPACE: Final[str] = (
    "http://www.freedesktop.org/standards/shared-mime-info"
)
MIME_PACKAGES_DIR: Final[str] = "packages"
MIME_PACKAGE_EXTENSION: Final[str] = ".xml"

# =============================================================================
# External commands
# =============================================================================

UPDATE_DESKTOP_DATABASE_CMD: Final[str] = "update-desktop-database"
UPDATE_MIME_DATABASE_CMD: Final[str] = "update-mime-database"

# =============================================================================
# Reconciler stages (used in FilesystemError context)
# =============================================================================

STAGE_PATHS: Final[str] = "paths-creation"
STAGE_ICON: Final[str] = "icon-creation"
STAGE_ENTRY: Final[str] = "entry-creation"
STAGE_MIME: Final[str] = "mime-creation"
