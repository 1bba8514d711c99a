"""Path constants and utilities for desktop-entry configuration.

Paths are computed on access rather than at import time so that
environment overrides (XDG_CONFIG_HOME, DESKTOP_ENTRY_CONFIG_DIR) set by
tests or wrappers are honoured.
"""

import os
from pathlib import Path

from desktop_entry.constants import (
    CONFIG_FILE_NAME,
    DEFAULT_CONFIG_SUBDIR,
    ENV_CONFIG_DIR,
    ENV_XDG_CONFIG_HOME,
)


class Paths:
    """Application paths and directory structure."""

    @classmethod
    def config_dir(cls) -> Path:
        """Get the settings directory.

        Returns:
            $DESKTOP_ENTRY_CONFIG_DIR, else $XDG_CONFIG_HOME/desktop-entry,
            else ~/.config/desktop-entry

        """
        override = os.getenv(ENV_CONFIG_DIR)
        if override:
            return cls.expand_path(override)

        xdg_config_home = os.getenv(ENV_XDG_CONFIG_HOME)
        base = (
            cls.expand_path(xdg_config_home)
            if xdg_config_home
            else Path.home() / ".config"
        )
        return base / DEFAULT_CONFIG_SUBDIR

    @classmethod
    def settings_file(cls, config_dir: Path | None = None) -> Path:
        """Get path to the settings file."""
        return (config_dir or cls.config_dir()) / CONFIG_FILE_NAME

    @classmethod
    def expand_path(cls, path_str: str) -> Path:
        """Expand ~ and make the path absolute without resolving symlinks.

        Example:
            >>> Paths.expand_path("~/.icons")
            PosixPath('/home/user/.icons')

        """
        return Path(os.path.abspath(Path(path_str).expanduser()))
