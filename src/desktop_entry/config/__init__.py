"""Configuration management - settings file and path utilities.

This package provides:
- SettingsManager: INI settings loading and default file creation
- Settings: Parsed settings with EntryConfig overrides
- Paths: Path constants and utilities
- Parser utilities: INI parser helpers
"""

from desktop_entry.config.parser import (
    CommentAwareConfigParser,
    ConfigCommentManager,
)
from desktop_entry.config.paths import Paths
from desktop_entry.config.settings import Settings, SettingsManager

__all__ = [
    "CommentAwareConfigParser",
    "ConfigCommentManager",
    "Paths",
    "Settings",
    "SettingsManager",
]
