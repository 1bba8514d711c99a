"""Settings manager for the desktop-entry INI file.

The settings file is optional. It carries logging preferences and
machine-wide defaults for desktop entries:

    [DEFAULT]
    log_level = INFO
    console_log_level = WARNING
    log_file =

    [entry]
    apps_path = ~/.local/share/applications
    icons_path = ~/.icons
    perm = 755
    oss = linux
    update_if_changed = true
    rerun_if_changed = true

Only keys present in the [entry] section override an EntryConfig.
"""

import configparser
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from desktop_entry.config.parser import (
    CommentAwareConfigParser,
    ConfigCommentManager,
)
from desktop_entry.config.paths import Paths
from desktop_entry.constants import (
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_PERM,
    DEFAULT_SUPPORTED_OSS,
    DESKTOP_USER_APPLICATIONS_SUBPATH,
    DESKTOP_USER_ICONS_SUBPATH,
    ENTRY_KEYS,
    KEY_APPS_PATH,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_ICONS_PATH,
    KEY_LOG_FILE,
    KEY_LOG_LEVEL,
    KEY_OSS,
    KEY_PERM,
    KEY_RERUN_IF_CHANGED,
    KEY_UPDATE_IF_CHANGED,
    SECTION_DEFAULT,
    SECTION_ENTRY,
)
from desktop_entry.exceptions import InvalidConfigurationError
from desktop_entry.logger import get_logger
from desktop_entry.types import EntryConfig

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Parsed settings file.

    Attributes:
        log_level: File log level
        console_log_level: Console log level
        log_file: Log file path, None disables file logging
        entry_overrides: EntryConfig field overrides from [entry]

    """

    log_level: str = DEFAULT_LOG_LEVEL
    console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL
    log_file: Path | None = None
    entry_overrides: dict[str, Any] = field(default_factory=dict)

    def apply(self, config: EntryConfig) -> EntryConfig:
        """Return config with the [entry] overrides applied."""
        if not self.entry_overrides:
            return config
        return config.with_options(**self.entry_overrides)


class SettingsManager:
    """Loads and writes the desktop-entry settings file."""

    def __init__(self, config_dir: Path | None = None) -> None:
        """Initialize settings manager.

        Args:
            config_dir: Configuration directory path
                (defaults to Paths.config_dir())

        """
        self.config_dir = config_dir or Paths.config_dir()
        self.settings_file = Paths.settings_file(self.config_dir)

    def get_default_settings(self) -> dict[str, dict[str, str]]:
        """Get default settings as raw INI values."""
        home = Path.home()
        return {
            SECTION_DEFAULT: {
                KEY_LOG_LEVEL: DEFAULT_LOG_LEVEL,
                KEY_CONSOLE_LOG_LEVEL: DEFAULT_CONSOLE_LOG_LEVEL,
                KEY_LOG_FILE: "",
            },
            SECTION_ENTRY: {
                KEY_APPS_PATH: str(
                    home.joinpath(*DESKTOP_USER_APPLICATIONS_SUBPATH)
                ),
                KEY_ICONS_PATH: str(
                    home.joinpath(*DESKTOP_USER_ICONS_SUBPATH)
                ),
                KEY_PERM: f"{DEFAULT_PERM:o}",
                KEY_OSS: ",".join(DEFAULT_SUPPORTED_OSS),
                KEY_UPDATE_IF_CHANGED: "true",
                KEY_RERUN_IF_CHANGED: "true",
            },
        }

    def load(self) -> Settings:
        """Load settings, falling back to defaults when the file is absent.

        Returns:
            Parsed Settings

        Raises:
            InvalidConfigurationError: If the file cannot be parsed or holds
                invalid values

        """
        if not self.settings_file.exists():
            logger.debug("No settings file at %s", self.settings_file)
            return Settings()

        parser = CommentAwareConfigParser()
        try:
            with self.settings_file.open(encoding="utf-8") as f:
                parser.read_file(f)
        except (OSError, configparser.Error) as e:
            msg = f"cannot read settings file: {e}"
            raise InvalidConfigurationError(
                msg, target=str(self.settings_file)
            ) from e

        return Settings(
            log_level=self._get_level(
                parser, KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL
            ),
            console_log_level=self._get_level(
                parser, KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
            log_file=self._get_log_file(parser),
            entry_overrides=self._get_entry_overrides(parser),
        )

    def write_default(
        self,
        overwrite: bool = False,  # noqa: FBT001, FBT002
    ) -> Path:
        """Write a documented settings file with the default values.

        Args:
            overwrite: Replace an existing settings file

        Returns:
            Path to the settings file

        """
        if self.settings_file.exists() and not overwrite:
            logger.info("Settings file already exists: %s", self.settings_file)
            return self.settings_file

        self.config_dir.mkdir(parents=True, exist_ok=True)
        defaults = self.get_default_settings()
        comments = ConfigCommentManager.get_section_comments()

        lines = [ConfigCommentManager.get_file_header()]
        for section, values in defaults.items():
            lines.append(comments[section])
            lines.append(f"[{section}]\n")
            lines.extend(f"{key} = {value}\n" for key, value in values.items())

        self.settings_file.write_text("".join(lines), encoding="utf-8")
        logger.info("Wrote settings file: %s", self.settings_file)
        return self.settings_file

    def _get_level(
        self, parser: CommentAwareConfigParser, key: str, default: str
    ) -> str:
        value = parser.get(SECTION_DEFAULT, key, fallback=default) or default
        level = value.strip().upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"{key} must be one of {', '.join(VALID_LOG_LEVELS)}"
            raise InvalidConfigurationError(msg, target=value)
        return level

    def _get_log_file(self, parser: CommentAwareConfigParser) -> Path | None:
        value = parser.get(SECTION_DEFAULT, KEY_LOG_FILE, fallback="")
        if not value or not value.strip():
            return None
        return Paths.expand_path(value.strip())

    def _get_entry_overrides(
        self, parser: CommentAwareConfigParser
    ) -> dict[str, Any]:
        if not parser.has_section(SECTION_ENTRY):
            return {}

        overrides: dict[str, Any] = {}
        # Only options written in the section itself, not inherited DEFAULTs
        section_keys = [
            key
            for key in parser.options(SECTION_ENTRY)
            if key not in parser.defaults()
        ]

        for key in section_keys:
            if key not in ENTRY_KEYS:
                logger.warning("Ignoring unknown setting [entry] %s", key)
                continue

            value = parser.get(SECTION_ENTRY, key).strip()
            try:
                if key in (KEY_APPS_PATH, KEY_ICONS_PATH):
                    overrides[key] = Paths.expand_path(value)
                elif key == KEY_PERM:
                    overrides[key] = int(value, 8)
                elif key == KEY_OSS:
                    overrides[key] = tuple(
                        part.strip().lower()
                        for part in value.split(",")
                        if part.strip()
                    )
                else:
                    overrides[key] = parser.getboolean(SECTION_ENTRY, key)
            except ValueError as e:
                msg = f"invalid value for [entry] {key}: {value!r}"
                raise InvalidConfigurationError(
                    msg, target=str(self.settings_file)
                ) from e

        return overrides
