"""INI reading and documentation helpers for settings.conf."""

import configparser
from datetime import UTC, datetime
from typing import Any

from desktop_entry.constants import (
    ISO_DATETIME_FORMAT,
    SECTION_DEFAULT,
    SECTION_ENTRY,
)

# Two spaces then '#' starts a trailing comment: "perm = 700  # owner only"
INLINE_COMMENT_MARKER = "  #"


def _strip_inline_comment(value: str) -> str:
    head, marker, _ = value.partition(INLINE_COMMENT_MARKER)
    return head.strip() if marker else value


class CommentAwareConfigParser(configparser.ConfigParser):
    """Plain-value ConfigParser that drops trailing ``  #`` comments.

    Interpolation is off, so paths and patterns containing '%' are read
    as written.
    """

    def __init__(self) -> None:
        super().__init__(interpolation=None)

    def get(  # type: ignore[override]
        self,
        section: str,
        option: str,
        **kwargs: Any,  # noqa: ANN401
    ) -> str:
        raw = super().get(section, option, **kwargs)
        return raw if raw is None else _strip_inline_comment(raw)


class ConfigCommentManager:
    """Comment blocks written into a fresh settings.conf."""

    @staticmethod
    def get_file_header() -> str:
        """Header naming the file's purpose and when it was written."""
        written_at = datetime.now(tz=UTC).strftime(ISO_DATETIME_FORMAT)
        return (
            "# desktop-entry configuration\n"
            "# Defaults applied to every desktop entry created by\n"
            "# desktop-entry on this machine. Values set here override the\n"
            "# built-in defaults; applications may still override them in\n"
            "# code.\n"
            "#\n"
            f"# Written: {written_at} UTC\n"
            "\n"
        )

    @staticmethod
    def get_section_comments() -> dict[str, str]:
        """Documentation block placed above each section."""
        rule = "# " + "=" * 40 + "\n"
        return {
            SECTION_DEFAULT: (
                f"{rule}# LOGGING\n{rule}"
                "# log_level: File log level (DEBUG, INFO, WARNING, ERROR)\n"
                "# console_log_level: Level for messages printed to stderr\n"
                "# log_file: Log file path, empty disables file logging\n"
                "\n"
            ),
            SECTION_ENTRY: (
                f"\n{rule}# DESKTOP ENTRY DEFAULTS\n{rule}"
                "# apps_path: Directory for .desktop files\n"
                "# icons_path: Directory for icons\n"
                "# perm: Octal mode for created files and directories (755)\n"
                "# oss: Comma separated operating systems to install on\n"
                "# update_if_changed: Rewrite the entry when the binary "
                "moved\n"
                "# rerun_if_changed: Restart the application after a "
                "rewrite\n"
                "\n"
            ),
        }
