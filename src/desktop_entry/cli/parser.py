"""CLI argument parser for desktop-entry.

Handles parsing of command-line arguments and provides a clean
interface for defining CLI commands and their options.
"""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path


def _octal(value: str) -> int:
    """Parse an octal permission string such as '755'."""
    try:
        return int(value, 8)
    except ValueError as e:
        msg = f"invalid octal permission: {value!r}"
        raise argparse.ArgumentTypeError(msg) from e


class CLIParser:
    """Command-line argument parser for desktop-entry."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        args = parser.parse_args(argv)
        self._check_mime_options(parser, args)
        return args

    def _check_mime_options(
        self, parser: argparse.ArgumentParser, args: Namespace
    ) -> None:
        """Exit unless --mime-type and --mime-path are given together."""
        mime_type = getattr(args, "mime_type", "")
        mime_path = getattr(args, "mime_path", None)
        if mime_type and mime_path is None:
            parser.error("--mime-type requires --mime-path")
        if mime_path is not None and not mime_type:
            parser.error("--mime-path requires --mime-type")

    def create_parser(self) -> argparse.ArgumentParser:
        """Build the full parser with global options and subcommands."""
        parser = self._create_main_parser()
        self._add_global_options(parser)
        self._add_subcommands(parser)
        return parser

    def _create_main_parser(self) -> argparse.ArgumentParser:
        return argparse.ArgumentParser(
            prog="desktop-entry",
            description="Create and maintain freedesktop desktop entries",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Install a launcher, icon and menu entry for a binary
  %(prog)s create --name MyApp --app-version 1.0.0 \\
      --icon myapp.png --exec ~/bin/myapp --categories "Utility;"

  # Register a custom mime type together with the entry
  %(prog)s create --name MyApp --app-version 1.0.0 --icon myapp.png \\
      --exec ~/bin/myapp --mime-type application/x-myapp \\
      --mime-path ~/.local/share/mime --mime-pattern "*.myapp"

  # Check whether an installed entry still points at the binary
  %(prog)s status --name MyApp --exec ~/bin/myapp --json

  # Write the documented default settings file
  %(prog)s config --init
            """,
        )

    def _add_global_options(self, parser: argparse.ArgumentParser) -> None:
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show desktop-entry version and exit",
        )
        parser.add_argument(
            "--config-dir",
            type=Path,
            default=None,
            help="Directory holding settings.conf",
        )

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )

        self._add_create_command(subparsers)
        self._add_status_command(subparsers)
        self._add_config_command(subparsers)

    def _add_identity_options(self, parser: argparse.ArgumentParser) -> None:
        """Options shared by commands that render fingerprint lines."""
        parser.add_argument(
            "--name", required=True, help="Application name"
        )
        parser.add_argument(
            "--exec",
            dest="exec_path",
            required=True,
            help="Executable the entry launches",
        )
        parser.add_argument(
            "--wm-class",
            default=None,
            help="StartupWMClass value (default: executable file name)",
        )
        parser.add_argument(
            "--apps-path",
            type=Path,
            default=None,
            help="Directory for .desktop files",
        )
        parser.add_argument(
            "--json",
            action="store_true",
            help="Print the result as JSON",
        )

    def _add_create_command(self, subparsers) -> None:
        create_parser = subparsers.add_parser(
            "create",
            help="Create or update a desktop entry",
        )
        self._add_identity_options(create_parser)
        create_parser.add_argument(
            "--app-version", required=True, help="Application version"
        )
        create_parser.add_argument(
            "--icon",
            type=Path,
            required=True,
            help="PNG icon file",
        )
        create_parser.add_argument(
            "--type", dest="entry_type", default=None, help="Entry type"
        )
        create_parser.add_argument(
            "--categories",
            default=None,
            help="Semicolon separated categories (e.g. 'Utility;')",
        )
        create_parser.add_argument(
            "--comment", default=None, help="Application description"
        )
        create_parser.add_argument(
            "--icons-path",
            type=Path,
            default=None,
            help="Directory for icons",
        )
        create_parser.add_argument(
            "--perm",
            type=_octal,
            default=None,
            help="Octal permission for created files (e.g. 755)",
        )
        create_parser.add_argument(
            "--no-update",
            action="store_true",
            help="Never rewrite an existing entry",
        )

        mime_group = create_parser.add_argument_group("mime type")
        mime_group.add_argument(
            "--mime-type",
            default="",
            help="Mime type, e.g. text/x-myapp (needs --mime-path)",
        )
        mime_group.add_argument(
            "--mime-path",
            type=Path,
            default=None,
            help="Mime directory, usually ~/.local/share/mime",
        )
        mime_group.add_argument(
            "--mime-comment", default="", help="Mime type description"
        )
        mime_group.add_argument(
            "--mime-icon", default="", help="Generic icon name"
        )
        mime_group.add_argument(
            "--mime-pattern",
            action="append",
            default=[],
            help="Glob pattern (repeatable)",
        )

    def _add_status_command(self, subparsers) -> None:
        status_parser = subparsers.add_parser(
            "status",
            help="Check whether an installed entry is up to date",
        )
        self._add_identity_options(status_parser)

    def _add_config_command(self, subparsers) -> None:
        config_parser = subparsers.add_parser(
            "config",
            help="Manage the settings file",
        )
        group = config_parser.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--init",
            action="store_true",
            help="Write the default settings file",
        )
        group.add_argument(
            "--show",
            action="store_true",
            help="Print the effective settings",
        )
        config_parser.add_argument(
            "--force",
            action="store_true",
            help="Overwrite an existing settings file with --init",
        )
