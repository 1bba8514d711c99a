"""CLI runner for desktop-entry.

Routes parsed arguments to the command handlers. The CLI installs entries
for another executable, so it always works with a StaticIdentity built from
--exec / --wm-class and never restarts itself.
"""

from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import orjson

from desktop_entry import __version__, new
from desktop_entry.cli.parser import CLIParser
from desktop_entry.config import Paths, Settings, SettingsManager
from desktop_entry.exceptions import InvalidConfigurationError
from desktop_entry.identity import (
    CurrentProcess,
    StaticIdentity,
    resolve_executable,
)
from desktop_entry.logger import get_logger, update_logger_from_config
from desktop_entry.reconciler import Reconciler
from desktop_entry.types import EntryConfig, MimeType

logger = get_logger(__name__)


def _print_json(data: dict[str, Any]) -> None:
    print(orjson.dumps(data, option=orjson.OPT_INDENT_2).decode())


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self, reconciler_factory=Reconciler) -> None:
        """Initialize CLI runner.

        Args:
            reconciler_factory: Callable building a Reconciler from an
                identity (replaced in tests)

        """
        self.reconciler_factory = reconciler_factory
        self.command_handlers = {
            "create": self.handle_create,
            "status": self.handle_status,
            "config": self.handle_config,
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and dispatch to the matching handler.

        Returns:
            Process exit status

        """
        args = CLIParser().parse_args(argv)

        if args.version:
            print(__version__)
            return 0

        if not args.command:
            CLIParser().create_parser().print_help()
            return 1

        update_logger_from_config(args.config_dir)
        settings = SettingsManager(args.config_dir).load()

        logger.debug("Running command: %s", args.command)
        return self.command_handlers[args.command](args, settings)

    def handle_create(self, args: Namespace, settings: Settings) -> int:
        """Create or update an entry for --exec."""
        config = self._build_entry_config(args, settings)
        identity = self._build_identity(args)

        result = self.reconciler_factory(identity=identity).create(config)

        if args.json:
            _print_json(result.to_dict())
        elif result.skipped:
            print(f"Skipped {config.name}: unsupported environment")
        elif result.changed:
            print(f"Desktop entry written: {result.entry_path}")
        else:
            print(f"Desktop entry up to date: {result.entry_path}")
        return 0

    def handle_status(self, args: Namespace, settings: Settings) -> int:
        """Report whether the entry exists and matches --exec."""
        config = settings.apply(
            EntryConfig(name=args.name, version="", icon=b"")
        )
        if args.apps_path is not None:
            config = config.with_options(
                apps_path=Paths.expand_path(str(args.apps_path))
            )

        status = self.reconciler_factory(
            identity=self._build_identity(args)
        ).inspect(config)

        if args.json:
            _print_json(status.to_dict())
        elif not status.exists:
            print(f"Missing: {status.entry_path}")
        elif status.stale:
            print(f"Outdated: {status.entry_path}")
        else:
            print(f"Up to date: {status.entry_path}")
        # Non-zero when a create run would write the entry
        return 1 if status.stale else 0

    def handle_config(self, args: Namespace, settings: Settings) -> int:
        """Write or show the settings file."""
        manager = SettingsManager(args.config_dir)
        if args.init:
            path = manager.write_default(overwrite=args.force)
            print(f"Settings file: {path}")
            return 0

        _print_json(
            {
                "settings_file": str(manager.settings_file),
                "log_level": settings.log_level,
                "console_log_level": settings.console_log_level,
                "log_file": (
                    str(settings.log_file) if settings.log_file else None
                ),
                "entry": {
                    key: (
                        str(value)
                        if isinstance(value, Path)
                        else list(value)
                        if isinstance(value, tuple)
                        else value
                    )
                    for key, value in settings.entry_overrides.items()
                },
            }
        )
        return 0

    def _build_identity(self, args: Namespace) -> StaticIdentity:
        """Identity of the executable named by --exec.

        argv[0] is the executable itself, or a sibling path named after
        --wm-class so the StartupWMClass line carries that name.
        """
        executable = resolve_executable(args.exec_path)
        argv0 = executable
        if args.wm_class:
            argv0 = str(Path(executable).parent / args.wm_class)
        return StaticIdentity(
            executable_path=executable,
            arguments=(argv0,),
            system_name=CurrentProcess().system(),
        )

    def _build_entry_config(
        self, args: Namespace, settings: Settings
    ) -> EntryConfig:
        try:
            icon = args.icon.read_bytes()
        except OSError as e:
            msg = f"cannot read icon file: {e}"
            raise InvalidConfigurationError(msg, target=str(args.icon)) from e

        config = settings.apply(new(args.name, args.app_version, icon))

        overrides: dict[str, Any] = {"rerun_if_changed": False}
        if args.entry_type:
            overrides["type"] = args.entry_type
        if args.categories is not None:
            overrides["categories"] = args.categories
        if args.comment is not None:
            overrides["comment"] = args.comment
        if args.apps_path is not None:
            overrides["apps_path"] = Paths.expand_path(str(args.apps_path))
        if args.icons_path is not None:
            overrides["icons_path"] = Paths.expand_path(str(args.icons_path))
        if args.perm is not None:
            overrides["perm"] = args.perm
        if args.no_update:
            overrides["update_if_changed"] = False
        if args.mime_type:
            overrides["mime_type"] = MimeType(
                type=args.mime_type,
                path=Paths.expand_path(str(args.mime_path)),
                comment=args.mime_comment,
                generic_icon=args.mime_icon,
                patterns=tuple(args.mime_pattern),
            )

        return config.with_options(**overrides)
