"""Desktop entry reconciler.

Decides whether the on-disk desktop integration of the running program must
be created, left alone or regenerated, and performs the resulting writes.

Design Philosophy:
- The icon is written ONCE and never compared or replaced afterwards
- The .desktop entry is compared through two fingerprint lines only
  (Exec= and StartupWMClass=), which change when the binary moves or is
  started under another name
- Unchanged entries are never rewritten, so calling create() on every
  startup costs a few stat calls and one read
- Refresh tools are advisory: their failures never reach the caller
"""

import re
import tempfile
from pathlib import Path

from desktop_entry.builder import (
    build_desktop_entry,
    get_exec_line,
    get_startup_class_line,
    mime_package_path,
    render_mime_xml,
)
from desktop_entry.constants import (
    DESKTOP_EXEC_PATTERN,
    DESKTOP_STARTUP_CLASS_PATTERN,
    MIME_PACKAGES_DIR,
    STAGE_ENTRY,
    STAGE_ICON,
    STAGE_MIME,
    STAGE_PATHS,
    UPDATE_DESKTOP_DATABASE_CMD,
    UPDATE_MIME_DATABASE_CMD,
)
from desktop_entry.exceptions import FilesystemError
from desktop_entry.identity import CurrentProcess, ProcessIdentity
from desktop_entry.infrastructure.commands import (
    BestEffortCommandRunner,
    CommandRunner,
    ProcessRelauncher,
    Relauncher,
)
from desktop_entry.infrastructure.file_ops import FileOperations
from desktop_entry.logger import get_logger
from desktop_entry.types import EntryConfig, EntryStatus, ReconcileResult

logger = get_logger(__name__)

_EXEC_RE = re.compile(DESKTOP_EXEC_PATTERN)
_STARTUP_CLASS_RE = re.compile(DESKTOP_STARTUP_CLASS_PATTERN)


def extract_fingerprint(content: str) -> tuple[str | None, str | None]:
    """Extract the Exec= and StartupWMClass= lines from entry content.

    Args:
        content: Existing .desktop file content (possibly malformed)

    Returns:
        Tuple of (exec_line, startup_class_line), None where absent

    """
    exec_match = _EXEC_RE.search(content)
    class_match = _STARTUP_CLASS_RE.search(content)
    return (
        exec_match.group(0) if exec_match else None,
        class_match.group(0) if class_match else None,
    )


def is_stale(content: str, exec_line: str, startup_class_line: str) -> bool:
    """Check whether existing content no longer matches fresh fingerprints."""
    existing_exec, existing_class = extract_fingerprint(content)
    return existing_exec != exec_line or existing_class != startup_class_line


class Reconciler:
    """Creates or refreshes the desktop integration of a program."""

    def __init__(
        self,
        identity: ProcessIdentity | None = None,
        runner: CommandRunner | None = None,
        relauncher: Relauncher | None = None,
        temp_dir: Path | None = None,
    ) -> None:
        """Initialize the reconciler with its collaborators.

        Args:
            identity: Process identity (defaults to the live process)
            runner: Runner for the database refresh commands
            relauncher: Collaborator restarting the program on change
            temp_dir: Directory marking transient/development runs
                (defaults to the system temp directory)

        """
        self.identity = identity or CurrentProcess()
        self.runner = runner or BestEffortCommandRunner()
        self.relauncher = relauncher or ProcessRelauncher()
        self.temp_dir = Path(temp_dir or tempfile.gettempdir())

    def is_transient(self) -> bool:
        """Check whether argv[0] lives under the temp directory.

        Programs started from build or test scratch directories land
        there and must not register themselves.
        """
        argv0 = Path(self.identity.argv()[0]).absolute()
        temp_dir = self.temp_dir.absolute()
        return argv0 == temp_dir or temp_dir in argv0.parents

    def is_supported(self, config: EntryConfig) -> bool:
        """Check the current OS against the configured allow-list."""
        return self.identity.system() in config.oss

    def create(self, config: EntryConfig) -> ReconcileResult:
        """Create the desktop entry or update it if the executable moved.

        Safe to call on every startup: once the entry is current, repeated
        calls perform no writes.

        Args:
            config: Entry configuration

        Returns:
            ReconcileResult describing what was written

        Raises:
            PathResolutionError: If the executable or argv[0] is unknown
            InvalidMimeTypeError: If the requested mime type has no '/'
            FilesystemError: If a directory or file operation fails

        """
        if self.is_transient() or not self.is_supported(config):
            logger.debug(
                "Skipping desktop entry for %s (transient run or "
                "unsupported OS '%s')",
                config.name,
                self.identity.system(),
            )
            return ReconcileResult(skipped=True)

        mime_path = None
        if config.mime_type.is_requested:
            mime_path = mime_package_path(config.mime_type)

        file_ops = FileOperations(config.perm)

        self._create_paths(config, file_ops)
        icon_created = self._create_icon(config, file_ops)
        changed = self._create_entry(config, file_ops)

        mime_created = False
        if mime_path is not None:
            mime_created = self._create_mime_type(config, mime_path, file_ops)

        if changed and config.rerun_if_changed:
            self.relauncher.relaunch(self.identity)

        return ReconcileResult(
            changed=changed,
            icon_created=icon_created,
            mime_created=mime_created,
            entry_path=config.entry_path,
            icon_path=config.icon_path,
            mime_path=mime_path,
        )

    def inspect(self, config: EntryConfig) -> EntryStatus:
        """Compare the on-disk entry with fresh content without writing.

        Raises:
            PathResolutionError: If the executable or argv[0] is unknown
            FilesystemError: If the existing entry cannot be read

        """
        exec_line = get_exec_line(self.identity)
        startup_class_line = get_startup_class_line(self.identity)
        entry_path = config.entry_path

        try:
            content = entry_path.read_text(encoding="utf-8", errors="replace")
        except FileNotFoundError:
            return EntryStatus(
                entry_path=entry_path,
                exists=False,
                stale=True,
                exec_line=exec_line,
                startup_class_line=startup_class_line,
            )
        except OSError as e:
            msg = f"cannot read desktop entry: {e}"
            raise FilesystemError(
                msg, stage=STAGE_ENTRY, target=str(entry_path)
            ) from e

        existing_exec, existing_class = extract_fingerprint(content)
        return EntryStatus(
            entry_path=entry_path,
            exists=True,
            stale=is_stale(content, exec_line, startup_class_line),
            exec_line=exec_line,
            startup_class_line=startup_class_line,
            existing_exec_line=existing_exec,
            existing_startup_class_line=existing_class,
        )

    def should_update(
        self, entry_path: Path, file_ops: FileOperations
    ) -> bool:
        """Check the fingerprint of an existing entry against fresh lines."""
        existing = file_ops.read_text(entry_path)
        stale = is_stale(
            existing,
            get_exec_line(self.identity),
            get_startup_class_line(self.identity),
        )
        if stale:
            logger.debug("Desktop entry fingerprint changed: %s", entry_path)
        return stale

    def _create_paths(
        self, config: EntryConfig, file_ops: FileOperations
    ) -> None:
        paths = [Path(config.apps_path), Path(config.icons_path)]
        if config.mime_type.is_requested:
            paths.append(Path(config.mime_type.path) / MIME_PACKAGES_DIR)

        for path in paths:
            try:
                file_ops.ensure_directory(path)
            except OSError as e:
                msg = f"failed to create directory: {e}"
                raise FilesystemError(
                    msg, stage=STAGE_PATHS, target=str(path)
                ) from e

    def _create_icon(
        self, config: EntryConfig, file_ops: FileOperations
    ) -> bool:
        icon_path = config.icon_path
        try:
            created = file_ops.write_if_absent(icon_path, config.icon)
        except OSError as e:
            msg = f"failed to create icon file: {e}"
            raise FilesystemError(
                msg, stage=STAGE_ICON, target=str(icon_path)
            ) from e

        if created:
            logger.info("Created icon: %s", icon_path)
        return created

    def _create_entry(
        self, config: EntryConfig, file_ops: FileOperations
    ) -> bool:
        entry_path = config.entry_path

        try:
            exists = file_ops.exists(entry_path)
            if exists and not config.update_if_changed:
                logger.debug("Desktop entry exists, updates disabled")
                return False
            if exists and not self.should_update(entry_path, file_ops):
                logger.debug("Desktop entry unchanged: %s", entry_path)
                return False

            content = build_desktop_entry(config, self.identity)
            file_ops.write_text(entry_path, content)
        except OSError as e:
            msg = f"failed to create or update desktop entry: {e}"
            raise FilesystemError(
                msg, stage=STAGE_ENTRY, target=str(entry_path)
            ) from e

        if exists:
            logger.info("Updated desktop entry: %s", entry_path)
        else:
            logger.info("Created desktop entry: %s", entry_path)

        self.runner.run([UPDATE_DESKTOP_DATABASE_CMD, str(config.apps_path)])
        return True

    def _create_mime_type(
        self, config: EntryConfig, mime_path: Path, file_ops: FileOperations
    ) -> bool:
        content = render_mime_xml(config.mime_type)

        try:
            if (
                file_ops.exists(mime_path)
                and file_ops.read_text(mime_path) == content
            ):
                logger.debug("Mime package unchanged: %s", mime_path)
                return False
            file_ops.write_text(mime_path, content)
        except OSError as e:
            msg = f"failed to create mime type file: {e}"
            raise FilesystemError(
                msg, stage=STAGE_MIME, target=str(mime_path)
            ) from e

        logger.info(
            "Registered mime type %s: %s", config.mime_type.type, mime_path
        )
        self.runner.run([UPDATE_MIME_DATABASE_CMD, str(config.mime_type.path)])
        return True


def create(
    config: EntryConfig, identity: ProcessIdentity | None = None
) -> ReconcileResult:
    """Convenience function to create or update the entry for config.

    Args:
        config: Entry configuration
        identity: Optional identity override (defaults to this process)

    Returns:
        ReconcileResult describing what was written

    """
    return Reconciler(identity=identity).create(config)
