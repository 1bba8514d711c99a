"""Entry content builder.

Renders the .desktop entry body and the shared-mime-info package body as
deterministic strings. Field order and the conditional-inclusion rules are
fixed: the reconciler compares freshly rendered fingerprint lines against
files written by earlier runs, so any change here rewrites every installed
entry.
"""

import posixpath
from pathlib import Path

from desktop_entry.constants import (
    DESKTOP_EXEC_TEMPLATE,
    DESKTOP_SECTION_HEADER,
    DESKTOP_STARTUP_CLASS_PREFIX,
    MIME_INFO_NAMESPACE,
    MIME_PACKAGE_EXTENSION,
    MIME_PACKAGES_DIR,
    MIME_XML_DECLARATION,
)
from desktop_entry.exceptions import InvalidMimeTypeError
from desktop_entry.identity import ProcessIdentity
from desktop_entry.types import EntryConfig, MimeType


def get_exec_line(identity: ProcessIdentity) -> str:
    """Build the Exec= line for the running executable.

    Args:
        identity: Process identity provider

    Returns:
        Line such as ``Exec=sh -c '/opt/app/bin/app %F'``

    Raises:
        PathResolutionError: If the executable cannot be resolved

    """
    return DESKTOP_EXEC_TEMPLATE.format(path=identity.executable())


def get_startup_class_line(identity: ProcessIdentity) -> str:
    """Build the StartupWMClass= line from the basename of argv[0].

    Raises:
        PathResolutionError: If the argument vector is unavailable

    """
    argv0 = identity.argv()[0]
    return DESKTOP_STARTUP_CLASS_PREFIX + posixpath.basename(
        argv0.rstrip("/")
    )


def render_desktop_entry(
    config: EntryConfig, exec_line: str, startup_class_line: str
) -> str:
    """Render the .desktop file body.

    Args:
        config: Entry configuration
        exec_line: Resolved Exec= line
        startup_class_line: Resolved StartupWMClass= line

    Returns:
        Lines joined with a newline, without a trailing newline

    """
    lines = [
        DESKTOP_SECTION_HEADER,
        f"Type={config.type}",
        f"Name={config.name}",
        exec_line,
        f"Icon={config.icon_path}",
        startup_class_line,
    ]

    if config.categories:
        lines.append(f"Categories={config.categories}")

    if config.comment:
        lines.append(f"Comment={config.comment}")

    if config.mime_type.type:
        lines.append(f"MimeType={config.mime_type.type}")

    return "\n".join(lines)


def build_desktop_entry(config: EntryConfig, identity: ProcessIdentity) -> str:
    """Resolve the fingerprint lines and render the entry in one step."""
    return render_desktop_entry(
        config,
        get_exec_line(identity),
        get_startup_class_line(identity),
    )


def render_mime_xml(mime: MimeType) -> str:
    """Render a shared-mime-info package document.

    Values are inserted verbatim, callers must pass XML-safe text.

    Args:
        mime: Mime type definition

    Returns:
        XML document without a trailing newline

    """
    lines = [
        MIME_XML_DECLARATION,
        f'<mime-info xmlns="{MIME_INFO_NAMESPACE}">',
        f'  <mime-type type="{mime.type}">',
    ]

    lines.extend(f'    <glob pattern="{p}"/>' for p in mime.patterns)

    if mime.comment:
        lines.append(f"    <comment>{mime.comment}</comment>")

    if mime.generic_icon:
        lines.append(f'    <generic-icon name="{mime.generic_icon}"/>')

    lines.extend(["  </mime-type>", "</mime-info>"])
    return "\n".join(lines)


def get_mime_subtype(mime_type: str) -> str:
    """Return the second '/'-separated segment of a mime type.

    Anything after a further '/' is dropped, so the package file always
    lands directly in ``packages/``.

    Raises:
        InvalidMimeTypeError: If the separator is missing or the subtype
            is empty

    """
    parts = mime_type.split("/")
    if len(parts) < 2 or not parts[1]:
        msg = "mime type must have the form 'type/subtype'"
        raise InvalidMimeTypeError(msg, target=mime_type)
    return parts[1]


def mime_package_path(mime: MimeType) -> Path:
    """Return ``<mime.path>/packages/<subtype>.xml``.

    Raises:
        InvalidMimeTypeError: If the mime type has no '/' separator

    """
    subtype = get_mime_subtype(mime.type)
    return (
        Path(mime.path or "")
        / MIME_PACKAGES_DIR
        / f"{subtype}{MIME_PACKAGE_EXTENSION}"
    )
