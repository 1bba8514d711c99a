"""Tests for the CLI argument parser."""

from pathlib import Path
from unittest.mock import patch

import pytest

from desktop_entry.cli.parser import CLIParser


@pytest.fixture
def cli_parser() -> CLIParser:
    return CLIParser()


def test_create_command_basic(cli_parser):
    with patch(
        "sys.argv",
        [
            "desktop-entry",
            "create",
            "--name",
            "MyApp",
            "--app-version",
            "1.0.0",
            "--icon",
            "icon.png",
            "--exec",
            "/usr/bin/myapp",
        ],
    ):
        args = cli_parser.parse_args()

    assert args.command == "create"
    assert args.name == "MyApp"
    assert args.app_version == "1.0.0"
    assert args.icon == Path("icon.png")
    assert args.exec_path == "/usr/bin/myapp"
    assert args.perm is None
    assert not args.no_update
    assert not args.json
    assert args.mime_type == ""
    assert args.mime_pattern == []


def test_create_command_with_options(cli_parser):
    args = cli_parser.parse_args(
        [
            "create",
            "--name=MyApp",
            "--app-version=2",
            "--icon=icon.png",
            "--exec=/usr/bin/myapp",
            "--wm-class=MyAppWindow",
            "--perm=700",
            "--no-update",
            "--mime-type=application/x-myapp",
            "--mime-path=~/.local/share/mime",
            "--mime-pattern=*.myapp",
            "--mime-pattern=*.myp",
            "--json",
        ]
    )

    assert args.wm_class == "MyAppWindow"
    assert args.perm == 0o700
    assert args.no_update
    assert args.mime_pattern == ["*.myapp", "*.myp"]
    assert args.json


def test_invalid_perm_exits(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(
            [
                "create",
                "--name=a",
                "--app-version=1",
                "--icon=i.png",
                "--exec=/bin/a",
                "--perm=rwx",
            ]
        )


_CREATE_ARGS = [
    "create",
    "--name=MyApp",
    "--app-version=1.0.0",
    "--icon=icon.png",
    "--exec=/usr/bin/myapp",
]


def test_mime_type_without_mime_path_exits(cli_parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli_parser.parse_args([*_CREATE_ARGS, "--mime-type=text/x-myapp"])

    assert exc_info.value.code == 2
    assert "--mime-type requires --mime-path" in capsys.readouterr().err


def test_mime_path_without_mime_type_exits(cli_parser, capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli_parser.parse_args([*_CREATE_ARGS, "--mime-path=/tmp/mime"])

    assert exc_info.value.code == 2
    assert "--mime-path requires --mime-type" in capsys.readouterr().err

def test_status_command(cli_parser):
    args = cli_parser.parse_args(
        ["status", "--name", "MyApp", "--exec", "/usr/bin/myapp"]
    )
    assert args.command == "status"
    assert args.apps_path is None


def test_config_requires_action(cli_parser):
    with pytest.raises(SystemExit):
        cli_parser.parse_args(["config"])


def test_config_init_force(cli_parser):
    args = cli_parser.parse_args(
        ["--config-dir", "/tmp/x", "config", "--init", "--force"]
    )
    assert args.init
    assert args.force
    assert args.config_dir == Path("/tmp/x")


def test_version_flag(cli_parser):
    args = cli_parser.parse_args(["--version"])
    assert args.version
    assert args.command is None
