"""Tests for process identity providers."""

import sys

import pytest

from desktop_entry.exceptions import PathResolutionError
from desktop_entry.identity import (
    CurrentProcess,
    StaticIdentity,
    resolve_executable,
)


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "bin" / "myapp"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\n")
    path.chmod(0o755)
    return path


class TestResolveExecutable:
    def test_resolves_symlinks(self, program, tmp_path):
        link = tmp_path / "link"
        link.symlink_to(program)
        assert resolve_executable(str(link)) == str(program.resolve())

    def test_missing_path_raises(self, tmp_path):
        with pytest.raises(PathResolutionError) as exc_info:
            resolve_executable(str(tmp_path / "missing"))
        assert exc_info.value.target == str(tmp_path / "missing")


class TestCurrentProcess:
    """Test executable resolution for the live process."""

    def test_appimage_takes_precedence(self, program, monkeypatch):
        monkeypatch.setenv("APPIMAGE", str(program))
        monkeypatch.setattr(sys, "argv", ["/somewhere/else"])
        assert CurrentProcess().executable() == str(program.resolve())

    def test_frozen_uses_sys_executable(self, program, monkeypatch):
        monkeypatch.delenv("APPIMAGE", raising=False)
        monkeypatch.setattr(sys, "frozen", True, raising=False)
        monkeypatch.setattr(sys, "executable", str(program))
        assert CurrentProcess().executable() == str(program.resolve())

    def test_argv0_path(self, program, monkeypatch):
        monkeypatch.delenv("APPIMAGE", raising=False)
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", [str(program), "--flag"])

        process = CurrentProcess()
        assert process.executable() == str(program.resolve())
        assert process.argv() == [str(program), "--flag"]

    def test_bare_argv0_is_looked_up_on_path(self, program, monkeypatch):
        monkeypatch.delenv("APPIMAGE", raising=False)
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setenv("PATH", str(program.parent))
        monkeypatch.setattr(sys, "argv", ["myapp"])
        assert CurrentProcess().executable() == str(program.resolve())

    def test_interactive_session_raises(self, monkeypatch):
        monkeypatch.delenv("APPIMAGE", raising=False)
        monkeypatch.delattr(sys, "frozen", raising=False)
        monkeypatch.setattr(sys, "argv", ["-c"])
        with pytest.raises(PathResolutionError):
            CurrentProcess().executable()

    def test_empty_argv_raises(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", [])
        with pytest.raises(PathResolutionError):
            CurrentProcess().argv()

    def test_system_is_lower_case(self, monkeypatch):
        monkeypatch.setattr(
            "desktop_entry.identity.platform.system", lambda: "Linux"
        )
        assert CurrentProcess().system() == "linux"


class TestStaticIdentity:
    def test_returns_configured_values(self):
        identity = StaticIdentity("/usr/bin/app", ("app", "-v"), "freebsd")
        assert identity.executable() == "/usr/bin/app"
        assert identity.argv() == ["app", "-v"]
        assert identity.system() == "freebsd"

    def test_default_system_is_linux(self):
        assert StaticIdentity("/usr/bin/app", ("app",)).system() == "linux"
