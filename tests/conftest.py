"""Pytest configuration and fixtures for desktop-entry tests."""

import logging
import os
from pathlib import Path

import pytest

from desktop_entry import StaticIdentity, new
from desktop_entry.types import EntryConfig

EXECUTABLE = "/opt/myapp/bin/myapp"
ICON_DATA = b"\x89PNG\r\n\x1a\nicon"


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("desktop_entry"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests away from the real ~/.config/desktop-entry."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("DESKTOP_ENTRY_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def umask_022():
    """Pin the process umask so permission checks are predictable."""
    previous = os.umask(0o022)
    yield
    os.umask(previous)


class RecordingRunner:
    """CommandRunner double recording every command."""

    def __init__(self, result: bool = True) -> None:
        self.result = result
        self.calls: list[list[str]] = []

    def run(self, args: list[str]) -> bool:
        self.calls.append(list(args))
        return self.result


class RecordingRelauncher:
    """Relauncher double that never spawns or exits."""

    def __init__(self) -> None:
        self.calls = []

    def relaunch(self, identity) -> None:
        self.calls.append(identity)


@pytest.fixture
def identity() -> StaticIdentity:
    """Identity of a program installed outside the temp directory."""
    return StaticIdentity(EXECUTABLE, (EXECUTABLE, "--flag"))


@pytest.fixture
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture
def failing_runner() -> RecordingRunner:
    """Runner whose commands all report failure."""
    return RecordingRunner(result=False)


@pytest.fixture
def icon_data() -> bytes:
    return ICON_DATA


@pytest.fixture
def relauncher() -> RecordingRelauncher:
    return RecordingRelauncher()


@pytest.fixture
def entry_config(tmp_path: Path) -> EntryConfig:
    """EntryConfig writing into the test's temporary home."""
    return new(
        "MyApp",
        "1.0.0",
        ICON_DATA,
        categories="Utility;",
        comment="My test application",
        apps_path=tmp_path / "applications",
        icons_path=tmp_path / "icons",
        perm=0o755,
    )
