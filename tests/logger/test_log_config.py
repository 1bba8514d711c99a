"""Tests for logger configuration."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from desktop_entry.exceptions import DesktopEntryError
from desktop_entry.logger import (
    ConfigurationError,
    HybridConsoleFormatter,
    clear_logger_state,
    get_logger,
    setup_logging,
    update_logger_from_config,
)
from desktop_entry.logger.config import load_log_settings
from desktop_entry.logger.handlers import build_file_handler
from desktop_entry.logger.state import get_state


@pytest.fixture
def fresh_logging():
    """Rebuild the logging pipeline around a test."""
    clear_logger_state()
    yield
    clear_logger_state()


def test_load_log_settings_with_env_var(monkeypatch: MonkeyPatch) -> None:
    """Test load_log_settings enables file logging when the env var is set."""
    monkeypatch.setenv("DESKTOP_ENTRY_LOG_DIR", "/tmp/pytest-logs")
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_LEVEL", raising=False)

    console_level, file_level, log_path = load_log_settings()

    assert console_level == "WARNING"
    assert file_level == "INFO"
    assert log_path == Path("/tmp/pytest-logs") / "desktop-entry.log"


def test_load_log_settings_without_env_var(monkeypatch: MonkeyPatch) -> None:
    """File logging is off by default."""
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)
    monkeypatch.setenv("DESKTOP_ENTRY_LOG_LEVEL", "debug")

    console_level, _, log_path = load_log_settings()

    assert console_level == "DEBUG"
    assert log_path is None


def test_get_logger_returns_package_child(fresh_logging) -> None:
    logger = get_logger("desktop_entry.some.module")
    assert logger.name == "desktop_entry.some.module"
    assert not get_state().root_initialized
    assert get_state().queue_listener is None


def test_records_reach_host_logging_before_setup(
    fresh_logging, caplog
) -> None:
    """An embedding application sees package records through propagation."""
    caplog.set_level(logging.INFO)

    get_logger("desktop_entry.reconciler").info("Created icon: %s", "x.png")

    root = logging.getLogger("desktop_entry")
    assert root.propagate is True
    assert any(isinstance(h, logging.NullHandler) for h in root.handlers)
    assert "Created icon: x.png" in caplog.text


def test_setup_logging_builds_pipeline_once(
    fresh_logging, monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)

    setup_logging()
    listener = get_state().queue_listener
    setup_logging()

    assert get_state().root_initialized
    assert get_state().queue_listener is listener
    assert logging.getLogger("desktop_entry").propagate is False


def test_setup_uses_console_handler_only(
    fresh_logging, monkeypatch: MonkeyPatch
) -> None:
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)
    setup_logging()

    handlers = get_state().queue_listener.handlers
    assert len(handlers) == 1
    assert isinstance(handlers[0].formatter, HybridConsoleFormatter)


def test_update_from_settings_adds_file_handler(
    fresh_logging, monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)
    setup_logging()
    log_file = tmp_path / "logs" / "de.log"
    config_dir = tmp_path / "conf"
    config_dir.mkdir()
    (config_dir / "settings.conf").write_text(
        f"[DEFAULT]\nconsole_log_level = ERROR\nlog_file = {log_file}\n"
    )

    update_logger_from_config(config_dir)

    handlers = get_state().queue_listener.handlers
    file_handlers = [h for h in handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert log_file.parent.is_dir()
    console = [h for h in handlers if h not in file_handlers][0]
    assert console.level == logging.ERROR


def test_update_keeps_levels_on_invalid_settings(
    fresh_logging, monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_LEVEL", raising=False)
    monkeypatch.delenv("DESKTOP_ENTRY_LOG_DIR", raising=False)
    setup_logging()
    (tmp_path / "settings.conf").write_text("[DEFAULT]\nlog_level = LOUD\n")

    update_logger_from_config(tmp_path)

    handler = get_state().queue_listener.handlers[0]
    assert handler.level == logging.WARNING


def test_hybrid_formatter_info_is_plain() -> None:
    formatter = HybridConsoleFormatter("%(levelname)s - %(message)s")
    info = logging.LogRecord("x", logging.INFO, "", 0, "hello", None, None)
    warning = logging.LogRecord(
        "x", logging.WARNING, "", 0, "careful", None, None
    )

    assert formatter.format(info) == "hello"
    assert "careful" in formatter.format(warning)
    assert "WARNING" in formatter.format(warning)
    # Level name restored after colouring
    assert warning.levelname == "WARNING"


def test_unwritable_log_file_raises(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")

    with pytest.raises(ConfigurationError) as exc_info:
        build_file_handler(blocker / "logs" / "de.log", "INFO")

    assert isinstance(exc_info.value, DesktopEntryError)
    assert "Logging setup failed" in str(exc_info.value)
