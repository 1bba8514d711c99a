"""Tests for exception classes."""

import pytest

from desktop_entry.exceptions import (
    DesktopEntryError,
    FilesystemError,
    InvalidConfigurationError,
    InvalidMimeTypeError,
    PathResolutionError,
    ResolutionError,
)


class TestDesktopEntryError:
    """Test DesktopEntryError class."""

    def test_basic_initialization(self):
        error = DesktopEntryError("Test error")
        assert error.message == "Test error"
        assert error.target is None
        assert str(error) == "Desktop entry operation failed: Test error"

    def test_initialization_with_target(self):
        error = DesktopEntryError("boom", target="myapp")
        assert str(error) == (
            "Desktop entry operation failed for 'myapp': boom"
        )


class TestPathResolutionError:
    def test_prefix(self):
        error = PathResolutionError("gone", target="/usr/bin/app")
        assert str(error) == "Path resolution failed for '/usr/bin/app': gone"

    def test_alias(self):
        assert ResolutionError is PathResolutionError


class TestFilesystemError:
    """Test FilesystemError class."""

    def test_stage_in_message(self):
        error = FilesystemError(
            "permission denied", stage="icon-creation", target="/x.png"
        )
        assert error.stage == "icon-creation"
        assert str(error) == (
            "Filesystem error during icon-creation for '/x.png': "
            "permission denied"
        )

    def test_raise_and_catch_as_base(self):
        with pytest.raises(DesktopEntryError) as exc_info:
            raise FilesystemError("nope", stage="paths-creation")

        assert exc_info.value.stage == "paths-creation"


class TestInvalidMimeTypeError:
    def test_is_configuration_error(self):
        error = InvalidMimeTypeError("missing '/'", target="text")
        assert isinstance(error, InvalidConfigurationError)
        assert str(error) == "Invalid mime type for 'text': missing '/'"
