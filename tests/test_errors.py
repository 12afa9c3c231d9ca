"""Tests for error types and models."""

import pytest

from sway_display_switcher.errors import ConfigIOError, ErrorCode, MarkerNotFoundError, ReloadError
from sway_display_switcher.models import DisplayConfig, DisplayStatus


class TestErrors:
    """Test structured error details."""

    def test_to_dict(self):
        error = MarkerNotFoundError("Display Start")

        assert error.to_dict() == {
            "code": ErrorCode.MARKER_NOT_FOUND.value,
            "message": "'Display Start' marker not found in the config file.",
            "suggestion": "Add a comment line containing 'Display Start' around the display blocks",
            "context": {"marker": "Display Start"},
        }

    def test_str_is_message(self):
        error = ReloadError("exit status 1")
        assert str(error) == "Failed to reload Sway configuration: exit status 1"

    def test_io_error_codes(self):
        assert ConfigIOError("read", "/x", "boom").code == ErrorCode.FILE_READ_ERROR
        assert ConfigIOError("replace", "/x", "boom").code == ErrorCode.FILE_REPLACE_ERROR


class TestDisplayConfig:
    """Test DisplayConfig validation."""

    def test_status_text_is_parsed(self):
        assert DisplayConfig(description="A", status="eNaBlEd").status == DisplayStatus.ENABLED
        assert DisplayConfig(description="A", status="off").status == DisplayStatus.DISABLED

    def test_description_is_trimmed(self):
        assert DisplayConfig(description="  A  ").description == "A"

    def test_blank_description_rejected(self):
        with pytest.raises(ValueError):
            DisplayConfig(description="   ")

    def test_defaults(self):
        config = DisplayConfig(description="A")

        assert config.status == DisplayStatus.DISABLED
        assert config.outputs == []
        assert not config.is_enabled
