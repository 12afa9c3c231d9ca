"""Tests for sway reload mechanisms."""

import subprocess
import sys
import types
from unittest.mock import MagicMock, patch

import pytest

from sway_display_switcher.errors import ReloadError
from sway_display_switcher.reloader import CommandReloader, SwayIPCReloader, build_reloader
from sway_display_switcher.settings import ReloadMethod, SwitcherSettings


class TestCommandReloader:
    """Test reloading via an external command."""

    def test_default_command(self):
        assert CommandReloader().command == ["swaymsg", "reload"]

    def test_success(self):
        completed = subprocess.CompletedProcess(["swaymsg", "reload"], 0, stdout="", stderr="")
        with patch("sway_display_switcher.reloader.subprocess.run", return_value=completed) as run:
            CommandReloader().reload()

        assert run.call_args.args[0] == ["swaymsg", "reload"]

    def test_non_zero_exit(self):
        completed = subprocess.CompletedProcess(
            ["swaymsg", "reload"], 1, stdout="", stderr="Unable to retrieve socket path"
        )
        with patch("sway_display_switcher.reloader.subprocess.run", return_value=completed):
            with pytest.raises(ReloadError) as exc_info:
                CommandReloader().reload()

        assert "Unable to retrieve socket path" in exc_info.value.message

    def test_non_zero_exit_without_stderr(self):
        completed = subprocess.CompletedProcess(["swaymsg", "reload"], 2, stdout="", stderr="")
        with patch("sway_display_switcher.reloader.subprocess.run", return_value=completed):
            with pytest.raises(ReloadError, match="exit status 2"):
                CommandReloader().reload()

    def test_missing_binary(self):
        with pytest.raises(ReloadError, match="command not found"):
            CommandReloader(["definitely-not-a-real-binary-xyz", "reload"]).reload()

    def test_timeout(self):
        with patch(
            "sway_display_switcher.reloader.subprocess.run",
            side_effect=subprocess.TimeoutExpired(["swaymsg", "reload"], 10)
        ):
            with pytest.raises(ReloadError, match="timed out"):
                CommandReloader().reload()

    def test_real_command(self):
        CommandReloader([sys.executable, "-c", "pass"]).reload()


class TestSwayIPCReloader:
    """Test reloading over the sway IPC socket."""

    def _fake_i3ipc(self, connection):
        module = types.ModuleType("i3ipc")
        module.Connection = connection
        return module

    def test_success(self):
        reply = MagicMock(success=True, error=None)
        connection = MagicMock()
        connection.return_value.command.return_value = [reply]

        with patch.dict(sys.modules, {"i3ipc": self._fake_i3ipc(connection)}):
            SwayIPCReloader().reload()

        connection.return_value.command.assert_called_once_with("reload")

    def test_rejected(self):
        reply = MagicMock(success=False, error="Error on line 12")
        connection = MagicMock()
        connection.return_value.command.return_value = [reply]

        with patch.dict(sys.modules, {"i3ipc": self._fake_i3ipc(connection)}):
            with pytest.raises(ReloadError, match="Error on line 12"):
                SwayIPCReloader().reload()

    def test_connection_failure(self):
        connection = MagicMock(side_effect=Exception("Failed to retrieve the i3 or sway IPC socket path"))

        with patch.dict(sys.modules, {"i3ipc": self._fake_i3ipc(connection)}):
            with pytest.raises(ReloadError, match="IPC connection failed"):
                SwayIPCReloader().reload()


class TestBuildReloader:
    """Test reloader selection from settings."""

    def test_command(self):
        reloader = build_reloader(SwitcherSettings(reload_command=["i3-msg", "reload"]))

        assert isinstance(reloader, CommandReloader)
        assert reloader.command == ["i3-msg", "reload"]

    def test_ipc(self):
        assert isinstance(build_reloader(SwitcherSettings(reload_method=ReloadMethod.IPC)), SwayIPCReloader)

    def test_none(self):
        assert build_reloader(SwitcherSettings(reload_method="none")) is None
