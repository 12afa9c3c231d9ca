"""
Sway configuration reload.

Reloaders implement ``reload()`` and raise ReloadError on failure. A failed
reload never undoes the config write.
"""

import logging
import subprocess
from typing import List, Optional, Protocol, Sequence

from .errors import ReloadError
from .settings import ReloadMethod, SwitcherSettings

logger = logging.getLogger(__name__)

RELOAD_TIMEOUT = 10.0


class Reloader(Protocol):
    """Tells sway to re-read its configuration."""

    def reload(self) -> None:
        ...


class CommandReloader:
    """Reload by running an external command (``swaymsg reload``)."""

    def __init__(self, command: Optional[Sequence[str]] = None, timeout: float = RELOAD_TIMEOUT):
        self.command: List[str] = list(command or ["swaymsg", "reload"])
        self.timeout = timeout

    def reload(self) -> None:
        logger.debug(f"Running reload command: {' '.join(self.command)}")
        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                text=True,
                timeout=self.timeout,
                check=False
            )
        except FileNotFoundError:
            raise ReloadError(f"command not found: {self.command[0]}")
        except subprocess.TimeoutExpired:
            raise ReloadError(f"'{' '.join(self.command)}' timed out after {self.timeout:g}s")
        except OSError as e:
            raise ReloadError(str(e)) from e

        if result.returncode != 0:
            reason = result.stderr.strip() or f"exit status {result.returncode}"
            raise ReloadError(reason)

        logger.info("Sway config reloaded successfully")


class SwayIPCReloader:
    """Reload through the sway IPC socket."""

    def reload(self) -> None:
        from i3ipc import Connection

        try:
            replies = Connection().command("reload")
        except Exception as e:
            raise ReloadError(f"Sway IPC connection failed: {e}") from e

        for reply in replies:
            if not reply.success:
                raise ReloadError(reply.error or "sway rejected the reload command")

        logger.info("Sway config reloaded successfully")


def build_reloader(settings: SwitcherSettings) -> Optional[Reloader]:
    """Create the reloader selected by settings.reload_method (None to skip)."""
    if settings.reload_method == ReloadMethod.IPC:
        return SwayIPCReloader()
    if settings.reload_method == ReloadMethod.NONE:
        return None
    return CommandReloader(settings.reload_command)
