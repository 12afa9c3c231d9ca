"""
Pytest configuration and fixtures for sway display switcher tests.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

# Add repository root to path for imports without installation
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from sway_display_switcher.errors import ReloadError
from sway_display_switcher.models import DisplayConfig
from sway_display_switcher.settings import SwitcherSettings


SAMPLE_CONFIG = """\
# Sway config
set $mod Mod4
font pango:monospace 10

### Display Start
# Description = Docked, Status = Enabled
output DP-1 res 2560x1440 pos 0 0
output eDP-1 disable
# Description = Laptop only, Status = Disabled
# output eDP-1 res 1920x1080 pos 0 0
# Description = Presentation, Status = disabled
##output HDMI-A-1 res 1280x720 pos 0 0
#    output eDP-1 res 1920x1080 pos 1280 0
### Display End

bindsym $mod+Return exec foot
"""


class RecordingReloader:
    """Fake reloader that counts calls."""

    def __init__(self):
        self.calls = 0

    def reload(self) -> None:
        self.calls += 1


class FailingReloader:
    """Fake reloader that always fails."""

    def __init__(self, reason: str = "sway is not running"):
        self.reason = reason
        self.calls = 0

    def reload(self) -> None:
        self.calls += 1
        raise ReloadError(self.reason)


class ScriptedSelector:
    """Selector returning a fixed answer and recording what it was shown."""

    def __init__(self, answer: Optional[int]):
        self.answer = answer
        self.seen: List[DisplayConfig] = []

    def choose(self, configs: Sequence[DisplayConfig]) -> Optional[int]:
        self.seen = list(configs)
        return self.answer


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by CLI runs so they never outlive a test."""
    yield
    logger = logging.getLogger("sway_display_switcher")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def sample_config_text() -> str:
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path: Path, sample_config_text: str) -> Path:
    """Sway config file containing a display section with three blocks."""
    path = tmp_path / "config"
    path.write_text(sample_config_text)
    return path


@pytest.fixture
def settings(config_file: Path) -> SwitcherSettings:
    return SwitcherSettings(source_path=config_file)


@pytest.fixture
def reloader() -> RecordingReloader:
    return RecordingReloader()


@pytest.fixture
def failing_reloader() -> FailingReloader:
    return FailingReloader()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep user settings and SWAY_DISPLAY_* variables out of tests."""
    monkeypatch.delenv("SWAY_DISPLAY_CONFIG", raising=False)
    monkeypatch.delenv("SWAY_DISPLAY_RELOAD", raising=False)
    monkeypatch.setattr(
        "sway_display_switcher.settings.SETTINGS_PATH",
        tmp_path / "no-such-settings.toml"
    )
