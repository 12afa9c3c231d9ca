"""
Settings for the display switcher.

Settings are layered, later sources winning:
- built-in defaults
- ~/.config/sway-display-switcher/config.toml (optional)
- SWAY_DISPLAY_CONFIG / SWAY_DISPLAY_RELOAD environment variables
- explicit overrides (command-line options)
"""

import logging
import os
import tomllib
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .config.section import DEFAULT_END_MARKER, DEFAULT_START_MARKER
from .errors import SettingsError

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_PATH = Path("~/.config/sway/config")
SETTINGS_PATH = Path.home() / ".config" / "sway-display-switcher" / "config.toml"

ENV_SOURCE_PATH = "SWAY_DISPLAY_CONFIG"
ENV_RELOAD_METHOD = "SWAY_DISPLAY_RELOAD"


class ReloadMethod(str, Enum):
    """How sway is told to reload after the config is written."""
    COMMAND = "command"
    IPC = "ipc"
    NONE = "none"


class SwitcherSettings(BaseModel):
    """Paths, markers and reload behaviour for a switch run."""

    source_path: Path = Field(DEFAULT_SOURCE_PATH, validate_default=True, description="Sway config file to edit")
    temp_path: Optional[Path] = Field(None, description="Fixed temp file (default: sibling of source_path)")
    start_marker: str = Field(DEFAULT_START_MARKER, description="Substring marking the section start")
    end_marker: str = Field(DEFAULT_END_MARKER, description="Substring marking the section end")
    reload_method: ReloadMethod = Field(ReloadMethod.COMMAND, description="Reload mechanism")
    reload_command: List[str] = Field(
        default_factory=lambda: ["swaymsg", "reload"],
        min_length=1,
        description="Command run when reload_method is 'command'"
    )
    dry_run: bool = Field(False, description="Render the new config without writing it")

    @field_validator('source_path', 'temp_path')
    @classmethod
    def expand_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Expand ~ in paths."""
        if v is None:
            return v
        return v.expanduser()

    @field_validator('start_marker', 'end_marker')
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Markers cannot be blank; a blank marker would match every line."""
        if not v.strip():
            raise ValueError("Marker cannot be empty")
        return v


def _read_settings_file(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(str(path), str(e)) from e
    except OSError as e:
        raise SettingsError(str(path), str(e)) from e

    logger.debug(f"Loaded settings from {path}")
    # Accept either top-level keys or a [switcher] table
    table = data.get("switcher", data)
    if not isinstance(table, dict):
        raise SettingsError(str(path), "'switcher' must be a table")
    return dict(table)


def _read_environment(environ: Mapping[str, str]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    if environ.get(ENV_SOURCE_PATH):
        values["source_path"] = environ[ENV_SOURCE_PATH]
    if environ.get(ENV_RELOAD_METHOD):
        values["reload_method"] = environ[ENV_RELOAD_METHOD].strip().lower()
    return values


def load_settings(
    settings_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
    **overrides: Any,
) -> SwitcherSettings:
    """
    Build settings from the settings file, environment and overrides.

    Args:
        settings_path: TOML settings file; the default location is used when
            omitted and silently skipped if it does not exist
        environ: Environment mapping (defaults to os.environ)
        **overrides: Explicit values; None values are ignored

    Returns:
        Validated SwitcherSettings

    Raises:
        SettingsError: If the file is unreadable or a value is invalid
    """
    values: Dict[str, Any] = {}
    source = "defaults"

    if settings_path is not None:
        values.update(_read_settings_file(settings_path))
        source = str(settings_path)
    elif SETTINGS_PATH.exists():
        values.update(_read_settings_file(SETTINGS_PATH))
        source = str(SETTINGS_PATH)

    env_values = _read_environment(os.environ if environ is None else environ)
    if env_values:
        values.update(env_values)
        source = f"{source} + environment"

    values.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return SwitcherSettings(**values)
    except ValidationError as e:
        errors = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise SettingsError(source, errors) from e
