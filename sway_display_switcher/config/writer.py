"""
Config file I/O with atomic replacement.

The new content is fully written and synced to a temporary file before it
is renamed over the live config, so an interrupted write never leaves a
half-written sway config behind.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence

from ..errors import ConfigIOError

logger = logging.getLogger(__name__)


def read_config_lines(path: Path) -> List[str]:
    """
    Read a config file as a list of lines without line terminators.

    Raises:
        ConfigIOError: If the file cannot be read
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigIOError("read", path, str(e)) from e

    lines = split_lines(content)
    logger.debug(f"Read {len(lines)} lines from {path}")
    return lines


def split_lines(content: str) -> List[str]:
    r"""
    Split file content on "\n" only, dropping one trailing "\r" per line.

    Form feeds and other characters str.splitlines() treats as line
    boundaries stay inside their line.
    """
    if not content:
        return []
    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def render_lines(lines: Sequence[str]) -> str:
    """Join lines into file content, each terminated by a newline."""
    return "".join(f"{line}\n" for line in lines)


def write_config_atomic(path: Path, lines: Sequence[str], temp_path: Optional[Path] = None) -> None:
    """
    Write lines to path using temp file + rename.

    Args:
        path: Config file to replace
        lines: New file content, one entry per line
        temp_path: Fixed temporary file location; a sibling of path is
            created when omitted

    Raises:
        ConfigIOError: If writing or replacing fails; path is left untouched
    """
    content = render_lines(lines)

    try:
        if temp_path is None:
            fd, temp_name = tempfile.mkstemp(
                dir=path.parent, prefix=f".{path.name}-", suffix=".tmp"
            )
        else:
            temp_name = str(temp_path)
            fd = os.open(temp_name, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as e:
        raise ConfigIOError("write", temp_path or path.parent, str(e)) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())  # Ensure data is written to disk

        if path.exists():
            os.chmod(temp_name, stat.S_IMODE(path.stat().st_mode))
    except OSError as e:
        _discard(temp_name)
        raise ConfigIOError("write", temp_name, str(e)) from e

    try:
        # Atomic rename
        os.replace(temp_name, path)
    except OSError as e:
        _discard(temp_name)
        raise ConfigIOError("replace", path, str(e)) from e

    logger.info(f"Wrote {len(lines)} lines to {path}")


def _discard(temp_name: str) -> None:
    # Clean up temp file on error
    try:
        if Path(temp_name).exists():
            os.unlink(temp_name)
    except OSError as e:
        logger.warning(f"Could not remove temporary file {temp_name}: {e}")
