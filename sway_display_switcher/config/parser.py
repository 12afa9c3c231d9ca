"""
Parser for display configuration blocks.

A block is a header line followed by its output directives:

    # Description = Docked, Status = Enabled
    output DP-1 res 2560x1440 pos 0 0
    # Description = Laptop only, Status = Disabled
    # output eDP-1 res 1920x1080

Directives of disabled blocks are commented out; the parser strips the
comment markers so every record holds bare directives.
"""

import logging
import re
from typing import Iterable, List, Optional

from ..models import DisplayConfig, DisplayStatus

logger = logging.getLogger(__name__)

# Description stops at the first comma, status at the next comma or line end.
HEADER_PATTERN = re.compile(r"# Description = ([^,]+), Status = ([^,]+)")


def parse_header(line: str) -> Optional[DisplayConfig]:
    """Return a new empty record if line is a block header, else None."""
    match = HEADER_PATTERN.search(line)
    if not match:
        return None
    description = match.group(1).strip()
    # A blank description would render as a line that no longer matches
    if not description:
        return None
    return DisplayConfig(
        description=description,
        status=DisplayStatus.parse(match.group(2)),
        outputs=[],
    )


def strip_comment(line: str) -> str:
    """Remove all leading '#' characters, then leading whitespace."""
    return line.lstrip("#").lstrip()


def parse_section(lines: Iterable[str]) -> List[DisplayConfig]:
    """
    Parse the lines between the section markers into display records.

    Lines before the first header are ignored, and lines that are empty once
    comment markers are removed are dropped.

    Args:
        lines: Section body, markers excluded

    Returns:
        Records in the order they appear
    """
    configs: List[DisplayConfig] = []
    current: Optional[DisplayConfig] = None

    for line_number, line in enumerate(lines, start=1):
        header = parse_header(line)
        if header is not None:
            if current is not None:
                configs.append(current)
            current = header
            continue

        if current is None:
            if line.strip():
                logger.debug(f"Ignoring line {line_number} before first header: {line!r}")
            continue

        directive = strip_comment(line)
        if directive:
            current.outputs.append(directive)

    if current is not None:
        configs.append(current)

    logger.debug(f"Parsed {len(configs)} display configuration(s)")
    return configs
