"""
Locate and replace the marked display section of a sway config.

Markers are matched by substring containment; the first matching line of
each marker wins.
"""

from typing import List, Optional, Sequence

from ..errors import InvertedMarkersError, MarkerNotFoundError
from ..models import SectionBounds

DEFAULT_START_MARKER = "Display Start"
DEFAULT_END_MARKER = "Display End"


def _find_marker(lines: Sequence[str], marker: str) -> Optional[int]:
    for index, line in enumerate(lines):
        if marker in line:
            return index
    return None


def locate_section(
    lines: Sequence[str],
    start_marker: str = DEFAULT_START_MARKER,
    end_marker: str = DEFAULT_END_MARKER,
) -> SectionBounds:
    """
    Find the start and end marker lines.

    Args:
        lines: Full config file, one entry per line
        start_marker: Substring identifying the start marker line
        end_marker: Substring identifying the end marker line

    Returns:
        SectionBounds with the indices of both marker lines

    Raises:
        MarkerNotFoundError: If either marker is absent
        InvertedMarkersError: If the end marker does not follow the start marker
    """
    start = _find_marker(lines, start_marker)
    if start is None:
        raise MarkerNotFoundError(start_marker)

    end = _find_marker(lines, end_marker)
    if end is None:
        raise MarkerNotFoundError(end_marker)

    if end <= start:
        raise InvertedMarkersError(start_marker, end_marker, start, end)

    return SectionBounds(start=start, end=end)


def section_body(lines: Sequence[str], bounds: SectionBounds) -> List[str]:
    """Return the lines strictly between the two markers."""
    return list(lines[bounds.start + 1:bounds.end])


def splice_section(
    lines: Sequence[str],
    bounds: SectionBounds,
    new_section: Sequence[str],
) -> List[str]:
    """
    Replace the section body, copying both marker lines through unchanged.

    Args:
        lines: Original config file lines
        bounds: Marker positions within lines
        new_section: Replacement body lines

    Returns:
        New full line list
    """
    return list(lines[:bounds.start + 1]) + list(new_section) + list(lines[bounds.end:])
