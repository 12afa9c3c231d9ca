"""
Display section handling for the sway config file.

Modules:
- section: Locate the marked display section and splice a new one in
- parser: Parse display blocks into DisplayConfig records
- serializer: Activate one record and render the section back to lines
- writer: Read the config file and replace it atomically
"""

from .section import locate_section, splice_section
from .parser import parse_section
from .serializer import activate, render_section
from .writer import read_config_lines, write_config_atomic

__all__ = [
    "locate_section",
    "splice_section",
    "parse_section",
    "activate",
    "render_section",
    "read_config_lines",
    "write_config_atomic",
]
