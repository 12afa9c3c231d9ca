"""
Display switch pipeline.

read lines -> locate section -> parse records -> select -> activate ->
render -> splice -> atomic write -> reload

Every fatal error is raised before the write, so a failed or cancelled run
leaves the config file untouched.
"""

import logging
from typing import List, Optional

from .config.parser import parse_section
from .config.section import locate_section, section_body, splice_section
from .config.serializer import activate, render_section
from .config.writer import read_config_lines, render_lines, write_config_atomic
from .errors import NoDisplayConfigsError, ReloadError
from .models import DisplayConfig, SwitchResult
from .reloader import Reloader
from .selector import Selector
from .settings import SwitcherSettings

logger = logging.getLogger(__name__)


class DisplaySwitcher:
    """Switches the active display block in a sway config file."""

    def __init__(
        self,
        settings: SwitcherSettings,
        selector: Selector,
        reloader: Optional[Reloader] = None
    ):
        """
        Initialize display switcher.

        Args:
            settings: Paths, markers and dry-run flag
            selector: Chooses the configuration to enable
            reloader: Reloads sway after a successful write (None: skip reload)
        """
        self.settings = settings
        self.selector = selector
        self.reloader = reloader

    def _load(self):
        lines = read_config_lines(self.settings.source_path)
        bounds = locate_section(lines, self.settings.start_marker, self.settings.end_marker)
        configs = parse_section(section_body(lines, bounds))
        if not configs:
            raise NoDisplayConfigsError()
        return lines, bounds, configs

    def list_configs(self) -> List[DisplayConfig]:
        """
        Parse the display configurations without changing anything.

        Raises:
            ConfigIOError: If the config cannot be read
            MarkerNotFoundError, InvertedMarkersError: If the section is missing
            NoDisplayConfigsError: If the section holds no blocks
        """
        _, _, configs = self._load()
        return configs

    def run(self) -> SwitchResult:
        """
        Run the full switch.

        Returns:
            SwitchResult describing what happened

        Raises:
            SwitcherError: On any fatal condition; the config is not modified
        """
        lines, bounds, configs = self._load()
        logger.info(
            f"Found {len(configs)} display configuration(s) in "
            f"{self.settings.source_path} (lines {bounds.start + 1}-{bounds.end + 1})"
        )

        index = self.selector.choose(configs)
        if index is None:
            logger.info("Selection cancelled, config left unchanged")
            return SwitchResult(cancelled=True)

        updated = activate(configs, index)
        selected = updated[index]
        new_lines = splice_section(lines, bounds, render_section(updated))
        changed = new_lines != lines

        if self.settings.dry_run:
            logger.info("Dry run, not writing config")
            return SwitchResult(selected=selected, changed=changed, rendered=render_lines(new_lines))

        write_config_atomic(self.settings.source_path, new_lines, self.settings.temp_path)
        logger.info(f"Activated display configuration: {selected.description}")

        result = SwitchResult(selected=selected, changed=changed, written=True)
        if self.reloader is None:
            logger.info("Reload skipped")
            return result

        try:
            self.reloader.reload()
            result.reloaded = True
        except ReloadError as e:
            logger.info(e.message)
            result.reload_error = e.message

        return result
