"""
Sway Display Switcher CLI

Run with no arguments to pick the active display configuration from a
numbered menu, write it to ~/.config/sway/config and reload sway.

Usage:
    sway-display-switcher                  Interactive menu
    sway-display-switcher --select 2       Activate configuration 2
    sway-display-switcher --list           Show configurations and exit
    sway-display-switcher --dry-run        Print the new config instead of writing it

Exit codes:
    0 - Switched, listed, or cancelled with 'q'
    1 - Fatal error (missing markers, I/O failure, invalid settings)
  130 - Interrupted
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .errors import SwitcherError
from .logging_config import setup_logging
from .reloader import build_reloader
from .selector import FixedSelector, PromptSelector, print_menu
from .settings import ReloadMethod, load_settings
from .switcher import DisplaySwitcher

logger = logging.getLogger(__name__)


def _report_error(console: Console, error: SwitcherError, verbose: bool = False) -> None:
    message = error.message
    if verbose and error.suggestion:
        message = f"{message} ({error.suggestion})"
    console.print(f"[red]Error: {escape(message)}[/red]")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option('--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Sway config file to edit (default: ~/.config/sway/config)')
@click.option('--settings', 'settings_path', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help='Settings TOML file (default: ~/.config/sway-display-switcher/config.toml)')
@click.option('--select', 'selection', type=int, metavar='N',
              help='Activate configuration N without prompting')
@click.option('--list', 'list_only', is_flag=True, help='List configurations and exit')
@click.option('--dry-run', is_flag=True, help='Print the new config instead of writing it')
@click.option('--no-reload', is_flag=True, help="Don't reload sway after writing")
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging')
@click.option('--debug', is_flag=True, help='Debug logging')
@click.version_option(__version__, prog_name="sway-display-switcher")
def main(
    config_path: Optional[Path],
    settings_path: Optional[Path],
    selection: Optional[int],
    list_only: bool,
    dry_run: bool,
    no_reload: bool,
    verbose: bool,
    debug: bool,
):
    """Switch the active display configuration in the sway config."""
    setup_logging(verbose=verbose, debug=debug)
    console = Console(highlight=False, soft_wrap=True)
    err_console = Console(stderr=True, highlight=False, soft_wrap=True)

    try:
        settings = load_settings(
            settings_path,
            source_path=config_path,
            dry_run=True if dry_run else None,
            reload_method=ReloadMethod.NONE if no_reload else None,
        )

        if selection is not None:
            selector = FixedSelector(selection)
        else:
            selector = PromptSelector(console)

        switcher = DisplaySwitcher(settings, selector, build_reloader(settings))

        if list_only:
            print_menu(console, switcher.list_configs())
            sys.exit(0)

        result = switcher.run()

    except SwitcherError as e:
        logger.debug(f"Fatal error: {e.to_dict()}")
        _report_error(err_console, e, verbose=verbose or debug)
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\nInterrupted")
        sys.exit(130)

    if result.cancelled:
        sys.exit(0)

    description = escape(result.selected.description)

    if result.rendered is not None:
        console.print(result.rendered, end="", markup=False)
        console.print(f"[dim]Dry run: {description} would be activated, config not written[/dim]")
        sys.exit(0)

    console.print(f"✅ Activated display configuration: [bold]{description}[/bold]")
    if result.reloaded:
        console.print("Successfully reloaded Sway configuration.")
    elif result.reload_error:
        err_console.print(f"[yellow]⚠️  Warning: {escape(result.reload_error)}[/yellow]")

    sys.exit(0)


if __name__ == '__main__':
    main()
