"""
Selection of the display configuration to activate.

Selectors implement ``choose(configs) -> Optional[int]`` and return a 0-based
index, or None when the user cancels.
"""

import logging
from typing import IO, Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape

from .errors import InvalidSelectionError
from .models import DisplayConfig

logger = logging.getLogger(__name__)

QUIT_KEY = "q"
PROMPT = "Enter the number of the configuration you want to activate, or 'q' to quit:"


class Selector(Protocol):
    """Chooses which display configuration to enable."""

    def choose(self, configs: Sequence[DisplayConfig]) -> Optional[int]:
        ...


def parse_selection(text: str, count: int) -> Optional[int]:
    """
    Convert menu input into a 0-based index.

    Args:
        text: Raw user input
        count: Number of menu entries

    Returns:
        0-based index, or None if the user asked to quit

    Raises:
        InvalidSelectionError: If input is not an integer in [1, count]
    """
    value = text.strip()
    if value.lower() == QUIT_KEY:
        return None

    # int() would also accept "+1", "1_0" and non-ASCII digits
    if not value.isascii() or not value.isdigit():
        raise InvalidSelectionError(value, count)

    choice = int(value)
    if not 1 <= choice <= count:
        raise InvalidSelectionError(value, count)

    return choice - 1


def print_menu(console: Console, configs: Sequence[DisplayConfig]) -> None:
    """Print the active configuration and the numbered list of choices."""
    active = next((config for config in configs if config.is_enabled), None)
    if active is not None:
        console.print(f"Current active configuration: [bold green]{escape(active.description)}[/bold green]")
    else:
        console.print("No configuration is currently enabled.")

    console.print("\nAvailable display configurations:")
    for number, config in enumerate(configs, start=1):
        style = "green" if config.is_enabled else "dim"
        console.print(
            f"{number}. {escape(config.description)} [{style}]\\[{config.status.value}][/{style}]"
        )


class PromptSelector:
    """Interactive numbered menu on the console."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        """
        Initialize prompt selector.

        Args:
            console: Rich console for output (default: stdout)
            stream: Input stream; standard input is used when omitted
        """
        self.console = console or Console(highlight=False)
        self.stream = stream

    def _read(self) -> Optional[str]:
        """Read one line of input, or None at end of input."""
        try:
            line = self.console.input("", stream=self.stream)
        except EOFError:
            return None
        # readline() returns "" only at end of stream
        if self.stream is not None and line == "":
            return None
        return line

    def choose(self, configs: Sequence[DisplayConfig]) -> Optional[int]:
        print_menu(self.console, configs)

        while True:
            self.console.print(PROMPT)
            line = self._read()
            if line is None:
                logger.info("End of input reached, treating as cancel")
                return None

            try:
                index = parse_selection(line, len(configs))
            except InvalidSelectionError as e:
                logger.debug(f"Rejected selection {e.value!r}")
                self.console.print(
                    f"[yellow]Invalid selection. Please enter a number between 1 and "
                    f"{len(configs)}, or 'q' to quit.[/yellow]"
                )
                continue

            if index is None:
                self.console.print("Exiting without making changes.")
            return index


class FixedSelector:
    """Non-interactive selection of a 1-based menu number."""

    def __init__(self, number: int):
        self.number = number

    def choose(self, configs: Sequence[DisplayConfig]) -> Optional[int]:
        """
        Return the configured choice.

        Raises:
            InvalidSelectionError: If the number is outside the menu range
        """
        return parse_selection(str(self.number), len(configs))
