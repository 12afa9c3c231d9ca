"""Entry point for sway-display-switcher when run as a module."""

from .cli import main

if __name__ == "__main__":
    main()
