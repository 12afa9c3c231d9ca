"""
Sway Display Switcher

Switches the active display output block in a sway configuration file
and reloads sway.
"""

__version__ = "1.0.0"
__author__ = "NixOS Configuration Team"
