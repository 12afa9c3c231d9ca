"""
Error handling for sway display switching.

Every fatal condition raises a SwitcherError subclass before any
destructive step runs; the CLI turns them into a one-line diagnostic.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class ErrorCode(Enum):
    """
    Error codes for the display switcher.

    - 1100-1199: Configuration section errors
    - 1200-1299: File system errors
    - 1300-1399: Selection errors
    - 1400-1499: Sway reload errors
    - 1500-1599: Settings errors
    """

    # Configuration section errors (1100-1199)
    MARKER_NOT_FOUND = 1100
    INVERTED_MARKERS = 1101
    NO_DISPLAY_CONFIGS = 1102

    # File system errors (1200-1299)
    FILE_READ_ERROR = 1201
    FILE_WRITE_ERROR = 1202
    FILE_REPLACE_ERROR = 1203

    # Selection errors (1300-1399)
    INVALID_SELECTION = 1300

    # Sway reload errors (1400-1499)
    SWAY_RELOAD_FAILED = 1402

    # Settings errors (1500-1599)
    INVALID_SETTINGS = 1500


class SwitcherError(Exception):
    """Base exception for display switcher errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize switcher error.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            suggestion: Suggested recovery action
            context: Additional context for debugging
        """
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert error to dictionary.

        Returns:
            Error dictionary with code, message, suggestion, and context
        """
        result = {
            "code": self.code.value,
            "message": self.message
        }

        if self.suggestion:
            result["suggestion"] = self.suggestion

        if self.context:
            result["context"] = self.context

        return result


class MarkerNotFoundError(SwitcherError):
    """A section marker is missing from the config file."""

    def __init__(self, marker: str):
        super().__init__(
            code=ErrorCode.MARKER_NOT_FOUND,
            message=f"'{marker}' marker not found in the config file.",
            suggestion=f"Add a comment line containing '{marker}' around the display blocks",
            context={"marker": marker}
        )


class InvertedMarkersError(SwitcherError):
    """The end marker appears before the start marker."""

    def __init__(self, start_marker: str, end_marker: str, start_line: int, end_line: int):
        super().__init__(
            code=ErrorCode.INVERTED_MARKERS,
            message=(
                f"'{end_marker}' marker (line {end_line + 1}) must come after "
                f"'{start_marker}' marker (line {start_line + 1})."
            ),
            suggestion="Move the end marker below the display blocks",
            context={"start_line": start_line, "end_line": end_line}
        )


class NoDisplayConfigsError(SwitcherError):
    """The marked section holds no display configuration blocks."""

    def __init__(self):
        super().__init__(
            code=ErrorCode.NO_DISPLAY_CONFIGS,
            message="No display configurations found between the markers.",
            suggestion="Add header lines like '# Description = Laptop, Status = Enabled'"
        )


class InvalidSelectionError(SwitcherError, ValueError):
    """User input is not a number within the menu range."""

    def __init__(self, value: str, count: int):
        super().__init__(
            code=ErrorCode.INVALID_SELECTION,
            message=(
                f"Invalid selection '{value}'. Please enter a number between 1 and "
                f"{count}, or 'q' to quit."
            ),
            context={"value": value, "count": count}
        )
        self.value = value
        self.count = count


class ConfigIOError(SwitcherError):
    """Reading, writing or replacing the config file failed."""

    _CODES = {
        "read": ErrorCode.FILE_READ_ERROR,
        "write": ErrorCode.FILE_WRITE_ERROR,
        "replace": ErrorCode.FILE_REPLACE_ERROR,
    }

    def __init__(self, operation: str, path: Union[str, Path], reason: str):
        """
        Initialize config I/O error.

        Args:
            operation: "read", "write" or "replace"
            path: File the operation targeted
            reason: Reason for failure
        """
        super().__init__(
            code=self._CODES.get(operation, ErrorCode.FILE_WRITE_ERROR),
            message=f"Failed to {operation} {path}: {reason}",
            suggestion="Check the file exists and its directory is writable",
            context={"operation": operation, "path": str(path), "reason": reason}
        )
        self.operation = operation
        self.path = Path(path)


class ReloadError(SwitcherError):
    """Sway did not accept the reload request."""

    def __init__(self, reason: str):
        super().__init__(
            code=ErrorCode.SWAY_RELOAD_FAILED,
            message=f"Failed to reload Sway configuration: {reason}",
            suggestion="Ensure Sway is running, then run 'swaymsg reload'",
            context={"reason": reason}
        )


class SettingsError(SwitcherError):
    """Switcher settings could not be loaded or are invalid."""

    def __init__(self, source: str, reason: str):
        super().__init__(
            code=ErrorCode.INVALID_SETTINGS,
            message=f"Invalid settings from {source}: {reason}",
            suggestion="Check the settings file and SWAY_DISPLAY_* environment variables",
            context={"source": source, "reason": reason}
        )
