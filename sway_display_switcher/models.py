"""
Pydantic data models for sway display switching.

Defines the display configuration records parsed from the marked section
of the sway config, and the result of a switch run.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class DisplayStatus(str, Enum):
    """Whether a display configuration block is active."""
    ENABLED = "Enabled"
    DISABLED = "Disabled"

    @classmethod
    def parse(cls, value: str) -> "DisplayStatus":
        """Parse status text case-insensitively.

        Anything other than "enabled" is treated as disabled, so a typo in a
        header can never activate a second block.
        """
        if value.strip().lower() == cls.ENABLED.value.lower():
            return cls.ENABLED
        return cls.DISABLED


class DisplayConfig(BaseModel):
    """One display configuration block: header plus output directives."""

    description: str = Field(..., description="Human-readable label from the header line")
    status: DisplayStatus = Field(DisplayStatus.DISABLED, description="Enabled/Disabled state")
    outputs: List[str] = Field(default_factory=list, description="Directive lines, comment markers stripped")

    @field_validator('description')
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Trim surrounding whitespace; the description cannot be blank."""
        v = v.strip()
        if not v:
            raise ValueError("Description cannot be empty")
        return v

    @field_validator('status', mode='before')
    @classmethod
    def validate_status(cls, v):
        """Accept status text in any case."""
        if isinstance(v, str) and not isinstance(v, DisplayStatus):
            return DisplayStatus.parse(v)
        return v

    @property
    def is_enabled(self) -> bool:
        return self.status == DisplayStatus.ENABLED


class SectionBounds(BaseModel):
    """Line indices of the start and end marker lines."""

    start: int = Field(..., ge=0, description="Index of the start marker line")
    end: int = Field(..., ge=0, description="Index of the end marker line")

    @model_validator(mode='after')
    def validate_order(self):
        """End marker must come after the start marker."""
        if self.end <= self.start:
            raise ValueError("end marker must follow start marker")
        return self


class SwitchResult(BaseModel):
    """Outcome of a display switch run."""

    cancelled: bool = False
    selected: Optional[DisplayConfig] = None
    changed: bool = False
    written: bool = False
    reloaded: bool = False
    reload_error: Optional[str] = None
    rendered: Optional[str] = Field(None, description="New file content (dry run only)")
