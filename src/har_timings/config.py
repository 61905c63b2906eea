"""Render settings."""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from har_timings.bar import DEFAULT_DELIMITER_WIDTH, DEFAULT_MAX_BAR_WIDTH
from har_timings.palette import DEFAULT_PALETTE, Palette
from har_timings.summary import DEFAULT_LABEL_WIDTH
from har_timings.timings import PHASE_ORDER


class DisplayStyle(str, Enum):
    """Report layouts."""

    STANDARD = "standard"
    COMPACT = "compact"


class RenderSettings(BaseModel):
    """Options shared by every entry of one report."""

    model_config = ConfigDict(frozen=True)

    style: DisplayStyle = DisplayStyle.STANDARD
    max_bar_width: int = Field(DEFAULT_MAX_BAR_WIDTH, ge=1)
    delimiter_width: int = Field(DEFAULT_DELIMITER_WIDTH, ge=0)
    label_width: int = Field(DEFAULT_LABEL_WIDTH, ge=0)
    size_label_width: int = Field(11, ge=0)
    console_width: int = Field(200, ge=20)
    color: bool = True
    # A mappingproxy cannot be deep-copied as a plain default.
    palette: Palette = Field(default_factory=lambda: DEFAULT_PALETTE)

    @field_validator("palette")
    @classmethod
    def _complete_read_only_palette(cls, value: Palette) -> Palette:
        missing = [phase.value for phase in PHASE_ORDER if phase not in value]
        if missing:
            raise ValueError(f"palette is missing phases: {', '.join(missing)}")
        return MappingProxyType(dict(value))

    @model_validator(mode="after")
    def _bar_fits_delimiters(self) -> RenderSettings:
        if self.max_bar_width < len(PHASE_ORDER) * self.delimiter_width:
            raise ValueError("max_bar_width must leave room for one delimiter per phase")
        return self

    @property
    def is_compact(self) -> bool:
        return self.style is DisplayStyle.COMPACT
