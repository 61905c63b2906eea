"""Display names, abbreviations and colors of the timing phases."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from har_timings.timings import Phase


class PhaseStyle(BaseModel):
    """How one phase is labelled and colored."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    abbreviation: str = Field(min_length=1, max_length=1)
    style: str


Palette = Mapping[Phase, PhaseStyle]

DEFAULT_PALETTE: Palette = MappingProxyType(
    {
        Phase.BLOCKED: PhaseStyle(display_name="blocked", abbreviation="b", style="white on black"),
        Phase.DNS: PhaseStyle(
            display_name="dns resolution", abbreviation="d", style="black on magenta"
        ),
        Phase.CONNECT: PhaseStyle(display_name="connecting", abbreviation="c", style="white on red"),
        Phase.SSL: PhaseStyle(
            display_name="tls setup", abbreviation="t", style="black on bright_cyan"
        ),
        Phase.SEND: PhaseStyle(display_name="sending", abbreviation="s", style="black on yellow"),
        Phase.WAIT: PhaseStyle(display_name="waiting", abbreviation="w", style="black on green"),
        Phase.RECEIVE: PhaseStyle(
            display_name="receiving", abbreviation="r", style="black on blue"
        ),
    }
)
