"""Proportional timing bar: character layout and styled rendering."""

from __future__ import annotations

import logging
import math

from pydantic import BaseModel, ConfigDict
from rich.text import Text

from har_timings.palette import DEFAULT_PALETTE, Palette
from har_timings.timings import PHASE_ORDER, Phase, TimingSet

logger = logging.getLogger(__name__)

DEFAULT_MAX_BAR_WIDTH = 80
DEFAULT_DELIMITER_WIDTH = 1
FILLER_CHAR = "-"
DELIMITER_CHAR = "|"


class BarSegment(BaseModel):
    """Layout of one phase inside the bar."""

    model_config = ConfigDict(frozen=True)

    phase: Phase
    abbreviation: str
    duration: float
    percent: float
    width: int
    midpoint: int
    run: str
    delimiter: str

    @property
    def text(self) -> str:
        return self.run + self.delimiter


class BarLayout(BaseModel):
    """Segments of one bar in canonical phase order."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[BarSegment, ...] = ()
    total: float = 0.0
    available_width: int = 0

    @property
    def width(self) -> int:
        """Rendered character count, delimiters included."""
        return sum(len(segment.text) for segment in self.segments)


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class BarLayoutEngine:
    """Turn a :class:`TimingSet` into integer segment widths under a fixed budget.

    Each phase gets ``round_half_up(share * available)`` filler characters,
    where ``available`` is the bar width left after one delimiter per phase.
    Rounding several segments up can overshoot the budget; the overshoot is
    taken back from the rounded-up segments with the smallest fractional
    part, later phases first on ties.
    """

    def __init__(
        self,
        *,
        max_bar_width: int = DEFAULT_MAX_BAR_WIDTH,
        delimiter_width: int = DEFAULT_DELIMITER_WIDTH,
        palette: Palette = DEFAULT_PALETTE,
        filler: str = FILLER_CHAR,
        delimiter: str = DELIMITER_CHAR,
    ) -> None:
        if max_bar_width < len(PHASE_ORDER) * delimiter_width:
            raise ValueError(
                f"max_bar_width={max_bar_width} cannot hold {len(PHASE_ORDER)} delimiters "
                f"of width {delimiter_width}"
            )
        self._max_bar_width = max_bar_width
        self._delimiter_width = delimiter_width
        self._palette = palette
        self._filler = filler
        self._delimiter = delimiter

    def layout(self, timing_set: TimingSet) -> BarLayout:
        if timing_set.is_degenerate or timing_set.total <= 0:
            return BarLayout()

        count = len(timing_set.phases)
        available = self._max_bar_width - count * self._delimiter_width
        fractions = [m.duration / timing_set.total for m in timing_set.phases]
        raw_widths = [fraction * available for fraction in fractions]
        widths = self._fit_widths(raw_widths, available)

        segments: list[BarSegment] = []
        for measurement, fraction, width in zip(timing_set.phases, fractions, widths, strict=True):
            abbreviation = self._palette[measurement.phase].abbreviation
            midpoint = math.ceil(width / 2)
            segments.append(
                BarSegment(
                    phase=measurement.phase,
                    abbreviation=abbreviation,
                    duration=measurement.duration,
                    percent=round(fraction * 100, 2),
                    width=width,
                    midpoint=midpoint,
                    run=self._run(width, midpoint, abbreviation),
                    delimiter=self._delimiter * self._delimiter_width,
                )
            )
        return BarLayout(
            segments=tuple(segments), total=timing_set.total, available_width=available
        )

    def _fit_widths(self, raw_widths: list[float], available: int) -> list[int]:
        widths = [max(0, round_half_up(raw)) for raw in raw_widths]
        overshoot = sum(widths) - available
        if overshoot <= 0:
            return widths

        logger.debug(f"Trimming {overshoot} character(s) of rounding overshoot")
        rounded_up = sorted(
            (i for i, raw in enumerate(raw_widths) if widths[i] > raw),
            key=lambda i: (raw_widths[i] - math.floor(raw_widths[i]), -i),
        )
        for i in rounded_up[:overshoot]:
            widths[i] -= 1
        return widths

    def _run(self, width: int, midpoint: int, abbreviation: str) -> str:
        # The label sits ``midpoint`` characters from the right end of the run.
        chars = [self._filler] * width
        if width > 0:
            chars[width - midpoint] = abbreviation
        return "".join(chars)


class BarRenderer:
    """Color each bar segment with its phase style and join them into one line."""

    def __init__(self, palette: Palette = DEFAULT_PALETTE) -> None:
        self._palette = palette

    def render(self, layout: BarLayout) -> Text:
        bar = Text(no_wrap=True)
        for segment in layout.segments:
            bar.append(segment.text, style=self._palette[segment.phase].style)
        return bar
