"""Aligned duration/percentage table for the phases of one exchange."""

from __future__ import annotations

from har_timings.bar import BarLayout
from har_timings.layout import Align, Row, cell, row
from har_timings.palette import DEFAULT_PALETTE, Palette

DEFAULT_LABEL_WIDTH = 19
TOTAL_LABEL = "total time"


class SummaryTableBuilder:
    """Build one row per included phase plus a leading ``total time`` row.

    Durations and percentages are read from the bar layout so both views show
    the same numbers. Every duration string, the total included, is padded to
    the width of the longest one.
    """

    def __init__(
        self, palette: Palette = DEFAULT_PALETTE, *, label_width: int = DEFAULT_LABEL_WIDTH
    ) -> None:
        self._palette = palette
        self._label_width = label_width

    def build(self, layout: BarLayout) -> tuple[Row, ...]:
        if not layout.segments:
            return ()

        total = f"{layout.total:.2f}"
        durations = [f"{segment.duration:.2f}" for segment in layout.segments]
        digits = max(len(value) for value in (total, *durations))

        rows = [self._row(TOTAL_LABEL, f": {total.rjust(digits)}ms")]
        for segment, duration in zip(layout.segments, durations, strict=True):
            style = self._palette[segment.phase]
            rows.append(
                self._row(
                    f"{style.display_name} ({style.abbreviation})",
                    f": {duration.rjust(digits)}ms ({segment.percent:.2f}%)",
                )
            )
        return tuple(rows)

    def _row(self, label: str, value: str) -> Row:
        return row(cell(label, width=self._label_width, align=Align.RIGHT), cell(value))
