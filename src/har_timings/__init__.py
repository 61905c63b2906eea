"""Terminal timing breakdowns for HAR entries."""

from har_timings.bar import BarLayout, BarLayoutEngine, BarRenderer, BarSegment
from har_timings.config import DisplayStyle, RenderSettings
from har_timings.models import Har, HarEntry, HarLoadError, load_har
from har_timings.palette import DEFAULT_PALETTE, PhaseStyle
from har_timings.report import print_entries, print_entry, render_entry
from har_timings.summary import SummaryTableBuilder
from har_timings.timings import PHASE_ORDER, Phase, PhaseMeasurement, TimingSet, normalize_timings

__all__ = [
    "DEFAULT_PALETTE",
    "PHASE_ORDER",
    "BarLayout",
    "BarLayoutEngine",
    "BarRenderer",
    "BarSegment",
    "DisplayStyle",
    "Har",
    "HarEntry",
    "HarLoadError",
    "Phase",
    "PhaseMeasurement",
    "PhaseStyle",
    "RenderSettings",
    "SummaryTableBuilder",
    "TimingSet",
    "load_har",
    "normalize_timings",
    "print_entries",
    "print_entry",
    "render_entry",
]
