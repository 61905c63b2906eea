"""Per-entry terminal report: header, timing breakdown and size details."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor

from rich.filesize import decimal
from rich.text import Text

from har_timings.bar import BarLayoutEngine, BarRenderer
from har_timings.config import RenderSettings
from har_timings.layout import (
    BLANK_ROW,
    Align,
    Row,
    cell,
    flatten_rows,
    render_to_string,
    required_width,
    row,
)
from har_timings.models import HarEntry, HarRequest, HarResponse
from har_timings.summary import SummaryTableBuilder
from har_timings.timings import normalize_timings

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]

HTTP_STATUS_SUCCESS_MIN = 200
HTTP_STATUS_REDIRECT_MIN = 300
HTTP_STATUS_CLIENT_ERROR_MIN = 400
HTTP_STATUS_ERROR_MAX = 600

SECTION_INDENT = (0, 0, 0, 2)
UNKNOWN_ENCODING = "<<unknown>>"


def status_style(status: int) -> str:
    if HTTP_STATUS_SUCCESS_MIN <= status < HTTP_STATUS_REDIRECT_MIN:
        return "green"
    if HTTP_STATUS_CLIENT_ERROR_MIN <= status < HTTP_STATUS_ERROR_MAX:
        return "red"
    return "yellow"


def format_bytes(size: float) -> str:
    """Human readable size in decimal units, unknown (negative) sizes count as 0."""
    return decimal(max(round(size), 0))


# =============================================================================
# Sections
# =============================================================================


def _header_rows(index: int, entry: HarEntry, settings: RenderSettings) -> tuple[Row, ...]:
    status = entry.response.status
    line = Text()
    if not settings.is_compact:
        line.append(f"{index + 1}. ")
    line.append(str(status), style=status_style(status))
    line.append(f" {entry.request.method} {entry.request.url}")

    if settings.is_compact:
        line.append(f" ({entry.time:.2f}ms)")
        return (row(line),)
    return (row(cell(line, padding=(0, 0, 1, 0)), border=True),)


def _timing_rows(entry: HarEntry, settings: RenderSettings) -> tuple[Row, ...]:
    timing_set = normalize_timings(entry.timings.model_dump())
    layout = BarLayoutEngine(
        max_bar_width=settings.max_bar_width,
        delimiter_width=settings.delimiter_width,
        palette=settings.palette,
    ).layout(timing_set)
    bar = BarRenderer(settings.palette).render(layout)

    rows = [row(cell(bar, padding=(0, 0, 1, 0)))]
    if not settings.is_compact:
        summary = SummaryTableBuilder(settings.palette, label_width=settings.label_width)
        rows.extend(summary.build(layout))
    return tuple(rows)


def _size_rows(headers_size: float, body_size: float, settings: RenderSettings) -> tuple[Row, ...]:
    sizes = {
        "headers": format_bytes(headers_size),
        "body": format_bytes(body_size),
        "total": format_bytes(max(headers_size, 0) + max(body_size, 0)),
    }
    digits = max(len(value) for value in sizes.values())
    return (
        row(cell("size:", padding=SECTION_INDENT)),
        *(
            row(
                cell(label, width=settings.size_label_width, align=Align.RIGHT),
                cell(f": {value.rjust(digits)}"),
            )
            for label, value in sizes.items()
        ),
    )


def _request_rows(request: HarRequest, settings: RenderSettings) -> tuple[Row, ...]:
    return (row("request:"), *_size_rows(request.headers_size, request.body_size, settings))


def _compression_text(response: HarResponse) -> str:
    content = response.content
    if content is None or not content.compression:
        return "compression: none"

    original = content.size
    saved = original - response.body_size
    pct = (saved / original * 100) if original > 0 else 0.0
    encoding = response.header("content-encoding") or UNKNOWN_ENCODING
    return f"compression: {encoding}, saved {decimal(round(saved))} ({pct:.2f}%)"


def _response_rows(response: HarResponse, settings: RenderSettings) -> tuple[Row, ...]:
    return (
        row("response:"),
        row(cell(_compression_text(response), padding=SECTION_INDENT)),
        *_size_rows(response.headers_size, response.body_size, settings),
    )


# =============================================================================
# Entry points
# =============================================================================


def build_entry_rows(index: int, entry: HarEntry, settings: RenderSettings) -> tuple[Row, ...]:
    """Rows of one entry's report, in display order."""
    rows = [*_header_rows(index, entry, settings), *_timing_rows(entry, settings)]
    if not settings.is_compact:
        rows.extend(
            [
                BLANK_ROW,
                *_request_rows(entry.request, settings),
                BLANK_ROW,
                *_response_rows(entry.response, settings),
                BLANK_ROW,
            ]
        )
    return tuple(rows)


def render_entry(index: int, entry: HarEntry, settings: RenderSettings | None = None) -> str:
    """Render one entry's report as text."""
    settings = settings or RenderSettings()
    rows = build_entry_rows(index, entry, settings)
    width = max(settings.console_width, required_width(rows))
    return render_to_string(flatten_rows(rows), width=width, color=settings.color)


def print_entry(
    index: int, entry: HarEntry, settings: RenderSettings | None, sink: Sink
) -> None:
    sink(render_entry(index, entry, settings))


def print_entries(
    entries: Iterable[HarEntry],
    settings: RenderSettings | None,
    sink: Sink,
    *,
    jobs: int = 1,
) -> int:
    """Render every entry and deliver the blocks to ``sink`` in source order.

    With ``jobs > 1`` entries are rendered on worker threads; delivery still
    happens on the calling thread, one block at a time, in input order.
    Returns the number of entries delivered.
    """
    settings = settings or RenderSettings()
    indexed = list(enumerate(entries))
    logger.debug(f"Rendering {len(indexed)} entries with {jobs} job(s)")

    if jobs <= 1:
        for index, entry in indexed:
            print_entry(index, entry, settings, sink)
        return len(indexed)

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        blocks = executor.map(lambda item: render_entry(item[0], item[1], settings), indexed)
        for block in blocks:
            sink(block)
    return len(indexed)
