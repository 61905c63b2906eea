"""Row-based text layout.

Report sections are built as tuples of immutable :class:`Row` descriptors.
:func:`flatten_rows` joins them once into a rich renderable and
:func:`render_to_string` captures that renderable as terminal text.
"""

from __future__ import annotations

import io
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.text import Text


class Align(str, Enum):
    """Horizontal alignment of a cell inside its width."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Cell(BaseModel):
    """One piece of text with optional width, alignment and padding.

    ``padding`` is ``(top, right, bottom, left)``.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    text: Text
    width: int | None = None
    align: Align = Align.LEFT
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: object) -> object:
        if isinstance(value, str):
            return Text(value)
        return value


class Row(BaseModel):
    """Cells rendered side by side on one line."""

    model_config = ConfigDict(frozen=True)

    cells: tuple[Cell, ...] = ()
    border: bool = False


def cell(
    text: str | Text,
    *,
    width: int | None = None,
    align: Align = Align.LEFT,
    padding: tuple[int, int, int, int] = (0, 0, 0, 0),
) -> Cell:
    return Cell(text=text, width=width, align=align, padding=padding)


def row(*cells: Cell | str | Text, border: bool = False) -> Row:
    return Row(
        cells=tuple(c if isinstance(c, Cell) else cell(c) for c in cells),
        border=border,
    )


BLANK_ROW = Row(cells=(Cell(text=Text()),))


def _fit(cell_: Cell) -> Text:
    text = cell_.text.copy()
    if cell_.width is None:
        return text
    excess = cell_.width - text.cell_len
    if excess <= 0:
        return text
    if cell_.align is Align.RIGHT:
        text.pad_left(excess)
    elif cell_.align is Align.CENTER:
        text.pad_left(excess // 2)
        text.pad_right(excess - excess // 2)
    else:
        text.pad_right(excess)
    return text


def _row_lines(row_: Row) -> list[Text]:
    line = Text()
    for c in row_.cells:
        _top, right, _bottom, left = c.padding
        line.append(" " * left)
        line.append_text(_fit(c))
        line.append(" " * right)
    top = max((c.padding[0] for c in row_.cells), default=0)
    bottom = max((c.padding[2] for c in row_.cells), default=0)
    return [*(Text() for _ in range(top)), line, *(Text() for _ in range(bottom))]


PANEL_FRAME_WIDTH = 4


def required_width(rows: Iterable[Row]) -> int:
    """Widest line the rows produce, panel frames included."""
    widest = 0
    for row_ in rows:
        frame = PANEL_FRAME_WIDTH if row_.border else 0
        for line in _row_lines(row_):
            widest = max(widest, line.cell_len + frame)
    return widest


def flatten_rows(rows: Iterable[Row]) -> Group:
    """Join rows into one renderable; bordered rows become panels."""
    renderables: list[RenderableType] = []
    pending: list[Text] = []

    def _flush() -> None:
        if pending:
            renderables.append(Text("\n", no_wrap=True, overflow="ignore").join(pending))
            pending.clear()

    for row_ in rows:
        if row_.border:
            _flush()
            renderables.append(Panel(Text("\n").join(_row_lines(row_)), expand=False))
        else:
            pending.extend(_row_lines(row_))
    _flush()
    return Group(*renderables)


def render_to_string(renderable: RenderableType, *, width: int, color: bool = True) -> str:
    """Capture ``renderable`` as text, with ANSI styling when ``color`` is set.

    Lines are never cropped; callers size ``width`` with :func:`required_width`
    so panels do not wrap.
    """
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=color,
        no_color=not color,
        color_system="standard" if color else None,
        highlight=False,
        emoji=False,
        legacy_windows=False,
    )
    console.print(renderable, crop=False)
    return buffer.getvalue()
