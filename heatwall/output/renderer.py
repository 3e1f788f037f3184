"""
Terminal renderer for a computed GridLayout.

Draws rows top to bottom (newest first), one text line per weekday,
with optional year headers, month labels, day labels and a legend.
"""

from datetime import date
from typing import List, Optional

from heatwall.grid.colors import EMPTY_COLOR
from heatwall.grid.columns import CELL_GAP
from heatwall.grid.layout import make_cell_id
from heatwall.grid.months import label_for_column
from heatwall.models.entities import DayCell, GridLayout
from heatwall.output.formatter import bold, dim, truecolor

CELL_GLYPH = '■'       # filled square
SELECTED_GLYPH = '◆'   # diamond
OUTSIDE_GLYPH = '·'    # middle dot
COLUMN_WIDTH = 2

DAY_LABELS = ['', 'Mon', '', 'Wed', '', 'Fri', '']
DAY_LABEL_WIDTH = 4


def _cell_text(cell: DayCell, selected: Optional[date], color_enabled: bool) -> str:
    if cell.color == EMPTY_COLOR:
        return dim(OUTSIDE_GLYPH, color_enabled)
    glyph = SELECTED_GLYPH if selected is not None and cell.date == selected else CELL_GLYPH
    return truecolor(glyph, cell.color, color_enabled)


def _padding_columns(left_padding: float, cell_size: float) -> int:
    step = cell_size + CELL_GAP
    if step <= 0:
        return 0
    return int(round(left_padding / step))


def _month_line(labels: List[Optional[str]], indent: int) -> str:
    width = indent + len(labels) * COLUMN_WIDTH + 3
    buf = [' '] * width
    for col, label in enumerate(labels):
        if not label:
            continue
        start = indent + col * COLUMN_WIDTH
        for offset, ch in enumerate(label):
            buf[start + offset] = ch
    return ''.join(buf).rstrip()


def render_grid(
    layout: GridLayout,
    description: Optional[str] = None,
    selected: Optional[date] = None,
    show_day_labels: bool = True,
    color_enabled: bool = True,
) -> str:
    """Render the layout as multi-line text."""
    if not layout.rows:
        return "No weeks to display."

    lines = []
    label_width = DAY_LABEL_WIDTH if show_day_labels else 0
    cells = {cell.cell_id: cell for cell in layout.cells}

    for row in layout.rows:
        pad = _padding_columns(row.left_padding, layout.cell_size) * COLUMN_WIDTH

        if row.year is not None:
            lines.append(bold(str(row.year), color_enabled))

        if layout.month_labels:
            labels = [
                label_for_column(week, index, layout.month_labels)
                for week, index in zip(row.weeks, row.week_indices)
            ]
            if any(labels):
                lines.append(_month_line(labels, label_width + pad))

        for weekday in range(7):
            parts = []
            if show_day_labels:
                parts.append(DAY_LABELS[weekday].ljust(DAY_LABEL_WIDTH))
            parts.append(' ' * pad)
            for week, week_index in zip(row.weeks, row.week_indices):
                if week[weekday] is None:
                    parts.append('  ')
                    continue
                cell = cells[make_cell_id(week_index, weekday)]
                parts.append(_cell_text(cell, selected, color_enabled) + ' ')
            lines.append(''.join(parts).rstrip())

        lines.append('')

    if description:
        lines.append(description)

    return '\n'.join(lines).rstrip('\n')


def render_legend(colors: List[str], color_enabled: bool = True) -> str:
    """'Less ■ ■ ■ ■ More' using the reachable palette colors."""
    reachable = colors[:-1] if len(colors) > 1 else colors
    swatches = ' '.join(truecolor(CELL_GLYPH, c, color_enabled) for c in reachable)
    return f"Less {swatches} More"
