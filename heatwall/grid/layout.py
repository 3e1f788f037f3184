"""
Grid recomputation.

recompute() is a pure function from GridInputs to GridLayout: same
inputs, same layout. GridController is the thin observer on top of it
that tracks inputs, container measurements and the current selection.
"""

import logging
from dataclasses import replace
from datetime import date
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from heatwall.grid.colors import EMPTY_COLOR, effective_thresholds, get_color_for_value
from heatwall.grid.columns import WidthTracker, fit_columns
from heatwall.grid.dates import DateWindow, build_date_grid, resolve_num_days
from heatwall.grid.months import place_month_labels
from heatwall.grid.rows import apply_row_alignment, partition_rows
from heatwall.grid.selection import PressCallback, SelectionController
from heatwall.models.entities import DataPoint, DayCell, GridInputs, GridLayout, Row
from heatwall.output.formatter import format_number
from heatwall.utils.timestamps import date_key, format_display_date, local_today

logger = logging.getLogger(__name__)

HINT_TEXT = "Tap a cell to see details"
NO_DATA_TEXT = "No data"


def build_data_map(data_points: Iterable[DataPoint]) -> Dict[str, DataPoint]:
    """Index points by ISO day key. Later points for the same day win."""
    data_map: Dict[str, DataPoint] = {}
    for dp in data_points:
        key = date_key(dp.date)
        if key:
            data_map[key] = dp
    return data_map


def make_cell_id(week_index: int, weekday: int) -> str:
    """Stable identifier of a cell: absolute week index x weekday."""
    return f"activity-cell-{week_index * 7 + weekday}"


def unit_label(unit) -> str:
    if isinstance(unit, Enum):
        return str(unit.value)
    return str(unit) if unit is not None else ''


def build_cells(
    rows: List[Row],
    window: DateWindow,
    data_map: Dict[str, DataPoint],
    thresholds: List[float],
    colors: List[str],
    interactive: bool,
) -> List[DayCell]:
    """
    Resolve value, color and interactivity for every rendered day.

    Empty slots of a year-split half get no cell, so each
    (week_index, weekday) pair maps to exactly one cell.
    """
    cells = []
    for row in rows:
        for week, week_index in zip(row.weeks, row.week_indices):
            for weekday, day in enumerate(week):
                if day is None:
                    continue
                in_window = window.contains(day)
                if in_window:
                    dp = data_map.get(day.isoformat())
                    value = dp.value if dp else 0
                    color = get_color_for_value(value, thresholds, colors)
                else:
                    value = 0
                    color = EMPTY_COLOR
                cells.append(DayCell(
                    cell_id=make_cell_id(week_index, weekday),
                    date=day,
                    value=value,
                    color=color,
                    interactive=interactive and in_window,
                    week_index=week_index,
                    weekday=weekday,
                ))
    return cells


def describe_total(cells: List[DayCell], data_map: Dict[str, DataPoint], window: DateWindow) -> str:
    """Sum of visible values with the unit of the most recent visible point."""
    visible: Dict[date, DataPoint] = {}
    for cell in cells:
        if not window.contains(cell.date):
            continue
        dp = data_map.get(cell.date.isoformat())
        if dp is not None:
            visible[cell.date] = dp
    if not visible:
        return NO_DATA_TEXT

    total = sum(dp.value for dp in visible.values())
    unit = unit_label(visible[max(visible)].unit)
    return f"{format_number(total)} {unit}" if unit else format_number(total)


def describe_selection(day: date, data_map: Dict[str, DataPoint], fallback_unit: str = '') -> str:
    """'<value> <unit> on <date>' for the selected day."""
    dp = data_map.get(day.isoformat())
    value = dp.value if dp else 0
    unit = unit_label(dp.unit) if dp else fallback_unit
    parts = [format_number(value)]
    if unit:
        parts.append(unit)
    parts.extend(['on', format_display_date(day)])
    return ' '.join(parts)


def default_description(
    inputs: GridInputs,
    cells: List[DayCell],
    data_map: Dict[str, DataPoint],
    window: DateWindow,
) -> Optional[str]:
    if not inputs.show_description:
        return None
    if inputs.show_hint:
        return HINT_TEXT
    return describe_total(cells, data_map, window)


def recompute(inputs: GridInputs) -> GridLayout:
    """Compute the renderable grid for one input tuple."""
    today = inputs.today or local_today()
    num_days = resolve_num_days(inputs.num_days, inputs.container_width, inputs.data_points, today)
    window = build_date_grid(num_days, today)

    max_columns, cell_size = fit_columns(
        inputs.container_width, inputs.show_day_labels, len(window.weeks)
    )

    rows = partition_rows(
        window.weeks, max_columns,
        enable_multi_row_layout=inputs.enable_multi_row_layout,
        split_by_year=inputs.split_by_year,
    )
    apply_row_alignment(
        rows, max_columns, cell_size,
        enable_multi_row_layout=inputs.enable_multi_row_layout,
        split_by_year=inputs.split_by_year,
    )

    data_map = build_data_map(inputs.data_points)
    thresholds = effective_thresholds(
        inputs.thresholds, [dp.value for dp in data_map.values()], inputs.colors
    )
    cells = build_cells(rows, window, data_map, thresholds, inputs.colors, inputs.interactive)

    month_labels = {}
    if inputs.show_month_labels:
        month_labels = place_month_labels(window.weeks, window.display_start, window.display_end)

    return GridLayout(
        rows=rows,
        month_labels=month_labels,
        cell_size=cell_size,
        max_columns=max_columns,
        weeks=window.weeks,
        display_start=window.display_start,
        display_end=window.display_end,
        effective_thresholds=thresholds,
        cells=cells,
        default_description=default_description(inputs, cells, data_map, window),
    )


LayoutListener = Callable[[GridLayout], None]


class GridController:
    """
    Observer layer around recompute().

    Holds the latest inputs; any tracked input change triggers a fresh
    recomputation and notifies subscribers. The selection is cleared
    whenever num_days changes or the visible date range moves.
    """

    def __init__(self, inputs: Optional[GridInputs] = None, on_press: Optional[PressCallback] = None):
        self.inputs = inputs or GridInputs()
        self.width_tracker = WidthTracker(self.inputs.container_width)
        self.selection = SelectionController(on_press)
        self._listeners: List[LayoutListener] = []
        self._data_map = build_data_map(self.inputs.data_points)
        self.layout = recompute(self.inputs)

    def subscribe(self, listener: LayoutListener) -> Callable[[], None]:
        """Register a listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)
        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.layout)

    def update(self, **changes) -> GridLayout:
        """Apply input changes; recompute only when something actually changed."""
        new_inputs = replace(self.inputs, **changes)
        if new_inputs == self.inputs:
            return self.layout

        old_range = (self.layout.display_start, self.layout.display_end)
        num_days_changed = new_inputs.num_days != self.inputs.num_days

        self.inputs = new_inputs
        self.width_tracker.width = new_inputs.container_width
        self._data_map = build_data_map(new_inputs.data_points)
        self.layout = recompute(new_inputs)

        # "fit" and "all" can move the visible range without num_days changing
        if num_days_changed or (self.layout.display_start, self.layout.display_end) != old_range:
            self.selection.reset()
        self._notify()
        return self.layout

    def measure(self, width: float) -> bool:
        """
        Report a container width measurement.

        Changes of 1px or less are ignored to break measure/layout loops.
        """
        if not self.width_tracker.update(width):
            logger.debug("Ignoring width %s (last accepted %s)", width, self.inputs.container_width)
            return False
        self.update(container_width=self.width_tracker.width)
        return True

    @property
    def selected(self) -> Optional[date]:
        return self.selection.selected

    def press(self, day: Optional[date]) -> Optional[date]:
        """Press the cell for a day; returns the new selection."""
        before = self.selection.selected
        dp = self._data_map.get(day.isoformat()) if day else None
        after = self.selection.press(
            day,
            dp.value if dp else 0,
            self.layout.display_start,
            self.layout.display_end,
            interactive=self.inputs.interactive,
        )
        if after != before:
            self._notify()
        return after

    def press_cell(self, cell_id: str) -> Optional[date]:
        """Press a rendered cell by its identifier."""
        cell = self.layout.get_cell(cell_id)
        if cell is None or not cell.interactive:
            return self.selection.selected
        return self.press(cell.date)

    @property
    def description(self) -> Optional[str]:
        """Live description text: the selection overrides the default."""
        if not self.inputs.show_description:
            return None
        selected = self.selection.selected
        if selected is None:
            return self.layout.default_description
        return describe_selection(selected, self._data_map, self._latest_unit())

    def _latest_unit(self) -> str:
        if not self._data_map:
            return ''
        latest = self._data_map[max(self._data_map)]
        return unit_label(latest.unit)
