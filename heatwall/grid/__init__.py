"""Grid package - date skeleton, column fit, coloring, rows, labels, selection."""

from .dates import build_date_grid, resolve_num_days, DateWindow, NUM_DAYS_FIT, NUM_DAYS_ALL
from .columns import fit_columns, calculate_max_week_columns, calculate_cell_size, WidthTracker
from .colors import get_color_for_value, effective_thresholds
from .rows import partition_rows, split_week_by_year, apply_row_alignment
from .months import place_month_labels
from .selection import SelectionController, next_selection
from .layout import recompute, GridController

__all__ = [
    "build_date_grid",
    "resolve_num_days",
    "DateWindow",
    "NUM_DAYS_FIT",
    "NUM_DAYS_ALL",
    "fit_columns",
    "calculate_max_week_columns",
    "calculate_cell_size",
    "WidthTracker",
    "get_color_for_value",
    "effective_thresholds",
    "partition_rows",
    "split_week_by_year",
    "apply_row_alignment",
    "place_month_labels",
    "SelectionController",
    "next_selection",
    "recompute",
    "GridController",
]
