"""
Responsive column fitting.

Works out how many week columns fit in a container and how large each
cell may grow to fill the leftover width.
"""

import math
from typing import Optional, Tuple

CELL_SIZE = 12
CELL_GAP = 5
LABEL_COLUMN_WIDTH = 32
MAX_CELL_SIZE = 18

# Column cap used before the container has been measured.
UNMEASURED_COLUMN_CAP = 12

# Width changes at or below this many pixels are ignored.
WIDTH_HYSTERESIS = 1

# Compact widget sizing
CONTAINER_PADDING = 32  # 16px left + 16px right
MIN_DAYS = 7
MAX_DAYS = 365


def _is_measured(container_width: Optional[float]) -> bool:
    return bool(container_width) and container_width > 0


def grid_width(container_width: float, show_day_labels: bool) -> float:
    """Width left for week columns once the day label column is taken out."""
    label_width = LABEL_COLUMN_WIDTH if show_day_labels else 0
    label_gap = CELL_GAP if show_day_labels else 0
    return container_width - label_width - label_gap


def calculate_max_week_columns(
    container_width: float,
    show_day_labels: bool,
    week_count: int,
) -> int:
    """
    Number of week columns that fit in the container.

    Falls back to min(week_count, 12) while the width is unmeasured.
    Never returns less than 1.
    """
    if not _is_measured(container_width):
        return max(min(week_count, UNMEASURED_COLUMN_CAP), 1)

    column_width = CELL_SIZE + CELL_GAP
    available = grid_width(container_width, show_day_labels)
    return max(1, math.floor((available + CELL_GAP) / column_width))


def calculate_cell_size(
    container_width: float,
    show_day_labels: bool,
    max_columns: int,
) -> float:
    """Grow cells to fill the row, bounded to [CELL_SIZE, MAX_CELL_SIZE]."""
    if not _is_measured(container_width):
        return CELL_SIZE

    columns = max(max_columns, 1)
    available_for_cells = grid_width(container_width, show_day_labels) - (columns - 1) * CELL_GAP
    auto_size = available_for_cells / columns
    if not math.isfinite(auto_size):
        return CELL_SIZE
    return min(max(auto_size, CELL_SIZE), MAX_CELL_SIZE)


def fit_columns(
    container_width: float,
    show_day_labels: bool,
    week_count: int,
) -> Tuple[int, float]:
    """Return (max_week_columns, effective_cell_size)."""
    max_columns = calculate_max_week_columns(container_width, show_day_labels, week_count)
    return max_columns, calculate_cell_size(container_width, show_day_labels, max_columns)


def calculate_num_days_from_width(container_width: float) -> int:
    """Days that fill a single row of a padded widget container."""
    if not _is_measured(container_width):
        return MIN_DAYS

    available = container_width - CONTAINER_PADDING
    column_width = CELL_SIZE + CELL_GAP
    max_columns = math.floor((available + CELL_GAP) / column_width)

    return min(max(MIN_DAYS, max_columns * 7), MAX_DAYS)


class WidthTracker:
    """Accepts container width measurements only when they move by more than 1px."""

    def __init__(self, width: float = 0):
        self.width = width

    def update(self, width: float) -> bool:
        """Record a measurement. Returns True when it was accepted."""
        if width is None or not math.isfinite(width):
            return False
        if abs(width - self.width) > WIDTH_HYSTERESIS:
            self.width = width
            return True
        return False
