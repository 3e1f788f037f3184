"""
Week skeleton construction.

Turns (num_days, today) into a padded, Sunday-aligned list of week
columns. The skeleton is independent of the data being drawn.
"""

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional

from heatwall.grid.columns import calculate_num_days_from_width
from heatwall.models.entities import DataPoint, NumDaysSetting, WeekColumn
from heatwall.utils.timestamps import get_date_array, local_today, to_calendar_day, weekday_index

logger = logging.getLogger(__name__)

DEFAULT_NUM_DAYS = 365
NUM_DAYS_FIT = "fit"
NUM_DAYS_ALL = "all"


@dataclass
class DateWindow:
    """Visible date range plus the padded week skeleton around it."""
    display_start: date
    display_end: date
    weeks: List[WeekColumn] = field(default_factory=list)

    def contains(self, day: Optional[date]) -> bool:
        return day is not None and self.display_start <= day <= self.display_end


def build_weeks(padded_start: date, padded_end: date) -> List[WeekColumn]:
    """Chunk the inclusive day run into consecutive groups of 7."""
    days = get_date_array(padded_start, padded_end)
    return [tuple(days[i:i + 7]) for i in range(0, len(days), 7)]


def build_date_grid(num_days: int = DEFAULT_NUM_DAYS, today: Optional[date] = None) -> DateWindow:
    """
    Build the week skeleton for the last num_days days ending at today.

    The display start is padded back to the previous Sunday and today is
    padded forward to the next Saturday, so every week is fully populated.
    num_days <= 0 is treated as 1.
    """
    if today is None:
        today = local_today()
    if num_days <= 0:
        logger.debug("num_days=%s treated as 1", num_days)
        num_days = 1

    display_start = today - timedelta(days=num_days - 1)
    padded_start = display_start - timedelta(days=weekday_index(display_start))
    padded_end = today + timedelta(days=6 - weekday_index(today))

    return DateWindow(
        display_start=display_start,
        display_end=today,
        weeks=build_weeks(padded_start, padded_end),
    )


def resolve_num_days(
    setting: NumDaysSetting,
    container_width: float = 0,
    data_points: Optional[Iterable[DataPoint]] = None,
    today: Optional[date] = None,
) -> int:
    """
    Resolve a num_days setting to a concrete day count.

    Accepts a positive int, "fit" (as many days as fill one row of the
    container) or "all" (from the earliest data point through today).
    """
    if setting == NUM_DAYS_FIT:
        return calculate_num_days_from_width(container_width)

    if setting == NUM_DAYS_ALL:
        if today is None:
            today = local_today()
        days = [to_calendar_day(dp.date) for dp in (data_points or [])]
        days = [d for d in days if d is not None]
        if not days:
            return DEFAULT_NUM_DAYS
        return max((today - min(days)).days + 1, 1)

    try:
        return max(int(setting), 1)
    except (TypeError, ValueError):
        logger.debug("Unrecognized num_days %r, using default", setting)
        return DEFAULT_NUM_DAYS
