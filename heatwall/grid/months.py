"""
Month label placement.

Labels are keyed by absolute week index in the unsliced skeleton, so a
label stays on the same week however many columns are visible.
"""

from datetime import date
from typing import Dict, List, Optional

from heatwall.models.entities import WeekColumn
from heatwall.utils.timestamps import short_month_name


def _starts_visible_month(day: date, display_start: date) -> bool:
    # The 1st of a month, or the first visible day of a month that began earlier.
    return day.day == 1 or day == display_start


def place_month_labels(
    weeks: List[WeekColumn],
    display_start: date,
    display_end: date,
) -> Dict[int, str]:
    """
    Map week index -> short month name.

    A week is labelled with the first in-window day that opens a visible
    month. Each (year, month) is labelled at most once and each week
    carries at most one label.
    """
    labels: Dict[int, str] = {}
    seen = set()

    for index, week in enumerate(weeks):
        for day in week:
            if day is None or not (display_start <= day <= display_end):
                continue
            if not _starts_visible_month(day, display_start):
                continue
            key = (day.year, day.month)
            if key in seen:
                continue
            seen.add(key)
            labels[index] = short_month_name(day)
            break

    return labels


def label_for_column(week: WeekColumn, week_index: int, labels: Dict[int, str]) -> Optional[str]:
    """
    Label to draw above a rendered column, if any.

    Both halves of a year-split week share one index; only the half that
    holds a day of the labelled month shows the label.
    """
    label = labels.get(week_index)
    if label is None:
        return None
    if any(day is not None and short_month_name(day) == label for day in week):
        return label
    return None
