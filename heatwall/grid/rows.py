"""
Row partitioning for the activity wall.

Arranges the week skeleton into visual rows. Three modes:

- single row: the most recent max_columns weeks;
- multi row: newest-first chunks of max_columns weeks;
- year split: weeks bucketed by calendar year (weeks straddling New Year
  are decomposed into two weekday-aligned halves), then chunked per year.

Rows are always returned newest first. Weeks inside a row run oldest to
newest, left to right.
"""

from collections import OrderedDict
from typing import Dict, List, Tuple

from heatwall.grid.columns import CELL_GAP
from heatwall.models.entities import Row, WeekColumn

# (absolute week index, week column)
IndexedWeek = Tuple[int, WeekColumn]


def split_week_by_year(week: WeekColumn) -> List[WeekColumn]:
    """
    Decompose a week that straddles a year boundary.

    Each half keeps its days at their original weekday slots and holds
    None everywhere else. Halves without any day are dropped. A week
    whose first and last day share a year is returned unchanged.
    """
    days = [d for d in week if d is not None]
    if not days or days[0].year == days[-1].year:
        return [week]

    halves = []
    for year in sorted({d.year for d in days}):
        half = tuple(d if d is not None and d.year == year else None for d in week)
        if any(d is not None for d in half):
            halves.append(half)
    return halves


def _week_year(week: WeekColumn) -> int:
    return next(d.year for d in week if d is not None)


def bucket_weeks_by_year(weeks: List[WeekColumn]) -> Dict[int, List[IndexedWeek]]:
    """Group weeks by calendar year, splitting weeks that span two years."""
    buckets: Dict[int, List[IndexedWeek]] = OrderedDict()
    for index, week in enumerate(weeks):
        for part in split_week_by_year(week):
            if not any(d is not None for d in part):
                continue
            buckets.setdefault(_week_year(part), []).append((index, part))
    return buckets


def chunk_newest_first(entries: List[IndexedWeek], max_columns: int) -> List[Row]:
    """
    Slice up to max_columns weeks at a time from the newest end.

    The first row holds the most recent weeks; the last row holds
    whatever is left over at the oldest end and may be partial.
    """
    max_columns = max(max_columns, 1)
    rows = []
    end = len(entries)
    while end > 0:
        start = max(0, end - max_columns)
        chunk = entries[start:end]
        rows.append(Row(
            weeks=[week for _, week in chunk],
            week_indices=[index for index, _ in chunk],
        ))
        end = start
    return rows


def partition_single_row(weeks: List[WeekColumn], max_columns: int) -> List[Row]:
    """Show only the most recent max_columns weeks."""
    entries = list(enumerate(weeks))[-max(max_columns, 1):]
    return [Row(
        weeks=[week for _, week in entries],
        week_indices=[index for index, _ in entries],
    )]


def partition_by_year(weeks: List[WeekColumn], max_columns: int) -> List[Row]:
    """
    Chunk each calendar year separately, newest year first.

    The oldest row of every year gets is_last_row_of_year; it also
    carries the year label, except in the most recent year.
    """
    buckets = bucket_weeks_by_year(weeks)
    rows: List[Row] = []

    for position, year in enumerate(sorted(buckets, reverse=True)):
        year_rows = chunk_newest_first(buckets[year], max_columns)
        if not year_rows:
            continue
        oldest = year_rows[-1]
        oldest.is_last_row_of_year = True
        if position > 0:
            oldest.year = year
        rows.extend(year_rows)

    return rows


def partition_rows(
    weeks: List[WeekColumn],
    max_columns: int,
    enable_multi_row_layout: bool = False,
    split_by_year: bool = False,
) -> List[Row]:
    """Arrange weeks into rows for the selected layout mode."""
    if not weeks:
        return []
    if split_by_year:
        return partition_by_year(weeks, max_columns)
    if enable_multi_row_layout:
        return chunk_newest_first(list(enumerate(weeks)), max_columns)
    return partition_single_row(weeks, max_columns)


def row_left_padding(row: Row, max_columns: int, cell_size: float) -> float:
    """Padding that pushes a partial row's weeks to the right edge."""
    missing = max(max_columns - len(row.weeks), 0)
    return missing * (cell_size + CELL_GAP)


def apply_row_alignment(
    rows: List[Row],
    max_columns: int,
    cell_size: float,
    enable_multi_row_layout: bool = False,
    split_by_year: bool = False,
) -> List[Row]:
    """
    Set left_padding on rows that should be right aligned.

    Year split: the last row of each year group. Multi row: the last row
    overall. Single row layouts are never padded.
    """
    if not (enable_multi_row_layout or split_by_year):
        return rows

    last = len(rows) - 1
    for i, row in enumerate(rows):
        right_aligned = row.is_last_row_of_year if split_by_year else i == last
        if right_aligned and len(row.weeks) < max_columns:
            row.left_padding = row_left_padding(row, max_columns, cell_size)
        else:
            row.left_padding = 0.0
    return rows
