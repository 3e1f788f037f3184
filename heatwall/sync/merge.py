"""
Merging of incoming health records into what is already known.

Both merges are last-writer-wins: incoming records replace existing
ones for the same key; existing records with no incoming counterpart
are kept.
"""

from typing import Dict, Iterable, List

from heatwall.models.entities import DataPoint, ExerciseDetail
from heatwall.utils.timestamps import date_key


def merge_data_points_by_day(
    existing: Iterable[DataPoint],
    incoming: Iterable[DataPoint],
) -> List[DataPoint]:
    """
    Merge metric data points by calendar day.

    - Preserves existing points for days not present in incoming.
    - Overwrites existing points for days present in incoming.
    - Returns points sorted by day ascending.
    """
    merged: Dict[str, DataPoint] = {}
    for dp in existing:
        merged[date_key(dp.date)] = dp
    for dp in incoming:
        merged[date_key(dp.date)] = dp
    return [merged[key] for key in sorted(merged)]


def merge_exercises_by_id(
    existing: Iterable[ExerciseDetail],
    incoming: Iterable[ExerciseDetail],
) -> List[ExerciseDetail]:
    """Merge exercises by id; incoming replaces existing with the same id."""
    merged: Dict[str, ExerciseDetail] = {}
    for ex in existing:
        merged[ex.id] = ex
    for ex in incoming:
        merged[ex.id] = ex
    return list(merged.values())


def normalize_data_points(points: Iterable[DataPoint]) -> List[DataPoint]:
    """Deduplicate a point list to one entry per day (last wins), sorted by day."""
    return merge_data_points_by_day([], points)
