"""Sync package - merge contract for incoming health records."""

from .merge import merge_data_points_by_day, merge_exercises_by_id, normalize_data_points

__all__ = ["merge_data_points_by_day", "merge_exercises_by_id", "normalize_data_points"]
