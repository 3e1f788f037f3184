"""
Small pure helpers for normalizing duration-like values.

Durations are stored consistently in minutes.
"""

import math

from heatwall.utils.timestamps import parse_timestamp

SECONDS_PER_MINUTE = 60

# Anything above 10 hours expressed in minutes is almost certainly seconds.
SECONDS_HEURISTIC_MINUTES = 600


def duration_minutes_from_iso_range(start_iso: str, end_iso: str) -> float:
    """Minutes between two ISO timestamps, 0 for unparseable or reversed input."""
    start = parse_timestamp(start_iso)
    end = parse_timestamp(end_iso)
    if start is None or end is None:
        return 0.0
    if (start.tzinfo is None) != (end.tzinfo is None):
        return 0.0

    minutes = (end - start).total_seconds() / 60
    if not math.isfinite(minutes):
        return 0.0
    return max(minutes, 0.0)


def normalize_workout_duration_to_minutes(duration: float) -> float:
    """
    Normalize a workout duration that may be reported in seconds or minutes.

    Values above SECONDS_HEURISTIC_MINUTES are treated as seconds
    (e.g. 3600 for a 60 minute workout), everything else as minutes.
    """
    try:
        duration = float(duration)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(duration) or duration <= 0:
        return 0.0

    if duration > SECONDS_HEURISTIC_MINUTES:
        return duration / SECONDS_PER_MINUTE
    return duration
