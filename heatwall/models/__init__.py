"""Models package - entities shared by the grid, sync and server layers."""

from .entities import (
    MetricType,
    MetricUnit,
    METRIC_UNITS,
    DataPoint,
    ExerciseDetail,
    Row,
    DayCell,
    GridInputs,
    GridLayout,
)

__all__ = [
    "MetricType",
    "MetricUnit",
    "METRIC_UNITS",
    "DataPoint",
    "ExerciseDetail",
    "Row",
    "DayCell",
    "GridInputs",
    "GridLayout",
]
