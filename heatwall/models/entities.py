"""
Data structures (entities) for heatwall.

Uses dataclasses for clean, typed data structures.
Calendar days are plain datetime.date values; equality and map keys
use the ISO YYYY-MM-DD form.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Optional, List, Dict, Any, Tuple, Union


class MetricType(str, Enum):
    """Health metric types that can be drawn on the wall."""
    CALORIES_BURNED = 'CALORIES_BURNED'
    EXERCISE_TIME = 'EXERCISE_TIME'
    STANDING_TIME = 'STANDING_TIME'
    STEPS = 'STEPS'
    FLOORS_CLIMBED = 'FLOORS_CLIMBED'
    SLEEP_HOURS = 'SLEEP_HOURS'


class MetricUnit(str, Enum):
    """Unit types for different metrics."""
    CALORIES = 'calories'
    MINUTES = 'minutes'
    HOURS = 'hours'
    STEPS = 'steps'
    FLOORS = 'floors'


METRIC_UNITS: Dict[MetricType, MetricUnit] = {
    MetricType.CALORIES_BURNED: MetricUnit.CALORIES,
    MetricType.EXERCISE_TIME: MetricUnit.MINUTES,
    MetricType.STANDING_TIME: MetricUnit.HOURS,
    MetricType.STEPS: MetricUnit.STEPS,
    MetricType.FLOORS_CLIMBED: MetricUnit.FLOORS,
    MetricType.SLEEP_HOURS: MetricUnit.HOURS,
}

# Seven slots indexed by weekday, 0=Sunday. None only after a year split.
WeekColumn = Tuple[Optional[date], ...]

# An int day count, or one of the sentinels "fit" / "all".
NumDaysSetting = Union[int, str]


@dataclass
class DataPoint:
    """Single per-day value for a metric."""
    date: date
    value: float
    metric_type: MetricType = MetricType.STEPS
    unit: MetricUnit = MetricUnit.STEPS


@dataclass
class ExerciseDetail:
    """Exercise record keyed by an opaque id."""
    id: str
    date: date
    type: str  # e.g. 'Running', 'Cycling'
    duration: float = 0.0  # minutes
    calories_burned: float = 0.0
    distance: Optional[float] = None  # meters
    heart_rate_average: Optional[float] = None
    heart_rate_max: Optional[float] = None
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Row:
    """One visual row of week columns, ordered oldest to newest left to right."""
    weeks: List[WeekColumn] = field(default_factory=list)
    week_indices: List[int] = field(default_factory=list)
    year: Optional[int] = None
    is_last_row_of_year: bool = False
    left_padding: float = 0.0


@dataclass
class DayCell:
    """Atomic renderable unit of the grid."""
    cell_id: str
    date: Optional[date]
    value: float
    color: str
    interactive: bool
    week_index: int
    weekday: int


@dataclass
class GridInputs:
    """Everything a grid recomputation depends on."""
    data_points: List[DataPoint] = field(default_factory=list)
    thresholds: List[float] = field(default_factory=list)
    colors: List[str] = field(default_factory=list)
    num_days: NumDaysSetting = 365
    today: Optional[date] = None
    container_width: float = 0.0
    show_month_labels: bool = True
    show_day_labels: bool = True
    show_description: bool = True
    show_hint: bool = True
    enable_multi_row_layout: bool = False
    split_by_year: bool = False
    interactive: bool = True


@dataclass
class GridLayout:
    """Renderable result of a recomputation."""
    rows: List[Row]
    month_labels: Dict[int, str]
    cell_size: float
    max_columns: int
    weeks: List[WeekColumn] = field(default_factory=list)
    display_start: Optional[date] = None
    display_end: Optional[date] = None
    effective_thresholds: List[float] = field(default_factory=list)
    cells: List[DayCell] = field(default_factory=list)
    default_description: Optional[str] = None

    @property
    def total_cells(self) -> int:
        """Number of day cells in the unsplit week skeleton."""
        return len(self.weeks) * 7

    def get_cell(self, cell_id: str) -> Optional[DayCell]:
        """Look up a rendered cell by its stable identifier."""
        for cell in self.cells:
            if cell.cell_id == cell_id:
                return cell
        return None

    def interactive_cells(self) -> List[DayCell]:
        """Cells that accept presses."""
        return [c for c in self.cells if c.interactive]
