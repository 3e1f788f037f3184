"""Pydantic models for the grid API."""

import math
import datetime
from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

from heatwall.grid.colors import is_valid_hex_color
from heatwall.models.entities import MetricType

# Ten years of days; bounds the week skeleton a single request can build.
MAX_NUM_DAYS = 3660


class DataPointIn(BaseModel):
    """One daily value."""
    date: datetime.date
    value: float


class GridRequest(BaseModel):
    """Inputs for one grid computation. Unset layout flags come from config."""
    data_points: List[DataPointIn] = Field(default_factory=list)
    metric: MetricType = MetricType.STEPS
    # null entries mean +inf
    thresholds: Optional[List[Optional[float]]] = None
    colors: Optional[List[str]] = None
    palette_id: Optional[str] = None
    theme: Optional[Literal["light", "dark"]] = None
    num_days: Optional[Union[int, Literal["fit", "all"]]] = None
    container_width: float = 0
    today: Optional[datetime.date] = None
    selected: Optional[datetime.date] = None

    show_month_labels: Optional[bool] = None
    show_day_labels: Optional[bool] = None
    show_description: Optional[bool] = None
    show_hint: Optional[bool] = None
    enable_multi_row_layout: Optional[bool] = None
    split_by_year: Optional[bool] = None
    interactive: Optional[bool] = None

    @field_validator("thresholds")
    @classmethod
    def unbounded_thresholds(cls, value):
        if value is None:
            return value
        return [math.inf if t is None else t for t in value]

    @field_validator("colors")
    @classmethod
    def valid_colors(cls, value):
        if value is None:
            return value
        bad = [c for c in value if not is_valid_hex_color(c)]
        if bad:
            raise ValueError(f"invalid hex colors: {', '.join(bad)}")
        return value

    @field_validator("num_days")
    @classmethod
    def positive_days(cls, value):
        if isinstance(value, int) and value < 1:
            raise ValueError("num_days must be at least 1")
        if isinstance(value, int) and value > MAX_NUM_DAYS:
            raise ValueError(f"num_days must be at most {MAX_NUM_DAYS}")
        return value


class RowOut(BaseModel):
    weeks: List[List[Optional[datetime.date]]]
    week_indices: List[int]
    year: Optional[int] = None
    is_last_row_of_year: bool = False
    left_padding: float = 0.0


class CellOut(BaseModel):
    cell_id: str
    date: Optional[datetime.date] = None
    value: float
    color: str
    interactive: bool
    week_index: int
    weekday: int  # 0=Sunday, 6=Saturday


class GridResponse(BaseModel):
    rows: List[RowOut]
    month_labels: Dict[int, str]
    cell_size: float
    max_columns: int
    display_start: datetime.date
    display_end: datetime.date
    week_count: int
    total_cells: int
    # null is the unbounded terminal bucket
    effective_thresholds: List[Optional[float]]
    cells: List[CellOut]
    selected: Optional[datetime.date] = None
    description: Optional[str] = None


class PaletteOut(BaseModel):
    id: str
    name: str
    light: List[str]
    dark: List[str]


class PalettesResponse(BaseModel):
    palettes: List[PaletteOut]
