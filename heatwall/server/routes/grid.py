"""Grid API endpoints."""

import math
from typing import Optional

from fastapi import APIRouter, Request

from heatwall.constants.palettes import COLOR_PALETTES, get_palette_colors
from heatwall.config.loader import get_metric_color_map, layout_flags
from heatwall.grid.layout import GridController
from heatwall.models.entities import METRIC_UNITS, DataPoint, GridInputs
from heatwall.server.dependencies import get_config
from heatwall.server.models.grid import (
    CellOut,
    GridRequest,
    GridResponse,
    PaletteOut,
    PalettesResponse,
    RowOut,
)

router = APIRouter(prefix="/api", tags=["grid"])

LAYOUT_FLAGS = [
    "show_month_labels", "show_day_labels", "show_description", "show_hint",
    "enable_multi_row_layout", "split_by_year", "interactive",
]


def _finite_or_none(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


def build_inputs(body: GridRequest, config: dict) -> GridInputs:
    """Merge request fields over configured defaults."""
    flags = layout_flags(config)
    metric = body.metric.value
    mode = body.theme or config.get("display", {}).get("theme", "light")

    thresholds, colors = get_metric_color_map(config, metric, mode)
    if body.thresholds is not None:
        thresholds = list(body.thresholds)
    if body.colors is not None:
        colors = list(body.colors)
    elif body.palette_id is not None:
        colors = get_palette_colors(body.palette_id, mode)

    unit = METRIC_UNITS[body.metric]
    points = [
        DataPoint(date=p.date, value=p.value, metric_type=body.metric, unit=unit)
        for p in body.data_points
    ]

    overrides = {
        name: getattr(body, name) if getattr(body, name) is not None else flags[name]
        for name in LAYOUT_FLAGS
    }
    return GridInputs(
        data_points=points,
        thresholds=thresholds,
        colors=colors,
        num_days=body.num_days if body.num_days is not None else flags["num_days"],
        today=body.today,
        container_width=body.container_width,
        **overrides,
    )


@router.post("/grid", response_model=GridResponse)
async def compute_grid(body: GridRequest, request: Request):
    """Compute the activity wall layout for the posted data."""
    config = get_config(request)
    controller = GridController(build_inputs(body, config))
    if body.selected is not None:
        controller.press(body.selected)

    layout = controller.layout
    return GridResponse(
        rows=[
            RowOut(
                weeks=[list(week) for week in row.weeks],
                week_indices=row.week_indices,
                year=row.year,
                is_last_row_of_year=row.is_last_row_of_year,
                left_padding=row.left_padding,
            )
            for row in layout.rows
        ],
        month_labels=layout.month_labels,
        cell_size=layout.cell_size,
        max_columns=layout.max_columns,
        display_start=layout.display_start,
        display_end=layout.display_end,
        week_count=len(layout.weeks),
        total_cells=layout.total_cells,
        effective_thresholds=[_finite_or_none(t) for t in layout.effective_thresholds],
        cells=[
            CellOut(
                cell_id=c.cell_id,
                date=c.date,
                value=c.value,
                color=c.color,
                interactive=c.interactive,
                week_index=c.week_index,
                weekday=c.weekday,
            )
            for c in layout.cells
        ],
        selected=controller.selected,
        description=controller.description,
    )


@router.get("/palettes", response_model=PalettesResponse)
async def list_palettes():
    """List built-in palettes in both theme orders."""
    return PalettesResponse(palettes=[
        PaletteOut(
            id=palette_id,
            name=palette["name"],
            light=get_palette_colors(palette_id, "light"),
            dark=get_palette_colors(palette_id, "dark"),
        )
        for palette_id, palette in COLOR_PALETTES.items()
    ])


@router.get("/metrics")
async def list_metrics(request: Request):
    """Configured metrics with thresholds (null marks the unbounded bucket)."""
    config = get_config(request)
    metrics = {}
    for name, settings in config.get("metrics", {}).items():
        thresholds, colors = get_metric_color_map(config, name)
        metrics[name] = {
            "enabled": settings.get("enabled", True),
            "display_name": settings.get("display_name", name),
            "thresholds": [_finite_or_none(t) for t in thresholds],
            "colors": colors,
        }
    return {"metrics": metrics}
