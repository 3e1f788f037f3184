#!/usr/bin/env python3
"""
heatwall - calendar activity heatmap

Draws daily metric values as a GitHub-style activity wall in the terminal,
or serves the layout engine over HTTP.

Usage:
    python -m heatwall --data steps.json [options]
    heatwall --serve
"""

import argparse
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional

from heatwall.config.loader import load_config, get_metric_color_map, layout_flags
from heatwall.grid.dates import NUM_DAYS_ALL, NUM_DAYS_FIT
from heatwall.grid.layout import GridController
from heatwall.models.entities import METRIC_UNITS, DataPoint, GridInputs, MetricType
from heatwall.sync.merge import normalize_data_points
from heatwall.utils.timestamps import to_calendar_day


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all CLI flags."""
    parser = argparse.ArgumentParser(
        prog='heatwall',
        description='Calendar activity heatmap'
    )

    parser.add_argument('--data', metavar='FILE',
                        help='JSON file of {"date", "value"} records')
    parser.add_argument('--metric', default='STEPS',
                        choices=[m.value for m in MetricType],
                        help='Metric the values belong to (default: STEPS)')

    # Date range (mutually exclusive)
    days = parser.add_mutually_exclusive_group()
    days.add_argument('--days', type=int, metavar='N',
                      help='Show the last N days')
    days.add_argument('--fit', action='store_true',
                      help='Show as many days as fit in one row')
    days.add_argument('--all-history', action='store_true',
                      help='Show all available history')
    parser.add_argument('--today', metavar='DATE',
                        help='Anchor day (YYYY-MM-DD, default: today)')

    # Layout
    layout = parser.add_argument_group('layout')
    layout.add_argument('--width', type=float, default=0,
                        help='Container width in pixels (default: unmeasured)')
    layout.add_argument('--multi-row', action='store_true',
                        help='Wrap weeks onto multiple rows')
    layout.add_argument('--split-by-year', action='store_true',
                        help='Start a new row group for each calendar year')
    layout.add_argument('--no-month-labels', action='store_true',
                        help='Hide month labels')
    layout.add_argument('--no-day-labels', action='store_true',
                        help='Hide weekday labels')
    layout.add_argument('--no-hint', action='store_true',
                        help='Show the visible total instead of the hint text')
    layout.add_argument('--select', metavar='DATE',
                        help='Select a day and describe it')

    # Output options
    parser.add_argument('--json', action='store_true',
                        help='Output cells as JSON')
    parser.add_argument('--no-color', action='store_true',
                        help='Disable colors')
    parser.add_argument('--theme', choices=['light', 'dark'],
                        help='Palette ordering')

    # Web API
    parser.add_argument('--serve', action='store_true',
                        help='Start the HTTP API')
    parser.add_argument('--port', type=int, default=8080,
                        help='Port for the API (default: 8080)')
    parser.add_argument('--host', default='127.0.0.1',
                        help='Host for the API (default: 127.0.0.1)')

    return parser


def load_data_points(path: Path, metric: MetricType) -> List[DataPoint]:
    """
    Read data points from a JSON file.

    Accepts either a list of records or an object with a "data_points"
    list. Each record needs "date" (ISO day or timestamp) and "value".
    """
    with open(path, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    records = payload.get('data_points', []) if isinstance(payload, dict) else payload
    unit = METRIC_UNITS[metric]
    points = []
    for i, record in enumerate(records):
        day = to_calendar_day(record.get('date'))
        if day is None:
            raise ValueError(f"record {i} has an invalid date: {record.get('date')!r}")
        points.append(DataPoint(date=day, value=float(record.get('value', 0)),
                                metric_type=metric, unit=unit))
    return normalize_data_points(points)


def parse_day(value: Optional[str], flag: str) -> Optional[date]:
    if value is None:
        return None
    day = to_calendar_day(value)
    if day is None:
        raise ValueError(f"{flag} expects YYYY-MM-DD, got {value!r}")
    return day


def build_inputs(args, config: dict, points: List[DataPoint]) -> GridInputs:
    """Combine CLI flags with configured layout defaults."""
    flags = layout_flags(config)
    mode = args.theme or config['display'].get('theme', 'light')
    thresholds, colors = get_metric_color_map(config, args.metric, mode)

    if args.days is not None:
        num_days = args.days
    elif args.fit:
        num_days = NUM_DAYS_FIT
    elif args.all_history:
        num_days = NUM_DAYS_ALL
    else:
        num_days = flags['num_days']

    return GridInputs(
        data_points=points,
        thresholds=thresholds,
        colors=colors,
        num_days=num_days,
        today=parse_day(args.today, '--today'),
        container_width=args.width,
        show_month_labels=flags['show_month_labels'] and not args.no_month_labels,
        show_day_labels=flags['show_day_labels'] and not args.no_day_labels,
        show_description=flags['show_description'],
        show_hint=flags['show_hint'] and not args.no_hint,
        enable_multi_row_layout=flags['enable_multi_row_layout'] or args.multi_row,
        split_by_year=flags['split_by_year'] or args.split_by_year,
        interactive=flags['interactive'],
    )


def main():
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    config = load_config()
    color_enabled = config['display'].get('color_enabled', True) and not args.no_color

    if args.serve:
        _run_serve(config, args)
        return

    if not args.data:
        parser.error('--data is required unless --serve is given')

    metric = MetricType(args.metric)
    try:
        points = load_data_points(Path(args.data), metric)
        inputs = build_inputs(args, config, points)
        selected = parse_day(args.select, '--select')
    except FileNotFoundError:
        print(f"Error: Data file not found: {args.data}")
        sys.exit(1)
    except (ValueError, TypeError, AttributeError, json.JSONDecodeError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    controller = GridController(inputs)
    if selected is not None:
        controller.press(selected)
    layout = controller.layout

    if args.json:
        print(json.dumps({
            'display_start': layout.display_start.isoformat(),
            'display_end': layout.display_end.isoformat(),
            'max_columns': layout.max_columns,
            'cell_size': layout.cell_size,
            'month_labels': layout.month_labels,
            'description': controller.description,
            'cells': [
                {
                    'id': c.cell_id,
                    'date': c.date.isoformat() if c.date else None,
                    'value': c.value,
                    'color': c.color,
                    'interactive': c.interactive,
                }
                for c in layout.cells
            ],
        }, indent=2))
        return

    from heatwall.output.formatter import print_section
    from heatwall.output.renderer import render_grid, render_legend

    title = config['metrics'].get(args.metric, {}).get('display_name', args.metric)
    print(print_section(title, color_enabled))
    print(render_grid(layout, controller.description, controller.selected,
                      inputs.show_day_labels, color_enabled))
    print()
    print(render_legend(inputs.colors, color_enabled))


def _run_serve(config, args):
    """Start the HTTP API."""
    try:
        import uvicorn
    except ImportError:
        print("Error: The HTTP API requires additional dependencies.")
        print("Install them with: python -m pip install fastapi uvicorn[standard] pydantic")
        sys.exit(1)

    from heatwall.server.app import create_app
    app = create_app(config=config)

    print(f"\nStarting heatwall API at http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop\n")

    uvicorn.run(app, host=args.host, port=args.port, log_level="info")


if __name__ == '__main__':
    main()
