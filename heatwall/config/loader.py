"""
Configuration loading for heatwall.

Handles loading configuration from ~/.heatwall/config.json with sensible defaults.
"""

import json
import math
from pathlib import Path
from typing import Dict, Any, List, Optional, Tuple
import copy

from heatwall.constants.palettes import get_palette_colors

INFINITY = float('inf')

# Default configuration: per-metric thresholds and palettes, layout flags
DEFAULT_CONFIG: Dict[str, Any] = {
    # Thresholds are bucket lower bounds; the terminal entry is unbounded
    "metrics": {
        "CALORIES_BURNED": {
            "enabled": True,
            "display_name": "Calories Burned",
            "thresholds": [0, 500, 800, 950, INFINITY],
            "palette_id": "ios_health_red",
        },
        "STEPS": {
            "enabled": True,
            "display_name": "Steps",
            "thresholds": [0, 2000, 5000, 10000, INFINITY],
            "palette_id": "github_green",
        },
        "EXERCISE_TIME": {
            "enabled": True,
            "display_name": "Exercise Time",
            "thresholds": [0, 15, 30, 60, INFINITY],
            "palette_id": "ios_health_green",
        },
        "STANDING_TIME": {
            "enabled": True,
            "display_name": "Standing Time",
            "thresholds": [0, 6, 8, 10, INFINITY],
            "palette_id": "ios_health_blue",
        },
        "FLOORS_CLIMBED": {
            "enabled": True,
            "display_name": "Floors Climbed",
            "thresholds": [0, 5, 10, 15, INFINITY],
            "palette_id": "github_green",
        },
        "SLEEP_HOURS": {
            "enabled": True,
            "display_name": "Hours of Sleep",
            "thresholds": [0, 6, 7, 8, INFINITY],
            "palette_id": "ios_health_purple",
        },
    },

    # Grid layout flags
    "layout": {
        "num_days": 365,
        "show_month_labels": True,
        "show_day_labels": True,
        "show_description": True,
        "show_hint": True,
        "enable_multi_row_layout": False,
        "split_by_year": False,
        "interactive": True,
    },

    # Display options
    "display": {
        "color_enabled": True,
        "theme": "light",
    },

    "config_version": "1.0.0"
}


def get_config_path() -> Path:
    """Get path to config file."""
    return Path.home() / ".heatwall" / "config.json"


def normalize_thresholds(thresholds: List[Any]) -> List[float]:
    """
    Coerce stored thresholds to floats.

    null, "inf" and "Infinity" become +inf so JSON files can express the
    unbounded terminal bucket.
    """
    result = []
    for t in thresholds:
        if t is None:
            result.append(INFINITY)
        elif isinstance(t, str):
            try:
                result.append(float(t))
            except ValueError:
                result.append(INFINITY)
        else:
            result.append(float(t))
    return result


def load_config() -> Dict[str, Any]:
    """
    Load configuration from file, merging with defaults.

    Returns a complete configuration with all default values filled in.
    User config overrides defaults where specified.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)

            # Per-metric merge
            if isinstance(user_config.get('metrics'), dict):
                for metric, settings in user_config['metrics'].items():
                    if not isinstance(settings, dict):
                        continue
                    if metric in config['metrics']:
                        config['metrics'][metric].update(settings)
                    else:
                        config['metrics'][metric] = settings

            # Shallow merge other sections
            for key in ['layout', 'display']:
                if key in user_config and isinstance(user_config[key], dict):
                    config[key].update(user_config[key])

            # Direct override for simple values
            for key in ['config_version']:
                if key in user_config:
                    config[key] = user_config[key]

        except json.JSONDecodeError as e:
            print(f"Warning: Could not parse config file: {e}")
        except (OSError, TypeError, ValueError) as e:
            print(f"Warning: Error loading config: {e}")

    for settings in config['metrics'].values():
        if 'thresholds' in settings:
            settings['thresholds'] = normalize_thresholds(settings['thresholds'])

    return config


def save_config(config: Dict[str, Any]) -> None:
    """Save configuration to file. Unbounded thresholds are written as null."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = copy.deepcopy(config)
    for settings in data.get('metrics', {}).values():
        if 'thresholds' in settings:
            settings['thresholds'] = [
                t if isinstance(t, (int, float)) and math.isfinite(t) else None
                for t in settings['thresholds']
            ]

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)


def get_metric_config(config: Dict[str, Any], metric: str) -> Optional[Dict[str, Any]]:
    """Settings for one metric, or None if unknown."""
    return config.get('metrics', {}).get(metric)


def get_metric_color_map(
    config: Dict[str, Any],
    metric: str,
    mode: Optional[str] = None,
) -> Tuple[List[float], List[str]]:
    """
    Thresholds and theme-ordered colors for a metric.

    Unknown metrics fall back to the STEPS settings.
    """
    settings = get_metric_config(config, metric) or config['metrics'].get('STEPS') \
        or DEFAULT_CONFIG['metrics']['STEPS']
    if mode is None:
        mode = config.get('display', {}).get('theme', 'light')

    thresholds = normalize_thresholds(settings.get('thresholds', []))
    colors = settings.get('colors') or get_palette_colors(settings.get('palette_id', ''), mode)
    return thresholds, list(colors)


def layout_flags(config: Dict[str, Any]) -> Dict[str, Any]:
    """Layout section with defaults filled in."""
    flags = copy.deepcopy(DEFAULT_CONFIG['layout'])
    flags.update(config.get('layout', {}))
    return flags
