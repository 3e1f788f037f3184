"""
Threshold based coloring.

Maps a metric value to a palette color through half-open threshold
buckets, and rescales thresholds when the data never gets near the
configured ceiling.
"""

import logging
import math
import re
from typing import Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

EMPTY_COLOR = 'transparent'

_HEX_PATTERN = re.compile(r'^#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})$', re.IGNORECASE)


def get_color_for_value(value: float, thresholds: List[float], colors: List[str]) -> str:
    """
    Color for value under the bucket rule [thresholds[i], thresholds[i+1]) -> colors[i].

    Values that match no bucket get colors[-2], the last color the scan
    can reach. With a terminal +inf threshold the final color entry is
    therefore never returned.
    """
    if not colors:
        return EMPTY_COLOR
    if len(colors) < 2:
        return colors[0]

    for i in range(len(thresholds) - 1):
        if thresholds[i] <= value < thresholds[i + 1]:
            if i < len(colors):
                return colors[i]
            break

    return colors[len(colors) - 2]


def effective_thresholds(
    thresholds: List[float],
    values: Iterable[float],
    colors: Optional[List[str]] = None,
) -> List[float]:
    """
    Rescale thresholds to the observed data when it stays below the ceiling.

    When the largest value is finite, positive and strictly below
    thresholds[-2], thresholds become idx * (max / (n - 1)) with the
    last entry kept at +inf. Otherwise the thresholds pass through.
    """
    thresholds = list(thresholds)
    if len(thresholds) < 2:
        return thresholds
    if colors is not None and len(colors) != len(thresholds):
        logger.debug("Threshold/color length mismatch (%d/%d), rescale skipped",
                     len(thresholds), len(colors))
        return thresholds

    values = list(values)
    if not values:
        return thresholds

    max_value = max(values)
    if not math.isfinite(max_value) or max_value <= 0:
        return thresholds
    if not max_value < thresholds[-2]:
        return thresholds

    step = max_value / (len(thresholds) - 1)
    return [idx * step for idx in range(len(thresholds) - 1)] + [math.inf]


def hex_to_rgb(hex_color: str) -> Optional[Dict[str, int]]:
    """Parse '#rrggbb' (with or without '#') into r/g/b ints."""
    match = _HEX_PATTERN.match(hex_color or '')
    if not match:
        return None
    return {
        'r': int(match.group(1), 16),
        'g': int(match.group(2), 16),
        'b': int(match.group(3), 16),
    }


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return '#' + ''.join(f"{x:02x}" for x in (r, g, b))


def lighten_color(hex_color: str, percent: float) -> str:
    """Lighten a color by percent, leaving invalid input unchanged."""
    rgb = hex_to_rgb(hex_color)
    if not rgb:
        return hex_color

    amount = round(2.55 * percent)
    return rgb_to_hex(
        min(255, rgb['r'] + amount),
        min(255, rgb['g'] + amount),
        min(255, rgb['b'] + amount),
    )


def darken_color(hex_color: str, percent: float) -> str:
    """Darken a color by percent, leaving invalid input unchanged."""
    rgb = hex_to_rgb(hex_color)
    if not rgb:
        return hex_color

    amount = round(2.55 * percent)
    return rgb_to_hex(
        max(0, rgb['r'] - amount),
        max(0, rgb['g'] - amount),
        max(0, rgb['b'] - amount),
    )


def is_valid_hex_color(hex_color: str) -> bool:
    return bool(_HEX_PATTERN.match(hex_color or ''))


def normalize_hex_color(hex_color: str) -> str:
    """Lowercase and ensure a leading '#'."""
    if hex_color.startswith('#'):
        return hex_color.lower()
    return f"#{hex_color.lower()}"


def reorder_colors_for_theme(colors: List[str], is_dark_mode: bool) -> List[str]:
    """
    Order palette colors for the active theme.

    Palettes are stored lightest first from index 1, which is the light
    mode order. Dark mode reverses the remaining colors so higher values
    read brighter against a dark background. Index 0 is the no-data
    color and never moves.
    """
    if len(colors) <= 1:
        return list(colors)

    first, rest = colors[0], list(colors[1:])
    if is_dark_mode:
        return [first] + rest[::-1]
    return [first] + rest
