"""
Color palette definitions for the activity wall.

Each palette holds 5 colors of increasing intensity; index 0 is the
no-data background.
"""

from typing import Dict, List, Any

from heatwall.grid.colors import reorder_colors_for_theme

DEFAULT_PALETTE_ID = 'github_green'

COLOR_PALETTES: Dict[str, Dict[str, Any]] = {
    'github_green': {
        'name': 'GitHub Green',
        'colors': ['#ebedf0', '#9be9a8', '#40c463', '#30a14e', '#216e39'],
        'base_color': '#40c463',
    },
    'ios_health_red': {
        'name': 'iOS Health Red',
        'colors': ['#f4e4e1', '#f9b8b2', '#f9827c', '#e74c3c', '#c0392b'],
        'base_color': '#e74c3c',
    },
    'ios_health_green': {
        'name': 'iOS Health Green',
        'colors': ['#e6f9ea', '#bdf6d8', '#7cefa1', '#34c759', '#1eae4a'],
        'base_color': '#34c759',
    },
    'ios_health_blue': {
        'name': 'iOS Health Blue',
        'colors': ['#e6f2fa', '#b3dbf7', '#6ec1f6', '#007aff', '#004a99'],
        'base_color': '#6ec1f6',
    },
    'ios_health_purple': {
        'name': 'iOS Health Purple',
        'colors': ['#f3e8ff', '#d1b3ff', '#a580e8', '#8e44ad', '#5e3370'],
        'base_color': '#8e44ad',
    },
    'ocean_blue': {
        'name': 'Ocean Blue',
        'colors': ['#e0f2fe', '#b3e5fc', '#4fc3f7', '#0288d1', '#01579b'],
        'base_color': '#0288d1',
    },
    'sunset_orange': {
        'name': 'Sunset Orange',
        'colors': ['#fff3e0', '#ffe0b2', '#ffb74d', '#ff9800', '#e65100'],
        'base_color': '#ff9800',
    },
    'forest_green': {
        'name': 'Forest Green',
        'colors': ['#e8f5e9', '#c8e6c9', '#81c784', '#4caf50', '#2e7d32'],
        'base_color': '#4caf50',
    },
    'lavender_purple': {
        'name': 'Lavender Purple',
        'colors': ['#f3e5f5', '#e1bee7', '#ba68c8', '#9c27b0', '#6a1b9a'],
        'base_color': '#9c27b0',
    },
    'monochrome_gray': {
        'name': 'Monochrome Gray',
        'colors': ['#f5f5f5', '#e0e0e0', '#9e9e9e', '#616161', '#212121'],
        'base_color': '#616161',
    },
    'fire_red': {
        'name': 'Fire Red',
        'colors': ['#ffebee', '#ffcdd2', '#ef5350', '#d32f2f', '#b71c1c'],
        'base_color': '#d32f2f',
    },
    'tropical_teal': {
        'name': 'Tropical Teal',
        'colors': ['#e0f7fa', '#b2ebf2', '#26c6da', '#00acc1', '#00838f'],
        'base_color': '#00acc1',
    },
    'amber_gold': {
        'name': 'Amber Gold',
        'colors': ['#fff8e1', '#ffecb3', '#ffc107', '#ffa000', '#ff6f00'],
        'base_color': '#ffc107',
    },
    'emerald_green': {
        'name': 'Emerald Green',
        'colors': ['#e8f5e9', '#a5d6a7', '#66bb6a', '#43a047', '#2e7d32'],
        'base_color': '#43a047',
    },
    'deep_purple': {
        'name': 'Deep Purple',
        'colors': ['#ede7f6', '#d1c4e9', '#9575cd', '#673ab7', '#4527a0'],
        'base_color': '#673ab7',
    },
    'rose_pink': {
        'name': 'Rose Pink',
        'colors': ['#fce4ec', '#f8bbd0', '#f48fb1', '#e91e63', '#c2185b'],
        'base_color': '#e91e63',
    },
    'cyan_blue': {
        'name': 'Cyan Blue',
        'colors': ['#e0f7fa', '#b2ebf2', '#4dd0e1', '#00bcd4', '#0097a7'],
        'base_color': '#00bcd4',
    },
    'indigo_night': {
        'name': 'Indigo Night',
        'colors': ['#e8eaf6', '#c5cae9', '#7986cb', '#3f51b5', '#283593'],
        'base_color': '#3f51b5',
    },
    'lime_green': {
        'name': 'Lime Green',
        'colors': ['#f1f8e9', '#dcedc8', '#aed581', '#8bc34a', '#689f38'],
        'base_color': '#8bc34a',
    },
}


def get_palette_ids() -> List[str]:
    return list(COLOR_PALETTES.keys())


def get_palette_colors(palette_id: str, mode: str = 'light') -> List[str]:
    """Theme ordered colors for a palette; unknown ids use the default palette."""
    palette = COLOR_PALETTES.get(palette_id) or COLOR_PALETTES[DEFAULT_PALETTE_ID]
    return reorder_colors_for_theme(palette['colors'], mode == 'dark')
