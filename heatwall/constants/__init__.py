"""Constants package - built-in color palettes."""

from .palettes import COLOR_PALETTES, DEFAULT_PALETTE_ID, get_palette_colors, get_palette_ids

__all__ = ["COLOR_PALETTES", "DEFAULT_PALETTE_ID", "get_palette_colors", "get_palette_ids"]
