"""Tests for threshold coloring, color helpers and palettes."""

import math
import unittest

from heatwall.constants.palettes import (
    COLOR_PALETTES, DEFAULT_PALETTE_ID, get_palette_colors, get_palette_ids,
)
from heatwall.grid.colors import (
    EMPTY_COLOR,
    darken_color,
    effective_thresholds,
    get_color_for_value,
    hex_to_rgb,
    is_valid_hex_color,
    lighten_color,
    normalize_hex_color,
    reorder_colors_for_theme,
    rgb_to_hex,
)

INF = math.inf
COLORS = ['c1', 'c2', 'c3', 'c4', 'c5']


class TestGetColorForValue(unittest.TestCase):
    """Test the half-open bucket rule."""

    def test_bucket_lookup(self):
        thresholds = [0, 800, 950, 1200, INF]
        self.assertEqual(get_color_for_value(500, thresholds, COLORS), 'c1')
        self.assertEqual(get_color_for_value(1000, thresholds, COLORS), 'c3')
        self.assertEqual(get_color_for_value(1500, thresholds, COLORS), 'c4')

    def test_lower_bound_inclusive(self):
        thresholds = [0, 800, 950, 1200, INF]
        self.assertEqual(get_color_for_value(0, thresholds, COLORS), 'c1')
        self.assertEqual(get_color_for_value(800, thresholds, COLORS), 'c2')

    def test_last_color_unreachable_with_infinite_terminal(self):
        """Verify the final palette entry is never returned."""
        thresholds = [0, 100, 200, 300, INF]
        self.assertEqual(get_color_for_value(50, thresholds, COLORS), 'c1')
        self.assertEqual(get_color_for_value(150, thresholds, COLORS), 'c2')
        self.assertEqual(get_color_for_value(250, thresholds, COLORS), 'c3')
        self.assertEqual(get_color_for_value(350, thresholds, COLORS), 'c4')
        self.assertEqual(get_color_for_value(1e6, thresholds, COLORS), 'c4')

    def test_value_beyond_finite_thresholds(self):
        """Verify values above every bound fall back to the second last color."""
        self.assertEqual(get_color_for_value(25, [0, 10, 20], ['a', 'b', 'c']), 'b')

    def test_negative_value_falls_back(self):
        self.assertEqual(get_color_for_value(-1, [0, 10, 20], ['a', 'b', 'c']), 'b')

    def test_empty_colors(self):
        self.assertEqual(get_color_for_value(5, [0, 10], []), EMPTY_COLOR)

    def test_single_color(self):
        self.assertEqual(get_color_for_value(5, [0, 10], ['only']), 'only')


class TestEffectiveThresholds(unittest.TestCase):
    """Test rescaling to the observed data."""

    def test_rescales_when_data_below_ceiling(self):
        result = effective_thresholds([0, 800, 950, 1200, INF], [100, 300, 200], COLORS)
        self.assertEqual(result, [0, 75, 150, 225, INF])

    def test_rescaled_buckets_spread_colors(self):
        """Verify low data still reaches the upper buckets after rescaling."""
        thresholds = effective_thresholds([0, 800, 950, 1200, INF], [100, 300], COLORS)
        self.assertEqual(get_color_for_value(300, thresholds, COLORS), 'c4')
        self.assertEqual(get_color_for_value(100, thresholds, COLORS), 'c2')

    def test_passes_through_when_data_reaches_ceiling(self):
        thresholds = [0, 800, 950, 1200, INF]
        self.assertEqual(effective_thresholds(thresholds, [1200], COLORS), thresholds)
        self.assertEqual(effective_thresholds(thresholds, [5000], COLORS), thresholds)

    def test_passes_through_without_positive_data(self):
        thresholds = [0, 800, 950, 1200, INF]
        self.assertEqual(effective_thresholds(thresholds, [], COLORS), thresholds)
        self.assertEqual(effective_thresholds(thresholds, [0, 0], COLORS), thresholds)

    def test_skips_on_length_mismatch(self):
        thresholds = [0, 800, 950, 1200, INF]
        self.assertEqual(effective_thresholds(thresholds, [300], ['a', 'b']), thresholds)

    def test_short_threshold_list(self):
        self.assertEqual(effective_thresholds([5], [1], ['a']), [5])

    def test_does_not_mutate_input(self):
        thresholds = [0, 800, 950, 1200, INF]
        effective_thresholds(thresholds, [300], COLORS)
        self.assertEqual(thresholds, [0, 800, 950, 1200, INF])


class TestColorHelpers(unittest.TestCase):
    """Test hex parsing and shading."""

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb('#40c463'), {'r': 64, 'g': 196, 'b': 99})
        self.assertEqual(hex_to_rgb('40C463'), {'r': 64, 'g': 196, 'b': 99})
        self.assertIsNone(hex_to_rgb('#fff'))
        self.assertIsNone(hex_to_rgb('not a color'))

    def test_rgb_to_hex(self):
        self.assertEqual(rgb_to_hex(64, 196, 99), '#40c463')

    def test_lighten_and_darken(self):
        self.assertEqual(lighten_color('#000000', 10), '#1a1a1a')
        self.assertEqual(lighten_color('#ffffff', 50), '#ffffff')
        self.assertEqual(darken_color('#ffffff', 10), '#e5e5e5')
        self.assertEqual(darken_color('#000000', 50), '#000000')

    def test_invalid_input_unchanged(self):
        self.assertEqual(lighten_color('bogus', 10), 'bogus')
        self.assertEqual(darken_color('bogus', 10), 'bogus')

    def test_validation_and_normalization(self):
        self.assertTrue(is_valid_hex_color('#AbCdEf'))
        self.assertFalse(is_valid_hex_color('#abcd'))
        self.assertEqual(normalize_hex_color('ABCDEF'), '#abcdef')
        self.assertEqual(normalize_hex_color('#ABCDEF'), '#abcdef')


class TestThemeOrdering(unittest.TestCase):
    """Test palette ordering per theme."""

    def test_light_keeps_order(self):
        colors = ['#0', '#1', '#2', '#3', '#4']
        self.assertEqual(reorder_colors_for_theme(colors, False), colors)

    def test_dark_reverses_all_but_first(self):
        colors = ['#0', '#1', '#2', '#3', '#4']
        self.assertEqual(reorder_colors_for_theme(colors, True), ['#0', '#4', '#3', '#2', '#1'])

    def test_short_lists(self):
        self.assertEqual(reorder_colors_for_theme([], True), [])
        self.assertEqual(reorder_colors_for_theme(['#0'], True), ['#0'])


class TestPalettes(unittest.TestCase):
    """Test the built-in palette table."""

    def test_palette_count(self):
        self.assertEqual(len(get_palette_ids()), 19)

    def test_every_palette_is_valid(self):
        for palette_id, palette in COLOR_PALETTES.items():
            self.assertEqual(len(palette['colors']), 5, palette_id)
            for color in palette['colors'] + [palette['base_color']]:
                self.assertTrue(is_valid_hex_color(color), (palette_id, color))

    def test_dark_mode_order(self):
        self.assertEqual(
            get_palette_colors('github_green', 'dark'),
            ['#ebedf0', '#216e39', '#30a14e', '#40c463', '#9be9a8'],
        )

    def test_unknown_palette_falls_back(self):
        self.assertEqual(
            get_palette_colors('nope'),
            COLOR_PALETTES[DEFAULT_PALETTE_ID]['colors'],
        )

    def test_returns_copy(self):
        colors = get_palette_colors('github_green')
        colors.append('#000000')
        self.assertEqual(len(get_palette_colors('github_green')), 5)


if __name__ == '__main__':
    unittest.main()
