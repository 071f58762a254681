"""Tests for huewave.core.palette — hex parsing, RGB distance, nearest swatch."""

import pytest
from huewave.core.builder import build_palette
from huewave.core.palette import hex_to_rgb, nearest_colour, rgb_distance, rgba8888_to_rgb


@pytest.fixture(scope='module')
def palette():
    return build_palette()


class TestHexToRgb:
    def test_white(self):
        assert hex_to_rgb('#ffffff') == (255, 255, 255)

    def test_black(self):
        assert hex_to_rgb('#000000') == (0, 0, 0)

    def test_uppercase(self):
        assert hex_to_rgb('#FF8800') == (255, 136, 0)

    def test_short_hex(self):
        assert hex_to_rgb('#fff') == (255, 255, 255)

    def test_no_hash(self):
        assert hex_to_rgb('ff0000') == (255, 0, 0)

    @pytest.mark.parametrize('bad', ['invalid', '#ff', '#ffffffff', '#gggggg'])
    def test_invalid_hex_raises(self, bad: str) -> None:
        with pytest.raises(ValueError, match='Not a hex colour'):
            hex_to_rgb(bad)


class TestRgbDistance:
    def test_same_colour(self):
        assert rgb_distance((255, 255, 255), (255, 255, 255)) == 0.0

    def test_black_white(self):
        assert rgb_distance((0, 0, 0), (255, 255, 255)) == pytest.approx(441.67, abs=0.01)

    def test_symmetry(self):
        a = (100, 50, 200)
        b = (120, 60, 180)
        assert rgb_distance(a, b) == rgb_distance(b, a)


class TestRgba8888:
    def test_unpack(self):
        assert rgba8888_to_rgb(0x12345678) == (0x12, 0x34, 0x56)


class TestNearestColour:
    def test_exact_black(self, palette):
        name, dist = nearest_colour(palette, (0, 0, 0))
        assert name == 'pure black'
        assert dist == 0.0

    def test_exact_white(self, palette):
        name, dist = nearest_colour(palette, (255, 255, 255))
        assert name == 'pure white'
        assert dist == 0.0

    def test_transparent_never_matches(self, palette):
        name, _dist = nearest_colour(palette, (0, 0, 0))
        assert name != 'transparent'

    def test_table_value_matches_at_zero(self, palette):
        from huewave.core import color_model

        packed = color_model.to_rgba8888(palette[120].color)
        _name, dist = nearest_colour(palette, rgba8888_to_rgb(packed))
        assert dist == 0.0

    def test_beyond_threshold_returns_none(self, palette):
        name, dist = nearest_colour(palette, (128, 1, 128), threshold=0.5)
        assert name is None
        assert dist > 0.5
