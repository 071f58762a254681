"""Tests for huewave.core.builder — palette layout, invariants, determinism."""

import logging

import pytest
from huewave.core import color_model
from huewave.core.builder import (
    MAX_LIGHTNESS,
    MIN_LIGHTNESS,
    PaletteBuilder,
    build_palette,
    check_gamut,
    crest_lightness,
    saturation_adjustment,
)
from huewave.core.config import GRAY_NAMES, PaletteConfig, default_config
from huewave.core.types import PaletteConfigError


@pytest.fixture(scope='module')
def palette():
    return build_palette()


class TestLayout:
    def test_size_is_256(self, palette):
        assert len(palette) == 1 + 15 + (5 * 12 + 3 * 12 + 3 * 36 + 1 * 36)
        assert len(palette) == 256

    def test_entry_zero_is_transparent(self, palette):
        assert palette[0].name == 'transparent'
        assert color_model.to_rgba8888(palette[0].color) == 0

    def test_grey_names(self, palette):
        assert tuple(palette.names[1:16]) == GRAY_NAMES

    def test_grey_lightness_strictly_increases(self, palette):
        ls = [color_model.channel_l(e.color) for e in palette.entries[1:16]]
        assert all(b > a for a, b in zip(ls, ls[1:]))

    def test_grey_ramp_ends(self, palette):
        assert color_model.to_rgba8888(palette[1].color) == 0x000000FF
        assert color_model.to_rgba8888(palette[15].color) == 0xFFFFFFFF

    def test_grey_has_no_saturation(self, palette):
        for e in palette.entries[1:16]:
            r, g, b = color_model.rgb(e.color)
            assert r == pytest.approx(g, abs=1e-4)
            assert g == pytest.approx(b, abs=1e-4)

    def test_names_unique(self, palette):
        assert len(set(palette.names)) == len(palette)

    def test_first_wave_entries(self, palette):
        assert palette.names[16:21] == ['black red', 'lead red', 'gray red', 'silver red', 'white red']

    def test_wave_two_starts_after_wave_one(self, palette):
        assert palette[16 + 60].name == 'drab red'

    def test_wave_three_starts(self, palette):
        assert palette[16 + 60 + 36].name == 'deep pure red'
        assert palette[16 + 60 + 36 + 3].name == 'deep brown red'

    def test_last_entry(self, palette):
        assert palette[255].name == 'bold magenta red'

    def test_all_opaque_after_transparent(self, palette):
        for e in palette.entries[1:]:
            assert color_model.alpha(e.color) == 1.0

    def test_no_gamut_violations(self, palette):
        assert palette.violations == ()


class TestDeterminism:
    def test_two_runs_identical(self, palette):
        again = PaletteBuilder(default_config()).build()
        assert again.names == palette.names
        packed_a = [color_model.to_rgba8888(c) for c in palette.colors]
        packed_b = [color_model.to_rgba8888(c) for c in again.colors]
        assert packed_a == packed_b
        assert [color_model.rgb(c) for c in palette.colors] == [color_model.rgb(c) for c in again.colors]


class TestSaturationAdjustment:
    def test_outside_band_even(self):
        assert saturation_adjustment(0.5, 0) == 1.0

    def test_outside_band_odd(self):
        assert saturation_adjustment(0.5, 1) == pytest.approx(0.9)

    def test_band_edge_is_undamped(self):
        assert saturation_adjustment(0.08, 0) == pytest.approx(1.0)

    def test_band_middle_is_deepest(self):
        assert saturation_adjustment(0.12, 0) == pytest.approx(0.6)

    def test_band_upper_bound_excluded(self):
        assert saturation_adjustment(0.16, 0) == 1.0

    def test_default_red_key_is_damped(self):
        red = default_config().core_hues[0]
        assert 0.08 <= red < 0.16
        assert saturation_adjustment(red, 0) < 1.0


class TestCrestLightness:
    def test_within_bounds(self):
        for crest in (3, 5):
            for level in range(crest):
                for index in range(36):
                    v = crest_lightness(crest, level, index)
                    assert MIN_LIGHTNESS <= v <= MAX_LIGHTNESS

    def test_rises_with_level(self):
        for index in range(12):
            vs = [crest_lightness(5, level, index) for level in range(5)]
            assert vs == sorted(vs)

    def test_turning_point_varies_by_hue(self):
        mids = {round(crest_lightness(5, 2, index), 6) for index in range(12)}
        assert len(mids) > 1


class TestCheckGamut:
    def test_in_range_colour(self):
        assert check_gamut(1, 'pure gray', color_model.from_hsl(0.1, 0.0, 0.5)) == []

    def test_out_of_range_channel(self, caplog: pytest.LogCaptureFixture) -> None:
        wild = color_model.Color('oklab', [0.5, 0.6, 0.0], 1.0)
        with caplog.at_level(logging.WARNING, logger='huewave.core.builder'):
            found = check_gamut(7, 'wild', wild)
        assert len(found) == 1
        assert found[0].channel == 'A'
        assert found[0].index == 7
        assert found[0].value > 256
        assert 'bad A for entry 7' in caplog.text


class TestConfigErrors:
    def test_colliding_names_rejected(self):
        cfg = default_config()
        grays = ('black red',) + GRAY_NAMES[1:]
        bad = PaletteConfig(core_hues=cfg.core_hues, hue_names=cfg.hue_names, gray_names=grays)
        with pytest.raises(PaletteConfigError, match='black red'):
            PaletteBuilder(bad).build()
