"""Palette builder: expands 12 core hues into the 256-entry named palette.

Layout of the result:
  0       transparent
  1-15    grey ramp, black to white
  16-255  wave colours, grouped by wave, then hue key, then crest level

Every wave colour's lightness follows bias_spline with a turning point
taken from the golden-ratio sequence, so neighbouring hues do not all peak
at the same relative lightness. Saturation is damped in the [0.08, 0.16)
hue band and reduced by 10% on odd hue keys.
"""

import logging
import math

from huewave.core import color_model
from huewave.core.config import PaletteConfig, default_config
from huewave.core.easing import bias_spline, golden_fraction, lerp
from huewave.core.types import GamutViolation, Palette, PaletteConfigError, PaletteEntry
from huewave.core.waves import WAVES, expand_hues, wave_profile

logger = logging.getLogger(__name__)

GRAY_HUE = 0.1
SATURATION_FLOOR = 0.0125
OUTER_SATURATION = 1.0
OUTER_LIGHTNESS = 128 / 255
MIN_LIGHTNESS = 48 / 255
MAX_LIGHTNESS = 207 / 255

PROBLEM_BAND = (0.08, 0.16)
PROBLEM_DAMPING = 0.4
ODD_KEY_DAMPING = 0.1


def saturation_adjustment(hue: float, index: int) -> float:
    """Multiplier for a hue key's saturation."""
    low, high = PROBLEM_BAND
    adjust = 1.0
    if low <= hue < high:
        # half a sine period across the band, deepest in the middle
        adjust -= math.sin(2.0 * math.pi * (hue - low) * 0.5 / (high - low)) * PROBLEM_DAMPING
    if index & 1:
        adjust *= 1.0 - ODD_KEY_DAMPING
    return adjust


def wave_quartile(wave: int) -> float:
    """How far saturation travels from the floor toward full for this wave."""
    return bias_spline(wave * 0.25, 0.5, 0.95)


def crest_lightness(crest: int, level: int, index: int) -> float:
    cr = 2 * level + 1
    turning = 0.2 + 0.6 * golden_fraction(index)
    return lerp(MIN_LIGHTNESS, MAX_LIGHTNESS, bias_spline(0.2 + 0.75 * (cr / (crest * 2.0)), 0.75, turning))


def check_gamut(index: int, name: str, color: color_model.Color) -> list[GamutViolation]:
    """Report perceptual bytes outside (-1, 256)."""
    found = []
    for channel, value in zip('LAB', color_model.perceptual_bytes(color)):
        if value <= -1.0 or value >= 256.0:
            logger.warning('%.4f is a bad %s for entry %d (%s)', value, channel, index, name)
            found.append(GamutViolation(index=index, name=name, channel=channel, value=value))
    return found


class PaletteBuilder:
    """Builds the palette from an immutable PaletteConfig."""

    def __init__(self, config: PaletteConfig | None = None):
        self.config = config or default_config()

    def build(self) -> Palette:
        entries: list[PaletteEntry] = []
        violations: list[GamutViolation] = []

        def append(color: color_model.Color, name: str) -> None:
            violations.extend(check_gamut(len(entries), name, color))
            entries.append(PaletteEntry(color=color, name=name))

        entries.append(PaletteEntry(color=color_model.TRANSPARENT, name='transparent'))
        steps = len(self.config.gray_names)
        for i, name in enumerate(self.config.gray_names):
            append(color_model.from_hsl(GRAY_HUE, 0.0, i / (steps - 1), 1.0), name)

        for wave in WAVES:
            profile = wave_profile(wave)
            hue_keys, name_keys = expand_hues(self.config.core_hues, self.config.hue_names, profile.hue_key_mode)
            quart = wave_quartile(wave)
            start = len(entries)

            for i, (hue, name_key) in enumerate(zip(hue_keys, name_keys)):
                sat_adjust = saturation_adjustment(hue, i)
                for j in range(profile.crest):
                    if profile.crest == 1:
                        saturation, lightness = OUTER_SATURATION * sat_adjust, OUTER_LIGHTNESS
                    else:
                        saturation = lerp(SATURATION_FLOOR, OUTER_SATURATION, quart) * sat_adjust
                        lightness = crest_lightness(profile.crest, j, i)
                    append(
                        color_model.from_hsl(hue, saturation, lightness, 1.0),
                        profile.level_names[j] + name_key,
                    )

            logger.debug('wave %d: %d entries (crest=%d, quart=%.4f)', wave, len(entries) - start, profile.crest, quart)

        names = [e.name for e in entries]
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            raise PaletteConfigError(f'Duplicate palette names: {", ".join(dupes)}')

        return Palette(entries=tuple(entries), violations=tuple(violations))


def build_palette(config: PaletteConfig | None = None) -> Palette:
    """Convenience wrapper: PaletteBuilder(config).build()."""
    return PaletteBuilder(config).build()
