"""Wave profiles and hue-key expansion.

Four waves band the hue wheel into families of swatches:

  wave  crest  hue keys  level names
  1     5      12 core   black, lead, gray, silver, white
  2     3      12 core   drab, faded, pale
  3     3      36 blend  deep, true, bright
  4     1      36 blend  bold

The 36-key wheel is a refinement of the 12-key one: every core hue is
kept, and two blends are inserted one third and two thirds of the way to
the next core hue.
"""

from huewave.core.easing import lerp_angle
from huewave.core.types import HueKeyMode, PaletteConfigError, WaveProfile

WAVES = (1, 2, 3, 4)

_PROFILES: dict[int, tuple[int, HueKeyMode, tuple[str, ...]]] = {
    1: (5, HueKeyMode.CORE_12, ('black ', 'lead ', 'gray ', 'silver ', 'white ')),
    2: (3, HueKeyMode.CORE_12, ('drab ', 'faded ', 'pale ')),
    3: (3, HueKeyMode.EXPANDED_36, ('deep ', 'true ', 'bright ')),
    4: (1, HueKeyMode.EXPANDED_36, ('bold ',)),
}


def wave_profile(wave: int) -> WaveProfile:
    """Return the banding profile for a wave number (1-4)."""
    if wave not in _PROFILES:
        raise ValueError(f'Unknown wave: {wave}. Expected one of {WAVES}')
    crest, mode, level_names = _PROFILES[wave]
    return WaveProfile(wave=wave, crest=crest, hue_key_mode=mode, level_names=level_names)


def expand_hues(
    core_hues: tuple[float, ...],
    hue_names: tuple[str, ...],
    mode: HueKeyMode,
) -> tuple[tuple[float, ...], tuple[str, ...]]:
    """Produce the hue keys and name keys for one wave."""
    if len(core_hues) != len(hue_names):
        raise PaletteConfigError(f'{len(core_hues)} core hues but {len(hue_names)} hue names')

    if mode is HueKeyMode.CORE_12:
        return tuple(core_hues), tuple(hue_names)

    count = len(core_hues)
    hue_keys: list[float] = []
    name_keys: list[str] = []
    for i in range(count):
        nxt = (i + 1) % count
        here, there = core_hues[i], core_hues[nxt]
        hue_keys.append(lerp_angle(here, there, 0.0))
        name_keys.append(f'pure {hue_names[i]}')
        hue_keys.append(lerp_angle(here, there, 1.0 / 3.0))
        name_keys.append(f'{hue_names[nxt]} {hue_names[i]}')
        hue_keys.append(lerp_angle(here, there, 2.0 / 3.0))
        name_keys.append(f'{hue_names[i]} {hue_names[nxt]}')
    return tuple(hue_keys), tuple(name_keys)
