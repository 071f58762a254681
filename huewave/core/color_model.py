"""Colour model adapter over coloraide.

Palette colours are coloraide Color objects held in sRGB. Hue, saturation and
lightness go through Okhsl, perceptual channels through Oklab. Everything
outside this module treats a Color as opaque and uses the accessors below.

Conventions:
  - hue is in turns, [0, 1)
  - red/green/blue are sRGB in [0, 1]
  - channel_l is Oklab L in [0, 1]; channel_a/channel_b are Oklab a/b
    shifted by +0.5 so that neutral grey sits at 0.5
"""

import math

from coloraide import Color as _Base
from coloraide.spaces.okhsl import Okhsl


class Color(_Base):
    """Project-local Color class with Okhsl support."""


Color.register(Okhsl(), overwrite=True)

TRANSPARENT = Color('srgb', [0.0, 0.0, 0.0], 0.0)


def from_hex(text: str) -> Color:
    """Parse a CSS hex colour ('#RRGGBB') into an sRGB Color."""
    return Color(text).convert('srgb')


def from_hsl(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> Color:
    """Build a colour from Okhsl components. Float dust outside sRGB is clipped."""
    return Color('okhsl', [hue * 360.0, saturation, lightness], alpha).convert('srgb').clip()


def clamp_to_gamut(hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> Color:
    """Build a colour from Okhsl components, gamut-mapping it into sRGB."""
    return Color('okhsl', [hue * 360.0, saturation, lightness], alpha).convert('srgb').fit()


def hue(color: Color) -> float:
    """Okhsl hue in turns. Achromatic colours report 0.0."""
    h = color.convert('okhsl').coords()[0]
    if math.isnan(h):
        return 0.0
    h = (h / 360.0) % 1.0
    return 0.0 if h >= 1.0 else h


def _rgb(color: Color) -> list[float]:
    return color.convert('srgb').coords()


def red(color: Color) -> float:
    return _rgb(color)[0]


def green(color: Color) -> float:
    return _rgb(color)[1]


def blue(color: Color) -> float:
    return _rgb(color)[2]


def rgb(color: Color) -> tuple[float, float, float]:
    """All three sRGB channels in one conversion."""
    r, g, b = _rgb(color)
    return (r, g, b)


def alpha(color: Color) -> float:
    return color['alpha']


def _oklab(color: Color) -> list[float]:
    return color.convert('oklab').coords()


def channel_l(color: Color) -> float:
    return _oklab(color)[0]


def channel_a(color: Color) -> float:
    return _oklab(color)[1] + 0.5


def channel_b(color: Color) -> float:
    return _oklab(color)[2] + 0.5


def perceptual_bytes(color: Color) -> tuple[float, float, float]:
    """Unrounded (L, A, B) byte values. Valid bytes lie in (-1, 256)."""
    lightness, a, b = _oklab(color)
    return (lightness * 255.0, a * 255.0 + 127.5, b * 255.0 + 127.5)


def _to_byte(value: float) -> int:
    return int(min(max(value, 0.0), 1.0) * 255.0 + 0.5)


def to_rgba8888(color: Color) -> int:
    """Pack as a 32-bit unsigned 0xRRGGBBAA integer."""
    r, g, b = _rgb(color)
    return _to_byte(r) << 24 | _to_byte(g) << 16 | _to_byte(b) << 8 | _to_byte(alpha(color))
