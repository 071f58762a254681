"""Every colour in a packed Oklab layout: 0xFF, then B, A and L bytes.

A and B are the Oklab opponent channels scaled by 255 and re-centred on
127.5; L is lightness times 255. Bytes are truncated, then masked to 8 bits.
Entry 0 (transparent) is the neutral 0x00808000.

Channels that fall outside a byte are reported as gamut violations while
the palette is built; here they are simply masked.

Example:
    huewave oklab
"""

from huewave.core import color_model
from huewave.core.types import Palette, Table

table = Table(
    name='oklab',
    help='Packed Oklab literals (alpha, B, A, L bytes), 8 per line.',
)

TRANSPARENT_LITERAL = '0x00808000'


def _byte(value: float) -> int:
    return int(value) & 0xFF


def oklab_literal(color: color_model.Color) -> str:
    lightness, a, b = color_model.perceptual_bytes(color)
    return f'0xFF{_byte(b):02X}{_byte(a):02X}{_byte(lightness):02X}'


@table.encode
def encode(palette: Palette, prefix: str) -> tuple[str, ...]:
    if not len(palette):
        return ()
    return (TRANSPARENT_LITERAL,) + tuple(oklab_literal(entry.color) for entry in palette.entries[1:])
