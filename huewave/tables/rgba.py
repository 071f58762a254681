"""Every colour as a packed 0xRRGGBBAA literal, 8 per line.

Entry 0 (transparent) is 0x00000000. Hex digits are uppercase.

Example:
    huewave rgba
    huewave rgba --json
"""

from huewave.core import color_model
from huewave.core.types import Palette, Table

table = Table(
    name='rgba',
    help='Packed RGBA8888 hex literals for every colour, 8 per line.',
)


def rgba_literal(color: color_model.Color) -> str:
    return f'0x{color_model.to_rgba8888(color):08X}'


@table.encode
def encode(palette: Palette, prefix: str) -> tuple[str, ...]:
    return tuple(rgba_literal(entry.color) for entry in palette)
