"""Name-to-colour lines: PREFIX_CONSTANT_NAME<TAB>0xRRGGBBAA<TAB>name.

The constant name is the entry name in uppercase with spaces turned into
underscores, e.g. 'bold pure red' -> UBE_BOLD_PURE_RED. The prefix comes
from --prefix, HUEWAVE_PREFIX, the palette config, then UBE.

With --output (or HUEWAVE_OUTPUT) the lines are also written to a text
file, one per line, UTF-8.

Example:
    huewave named --prefix YAM
    huewave named --output UbeColorData.txt
"""

from huewave.core.types import Palette, Table
from huewave.tables.rgba import rgba_literal

table = Table(
    name='named',
    help='NAME<TAB>0xRRGGBBAA<TAB>name lines for every colour.',
    layout='lines',
)


def constant_name(name: str, prefix: str = '') -> str:
    const = name.upper().replace(' ', '_')
    return f'{prefix}_{const}' if prefix else const


@table.encode
def encode(palette: Palette, prefix: str) -> tuple[str, ...]:
    return tuple(
        f'{constant_name(entry.name, prefix)}\t{rgba_literal(entry.color)}\t{entry.name}' for entry in palette
    )
