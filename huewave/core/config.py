"""Palette configuration: the core hue/name tables fed to the builder.

Defaults reproduce the Ube palette. A YAML file can replace any part:

    prefix: UBE
    core_hues:
      - {name: red, color: '#FF0000'}
      - {name: brown, hue: 0.119}
      ...
    gray_names: [pure black, almost black, ...]

Exactly 12 core hues and 15 grey names are required.
"""

import functools
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from huewave.core import color_model
from huewave.core.types import PaletteConfigError

CORE_HUE_COUNT = 12
GRAY_STEPS = 15
DEFAULT_PREFIX = 'UBE'

CORE_COLOURS: tuple[tuple[str, str], ...] = (
    ('red', '#FF0000'),
    ('brown', '#8F573B'),
    ('orange', '#FF7F00'),
    ('saffron', '#CE8E31'),
    ('yellow', '#FFFF00'),
    ('lime', '#93D300'),
    ('green', '#3FBF3F'),
    ('cyan', '#00FFFF'),
    ('blue', '#0000FF'),
    ('violet', '#9040EF'),
    ('purple', '#C000FF'),
    ('magenta', '#F500F5'),
)

GRAY_NAMES: tuple[str, ...] = (
    'pure black', 'almost black', 'lead black',
    'black lead', 'pure lead', 'gray lead',
    'lead gray', 'pure gray', 'silver gray',
    'gray silver', 'pure silver', 'white silver',
    'silver white', 'almost white', 'pure white',
)  # fmt: skip


@dataclass(frozen=True)
class PaletteConfig:
    """Immutable inputs to PaletteBuilder."""

    core_hues: tuple[float, ...]
    hue_names: tuple[str, ...]
    gray_names: tuple[str, ...] = GRAY_NAMES
    prefix: str = DEFAULT_PREFIX

    def __post_init__(self) -> None:
        if len(self.core_hues) != CORE_HUE_COUNT:
            raise PaletteConfigError(f'Expected {CORE_HUE_COUNT} core hues, got {len(self.core_hues)}')
        if len(self.hue_names) != len(self.core_hues):
            raise PaletteConfigError(f'{len(self.core_hues)} core hues but {len(self.hue_names)} hue names')
        if len(self.gray_names) != GRAY_STEPS:
            raise PaletteConfigError(f'Expected {GRAY_STEPS} grey names, got {len(self.gray_names)}')
        if len(set(self.hue_names)) != len(self.hue_names):
            raise PaletteConfigError(f'Duplicate hue names: {", ".join(self.hue_names)}')
        for h in self.core_hues:
            if not 0.0 <= h < 1.0:
                raise PaletteConfigError(f'Core hue {h} outside [0, 1)')


@functools.cache
def default_config() -> PaletteConfig:
    """The built-in Ube tables. Hues are read through the colour model once."""
    return PaletteConfig(
        core_hues=tuple(color_model.hue(color_model.from_hex(hx)) for _name, hx in CORE_COLOURS),
        hue_names=tuple(name for name, _hx in CORE_COLOURS),
    )


def _parse_hue(item: Any, position: int) -> tuple[str, float]:
    if not isinstance(item, dict) or 'name' not in item:
        raise PaletteConfigError(f'core_hues[{position}] must be a mapping with a name')
    name = str(item['name'])
    if 'hue' in item:
        try:
            return name, float(item['hue']) % 1.0
        except (TypeError, ValueError) as e:
            raise PaletteConfigError(f'core_hues[{position}] ({name}): bad hue {item["hue"]!r}') from e
    if 'color' in item:
        try:
            return name, color_model.hue(color_model.from_hex(str(item['color'])))
        except ValueError as e:
            raise PaletteConfigError(f'core_hues[{position}]: bad color {item["color"]!r}') from e
    raise PaletteConfigError(f'core_hues[{position}] ({name}) needs a hue or a color')


def parse_palette_config(data: dict[str, Any]) -> PaletteConfig:
    """Build a PaletteConfig from a parsed YAML mapping, falling back to defaults."""
    if not isinstance(data, dict):
        raise PaletteConfigError('Palette config must be a mapping')
    base = default_config()

    core_hues, hue_names = base.core_hues, base.hue_names
    if 'core_hues' in data:
        items = data['core_hues'] or []
        if not isinstance(items, list):
            raise PaletteConfigError('core_hues must be a list of mappings')
        parsed = [_parse_hue(item, i) for i, item in enumerate(items)]
        hue_names = tuple(name for name, _h in parsed)
        core_hues = tuple(h for _name, h in parsed)

    gray_items = data.get('gray_names') or base.gray_names
    if not isinstance(gray_items, (list, tuple)):
        raise PaletteConfigError('gray_names must be a list')
    gray_names = tuple(str(n) for n in gray_items)
    prefix = str(data.get('prefix') or base.prefix)
    return PaletteConfig(core_hues=core_hues, hue_names=hue_names, gray_names=gray_names, prefix=prefix)


def load_palette_config(path: str | Path | None = None) -> PaletteConfig:
    """Load a palette config from YAML. No path means the built-in tables."""
    if path is None:
        return default_config()
    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise PaletteConfigError(f'Cannot read palette config {path}: {e}') from e
    except yaml.YAMLError as e:
        raise PaletteConfigError(f'Invalid YAML in {path}: {e}') from e
    return parse_palette_config(data)
