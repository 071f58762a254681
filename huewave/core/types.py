"""Shared types for huewave: PaletteEntry, Palette, WaveProfile, Table, Report."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

from huewave.core.color_model import Color


class PaletteConfigError(ValueError):
    """Core hue/name tables are malformed. Generation cannot proceed."""


@dataclass(frozen=True)
class PaletteEntry:
    """One named swatch."""

    color: Color
    name: str


@dataclass(frozen=True)
class GamutViolation:
    """A derived perceptual byte fell outside its valid range. Non-fatal."""

    index: int
    name: str
    channel: str  # 'L', 'A' or 'B'
    value: float


@dataclass(frozen=True)
class Palette:
    """Ordered, read-only result of one generation run."""

    entries: tuple[PaletteEntry, ...] = ()
    violations: tuple[GamutViolation, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self.entries[index]

    @property
    def names(self) -> list[str]:
        return [e.name for e in self.entries]

    @property
    def colors(self) -> list[Color]:
        return [e.color for e in self.entries]


@dataclass(frozen=True)
class WorstPair:
    """Closest pair of swatches. distance is Euclidean (not squared) on [0,1] RGB."""

    index_a: int
    index_b: int
    distance: float


class HueKeyMode(enum.Enum):
    CORE_12 = 'core12'
    EXPANDED_36 = 'expanded36'


@dataclass(frozen=True)
class WaveProfile:
    """Banding profile for one wave."""

    wave: int
    crest: int  # lightness/saturation bands per hue key
    hue_key_mode: HueKeyMode
    level_names: tuple[str, ...]  # one prefix per crest level, trailing space included


class Table:
    """A self-registering output table.

    Usage in a table module:

        table = Table(name='rgba', help='Packed RGBA8888 literals')

        @table.encode
        def encode(palette, prefix):
            return tuple(...)
    """

    def __init__(self, name: str, help: str = '', layout: str = 'block'):
        self.name = name
        self.help = help
        self.layout = layout  # 'block' (literals, 8 per line) or 'lines'
        self._encode_fn: Callable[[Palette, str], tuple[str, ...]] | None = None
        self._run_fn: Callable | None = None

    def encode(self, fn: Callable[[Palette, str], tuple[str, ...]]) -> Callable:
        """Decorator to register the pure token encoder."""
        self._encode_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator for tables that drive other tables instead of encoding."""
        self._run_fn = fn
        return fn

    def render(self, palette: Palette, prefix: str = '') -> tuple[str, ...]:
        """Encode the palette into an immutable token sequence."""
        if self._encode_fn is None:
            raise RuntimeError(f'Table {self.name} has no encoder')
        return tuple(self._encode_fn(palette, prefix))

    def execute(self, palette: Palette, report: Report, prefix: str = '') -> None:
        """Encode the palette and add the tokens to the report."""
        if self._run_fn is not None:
            self._run_fn(palette, report, prefix)
            return
        report.add(self.name, self.render(palette, prefix), self.layout)


@dataclass
class Report:
    """Accumulates validation results and encoded tables for text/JSON output."""

    palette_size: int = 0
    prefix: str = ''
    config_path: str | None = None
    worst: WorstPair | None = None
    worst_names: tuple[str, str] | None = None
    violations: list[GamutViolation] = field(default_factory=list)
    tables: dict[str, dict[str, Any]] = field(default_factory=dict)

    def add(self, table_name: str, tokens: tuple[str, ...], layout: str = 'block') -> None:
        """Add encoded tokens for a table."""
        self.tables[table_name] = {'layout': layout, 'tokens': tokens}

    def set_worst(self, worst: WorstPair, palette: Palette) -> None:
        self.worst = worst
        self.worst_names = (palette[worst.index_a].name, palette[worst.index_b].name)
