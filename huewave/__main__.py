"""huewave — Procedural 256-colour named palette generator.

Usage: huewave <table> [options]

Tables are auto-discovered from huewave/tables/.
Each table module's docstring is its documentation.
Run `huewave help <table>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, huewave looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys
from pathlib import Path

from huewave import registry
from huewave.core.builder import build_palette
from huewave.core.config import load_palette_config
from huewave.core.palette import hex_to_rgb, nearest_colour
from huewave.core.report import format_json, format_lines, format_text
from huewave.core.settings import Settings, load_settings
from huewave.core.types import Palette, PaletteConfigError, Report
from huewave.core.validate import worst_pair


def _load_table_module(name: str) -> object:
    """Load the raw module for a table (for docstring access)."""
    return importlib.import_module(f'huewave.tables.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_table_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    tables = registry.all_tables()

    epilog = (
        'Examples:\n'
        '  huewave rgba\n'
        '  huewave all --json\n'
        '  huewave all --min-distance 0.02\n'
        '  huewave named --prefix YAM --output YamColorData.txt\n'
        '  huewave all --config palette.yaml\n'
        "  huewave nearest '#ff8800'\n"
        '  huewave help oklab\n'
        '\n'
        'Settings (set in .env or environment):\n'
        '  HUEWAVE_PREFIX  constant-name prefix for the named table\n'
        '  HUEWAVE_CONFIG  YAML palette config path\n'
        '  HUEWAVE_OUTPUT  write the named colour data file here\n'
    )
    parser = argparse.ArgumentParser(
        prog='huewave',
        description='Procedural 256-colour named palette generator.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log per-wave progress')
    sub = parser.add_subparsers(dest='table', help='Table to print')

    for name, tbl in sorted(tables.items()):
        p = sub.add_parser(name, help=_short_help(name, tbl.help))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-c', '--config', help='YAML palette config (core hues, grey names, prefix)')
        p.add_argument('-p', '--prefix', help='Constant-name prefix for the named table')
        p.add_argument('-o', '--output', help='Also write the named colour lines to this file')
        p.add_argument(
            '-m',
            '--min-distance',
            type=float,
            default=None,
            metavar='N',
            help='Exit 1 if the closest pair of colours is nearer than N (CI gating)',
        )

    nearest_parser = sub.add_parser('nearest', help='Find the palette colour nearest to a hex colour')
    nearest_parser.add_argument('colour', help="Hex colour, e.g. '#ff8800'")
    nearest_parser.add_argument('-c', '--config', help='YAML palette config (core hues, grey names, prefix)')
    nearest_parser.add_argument(
        '-t',
        '--threshold',
        type=float,
        default=None,
        help='Maximum 8-bit RGB distance for a match (default: no limit)',
    )

    help_parser = sub.add_parser('help', help='Print full docs for a table')
    help_parser.add_argument('command', nargs='?', help='Table name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a table."""
    tables = registry.all_tables()

    if command is None:
        print('Available tables:\n')
        for name, tbl in sorted(tables.items()):
            print(f'  {name:<10} {_short_help(name, tbl.help)}')
        print('\nRun: huewave help <table> for full docs.')
        return

    if command not in tables:
        print(f'Unknown table: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(tables))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_table_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _load_palette(args: argparse.Namespace, settings: Settings) -> tuple[Palette, str, str | None]:
    """Build the palette. Exits 1 on a malformed palette config."""
    config_path = args.config or settings.config_path
    try:
        config = load_palette_config(config_path)
        palette = build_palette(config)
    except PaletteConfigError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)
    prefix = getattr(args, 'prefix', None) or settings.prefix or config.prefix
    return palette, prefix, config_path


def _run_nearest(args: argparse.Namespace, settings: Settings) -> None:
    try:
        rgb = hex_to_rgb(args.colour)
    except ValueError as e:
        print(f'Error: {e}', file=sys.stderr)
        sys.exit(1)

    palette, _prefix, _config_path = _load_palette(args, settings)
    name, dist = nearest_colour(palette, rgb, threshold=args.threshold)
    if name is None:
        print(f'No palette colour within {args.threshold} of {args.colour} (nearest Δ={dist:.1f})')
        sys.exit(1)
    print(f'{name}  Δ={dist:.1f}')


def _write_named(palette: Palette, prefix: str, path: str) -> None:
    """Write the named colour data file (no trailing newline)."""
    lines = registry.get('named').render(palette, prefix)
    Path(path).write_text(format_lines(lines), encoding='utf-8')
    print(f'huewave: wrote {len(lines)} colours to {path}', file=sys.stderr)


def _check_min_distance(report: Report, threshold: float) -> bool:
    """Return True if the closest pair is nearer than threshold."""
    if report.worst is not None and report.worst.distance < threshold:
        print(f'\nFAIL: closest pair Δ={report.worst.distance:.8f} is below {threshold}')
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    settings = load_settings(env_file=args.env_file)
    if settings.env_path:
        print(f'huewave: loaded {settings.env_path}', file=sys.stderr)

    if not args.table:
        parser.print_help()
        sys.exit(1)

    if args.table == 'help':
        _print_help(getattr(args, 'command', None))
        return

    if args.table == 'nearest':
        _run_nearest(args, settings)
        return

    palette, prefix, config_path = _load_palette(args, settings)

    report = Report(
        palette_size=len(palette),
        prefix=prefix,
        config_path=config_path,
        violations=list(palette.violations),
    )
    report.set_worst(worst_pair(palette), palette)

    registry.get(args.table).execute(palette, report, prefix)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    output = args.output or settings.output_path
    if output:
        _write_named(palette, prefix, output)

    # CI gate: runs after output so the report is visible on failure
    if args.min_distance is not None and _check_min_distance(report, args.min_distance):
        sys.exit(1)


if __name__ == '__main__':
    main()
