"""Report builder — text and JSON output for huewave results.

Tables arrive as immutable token sequences; joining them into text
happens only here.
"""

import json
from typing import Any

from huewave.core.types import Report

LITERALS_PER_LINE = 8


def format_block(tokens: tuple[str, ...], per_line: int = LITERALS_PER_LINE) -> str:
    """Comma-separated literals, per_line to a line, inside braces."""
    rows = [', '.join(tokens[i : i + per_line]) + ',' for i in range(0, len(tokens), per_line)]
    return '{\n' + '\n'.join(rows) + '\n}'


def format_lines(tokens: tuple[str, ...]) -> str:
    return '\n'.join(tokens)


def format_table(layout: str, tokens: tuple[str, ...]) -> str:
    if layout == 'lines':
        return format_lines(tokens)
    return format_block(tokens)


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'huewave: {report.palette_size} colours (prefix {report.prefix})'
    if report.config_path:
        header += f' \u2014 {report.config_path}'
    lines.append(header)

    if report.worst is not None:
        w = report.worst
        a, b = report.worst_names or ('?', '?')
        lines.append(f'worst pair: {w.index_a} ({a}) and {w.index_b} ({b})  \u0394={w.distance:.8f}')
    if report.violations:
        lines.append(f'gamut: {len(report.violations)} violation(s)')
        for v in report.violations:
            lines.append(f'  {v.index} {v.name}: {v.channel}={v.value:.4f}')
    lines.append('')

    for table_name, table_data in report.tables.items():
        lines.append(f'\u2500\u2500 {table_name}')
        lines.append(format_table(table_data['layout'], table_data['tokens']))
        lines.append('')

    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'size': report.palette_size,
        'prefix': report.prefix,
    }
    if report.config_path:
        obj['config'] = report.config_path

    if report.worst is not None:
        obj['worst'] = {
            'index_a': report.worst.index_a,
            'index_b': report.worst.index_b,
            'names': list(report.worst_names or ()),
            'distance': report.worst.distance,
        }

    obj['violations'] = [
        {'index': v.index, 'name': v.name, 'channel': v.channel, 'value': v.value} for v in report.violations
    ]
    obj['tables'] = {name: list(data['tokens']) for name, data in report.tables.items()}
    return json.dumps(obj, indent=2)
