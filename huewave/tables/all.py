"""Run every table, combine into a single report.

Runs: rgba, oklab, named (in that order).

Example:
    huewave all
    huewave all --json
    huewave all --min-distance 0.02
"""

from huewave.core.types import Palette, Report, Table

table = Table(
    name='all',
    help='Run every table (rgba, oklab, named). Combine into a single report.',
)

ORDER = ('rgba', 'oklab', 'named')


@table.run
def run(palette: Palette, report: Report, prefix: str) -> None:
    from huewave.registry import all_tables

    tables = all_tables()
    for name in ORDER:
        tables[name].execute(palette, report, prefix)
