"""Table auto-discovery and registration.

Scans huewave/tables/ for modules that define a `table` object of type
Table. Collects them into a dict keyed by name. Dropping a new module into
tables/ adds a CLI subcommand with no other change.
"""

import importlib
import pkgutil

from huewave.core.types import Table

_registry: dict[str, Table] = {}


def discover() -> dict[str, Table]:
    """Import all table modules and return the registry."""
    if _registry:
        return _registry

    import huewave.tables as pkg

    for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__):
        if modname.startswith('_'):
            continue
        module = importlib.import_module(f'huewave.tables.{modname}')
        tbl = getattr(module, 'table', None)
        if isinstance(tbl, Table):
            _registry[tbl.name] = tbl

    return _registry


def get(name: str) -> Table:
    """Get a table by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown table: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_tables() -> dict[str, Table]:
    """Return all registered tables."""
    return discover()
