"""Output tables.

Every module in this package that defines a `table` object is
auto-registered by huewave.registry.discover(). Modules whose names start
with an underscore are skipped.
"""
