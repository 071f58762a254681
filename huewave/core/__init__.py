"""huewave.core — Foundation layer.

Contains the colour model adapter, easing curves, wave profiles, palette
builder, distance validator, type definitions, settings and report builder.
This module has NO dependencies on huewave.tables or huewave.registry.
Only stdlib, numpy, coloraide and PyYAML are allowed here.
"""
