"""nearest_colour.core — Foundation layer.

Contains the colour tables, type definitions, parser, palette builder,
matcher, env loading and report builder.
This module has NO dependencies on nearest_colour.commands or nearest_colour.registry.
Only stdlib and numpy are allowed here.
"""
