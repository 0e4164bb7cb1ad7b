"""
Source root of the d20 resolution engine.

This directory holds the engine's packages: core rules and dice, items and
their catalog, character snapshots, and combat resolution.
"""
