"""Archetype-based entity component system with schedules, queries and a levelled logger."""

__version__ = "0.1.0"