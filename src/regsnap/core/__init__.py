"""Snapshot core: option handling, inventory construction, filters and rendering."""
