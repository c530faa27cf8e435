"""
World, tool and page data models plus the JSON store loader.
"""

from .models import Page, Tool, WidgetKind, World, WorldStoreError, find_world, load_worlds, parse_worlds

__all__ = ["Page", "Tool", "WidgetKind", "World", "WorldStoreError", "find_world", "load_worlds", "parse_worlds"]
