"""
HTML composition for world documents, the master index, and tool widgets.
"""

from .index import IndexStats, compose_index_document, index_statistics, sort_worlds, world_link
from .widgets import registered_kinds, render_tool, render_tools
from .world import compose_world_document

__all__ = [
    "IndexStats",
    "compose_index_document",
    "index_statistics",
    "sort_worlds",
    "world_link",
    "registered_kinds",
    "render_tool",
    "render_tools",
    "compose_world_document",
]
