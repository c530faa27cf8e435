"""
Shared utility helpers for filesystem, strings, and time formatting.
"""

from .filesystem import ensure_directory, write_if_changed, write_text_file
from .text import format_grouped, is_safe_path_segment, shorten_owner
from .time import format_created_date, from_epoch_millis

__all__ = [
    "ensure_directory",
    "write_if_changed",
    "write_text_file",
    "format_grouped",
    "is_safe_path_segment",
    "shorten_owner",
    "format_created_date",
    "from_epoch_millis",
]
