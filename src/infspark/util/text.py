"""
Text-related helpers for display formatting and path safety.
"""

from __future__ import annotations

import re
from typing import Union

_SEGMENT_PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")

OWNER_PREFIX_CHARS = 6
OWNER_SUFFIX_CHARS = 4


def shorten_owner(owner: str) -> str:
    """
    Compress an owner identity to a `prefix...suffix` display form.

    Identities of ten characters or fewer are returned whole, since the
    `prefix...suffix` form would repeat or overlap their characters.
    """
    value = owner or ""
    if len(value) <= OWNER_PREFIX_CHARS + OWNER_SUFFIX_CHARS:
        return value
    return f"{value[:OWNER_PREFIX_CHARS]}...{value[-OWNER_SUFFIX_CHARS:]}"


def format_grouped(value: Union[int, float]) -> str:
    """
    Format a number with thousands separators (``1234567 -> "1,234,567"``).

    Fractional values keep up to three decimals, trailing zeros dropped.
    """
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def is_safe_path_segment(value: str) -> bool:
    """
    True when value can be used as a single directory name in a published site.
    """
    if not value or value in {".", ".."}:
        return False
    return bool(_SEGMENT_PATTERN.match(value))
