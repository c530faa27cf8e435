"""
Pydantic models for the read-only world collection and its JSON store.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# Epoch milliseconds of 0001-01-01T00:00:00Z and 9999-12-31T23:59:59.999Z.
MIN_CREATED_AT_MS = -62_135_596_800_000
MAX_CREATED_AT_MS = 253_402_300_799_999


class WorldStoreError(RuntimeError):
    """Raised when a world store file cannot be loaded or validated."""


class WidgetKind(str, Enum):
    """Every widget type the template registry knows how to render."""

    VIDEO_PLAYER = "video-player"
    CHART = "chart"
    GALLERY = "gallery"
    DASHBOARD = "dashboard"
    TIMELINE = "timeline"
    AUDIO_PLAYER = "audio-player"
    CALCULATOR = "calculator"
    CONTENT_HUB = "content-hub"

    @classmethod
    def parse(cls, value: str) -> Optional["WidgetKind"]:
        """Return the matching kind, or None for types this release does not know."""
        try:
            return cls(value)
        except ValueError:
            return None


_MODEL_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
)


def _none_to_empty_list(value: Any) -> Any:
    return [] if value is None else value


class Tool(BaseModel):
    """
    A typed interactive widget embedded in a world or page.

    Attributes:
        id: Unique within the owning world or page; scopes element ids.
        type: Registry key (see WidgetKind); unknown values are allowed.
        title: Heading shown above the widget.
        description: One-line blurb under the heading.
        config: Type-specific parameters, every entry optional.
    """
    model_config = _MODEL_CONFIG

    id: str
    type: str
    title: str = ""
    description: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("config", mode="before")
    @classmethod
    def _none_config(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def kind(self) -> Optional[WidgetKind]:
        return WidgetKind.parse(self.type)


class Page(BaseModel):
    """A named sub-section of a world with its own content and tools."""
    model_config = _MODEL_CONFIG

    title: str = ""
    content: str = ""
    tools: List[Tool] = Field(default_factory=list)

    @field_validator("tools", mode="before")
    @classmethod
    def _none_tools(cls, value: Any) -> Any:
        return _none_to_empty_list(value)


class World(BaseModel):
    """
    A user-authored mini-site. Keys follow the store's camelCase names.

    Attributes:
        id: Identity, also the world's folder name when published.
        owner_wallet: Owning identity string (``ownerWallet``).
        value: Non-negative score metric.
        created_at: Creation time in epoch milliseconds (``createdAt``), limited to
            the years datetime can represent.
        world_archetype: Optional classification tag (``worldArchetype``).
        token_id: Optional token identity shown in the footer (``tokenId``).
    """
    model_config = _MODEL_CONFIG

    id: str
    title: str = ""
    description: str = ""
    content: str = ""
    owner_wallet: str = ""
    url: str = ""
    value: Union[int, float] = Field(default=0, ge=0)
    created_at: int = Field(default=0, ge=MIN_CREATED_AT_MS, le=MAX_CREATED_AT_MS)
    world_archetype: Optional[str] = None
    token_id: Optional[str] = None
    tools: List[Tool] = Field(default_factory=list)
    pages: List[Page] = Field(default_factory=list)

    @field_validator("tools", "pages", mode="before")
    @classmethod
    def _none_lists(cls, value: Any) -> Any:
        return _none_to_empty_list(value)

    @property
    def display_token(self) -> str:
        return self.token_id or self.id

    def has_tool_type(self, kind: WidgetKind) -> bool:
        return any(tool.type == kind.value for tool in self.tools)


def parse_worlds(payload: Any) -> List[World]:
    """
    Validate a decoded store payload: a list of worlds or ``{"worlds": [...]}``.

    Raises:
        WorldStoreError: If the payload has the wrong shape or any world is invalid.
    """
    if isinstance(payload, dict) and "worlds" in payload:
        payload = payload["worlds"]
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise WorldStoreError("World store must be a JSON array or an object with a 'worlds' array.")

    worlds: List[World] = []
    for index, raw in enumerate(payload):
        try:
            worlds.append(World.model_validate(raw))
        except ValidationError as exc:
            raise WorldStoreError(f"World #{index} is invalid: {exc}") from exc
    _warn_duplicate_ids(worlds)
    return worlds


def _warn_duplicate_ids(worlds: Iterable[World]) -> None:
    seen: set[str] = set()
    for world in worlds:
        if world.id in seen:
            logger.warning("World id '%s' appears more than once; published folders will collide.", world.id)
        seen.add(world.id)


def load_worlds(path: Path | str) -> List[World]:
    """
    Load and validate a JSON world store.

    Raises:
        WorldStoreError: If the file is missing, unreadable, or invalid.
    """
    store_path = Path(path).expanduser().resolve()
    if not store_path.exists():
        raise WorldStoreError(f"World store not found: {store_path}")
    try:
        payload = json.loads(store_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise WorldStoreError(f"Unable to read world store: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WorldStoreError(f"Invalid JSON in world store: {exc}") from exc
    worlds = parse_worlds(payload)
    logger.debug("Loaded %d world(s) from %s", len(worlds), store_path)
    return worlds


def find_world(worlds: Iterable[World], world_id: str) -> World:
    for world in worlds:
        if world.id == world_id:
            return world
    raise WorldStoreError(f"No world with id '{world_id}' in the store.")
