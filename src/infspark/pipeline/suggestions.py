"""
Rule-based improvement hints for a world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

from ..worlds import WidgetKind, World

MAX_SUGGESTIONS = 3
VALUE_THRESHOLD = 2000
MIN_TOOLS = 3


@dataclass(frozen=True)
class SuggestionRule:
    """
    One heuristic: when `applies(world)` holds, `message(world)` is offered.

    Attributes:
        key: Stable identifier, handy for tests and telemetry.
        applies: Predicate over the world's composition.
        message: Builds the human-readable hint.
    """
    key: str
    applies: Callable[[World], bool]
    message: Callable[[World], str]


# Order is priority: earlier rules claim the limited slots first.
RULES: tuple[SuggestionRule, ...] = (
    SuggestionRule(
        key="add-more-tools",
        applies=lambda world: len(world.tools) < MIN_TOOLS,
        message=lambda world: f"Add more interactive tools to {world.title}",
    ),
    SuggestionRule(
        key="create-pages",
        applies=lambda world: not world.pages,
        message=lambda world: f"Create additional pages for {world.title}",
    ),
    SuggestionRule(
        key="try-slot-machine",
        applies=lambda world: not world.world_archetype,
        message=lambda world: "Try creating a world using the slot machine",
    ),
    SuggestionRule(
        key="add-gallery",
        applies=lambda world: world.has_tool_type(WidgetKind.VIDEO_PLAYER),
        message=lambda world: "Add a gallery to complement your video content",
    ),
    SuggestionRule(
        key="add-charts",
        applies=lambda world: world.has_tool_type(WidgetKind.DASHBOARD),
        message=lambda world: "Add charts to visualize your dashboard metrics",
    ),
    SuggestionRule(
        key="raise-value",
        applies=lambda world: world.value < VALUE_THRESHOLD,
        message=lambda world: "Increase world value by adding unique tools",
    ),
)


def matching_rules(world: World) -> List[str]:
    """Keys of every rule that applies, in priority order and without the cap."""
    return [rule.key for rule in RULES if rule.applies(world)]


def generate_suggestions(world: World, *, limit: int = MAX_SUGGESTIONS) -> List[str]:
    """
    Return up to `limit` hints from the highest-priority matching rules.
    """
    suggestions: List[str] = []
    for rule in RULES:
        if len(suggestions) >= limit:
            break
        if rule.applies(world):
            suggestions.append(rule.message(world))
    return suggestions
