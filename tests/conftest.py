import json
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
from typer.testing import CliRunner

from infspark.worlds import World

# 2023-11-14T22:13:20Z
CREATED_AT_MS = 1_700_000_000_000


def world_payload(**overrides: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "id": "abc123",
        "title": "Crystal Caves",
        "description": "An underground world of glowing minerals.",
        "content": "Line one\nLine two",
        "ownerWallet": "0x1234567890abcdef",
        "url": "https://example.test/abc123",
        "value": 2500,
        "createdAt": CREATED_AT_MS,
        "worldArchetype": "Explorer",
        "tools": [],
        "pages": [],
    }
    data.update(overrides)
    return data


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_world() -> Callable[..., World]:
    """
    Build a validated World; keyword overrides use the store's camelCase keys.
    """

    def _make(**overrides: Any) -> World:
        return World.model_validate(world_payload(**overrides))

    return _make


@pytest.fixture
def sample_store(tmp_path: Path) -> Path:
    """
    Write a small JSON world store and return its path.
    """
    worlds = [
        world_payload(
            tools=[
                {"id": "v1", "type": "video-player", "title": "Intro", "description": "Watch this"},
                {"id": "c1", "type": "calculator", "title": "Calc", "description": "Do sums"},
            ],
            pages=[{"title": "About", "content": "Who we are", "tools": None}],
        ),
        world_payload(
            id="def456",
            title="Sky Harbor",
            createdAt=CREATED_AT_MS + 1000,
            worldArchetype=None,
            value=900,
        ),
    ]
    path = tmp_path / "worlds.json"
    path.write_text(json.dumps({"worlds": worlds}), encoding="utf-8")
    return path
