import asyncio

import pytest

from infspark.config import SiteConfig
from infspark.pipeline import UNKNOWN_ERROR, DeploymentResult, package_world
from infspark.pipeline import packaging
from infspark.render import compose_world_document

from conftest import world_payload


def test_successful_package(make_world) -> None:
    world = make_world(id="abc123")

    result = asyncio.run(package_world(world))

    assert result.success is True
    assert result.error is None
    assert result.url == "https://pewpi-infinity.github.io/infinity-spark/abc123/"
    assert result.url.endswith("/abc123/")
    assert result.repo_path == "infinity-spark/abc123"
    assert result.index_content == compose_world_document(world)
    assert result.suggestions == [
        "Add more interactive tools to Crystal Caves",
        "Create additional pages for Crystal Caves",
    ]


def test_custom_public_root(make_world) -> None:
    site = SiteConfig(public_root="https://example.test/worlds/", repo_name="my-worlds")

    result = asyncio.run(package_world(make_world(id="xyz"), site))

    assert result.url == "https://example.test/worlds/xyz/"
    assert result.repo_path == "my-worlds/xyz"


def test_raw_mapping_is_validated_inside_boundary() -> None:
    result = asyncio.run(package_world(world_payload(id="raw1")))

    assert result.success is True
    assert result.url.endswith("/raw1/")


def test_composition_fault_becomes_failed_result(make_world, monkeypatch: pytest.MonkeyPatch) -> None:
    def explode(world, site=None):
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(packaging, "compose_world_document", explode)

    result = asyncio.run(package_world(make_world()))

    assert result.success is False
    assert result.error == "renderer exploded"
    assert result.url == ""
    assert result.repo_path == ""
    assert result.index_content == ""
    assert result.suggestions == []


def test_fault_without_message_uses_generic_error(make_world, monkeypatch: pytest.MonkeyPatch) -> None:
    def explode(world, site=None):
        raise RuntimeError()

    monkeypatch.setattr(packaging, "compose_world_document", explode)

    result = asyncio.run(package_world(make_world()))

    assert result.success is False
    assert result.error == UNKNOWN_ERROR


def test_malformed_tool_config_is_captured(make_world) -> None:
    world = make_world(tools=[{"id": "v", "type": "video-player", "config": {"videoUrl": 42}}])

    result = asyncio.run(package_world(world))

    assert result.success is False
    assert result.error
    assert result.index_content == ""


def test_invalid_raw_world_is_captured() -> None:
    result = asyncio.run(package_world({"title": "No id here"}))

    assert result.success is False
    assert "id" in (result.error or "")


def test_failed_result_constructor() -> None:
    result = DeploymentResult.failed("")

    assert result.success is False
    assert result.error == UNKNOWN_ERROR
    assert result.index_content == ""


def test_summary_rows_reflect_outcome(make_world) -> None:
    ok = dict(asyncio.run(package_world(make_world())).summary_rows())
    failed = dict(DeploymentResult.failed("boom").summary_rows())

    assert ok["Status"] == "ready"
    assert ok["Repository path"] == "infinity-spark/abc123"
    assert failed == {"Status": "failed", "Error": "boom"}


def test_numeric_dashboard_metric_packages(make_world) -> None:
    world = make_world(
        tools=[{"id": "d", "type": "dashboard", "config": {"metrics": [{"value": 42, "label": "Answers"}]}}]
    )

    result = asyncio.run(package_world(world))

    assert result.success is True
    assert '<div class="metric-value">42</div>' in result.index_content
