from infspark.config import SiteConfig
from infspark.render import compose_world_document
from infspark.worlds import World

from conftest import world_payload


def test_document_is_deterministic(make_world) -> None:
    world = make_world(
        tools=[{"id": "c1", "type": "calculator", "title": "Calc", "description": "Sums"}],
        pages=[{"title": "About", "content": "Hello"}],
    )

    assert compose_world_document(world) == compose_world_document(world)


def test_empty_tools_and_pages_sections_are_omitted(make_world) -> None:
    html = compose_world_document(make_world())

    assert html.startswith("<!DOCTYPE html>")
    assert '<section class="tools-section">' not in html
    assert '<section class="pages-section">' not in html
    assert "Interactive Tools" not in html
    assert "<header>" in html
    assert '<section class="content-section">' in html
    assert "<footer>" in html


def test_missing_and_empty_lists_render_identically() -> None:
    explicit = World.model_validate(world_payload(tools=[], pages=[]))
    missing = World.model_validate({k: v for k, v in world_payload().items() if k not in {"tools", "pages"}})
    nulls = World.model_validate(world_payload(tools=None, pages=None))

    assert compose_world_document(explicit) == compose_world_document(missing) == compose_world_document(nulls)


def test_tools_and_pages_render_in_order(make_world) -> None:
    world = make_world(
        tools=[
            {"id": "g1", "type": "gallery", "title": "Top Gallery", "description": ""},
            {"id": "t1", "type": "timeline", "title": "Top Timeline", "description": ""},
        ],
        pages=[
            {
                "title": "First Page",
                "content": "First page body",
                "tools": [{"id": "p1", "type": "chart", "title": "Page Chart", "description": ""}],
            },
            {"title": "Second Page", "content": "Second page body"},
        ],
    )

    html = compose_world_document(world)

    assert '<section class="tools-section">' in html
    assert '<section class="pages-section">' in html
    assert html.index("Top Gallery") < html.index("Top Timeline") < html.index("First Page")
    assert html.index("First page body") < html.index("Page Chart") < html.index("Second Page")
    assert 'id="chart-p1"' in html


def test_header_metadata(make_world) -> None:
    world = make_world(
        value=1234567,
        tools=[
            {"id": "a", "type": "gallery", "title": "A"},
            {"id": "b", "type": "gallery", "title": "B"},
        ],
    )

    html = compose_world_document(world)

    assert "<h1>Crystal Caves</h1>" in html
    assert "Owner: 0x1234...cdef" in html
    assert "Value: 1,234,567 ∞" in html
    assert "<span>2 Tools</span>" in html
    assert "<span>Explorer</span>" in html
    assert "https://example.test/abc123" in html


def test_archetype_item_is_omitted_when_unset(make_world) -> None:
    html = compose_world_document(make_world(worldArchetype=None))

    assert "🌍" not in html


def test_footer_uses_stored_timestamp_and_token(make_world) -> None:
    untokened = compose_world_document(make_world())
    tokened = compose_world_document(make_world(tokenId="tok-9"))

    assert "Token ID: abc123 • Created: 2023-11-14" in untokened
    assert "Token ID: tok-9" in tokened
    assert 'href="https://pewpi-infinity.github.io/infinity-spark/"' in untokened
    assert "Live Reference System" in untokened


def test_content_is_injected_verbatim_by_default(make_world) -> None:
    html = compose_world_document(make_world(content="Line one\nLine two <em>raw</em>"))

    assert "Line one\nLine two <em>raw</em>" in html


def test_escape_policy_covers_content_and_pages(make_world) -> None:
    site = SiteConfig(escape_user_content=True)
    world = make_world(
        content="<script>alert(1)</script>",
        pages=[{"title": "<i>Page</i>", "content": "a & b"}],
    )

    html = compose_world_document(world, site)

    assert "<script>alert(1)</script>" not in html
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
    assert "<h2>&lt;i&gt;Page&lt;/i&gt;</h2>" in html
    assert "a &amp; b" in html


def test_site_branding_is_configurable(make_world) -> None:
    site = SiteConfig(
        site_name="Test Spark",
        public_root="https://example.test/worlds/",
        date_format="%d/%m/%Y",
    )

    html = compose_world_document(make_world(), site)

    assert "<title>Crystal Caves - Test Spark</title>" in html
    assert "∞ Test Spark" in html
    assert 'href="https://example.test/worlds/"' in html
    assert "Created: 14/11/2023" in html


def test_composing_does_not_modify_world(make_world) -> None:
    world = make_world(tools=[{"id": "a", "type": "dashboard", "title": "A"}])
    before = world.model_dump()

    compose_world_document(world)

    assert world.model_dump() == before
